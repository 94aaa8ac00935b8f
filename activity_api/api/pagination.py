# This file resolves the `limit` query parameter for the log feed.
# It exists so bad, missing, or oversized limits all collapse to one deterministic row count.

from __future__ import annotations

import math


def resolve_limit(raw: str | None, *, default: int, maximum: int) -> int:
    """Parse a requested limit, falling back to `default` and clamping to `maximum`."""

    if raw is None:
        return min(default, maximum)
    try:
        requested = float(raw.strip()) if raw.strip() else 0.0
    except ValueError:
        requested = math.nan

    if not math.isfinite(requested) or requested <= 0:
        requested = default
    return max(1, int(min(requested, maximum)))
