"""Console entrypoint that serves the API with uvicorn."""

from __future__ import annotations

import uvicorn

from activity_api.api.api_config import get_api_config


def main() -> None:
    config = get_api_config()
    uvicorn.run("activity_api.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
