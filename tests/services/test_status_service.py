"""
Service tests for the status collection against a throwaway SQLite database.
They cover grouping, create defaults, partial updates, soft delete, and reorder rules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from activity_api.api.db_access import DatabaseClient
from activity_api.api.error_handlers import InvalidInput
from activity_api.api.schemas.status_schemas import StatusReorderRequest, StatusUpsertRequest
from activity_api.api.services.status_service import StatusService
from tests.api.support import build_sqlite_client, fetch_status_row, seed_status_item


@pytest.fixture
def db(tmp_path: Path) -> DatabaseClient:
    return build_sqlite_client(tmp_path)


@pytest.fixture
def service(db: DatabaseClient) -> StatusService:
    return StatusService(db=db)


def _count_rows(db: DatabaseClient) -> int:
    return int(db.fetch_all("SELECT COUNT(*) AS n FROM status_items")[0]["n"])


def test_list_always_has_both_sections(service: StatusService) -> None:
    assert service.list_active() == {"building": [], "learning": []}


def test_list_groups_and_orders_active_items(db: DatabaseClient, service: StatusService) -> None:
    seed_status_item(db, section="learning", title="Rust", position=1)
    seed_status_item(db, section="building", title="API", position=2)
    seed_status_item(db, section="building", title="CLI", position=0)
    seed_status_item(db, section="learning", title="Go", position=0)
    seed_status_item(db, section="building", title="Hidden", position=1, is_active=0)
    seed_status_item(db, section="archived", title="Unknown section", position=0)

    grouped = service.list_active()

    assert list(grouped) == ["building", "learning"]
    assert [item["title"] for item in grouped["building"]] == ["CLI", "API"]
    assert [item["title"] for item in grouped["learning"]] == ["Go", "Rust"]
    assert set(grouped["building"][0]) == {"id", "section", "title", "description", "position"}


def test_create_applies_defaults(db: DatabaseClient, service: StatusService) -> None:
    service.upsert(StatusUpsertRequest(section="building", title="X"))

    row = db.fetch_all("SELECT * FROM status_items")[0]
    assert row["title"] == "X"
    assert row["description"] == ""
    assert row["position"] == 0
    assert row["is_active"] == 1


def test_create_with_zero_id_takes_create_path(db: DatabaseClient, service: StatusService) -> None:
    service.upsert(StatusUpsertRequest.model_validate({"id": 0, "section": "learning", "title": "Y"}))
    assert _count_rows(db) == 1


def test_create_without_title_inserts_nothing(db: DatabaseClient, service: StatusService) -> None:
    with pytest.raises(InvalidInput, match="Missing fields"):
        service.upsert(StatusUpsertRequest(section="building"))
    with pytest.raises(InvalidInput, match="Missing fields"):
        service.upsert(StatusUpsertRequest(section="building", title=""))
    assert _count_rows(db) == 0


def test_invalid_section_is_rejected_on_create_and_update(
    db: DatabaseClient, service: StatusService
) -> None:
    item_id = seed_status_item(db, section="building", title="A")

    with pytest.raises(InvalidInput, match="Invalid section"):
        service.upsert(StatusUpsertRequest(section="shipping", title="X"))
    with pytest.raises(InvalidInput, match="Invalid section"):
        service.upsert(StatusUpsertRequest.model_validate({"id": item_id, "section": None}))
    assert fetch_status_row(db, item_id)["section"] == "building"


def test_update_changes_only_present_fields(db: DatabaseClient, service: StatusService) -> None:
    item_id = seed_status_item(db, section="building", title="A", description="keep", position=4)

    service.upsert(StatusUpsertRequest.model_validate({"id": item_id, "title": "B"}))

    row = fetch_status_row(db, item_id)
    assert row["title"] == "B"
    assert row["description"] == "keep"
    assert row["position"] == 4
    assert row["is_active"] == 1


def test_update_without_fields_is_rejected(db: DatabaseClient, service: StatusService) -> None:
    item_id = seed_status_item(db, section="building", title="A")
    with pytest.raises(InvalidInput, match="No fields to update"):
        service.upsert(StatusUpsertRequest.model_validate({"id": item_id}))


@pytest.mark.parametrize("field_name", ["title", "is_active"])
def test_update_rejects_null_for_required_fields(
    db: DatabaseClient, service: StatusService, field_name: str
) -> None:
    item_id = seed_status_item(db, section="building", title="A", description="keep")

    with pytest.raises(InvalidInput, match=f"{field_name} must not be null"):
        service.upsert(StatusUpsertRequest.model_validate({"id": item_id, field_name: None}))

    row = fetch_status_row(db, item_id)
    assert row["title"] == "A"
    assert row["is_active"] == 1


def test_update_allows_null_description(db: DatabaseClient, service: StatusService) -> None:
    item_id = seed_status_item(db, section="building", title="A", description="drop")

    service.upsert(StatusUpsertRequest.model_validate({"id": item_id, "description": None}))

    assert fetch_status_row(db, item_id)["description"] is None


def test_update_of_missing_row_succeeds_silently(db: DatabaseClient, service: StatusService) -> None:
    service.upsert(StatusUpsertRequest.model_validate({"id": 999, "title": "ghost"}))
    assert _count_rows(db) == 0


def test_soft_delete_hides_item_but_keeps_row(db: DatabaseClient, service: StatusService) -> None:
    item_id = seed_status_item(db, section="learning", title="A")

    service.soft_delete(item_id)

    assert service.list_active()["learning"] == []
    assert fetch_status_row(db, item_id)["is_active"] == 0

    service.upsert(StatusUpsertRequest.model_validate({"id": item_id, "title": "Renamed"}))
    row = fetch_status_row(db, item_id)
    assert row["title"] == "Renamed"
    assert row["is_active"] == 0


def test_update_can_reactivate(db: DatabaseClient, service: StatusService) -> None:
    item_id = seed_status_item(db, section="learning", title="A", is_active=0)
    service.upsert(StatusUpsertRequest.model_validate({"id": item_id, "is_active": True}))
    assert fetch_status_row(db, item_id)["is_active"] == 1


def test_soft_delete_requires_truthy_id(db: DatabaseClient, service: StatusService) -> None:
    with pytest.raises(InvalidInput, match="Invalid ID"):
        service.soft_delete(0)
    assert _count_rows(db) == 0


def test_reorder_assigns_positions_in_order(db: DatabaseClient, service: StatusService) -> None:
    first = seed_status_item(db, section="building", title="one", position=0)
    second = seed_status_item(db, section="building", title="two", position=1)
    third = seed_status_item(db, section="building", title="three", position=2)

    service.reorder(StatusReorderRequest(section="building", ids=[third, first, second]))

    assert fetch_status_row(db, third)["position"] == 0
    assert fetch_status_row(db, first)["position"] == 1
    assert fetch_status_row(db, second)["position"] == 2


def test_reorder_is_idempotent(db: DatabaseClient, service: StatusService) -> None:
    ids = [seed_status_item(db, section="learning", title=f"t{i}", position=9) for i in range(3)]
    request = StatusReorderRequest(section="learning", ids=list(reversed(ids)))

    service.reorder(request)
    after_first = service.list_active()
    service.reorder(request)

    assert service.list_active() == after_first


def test_reorder_leaves_other_sections_untouched(db: DatabaseClient, service: StatusService) -> None:
    building_id = seed_status_item(db, section="building", title="b", position=5)
    learning_id = seed_status_item(db, section="learning", title="l", position=7)

    service.reorder(StatusReorderRequest(section="building", ids=[learning_id, building_id]))

    assert fetch_status_row(db, learning_id)["position"] == 7
    assert fetch_status_row(db, building_id)["position"] == 1


def test_reorder_validation(service: StatusService) -> None:
    with pytest.raises(InvalidInput, match="Invalid payload"):
        service.reorder(StatusReorderRequest(section="building"))
    with pytest.raises(InvalidInput, match="Invalid payload"):
        service.reorder(StatusReorderRequest(ids=[1]))
    with pytest.raises(InvalidInput, match="Invalid section"):
        service.reorder(StatusReorderRequest(section="other", ids=[1]))

    service.reorder(StatusReorderRequest(section="building", ids=[]))
