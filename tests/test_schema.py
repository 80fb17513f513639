"""Tests for schema models."""

from bean_tray import InventoryRecord


def test_inventory_record_optional_fields_default_to_none():
    """InventoryRecord with only id and name should work."""
    record = InventoryRecord(id="b1", name="Kenya AA")
    assert record.remaining is None
    assert record.capacity is None
    assert record.roast_date is None
    assert record.start_day is None
    assert record.end_day is None
    assert record.is_frozen is None
    assert record.is_in_transit is None


def test_inventory_record_accepts_frontend_camel_case():
    """Frontend payload keys should map onto snake_case fields."""
    record = InventoryRecord.model_validate(
        {
            "id": "b1",
            "name": "Ethiopia Guji",
            "remaining": "120",
            "capacity": "200",
            "roastDate": "2024-03-01",
            "startDay": 5,
            "endDay": 40,
            "isFrozen": True,
            "isInTransit": False,
            "beanState": "roasted",
        }
    )
    assert record.roast_date == "2024-03-01"
    assert record.start_day == 5
    assert record.end_day == 40
    assert record.is_frozen is True
    assert record.is_in_transit is False
    assert record.bean_state == "roasted"


def test_inventory_record_ignores_unknown_keys():
    record = InventoryRecord.model_validate({"id": "b1", "name": "X", "price": "88", "flavor": ["Berry"]})
    assert record.id == "b1"


def test_inventory_record_json_deserialization():
    """InventoryRecord should deserialize from frontend JSON."""
    json_str = '{"id": "b2", "name": "Colombia", "remaining": null, "roastDate": null, "isFrozen": null}'
    record = InventoryRecord.model_validate_json(json_str)
    assert record.name == "Colombia"
    assert record.remaining is None
    assert record.is_frozen is None
