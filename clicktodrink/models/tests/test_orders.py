import pytest
from pydantic import ValidationError

from clicktodrink.models import LineItem, OrderRequest


def test_line_item_accepts_wire_and_python_names():
    item = LineItem(productId="P1", quantity=2)
    assert item.product_id == "P1"
    assert LineItem(product_id="P1", quantity=2) == item


def test_order_request_payload_uses_wire_names():
    order = OrderRequest(
        items=[LineItem(product_id="p1", quantity=2, variants={"size": "large"})],
        zone_id="z9",
    )
    assert order.to_payload() == {
        "items": [{"productId": "p1", "quantity": 2, "variants": {"size": "large"}}],
        "zoneId": "z9",
    }


def test_payload_omits_variants_when_not_given():
    order = OrderRequest.model_validate({"items": [{"productId": "p1", "quantity": 1}], "zoneId": "z1"})
    assert order.to_payload() == {"items": [{"productId": "p1", "quantity": 1}], "zoneId": "z1"}


def test_payload_keeps_item_order():
    items = [{"productId": f"p{i}", "quantity": i} for i in range(1, 6)]
    order = OrderRequest.model_validate({"items": items, "zoneId": "z1"})
    assert [item["productId"] for item in order.to_payload()["items"]] == ["p1", "p2", "p3", "p4", "p5"]


@pytest.mark.parametrize("bad", [
    {},
    {"zoneId": "z1"},
    {"zoneId": "z1", "items": []},
    {"zoneId": "", "items": [{"productId": "p1", "quantity": 1}]},
    {"zoneId": "z1", "items": [{}]},
    {"zoneId": "z1", "items": [{"productId": "", "quantity": 1}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": 0}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": -3}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": "2"}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": True}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": 2.0}]},
    {"zoneId": "z1", "items": [{"productId": "p1", "quantity": 1, "variants": {"size": 2}}]},
])
def test_order_request_invalid(bad):
    with pytest.raises(ValidationError):
        OrderRequest.model_validate(bad)


def test_quantity_is_not_coerced():
    with pytest.raises(ValidationError):
        LineItem(productId="p1", quantity="2")
    with pytest.raises(ValidationError):
        LineItem(productId="p1", quantity=True)
