from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """One product selection within an order."""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1, description="Identifier of the ordered product")
    quantity: int = Field(ge=1, strict=True, description="Number of units, at least one")
    variants: Optional[Dict[str, str]] = Field(default=None, description="Selected value per variant name")


class OrderRequest(BaseModel):
    """Order payload submitted to POST /orders."""
    model_config = ConfigDict(populate_by_name=True)

    items: List[LineItem] = Field(min_length=1, description="Ordered line items, at least one")
    zone_id: str = Field(alias="zoneId", min_length=1, description="Delivery/service zone identifier")

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation: camelCase keys, variants omitted when not given."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Opaque remote response; passed through without reshaping.
OrderConfirmation = Dict[str, Any]
