from .orders import (
    LineItem,
    OrderRequest,
    OrderConfirmation,
)

from .catalog import (
    Establishment,
    Product,
)

__all__ = [
    # Request models
    "LineItem",
    "OrderRequest",
    # Response types
    "OrderConfirmation",
    "Establishment",
    "Product",
]
