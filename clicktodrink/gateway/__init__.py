from .api_client import (
    ApiClient,
    get_api_client,
    fetch_establishment,
    fetch_products,
    submit_order,
    create_order,
)

__all__ = [
    "ApiClient",
    "get_api_client",
    "fetch_establishment",
    "fetch_products",
    "submit_order",
    "create_order",
]
