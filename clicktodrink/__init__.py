"""Async client for the ClickToDrink commerce API: catalog reads and order submission."""
from .config import AppConfig, get_config
from .errors import ApiError, ConfigurationError, NetworkError, RemoteRejection
from .gateway import (
    ApiClient,
    get_api_client,
    fetch_establishment,
    fetch_products,
    submit_order,
    create_order,
)
from .models import LineItem, OrderRequest

__all__ = [
    # Configuration
    "AppConfig",
    "get_config",
    # Errors
    "ApiError",
    "ConfigurationError",
    "NetworkError",
    "RemoteRejection",
    # Gateway
    "ApiClient",
    "get_api_client",
    "fetch_establishment",
    "fetch_products",
    "submit_order",
    "create_order",
    # Request models
    "LineItem",
    "OrderRequest",
]
