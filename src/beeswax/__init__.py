"""Beeswax API client.

An easy to use CRUD client for the Beeswax (Buzz) REST API:
- Typed resources with create/read/delete payloads
- Sync (requests) and async (httpx) clients with session-cookie auth
- In-memory clients for tests
"""

from .async_client import AsyncBeeswaxClient
from .client import BeeswaxClient
from .config import BeeswaxConnectionConfig
from .errors import (
    BeeswaxAPIError,
    BeeswaxAuthenticationError,
    BeeswaxConfigurationError,
    BeeswaxError,
    UnsupportedOperationError,
)
from .memory import AsyncInMemoryBeeswaxClient, InMemoryBeeswaxClient
from .resources import Authenticate
from .version import get_version

__all__ = [
    "AsyncBeeswaxClient",
    "AsyncInMemoryBeeswaxClient",
    "Authenticate",
    "BeeswaxAPIError",
    "BeeswaxAuthenticationError",
    "BeeswaxClient",
    "BeeswaxConfigurationError",
    "BeeswaxConnectionConfig",
    "BeeswaxError",
    "InMemoryBeeswaxClient",
    "UnsupportedOperationError",
    "get_version",
]
