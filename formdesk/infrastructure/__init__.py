"""Infrastructure layer exports."""

from .auth import Authenticator, StaticTokenAuthenticator, configure_authenticator, get_authenticator
from .ratelimit import FixedWindowRateLimiter
from .store import DocumentStore, InMemoryDocumentStore, JsonFileStore, StorageCorruptError

__all__ = [
    "Authenticator",
    "StaticTokenAuthenticator",
    "configure_authenticator",
    "get_authenticator",
    "FixedWindowRateLimiter",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonFileStore",
    "StorageCorruptError",
]
