"""Client-side helpers: API access, local drafts and routines, view state."""

from liftlog.client.api import ApiClient, ApiError
from liftlog.client.storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = ["ApiClient", "ApiError", "JsonFileStore", "KeyValueStore", "MemoryStore"]
