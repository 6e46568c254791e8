"""In-memory permission store."""

from warrant.infrastructure.store.memory_store import InMemoryPermissionStore
from warrant.infrastructure.store.models import StoreDocument

__all__ = ["InMemoryPermissionStore", "StoreDocument"]
