from .memory_store import InMemoryResourceStore

__all__ = ["InMemoryResourceStore"]
