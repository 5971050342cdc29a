"""リポジトリモジュール."""
from .in_memory_stable_repository import InMemoryStableRepository

__all__ = ["InMemoryStableRepository"]
