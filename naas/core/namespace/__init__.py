from .store import NamespaceStore

__all__ = ["NamespaceStore"]
