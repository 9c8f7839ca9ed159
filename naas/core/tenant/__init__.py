from .store import TenantStore

__all__ = ["TenantStore"]
