from core.services.catalog.categories import CategoryService
from core.services.catalog.clients import ClientService
from core.services.catalog.tags import TagService

__all__ = ["CategoryService", "ClientService", "TagService"]
