from core.services.project.service import ProjectService
from core.services.project.visibility import filter_visible_projects

__all__ = ["ProjectService", "filter_visible_projects"]
