from .auth import AuthService
from .catalog import CategoryService, ClientService, TagService
from .importing import ImportService
from .member import MemberService
from .project import ProjectService
from .reporting import ReportingService
from .settings import SettingsService
from .time_entry import TimeEntryService

__all__ = [
    "AuthService",
    "CategoryService",
    "ClientService",
    "TagService",
    "ImportService",
    "MemberService",
    "ProjectService",
    "ReportingService",
    "SettingsService",
    "TimeEntryService",
]
