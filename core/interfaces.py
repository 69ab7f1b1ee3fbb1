from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from core.models import Category, Client, Project, Tag, Team, TimeEntry, User, UserSettings, Workspace

T = TypeVar("T")


class CollectionRepository(ABC, Generic[T]):
    """Key-value collection store: one repository per collection."""

    @abstractmethod
    def add(self, item: T) -> None: ...

    @abstractmethod
    def update(self, item: T) -> None: ...

    @abstractmethod
    def delete(self, item_id: str) -> None: ...

    @abstractmethod
    def get(self, item_id: str) -> Optional[T]: ...

    @abstractmethod
    def list_all(self) -> List[T]: ...

    def query(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self.list_all() if predicate(item)]

    def add_many(self, items: List[T]) -> None:
        for item in items:
            self.add(item)


class WorkspaceRepository(CollectionRepository[Workspace]):
    pass


class UserRepository(CollectionRepository[User]):
    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[User]: ...


class TeamRepository(CollectionRepository[Team]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[Team]: ...


class ClientRepository(CollectionRepository[Client]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[Client]: ...


class ProjectRepository(CollectionRepository[Project]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[Project]: ...


class TagRepository(CollectionRepository[Tag]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[Tag]: ...


class CategoryRepository(CollectionRepository[Category]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[Category]: ...


class TimeEntryRepository(CollectionRepository[TimeEntry]):
    @abstractmethod
    def list_by_workspace(self, workspace_id: str) -> List[TimeEntry]: ...

    @abstractmethod
    def list_in_range(self, workspace_id: str, start: str, end: str) -> List[TimeEntry]: ...


class UserSettingsRepository(CollectionRepository[UserSettings]):
    @abstractmethod
    def get_by_user(self, user_id: str) -> Optional[UserSettings]: ...


__all__ = [
    "CollectionRepository",
    "WorkspaceRepository",
    "UserRepository",
    "TeamRepository",
    "ClientRepository",
    "ProjectRepository",
    "TagRepository",
    "CategoryRepository",
    "TimeEntryRepository",
    "UserSettingsRepository",
]
