"""Change notifications so list views can refresh after a collection write."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.time_entries_changed: Signal[str] = Signal("time_entries_changed")  # workspace_id
        self.projects_changed: Signal[str] = Signal("projects_changed")  # project_id
        self.tags_changed: Signal[str] = Signal("tags_changed")  # tag_id
        self.clients_changed: Signal[str] = Signal("clients_changed")  # client_id
        self.categories_changed: Signal[str] = Signal("categories_changed")  # category_id
        self.members_changed: Signal[str] = Signal("members_changed")  # user_id
        self.settings_changed: Signal[str] = Signal("settings_changed")  # user_id or workspace_id

    def reset(self) -> None:
        for signal in vars(self).values():
            if isinstance(signal, Signal):
                signal.disconnect_all()


# SINGLE global instance
domain_events = DomainEvents()
