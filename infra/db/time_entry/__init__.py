from infra.db.time_entry.mapper import time_entry_from_orm, time_entry_to_orm
from infra.db.time_entry.repository import SqlAlchemyTimeEntryRepository

__all__ = ["time_entry_to_orm", "time_entry_from_orm", "SqlAlchemyTimeEntryRepository"]
