from core.services.time_entry.service import TimeEntryService
from core.services.time_entry.validation import FieldIssue, validate_time_entry_fields
from core.services.time_entry.visibility import filter_visible_entries

__all__ = ["TimeEntryService", "FieldIssue", "validate_time_entry_fields", "filter_visible_entries"]
