from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


class EstimateType(str, Enum):
    NONE = "NONE"
    TIME = "TIME"
    BUDGET = "BUDGET"


class GroupByDimension(str, Enum):
    NONE = "none"
    MEMBER = "member"
    CLIENT = "client"
    PROJECT = "project"
    TEAM = "team"


class BillableFilter(str, Enum):
    ALL = "all"
    BILLABLE = "billable"
    NON_BILLABLE = "non_billable"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


__all__ = ["UserRole", "EstimateType", "GroupByDimension", "BillableFilter", "Theme"]
