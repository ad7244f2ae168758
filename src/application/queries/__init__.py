"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetUser, ListAlerts).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.emociograma_queries import (
    GetAlert,
    GetAlertDashboard,
    GetSubmission,
    ListAlerts,
    ListCategories,
    ListMySubmissions,
    ListTeamSubmissions,
)
from src.application.queries.lgpd_queries import GetAuditTrail
from src.application.queries.user_queries import GetUser, ListUsers

__all__ = [
    "GetAlert",
    "GetAlertDashboard",
    "GetAuditTrail",
    "GetSubmission",
    "GetUser",
    "ListAlerts",
    "ListCategories",
    "ListMySubmissions",
    "ListTeamSubmissions",
    "ListUsers",
]
