"""Team summaries and export helpers."""

from .export import EXPORT_HEADERS, export_assignment_to_csv
from .summary import (
    AssignmentSummary,
    TeamSummary,
    assignment_response,
    summarize_assignment,
    summarize_team,
    team_average_rating,
)

__all__ = [
    "AssignmentSummary",
    "EXPORT_HEADERS",
    "TeamSummary",
    "assignment_response",
    "export_assignment_to_csv",
    "summarize_assignment",
    "summarize_team",
    "team_average_rating",
]
