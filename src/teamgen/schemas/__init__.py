"""Pydantic models for persisted and reported team data."""

from .assignment import (
    AssignmentResponse,
    PlayerRowResponse,
    TeamIdLists,
    TeamResponse,
)

__all__ = [
    "AssignmentResponse",
    "PlayerRowResponse",
    "TeamIdLists",
    "TeamResponse",
]
