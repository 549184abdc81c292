"""Canonical player models shared across ingestion and allocation."""

from .player import PlayerRecord, overall_from_components

__all__ = ["PlayerRecord", "overall_from_components"]
