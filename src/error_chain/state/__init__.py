"""
Application state consumed by the handler chain.
"""

from error_chain.state.models import (
    AppState,
    Repository,
    SelectionState,
    SelectionType,
)
from error_chain.state.store import AppStore, InMemoryAppStore

__all__ = [
    "AppState",
    "AppStore",
    "InMemoryAppStore",
    "Repository",
    "SelectionState",
    "SelectionType",
]
