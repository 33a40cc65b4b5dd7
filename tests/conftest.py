"""Root pytest fixtures for error-chain-python tests."""

from __future__ import annotations

import io
import json
import sys
from typing import TYPE_CHECKING

import pytest

from error_chain.dispatcher import Dispatcher, build_default_chain
from error_chain.state import InMemoryAppStore, Repository, SelectionState
from error_chain.telemetry import ChainLogger, LogLevel, clear_log_context

if TYPE_CHECKING:
    from collections.abc import Iterator


class RecordingPresenter:
    """ErrorPresenter that remembers what it was asked to show."""

    def __init__(self) -> None:
        self.presented: list[BaseException] = []

    async def present(self, error: BaseException) -> None:
        self.presented.append(error)


class RecordingStore(InMemoryAppStore):
    """InMemoryAppStore that records missing flag updates."""

    def __init__(self) -> None:
        super().__init__()
        self.missing_updates: list[tuple[Repository, bool]] = []

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        self.missing_updates.append((repository, missing))
        await super().update_repository_missing(repository, missing)


class RecordingContext:
    """DispatchContext recording every capability call."""

    def __init__(self, selection: SelectionState | None = None) -> None:
        self.selection = selection
        self.presented: list[BaseException] = []
        self.missing_updates: list[tuple[Repository, bool]] = []

    async def present_error(self, error: BaseException) -> None:
        self.presented.append(error)

    def get_selection_state(self) -> SelectionState | None:
        return self.selection

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        self.missing_updates.append((repository, missing))


class LogCapture:
    """JSON log records written by ChainLogger."""

    def __init__(self, stream: io.StringIO) -> None:
        self._stream = stream

    @property
    def records(self) -> list[dict]:
        return [json.loads(line) for line in self._stream.getvalue().splitlines()]

    def messages(self) -> list[str]:
        return [r["message"] for r in self.records]


@pytest.fixture
def repository() -> Repository:
    """A reachable repository."""
    return Repository(id=1, name="desktop", path="/Users/octocat/desktop")


@pytest.fixture
def store(repository: Repository) -> RecordingStore:
    """Store tracking and selecting the repository."""
    store = RecordingStore()
    store.add_repository(repository)
    store.select_repository(repository)
    return store


@pytest.fixture
def presenter() -> RecordingPresenter:
    """Presenter recording presented errors."""
    return RecordingPresenter()


@pytest.fixture
def context() -> RecordingContext:
    """Dispatch context recording capability calls."""
    return RecordingContext()


@pytest.fixture
def dispatcher(store: RecordingStore, presenter: RecordingPresenter) -> Dispatcher:
    """Dispatcher running the standard chain."""
    return Dispatcher(store, presenter, build_default_chain(store))


@pytest.fixture
def log_capture() -> Iterator[LogCapture]:
    """Capture JSON log output at DEBUG level."""
    stream = io.StringIO()
    ChainLogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)
    yield LogCapture(stream)
    ChainLogger.configure(level=LogLevel.INFO, format="text", stream=sys.stderr)
    clear_log_context()
