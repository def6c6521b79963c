"""Shared test doubles for the host editor and notifications"""

from __future__ import annotations

from typing import List, Optional, Tuple

import pytest

from commento.application.host import Editor, Notifier
from commento.domain.models.fragment import Position


class FakeEditor(Editor):
    """In-memory editor with a fixed selection"""

    def __init__(self, selection: str, document: Optional[str] = None, language: str = "javascript",
                 start: Position = Position(0)):
        self.selection = selection
        self.document = selection if document is None else document
        self.language = language
        self.start = start
        self.inserts: List[Tuple[Position, str]] = []

    @property
    def language_id(self) -> str:
        return self.language

    def get_selection_text(self) -> str:
        return self.selection

    def get_selection_start(self) -> Position:
        return self.start

    def get_document_text(self) -> str:
        return self.document

    def insert(self, position: Position, text: str) -> None:
        self.inserts.append((position, text))


class FakeNotifier(Notifier):
    """Records errors and progress titles"""

    def __init__(self):
        self.errors: List[str] = []
        self.progress: List[Tuple[str, bool]] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    async def with_progress(self, title, task, cancellable=True):
        self.progress.append((title, cancellable))
        return await task()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep tests away from real config files and API keys"""
    for name in (
        "COMMENTO_LLM_PROVIDER",
        "COMMENTO_LLM_MODEL",
        "COMMENTO_API_KEY",
        "COMMENTO_INCLUDE_EXAMPLES",
        "GEMINI_API_KEY",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
