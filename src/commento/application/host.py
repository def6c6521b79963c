"""Interfaces to the host editor.

The comment pipeline only talks to the editor through these narrow seams, so
any host (the bundled command-line host, an editor plugin bridge, tests) can
drive it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from commento.domain.models.fragment import Position

T = TypeVar("T")


class Editor(ABC):
    """Active document and selection"""

    @property
    @abstractmethod
    def language_id(self) -> str:
        pass

    @abstractmethod
    def get_selection_text(self) -> str:
        pass

    @abstractmethod
    def get_selection_start(self) -> Position:
        pass

    @abstractmethod
    def get_document_text(self) -> str:
        pass

    @abstractmethod
    def insert(self, position: Position, text: str) -> None:
        """Insert text at position as a single atomic edit"""
        pass


class Notifier(ABC):
    """User-visible notifications"""

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass

    @abstractmethod
    async def with_progress(
        self, title: str, task: Callable[[], Awaitable[T]], cancellable: bool = True
    ) -> T:
        """Show a progress indicator while awaiting task()"""
        pass
