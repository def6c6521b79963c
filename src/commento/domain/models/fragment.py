"""CodeFragment model - the selected code a comment is generated for"""

from dataclasses import dataclass
from enum import Enum


class DetailLevel(str, Enum):
    """Target length/style of a generated comment"""

    CONCISE = "concise"
    DETAILED = "detailed"


class CodeCategory(str, Enum):
    """Coarse kind of a code fragment"""

    FUNCTION = "function"
    CLASS = "class"
    TEST = "test"
    CONFIG = "config"
    COMPLEX = "complex"
    GENERAL = "general"


@dataclass(frozen=True)
class Position:
    """Zero-based location in a document"""

    line: int
    column: int = 0

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError("Position must be non-negative")


@dataclass(frozen=True)
class CodeFragment:
    """Selected code together with its enclosing document"""

    code: str  # Selected text, verbatim
    language: str  # Declared language identifier (e.g. "python")
    document_text: str = ""  # Full text of the enclosing document
    start: Position = Position(0)  # Where the selection begins

    @property
    def is_blank(self) -> bool:
        """Check if the selection holds only whitespace"""
        return not self.code.strip()


@dataclass(frozen=True)
class GenerationOptions:
    """User-configurable generation switches, read once per invocation"""

    include_examples: bool = False
