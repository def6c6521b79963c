"""File-backed editor used by the command-line host"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from commento.application.host import Editor
from commento.domain.models.fragment import Position

logger = logging.getLogger(__name__)

LANGUAGE_IDS = {
    "py": "python",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "jsx": "javascriptreact",
    "ts": "typescript",
    "tsx": "typescriptreact",
    "java": "java",
    "kt": "kotlin",
    "go": "go",
    "rs": "rust",
    "cs": "csharp",
    "cpp": "cpp",
    "cc": "cpp",
    "hpp": "cpp",
    "c": "c",
    "h": "c",
    "php": "php",
    "rb": "ruby",
    "swift": "swift",
    "scala": "scala",
    "sql": "sql",
    "sh": "shellscript",
    "yaml": "yaml",
    "yml": "yaml",
}


def detect_language(path: Path) -> str:
    """Map a file extension to an editor language identifier"""
    ext = path.suffix.lstrip(".").lower()
    return LANGUAGE_IDS.get(ext, "plaintext")


class FileEditor(Editor):
    """Treats a line range of a file as the editor selection

    Lines are 1-based and inclusive on the command line; positions are
    0-based internally.
    """

    def __init__(
        self,
        path: Path,
        start_line: int,
        end_line: Optional[int] = None,
        language: Optional[str] = None,
    ):
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f"File not found: {self.path}")

        end_line = start_line if end_line is None else end_line
        if start_line < 1 or end_line < start_line:
            raise ValueError(f"Invalid line range: {start_line}-{end_line}")

        self.start_line = start_line
        self.end_line = end_line
        self._language = language or detect_language(self.path)
        self._text = self.path.read_text(encoding="utf-8")

    @property
    def language_id(self) -> str:
        return self._language

    def get_document_text(self) -> str:
        return self._text

    def get_selection_text(self) -> str:
        lines = self._text.splitlines(keepends=True)
        selected = "".join(lines[self.start_line - 1 : self.end_line])
        return selected.rstrip("\n")

    def get_selection_start(self) -> Position:
        return Position(line=self.start_line - 1, column=0)

    def insert(self, position: Position, text: str) -> None:
        lines = self._text.splitlines(keepends=True)
        if position.line > len(lines):
            raise ValueError(f"Position beyond end of document: line {position.line + 1}")

        offset = sum(len(line) for line in lines[: position.line]) + position.column
        updated = self._text[:offset] + text + self._text[offset:]
        self._write_atomic(updated)
        self._text = updated

    def _write_atomic(self, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {len(content)} chars to {self.path}")
