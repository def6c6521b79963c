"""Comment validator - cleans model output and rejects unusable comments"""

import logging
import re
from typing import Any, Dict, Optional

from commento.domain.errors import CommentRejectedError

logger = logging.getLogger(__name__)

MULTI_LINE_LIMIT = 500
SINGLE_LINE_LIMIT = 150

BANNED_TERMS = ("obvious", "simple", "self-explanatory")

_FENCE_OPEN = re.compile(r"\A```[^\n]*\n")
_FENCE_CLOSE = re.compile(r"(?:\A|\n)```\Z")

# Text that reads like the start of a function/class definition
_DEFINITION_OPENER = re.compile(
    r"^\s*(?:"
    r"(?:async\s+)?(?:function|def)\b"
    r"|class\b"
    r"|public\s+"
    r"|private\s+"
    r"|(?:const|let|var)\s+\w+\s*=\s*(?:async\s*)?\("
    r"|\w+\s*=\s*lambda\b"
    r")"
)


class ValidationResult:
    """Result of comment validation"""

    valid: bool
    reason: str
    comment: str

    def __init__(self, valid: bool, reason: str, comment: str):
        """Initialize validation result

        Args:
            valid: Whether comment is valid
            reason: Reason for validation decision
            comment: The cleaned comment text
        """
        self.valid = valid
        self.reason = reason
        self.comment = comment


def strip_code_fences(text: str) -> str:
    """Remove wrapping ``` fences the model adds despite being told not to.

    Fences are stripped until none remain, so the result is stable under
    repeated application.
    """
    text = text.strip()
    while True:
        unwrapped = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text, count=1), count=1).strip()
        if unwrapped == text:
            return text
        text = unwrapped


def looks_like_definition(text: str) -> bool:
    """Check if text opens like a function or class definition"""
    return _DEFINITION_OPENER.match(text) is not None


class CommentValidator:
    """Heuristic validator for generated code comments"""

    stats: Dict[str, Any]

    def __init__(self):
        self.stats = {
            "total": 0,
            "valid": 0,
            "invalid": 0,
            "reasons": {},
        }

    def validate(self, raw_text: Optional[str], code: str) -> ValidationResult:
        """Clean raw model output and check it is usable as a comment

        Args:
            raw_text: Text returned by the model
            code: The original selected code

        Returns:
            ValidationResult with the cleaned comment
        """
        self.stats["total"] += 1
        comment = strip_code_fences(raw_text or "")
        reason = self._rejection_reason(comment, code)

        if reason:
            self.stats["invalid"] += 1
            reasons = self.stats["reasons"]
            reasons[reason] = reasons.get(reason, 0) + 1
            logger.info(f"Comment rejected: {reason}")
            return ValidationResult(valid=False, reason=reason, comment=comment)

        self.stats["valid"] += 1
        return ValidationResult(valid=True, reason="ok", comment=comment)

    def sanitize(self, raw_text: Optional[str], code: str) -> str:
        """Return the cleaned comment or raise CommentRejectedError"""
        result = self.validate(raw_text, code)
        if not result.valid:
            raise CommentRejectedError(result.reason)
        return result.comment

    def _rejection_reason(self, comment: str, code: str) -> Optional[str]:
        if not comment:
            return "empty comment"

        limit = MULTI_LINE_LIMIT if "\n" in comment else SINGLE_LINE_LIMIT
        if len(comment) >= limit:
            return f"comment too long ({len(comment)} >= {limit} chars)"

        lowered = comment.lower()
        for term in BANNED_TERMS:
            if term in lowered:
                return f"banned term '{term}'"

        original = code.strip()
        if original and original in comment:
            return "comment repeats the original code"

        if looks_like_definition(comment):
            return "comment looks like a code definition"

        return None

    def get_stats(self) -> dict:
        """Get validation statistics"""
        stats = self.stats.copy()
        stats["reasons"] = dict(self.stats["reasons"])
        return stats
