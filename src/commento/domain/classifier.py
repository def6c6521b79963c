"""Heuristic classification of code fragments.

Classification is a best-effort textual check, not a parser. Rules are
evaluated in order and the first match wins.
"""

import re
from dataclasses import dataclass
from typing import Callable, List

from commento.domain.models.fragment import CodeCategory

_FUNCTION_KEYWORD = re.compile(r"(?:export\s+)?(?:async\s+)?(?:function|def)\b")
_FUNCTION_HEADER = re.compile(r"\):\s*\n")
_CLASS_KEYWORD = re.compile(r"(?:export\s+)?(?:default\s+)?class\b")
_TEST_CALL = re.compile(r"(?:describe|it|test)\b")
_CONFIG_WORDS = re.compile(r"config|settings|options", re.IGNORECASE)
_COMPLEX_TOKENS = re.compile(r"\b(?:for|while|reduce|map|filter|algorithm)\b|=>")


@dataclass(frozen=True)
class ClassificationRule:
    """A named predicate that assigns a category when it matches"""

    name: str
    category: CodeCategory
    matches: Callable[[str], bool]


def _starts_with(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda code: pattern.match(code.lstrip()) is not None


def _contains(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda code: pattern.search(code) is not None


CLASSIFICATION_RULES: List[ClassificationRule] = [
    ClassificationRule("function-keyword", CodeCategory.FUNCTION, _starts_with(_FUNCTION_KEYWORD)),
    ClassificationRule("function-header", CodeCategory.FUNCTION, _contains(_FUNCTION_HEADER)),
    ClassificationRule("class-keyword", CodeCategory.CLASS, _starts_with(_CLASS_KEYWORD)),
    ClassificationRule("test-call", CodeCategory.TEST, _starts_with(_TEST_CALL)),
    ClassificationRule("config-words", CodeCategory.CONFIG, _contains(_CONFIG_WORDS)),
    ClassificationRule("complex-tokens", CodeCategory.COMPLEX, _contains(_COMPLEX_TOKENS)),
]


def classify(code: str) -> CodeCategory:
    """Return the category of the first rule matching ``code``, else GENERAL."""
    for rule in CLASSIFICATION_RULES:
        if rule.matches(code):
            return rule.category
    return CodeCategory.GENERAL
