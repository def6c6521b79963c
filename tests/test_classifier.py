"""Tests for code fragment classification"""

import pytest

from commento.domain.classifier import CLASSIFICATION_RULES, classify
from commento.domain.models.fragment import CodeCategory


def _rule(name):
    return next(rule for rule in CLASSIFICATION_RULES if rule.name == name)


class TestRules:
    """Each rule matches in isolation"""

    @pytest.mark.parametrize(
        "code",
        [
            "function add(a, b) { return a + b; }",
            "def add(a, b):\n    return a + b",
            "async def fetch(url):\n    ...",
            "export function handler(event) {}",
            "   def indented():\n    pass",
        ],
    )
    def test_function_keyword(self, code):
        assert _rule("function-keyword").matches(code)

    def test_function_keyword_needs_whole_word(self):
        assert not _rule("function-keyword").matches("default_value = 3")
        assert not _rule("function-keyword").matches("functional = True")

    def test_function_header(self):
        assert _rule("function-header").matches("    async def run(self):\n        pass")
        assert not _rule("function-header").matches("print(x)")

    def test_class_keyword(self):
        assert _rule("class-keyword").matches("class Foo:\n    pass")
        assert _rule("class-keyword").matches("export default class Widget {}")
        assert not _rule("class-keyword").matches("classes = []")

    def test_test_call(self):
        assert _rule("test-call").matches("describe('math', () => {})")
        assert _rule("test-call").matches("it('adds', () => {})")
        assert _rule("test-call").matches("test('adds', () => {})")
        assert not _rule("test-call").matches("items.push(1)")
        assert not _rule("test-call").matches("test_value = 1")

    def test_config_words_case_insensitive(self):
        assert _rule("config-words").matches("APP_CONFIG = {}")
        assert _rule("config-words").matches("user.Settings.theme")
        assert _rule("config-words").matches("opts = parseOptions(argv)")

    def test_complex_tokens(self):
        assert _rule("complex-tokens").matches("for x in xs:\n    total += x")
        assert _rule("complex-tokens").matches("while (i < n) i++;")
        assert _rule("complex-tokens").matches("xs.map(x => x * 2)")
        assert _rule("complex-tokens").matches("const double = x => x * 2")
        assert not _rule("complex-tokens").matches("print(information)")


class TestClassify:
    """Tests for rule priority"""

    def test_examples(self):
        assert classify("function add(a, b) { return a + b; }") == CodeCategory.FUNCTION
        assert classify("class Account:\n    pass") == CodeCategory.CLASS
        assert classify("describe('Account', () => {})") == CodeCategory.TEST
        assert classify("DEFAULT_SETTINGS = {'debug': True}") == CodeCategory.CONFIG
        assert classify("total = sum(x for x in xs)") == CodeCategory.COMPLEX
        assert classify("x = 1") == CodeCategory.GENERAL

    @pytest.mark.parametrize(
        "code",
        [
            "def load_config(options):\n    for key in options:\n        pass",
            "function describe() { return settings.map(x => x); }",
            "def it():\n    while True:\n        pass",
        ],
    )
    def test_function_header_wins_over_body_keywords(self, code):
        assert classify(code) == CodeCategory.FUNCTION

    def test_class_wins_over_config(self):
        assert classify("class Settings:\n    debug = False") == CodeCategory.CLASS

    def test_empty_is_general(self):
        assert classify("") == CodeCategory.GENERAL
