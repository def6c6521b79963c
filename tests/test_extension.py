"""Tests for extension activation and command registration"""

from __future__ import annotations

import asyncio

import pytest
import yaml

from commento.application.extension import (
    COMMAND_GENERATE_CONCISE,
    COMMAND_GENERATE_DETAILED,
    CommentoExtension,
    create_provider_config,
)
from commento.domain.config import AppConfig
from commento.infrastructure.config.config_manager import ConfigManager
from commento.infrastructure.llm.gemini import GeminiProvider
from commento.infrastructure.llm.mock import MockLLMProvider

from conftest import FakeEditor

ADD_JS = "function add(a, b) { return a + b; }"


def _manager(tmp_path, data):
    path = tmp_path / ".commento.yml"
    path.write_text(yaml.dump(data), encoding="utf-8")
    return ConfigManager(config_path=path)


class TestActivation:
    """Tests for activate/deactivate"""

    def test_missing_api_key_registers_nothing(self, tmp_path, notifier):
        extension = CommentoExtension(_manager(tmp_path, {"llm": {"provider": "gemini"}}), notifier)

        assert extension.activate() is False
        assert extension.commands == {}
        assert extension.is_active is False
        assert len(notifier.errors) == 1
        assert "Please check settings." in notifier.errors[0]

    def test_blank_api_key_counts_as_missing(self, tmp_path, notifier):
        manager = _manager(tmp_path, {"llm": {"provider": "gemini", "api_key": "   "}})
        extension = CommentoExtension(manager, notifier)

        assert extension.activate() is False
        assert len(notifier.errors) == 1

    def test_api_key_from_config(self, tmp_path, notifier):
        manager = _manager(tmp_path, {"llm": {"provider": "gemini", "api_key": " key-123 "}})
        extension = CommentoExtension(manager, notifier)

        assert extension.activate() is True
        assert isinstance(extension.llm_provider, GeminiProvider)
        assert extension.llm_provider.api_key == "key-123"
        assert set(extension.commands) == {COMMAND_GENERATE_CONCISE, COMMAND_GENERATE_DETAILED}
        assert notifier.errors == []

    def test_api_key_from_provider_environment(self, tmp_path, notifier, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        extension = CommentoExtension(_manager(tmp_path, {}), notifier)

        assert extension.activate() is True
        assert extension.llm_provider.api_key == "env-key"

    def test_deactivate_unregisters_commands(self, tmp_path, notifier):
        extension = CommentoExtension(_manager(tmp_path, {"llm": {"provider": "mock"}}), notifier)
        extension.activate()

        extension.deactivate()

        assert extension.commands == {}
        assert extension.llm_provider is None
        with pytest.raises(KeyError):
            asyncio.run(extension.execute(COMMAND_GENERATE_CONCISE, FakeEditor(ADD_JS)))


class TestCommands:
    """Tests for executing registered commands"""

    def _extension(self, tmp_path, notifier, response, include_examples=False):
        manager = _manager(
            tmp_path,
            {"llm": {"provider": "mock"}, "comments": {"include_examples": include_examples}},
        )
        extension = CommentoExtension(manager, notifier)
        assert extension.activate()
        extension.llm_provider.delay = 0
        extension.llm_provider.response = response
        return extension

    def test_concise_command_inserts_comment(self, tmp_path, notifier):
        extension = self._extension(tmp_path, notifier, "// Adds two numbers and returns the sum.")
        editor = FakeEditor(ADD_JS)

        comment = asyncio.run(extension.execute(COMMAND_GENERATE_CONCISE, editor))

        assert comment == "// Adds two numbers and returns the sum."
        assert editor.inserts[0][1] == "// Adds two numbers and returns the sum.\n"
        assert notifier.progress == [("Generating concise comment...", True)]

    def test_detailed_command_failure_message(self, tmp_path, notifier):
        extension = self._extension(tmp_path, notifier, "obvious")
        editor = FakeEditor(ADD_JS)

        asyncio.run(extension.execute(COMMAND_GENERATE_DETAILED, editor))

        assert editor.inserts == []
        assert notifier.errors == ["detailed comment failed: Failed to generate detailed comment"]

    def test_include_examples_from_config(self, tmp_path, notifier):
        extension = self._extension(tmp_path, notifier, "// Adds numbers.", include_examples=True)
        assert extension.load_generation_options().include_examples is True

    def test_unknown_command(self, tmp_path, notifier):
        extension = self._extension(tmp_path, notifier, "// x")
        with pytest.raises(KeyError):
            asyncio.run(extension.execute("commento.openHomePage", FakeEditor(ADD_JS)))


def test_create_provider_config_omits_unset_values():
    config = AppConfig()
    provider_config = create_provider_config(config)

    assert "model" not in provider_config
    assert "api_key" not in provider_config
    assert provider_config["max_attempts"] == 1
    assert provider_config["timeout"] == 60.0


def test_create_provider_config_passes_model_and_key():
    config = AppConfig(llm={"provider": "openai", "model": "gpt-4o", "api_key": "k"})
    provider_config = create_provider_config(config)

    assert provider_config["model"] == "gpt-4o"
    assert provider_config["api_key"] == "k"


def test_mock_provider_needs_no_key(tmp_path, notifier):
    extension = CommentoExtension(_manager(tmp_path, {"llm": {"provider": "mock"}}), notifier)
    assert extension.activate() is True
    assert isinstance(extension.llm_provider, MockLLMProvider)
