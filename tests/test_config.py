"""Unit tests for setenv.config."""

import pytest
from pydantic import ValidationError

from setenv.config import load_config
from setenv.models import SetenvConfig, ShellKind


class TestLoadConfig:
    def test_defaults_when_unset(self):
        config = load_config({})
        assert config == SetenvConfig()
        assert config.shell is None
        assert config.debug is False

    def test_shell_override_is_normalized(self):
        assert load_config({"SETENV_SHELL": " ZSH "}).shell is ShellKind.ZSH

    def test_blank_values_are_ignored(self):
        config = load_config({"SETENV_SHELL": "   ", "SETENV_DEBUG": ""})
        assert config.shell is None
        assert config.debug is False

    @pytest.mark.parametrize("raw", ["1", "true", "yes", "on"])
    def test_debug_truthy_values(self, raw):
        assert load_config({"SETENV_DEBUG": raw}).debug is True

    def test_debug_falsy_value(self):
        assert load_config({"SETENV_DEBUG": "0"}).debug is False

    def test_unknown_shell_raises(self):
        with pytest.raises(ValidationError):
            load_config({"SETENV_SHELL": "fish"})

    def test_unparseable_debug_raises(self):
        with pytest.raises(ValidationError):
            load_config({"SETENV_DEBUG": "sometimes"})

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("SETENV_SHELL", "ksh")
        monkeypatch.delenv("SETENV_DEBUG", raising=False)
        assert load_config().shell is ShellKind.KSH
