"""Tests for the environment variable store."""

from __future__ import annotations

import logging
import os

import pytest

from rush.environment import (
    Environment,
    EnvironmentVariableNotSet,
    InvalidEnvironmentVariable,
)


class TestEnvironment:
    """Tests for Environment."""

    def test_add_and_get(self) -> None:
        """Test storing and retrieving a variable."""
        env = Environment()
        env.add("NAME", "value")

        assert env.get("NAME") == "value"
        assert "NAME" in env
        assert len(env) == 1
        assert list(env) == ["NAME"]

    def test_initial_variables(self) -> None:
        """Test variables passed to the constructor are stored."""
        env = Environment({"A": "1", "B": "2"})

        assert env.as_dict() == {"A": "1", "B": "2"}

    def test_add_replaces(self) -> None:
        """Test adding an existing name replaces its value."""
        env = Environment({"A": "1"})
        env.add("A", "2")

        assert env.get("A") == "2"

    def test_get_missing_raises(self) -> None:
        """Test reading an unset variable without default fails."""
        with pytest.raises(EnvironmentVariableNotSet) as exc_info:
            Environment().get("MISSING")
        assert exc_info.value.name == "MISSING"

    def test_get_default(self) -> None:
        """Test the default is returned for unset variables."""
        assert Environment().get("MISSING", "fallback") == "fallback"

    @pytest.mark.parametrize("name", ["", "A=B", "A\0B"])
    def test_invalid_names(self, name: str) -> None:
        """Test names unusable in a process environment are rejected."""
        with pytest.raises(InvalidEnvironmentVariable):
            Environment().add(name, "x")

    def test_as_dict_is_copy(self) -> None:
        """Test as_dict does not expose internal state."""
        env = Environment({"A": "1"})
        env.as_dict()["A"] = "changed"

        assert env.get("A") == "1"


class TestProcessEnvironment:
    """Tests for importing from and exporting to the process environment."""

    def test_add_from_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test copying a set variable."""
        monkeypatch.setenv("RUSH_TEST_VAR", "hello")
        env = Environment()

        env.add_from_process_environment("RUSH_TEST_VAR")

        assert env.get("RUSH_TEST_VAR") == "hello"

    def test_add_from_process_environment_unset(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test copying an unset variable fails and logs a warning."""
        monkeypatch.delenv("RUSH_TEST_VAR", raising=False)

        with caplog.at_level(logging.WARNING, logger="rush"):
            with pytest.raises(EnvironmentVariableNotSet):
                Environment().add_from_process_environment("RUSH_TEST_VAR")
        assert "RUSH_TEST_VAR" in caplog.text

    def test_add_with_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default is used only when the variable is unset."""
        monkeypatch.setenv("RUSH_SET_VAR", "real")
        monkeypatch.delenv("RUSH_UNSET_VAR", raising=False)
        env = Environment()

        env.add_with_default("RUSH_SET_VAR", "default")
        env.add_with_default("RUSH_UNSET_VAR", "default")

        assert env.get("RUSH_SET_VAR") == "real"
        assert env.get("RUSH_UNSET_VAR") == "default"

    def test_parse_whole_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test every process variable is imported."""
        monkeypatch.setenv("RUSH_TEST_VAR", "whole")
        env = Environment()

        env.parse_whole_process_environment()

        assert env.get("RUSH_TEST_VAR") == "whole"
        assert len(env) == len(os.environ)

    def test_export_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test exporting a single variable."""
        monkeypatch.delenv("RUSH_EXPORTED", raising=False)

        Environment.export_to_process_environment("RUSH_EXPORTED", "out")

        assert os.environ["RUSH_EXPORTED"] == "out"
        monkeypatch.delenv("RUSH_EXPORTED")

    def test_export_all(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test exporting every stored variable."""
        monkeypatch.delenv("RUSH_ONE", raising=False)
        monkeypatch.delenv("RUSH_TWO", raising=False)

        Environment({"RUSH_ONE": "1", "RUSH_TWO": "2"}).export_all()

        assert os.environ["RUSH_ONE"] == "1"
        assert os.environ["RUSH_TWO"] == "2"
        monkeypatch.delenv("RUSH_ONE")
        monkeypatch.delenv("RUSH_TWO")
