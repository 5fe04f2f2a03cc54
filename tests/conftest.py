"""Shared pytest fixtures for tangle tests."""

from __future__ import annotations

import os

import pytest
from click.testing import CliRunner

from tangle.domain.entities import Card
from tangle.domain.numbers import LocaleProfile


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def card() -> Card:
    """An empty default-named card."""
    return Card()


@pytest.fixture
def comma_locale() -> LocaleProfile:
    """Comma-decimal, dot-grouped profile (German style)."""
    return LocaleProfile("de", decimal_separator=",", group_separator=".")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from any real tangle.toml or TANGLE_* variables."""
    for key in [k for k in os.environ if k.startswith("TANGLE_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
