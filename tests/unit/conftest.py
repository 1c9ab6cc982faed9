"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from lazylet.config import LetConfig, set_config
from lazylet.definitions import Scope


class Widget:
    """Described class used by default-subject tests."""

    instances = 0

    def __init__(self) -> None:
        Widget.instances += 1
        self.parts: list[str] = []


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    previous = set_config(LetConfig())
    yield
    set_config(previous)


@pytest.fixture
def quiet_console() -> Console:
    """Provide a console whose output is discarded."""
    return Console(file=io.StringIO())


@pytest.fixture
def root_scope() -> Scope:
    return Scope("root")


@pytest.fixture
def widget_class():
    Widget.instances = 0
    return Widget
