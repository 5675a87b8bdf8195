"""Shared test fixtures for all test modules."""

from pathlib import Path

import pytest

from typedlog.adapters.handlers.in_memory import InMemoryHandler
from typedlog.core.encoding.json_formatter import JsonFormatter
from typedlog.core.encoding.text_formatter import TextFormatter
from typedlog.core.fields import FieldSet


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Provide a temporary file path for file handler tests."""
    return tmp_path / "app.log"


@pytest.fixture
def login_fields() -> FieldSet:
    """FieldSet used by the user login examples."""
    return FieldSet().add("user_id", 123).add("ip", "192.168.1.1")


@pytest.fixture
def json_memory_handler() -> InMemoryHandler:
    """In-memory handler rendering JSON lines."""
    return InMemoryHandler(JsonFormatter())


@pytest.fixture
def text_memory_handler() -> InMemoryHandler:
    """In-memory handler rendering text lines."""
    return InMemoryHandler(TextFormatter())
