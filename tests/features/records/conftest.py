"""BDD step definitions for record formatting and filtering features."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then, when

from typedlog.adapters.handlers.file import FileHandler
from typedlog.adapters.handlers.in_memory import InMemoryHandler
from typedlog.core.encoding.json_formatter import JsonFormatter
from typedlog.core.encoding.text_formatter import TextFormatter
from typedlog.core.fields import FieldSet
from typedlog.core.levels import parse_level
from typedlog.core.logger import Logger
from typedlog.core.ports import FormatterPort


@dataclass
class RecordScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    formatter: FormatterPort | None = None
    fields: FieldSet = field(default_factory=FieldSet)
    output: str | None = None
    handler: InMemoryHandler | None = None
    log_path: Path | None = None
    file_handler: FileHandler | None = None


@pytest.fixture
def ctx(tmp_path: Path) -> RecordScenarioContext:
    """Fresh scenario context for each test."""
    return RecordScenarioContext(log_path=tmp_path / "scenario.log")


# === Formatting ===


@given("a JSON formatter")
def given_json_formatter(ctx: RecordScenarioContext) -> None:
    ctx.formatter = JsonFormatter()


@given("a text formatter")
def given_text_formatter(ctx: RecordScenarioContext) -> None:
    ctx.formatter = TextFormatter()


@given(parsers.parse('a field "{key}" with integer value {value:d}'))
def given_int_field(ctx: RecordScenarioContext, key: str, value: int) -> None:
    ctx.fields.add_int(key, value)


@given(parsers.parse('a field "{key}" with text value "{value}"'))
def given_text_field(ctx: RecordScenarioContext, key: str, value: str) -> None:
    ctx.fields.add_text(key, value)


@given(parsers.parse('a field "{key}" holding a quoted greeting followed by a newline'))
def given_escaped_field(ctx: RecordScenarioContext, key: str) -> None:
    ctx.fields.add_text(key, 'he said "hi"\nbye')


@when(parsers.parse('an {level} record "{message}" is formatted'))
def when_record_formatted(ctx: RecordScenarioContext, level: str, message: str) -> None:
    assert ctx.formatter is not None
    ctx.output = ctx.formatter.format(parse_level(level), message, ctx.fields)


@then(parsers.parse("the output is {expected}"))
def then_output_is(ctx: RecordScenarioContext, expected: str) -> None:
    assert ctx.output == expected


# === Level filtering ===


@given(parsers.parse("a handler with minimum level {level}"))
def given_handler_with_level(ctx: RecordScenarioContext, level: str) -> None:
    ctx.handler = InMemoryHandler(level=parse_level(level))


@when(parsers.parse("records are sent at {levels}"))
def when_records_sent(ctx: RecordScenarioContext, levels: str) -> None:
    assert ctx.handler is not None
    for name in levels.replace(" and ", ", ").split(", "):
        ctx.handler.handle(parse_level(name), "record", FieldSet())


@then(parsers.parse("{count:d} lines are written"))
def then_lines_written(ctx: RecordScenarioContext, count: int) -> None:
    assert ctx.handler is not None
    assert len(ctx.handler.lines) == count


@then(parsers.parse("the written levels are {levels}"))
def then_written_levels(ctx: RecordScenarioContext, levels: str) -> None:
    assert ctx.handler is not None
    written = [line.split(":", 1)[0] for line in ctx.handler.lines]
    assert written == levels.split(", ")


# === File sinks ===


@given("a log file opened in truncate mode")
def given_truncated_file(ctx: RecordScenarioContext) -> None:
    assert ctx.log_path is not None
    ctx.log_path.write_text("old content\n", encoding="utf-8")
    ctx.file_handler = FileHandler(ctx.log_path, append=False)


@when("the log file is reopened in append mode")
def when_reopened_append(ctx: RecordScenarioContext) -> None:
    assert ctx.log_path is not None
    ctx.file_handler = FileHandler(ctx.log_path, append=True)


@when(parsers.parse('the line "{message}" is logged and the file is closed'))
def when_line_logged_and_closed(ctx: RecordScenarioContext, message: str) -> None:
    assert ctx.file_handler is not None
    with Logger(ctx.file_handler) as logger:
        logger.info(message)


@then(parsers.parse('the file contains the lines "{first}" and "{second}"'))
def then_file_contains(ctx: RecordScenarioContext, first: str, second: str) -> None:
    assert ctx.log_path is not None
    assert ctx.log_path.read_text(encoding="utf-8").splitlines() == [first, second]
