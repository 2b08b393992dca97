from __future__ import annotations

import re

import pytest

from fieldlog.domain.fields import FieldSet, empty
from fieldlog.domain.severity import FATAL, INFO, WARN
from fieldlog.formatting.formatter import FieldFormatter, FormatStyle, render

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

_ANSI = re.compile(r"\033\[[0-9;]*m")


def _strip(text: str) -> str:
    return _ANSI.sub("", text)


def test_severity_line_without_fields() -> None:
    assert render(INFO, "hello world", empty()) == f"{GREEN}[INFO] {RESET}hello world"
    assert render(WARN, "warn world", empty()) == f"{RED}[WARN] {RESET}warn world"
    assert render(FATAL, "boom", empty()) == f"{RED}[FATAL] {RESET}boom"


def test_fields_render_sorted_and_colored() -> None:
    fields = empty().with_field("key2", "value2").with_field("key1", "value1")
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET} = value1\n"
        f"  {YELLOW}key2{RESET} = value2"
    )


def test_keys_are_padded_to_widest_name() -> None:
    fields = empty().with_field("key1", "value1").with_field("long-key", "value2")
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET}     = value1\n"
        f"  {YELLOW}long-key{RESET} = value2"
    )


@pytest.mark.parametrize("names", [["a", "bbb", "cc"], ["request-id", "x", "user"]])
def test_equals_signs_share_one_column(names: list[str]) -> None:
    # Column is two leading spaces + widest name + one space, ignoring escape codes.
    fields = empty()
    for name in names:
        fields = fields.with_field(name, "v")
    lines = _strip(render(INFO, "m", fields)).split("\n")[1:]
    expected_column = 2 + max(len(name) for name in names) + 1
    assert [line.index("=") for line in lines] == [expected_column] * len(names)


def test_wraps_long_values_at_spaces() -> None:
    value = " ".join(["long-value"] * 23)
    fields = empty().with_field("key1", value).with_field("long-key", "value2")
    row = " ".join(["long-value"] * 6)
    indent = " " * 13
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET}     = {row}\n"
        f"{indent}{row}\n"
        f"{indent}{row}\n"
        f"{indent}{' '.join(['long-value'] * 5)}\n"
        f"  {YELLOW}long-key{RESET} = value2"
    )


def test_wraps_values_with_tabs() -> None:
    value = "\t".join(["long-value"] * 23)
    fields = empty().with_field("key1", value).with_field("long-key", "value2")
    row = "  ".join(["long-value"] * 5)
    indent = " " * 13
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET}     = {row}\n"
        f"{indent}{row}\n"
        f"{indent}{row}\n"
        f"{indent}{row}\n"
        f"{indent}{'  '.join(['long-value'] * 3)}\n"
        f"  {YELLOW}long-key{RESET} = value2"
    )


def test_explicit_newlines_continue_under_value_column() -> None:
    fields = empty().with_field("key1", "long-value\nlong-value").with_field("long-key", "value2")
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key1{RESET}     = long-value\n"
        f"             long-value\n"
        f"  {YELLOW}long-key{RESET} = value2"
    )


def test_contiguous_value_is_not_split() -> None:
    value = "0123456789" * 19
    fields = empty().with_field("long-key", value).with_field("key2", "value2")
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}key2{RESET}     = value2\n"
        f"  {YELLOW}long-key{RESET} = {value}"
    )


def test_empty_value_renders_placeholder() -> None:
    fields = empty().with_field("empty-key", "").with_field("key", "value2")
    assert render(INFO, "hello world", fields) == (
        f"{GREEN}[INFO] {RESET}hello world\n"
        f"  {YELLOW}empty-key{RESET} = <empty>\n"
        f"  {YELLOW}key{RESET}       = value2"
    )


def test_plain_style_has_no_escape_codes() -> None:
    fields = empty().with_field("k", "v")
    assert render(INFO, "msg", fields, FormatStyle(color=False)) == "[INFO] msg\n  k = v"


def test_line_width_controls_wrap_width() -> None:
    fields = empty().with_field("k", "aaa bbb ccc")
    # Prefix "  k = " is 6 wide, leaving 8 columns for the value.
    block = render(INFO, "m", fields, FormatStyle(color=False, line_width=14))
    assert block == "[INFO] m\n  k = aaa bbb\n      ccc"


def test_line_width_must_be_positive() -> None:
    with pytest.raises(ValueError):
        FormatStyle(line_width=0)


def test_formatter_with_field_does_not_affect_original() -> None:
    base = FieldFormatter()
    derived = base.with_field("k", "v")
    assert base.render(INFO, "hello") == f"{GREEN}[INFO] {RESET}hello"
    assert "k" in _strip(derived.render(INFO, "hello"))
    assert "k" not in base.fields


def test_formatter_caches_field_block() -> None:
    formatter = FieldFormatter(FieldSet.of({"a": "1"}))
    assert formatter.field_block is formatter.field_block
    assert formatter.render(WARN, "x").endswith(formatter.field_block)
