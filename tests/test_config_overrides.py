"""CLI configuration overrides (--set SECTION.KEY=VALUE): parsing, coercion, merging."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from greetql.adapters.config.overrides import ConfigOverride, apply_overrides, coerce_value, parse_override

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    assert parse_override("server.host=127.0.0.1") == ConfigOverride(
        section="server", key_path=("host",), value="127.0.0.1"
    )


@pytest.mark.os_agnostic
def test_parse_override_coerces_numbers() -> None:
    assert parse_override("server.port=9090").value == 9090


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")


@pytest.mark.os_agnostic
def test_parse_override_value_containing_equals() -> None:
    assert parse_override("section.key=val=ue").value == "val=ue"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("server.port", "must contain '='"),
        ("port=1", "must contain at least one dot"),
        (".port=1", "section name is empty"),
        ("server..port=1", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("null", None), ("5.5", 5.5), ('"8080"', "8080"), ("[1, 2]", [1, 2]), ("text", "text")],
)
def test_coerce_value_parses_json_or_keeps_text(raw: str, expected: object) -> None:
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_round_trips_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    coerce_value(raw)


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    config = config_factory({"server": {"port": 8080}})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Untouched keys in the section survive."""
    config = config_factory({"server": {"port": 8080, "host": "0.0.0.0"}})

    result = apply_overrides(config, ("server.port=9000", "service.result_shape=text"))

    assert result.get("server.port") == 9000
    assert result.get("server.host") == "0.0.0.0"
    assert result.get("service.result_shape") == "text"
    assert config.get("server.port") == 8080


@pytest.mark.os_agnostic
def test_apply_overrides_later_override_wins(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    result = apply_overrides(config_factory({}), ("server.port=1", "server.port=2"))

    assert result.get("server.port") == 2
