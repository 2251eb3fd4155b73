"""Config display wrapper around lib_layered_config."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from greetql.adapters.config.display import display_config
from greetql.domain.enums import OutputFormat


@pytest.mark.os_agnostic
def test_display_config_raises_for_nonexistent_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"server": {"port": 8080}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=OutputFormat.HUMAN, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config({"server": {"host": "127.0.0.1"}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[server]" in output
    assert "127.0.0.1" in output


@pytest.mark.os_agnostic
def test_display_json_renders_section(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config({"server": {"port": 8080}}, {}), output_format=OutputFormat.JSON, section="server")

    assert "8080" in capsys.readouterr().out
