from __future__ import annotations

import io

import pytest

from yamldelta.term.color import Palette, color_enabled


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({"COLOR": "true"}, True),
        ({"COLOR": "TRUE"}, True),
        ({"COLOR": "false"}, False),
        ({"COLOR": "False"}, False),
    ],
)
def test_color_env_var_forces_decision(environ: dict[str, str], expected: bool) -> None:
    assert color_enabled(io.StringIO(), environ=environ) is expected
    assert color_enabled(_Tty(), environ=environ) is expected


def test_color_follows_terminal_when_env_var_unset_or_unrecognized() -> None:
    assert color_enabled(_Tty(), environ={}) is True
    assert color_enabled(io.StringIO(), environ={}) is False
    assert color_enabled(_Tty(), environ={"COLOR": "maybe"}) is True
    assert color_enabled(None, environ={}) is False


def test_disabled_palette_is_a_no_op() -> None:
    palette = Palette(enabled=False)
    assert palette.decorate("+", "+ a: 1") == "+ a: 1"
    assert palette.highlight_resource("out.txt") == "out.txt"
    assert palette.highlight_code("yamldelta diff") == "`yamldelta diff`"


def test_enabled_palette_styles_each_marker() -> None:
    palette = Palette(enabled=True)
    added = palette.decorate("+", "+ a: 1")
    removed = palette.decorate("-", "- a: 1")
    run = palette.decorate("", "(1 unchanged item)")

    assert added.startswith("\x1b[") and "+ a: 1" in added
    assert removed != added and "- a: 1" in removed
    assert "(1 unchanged item)" in run and run.startswith("\x1b[")
    assert "`yamldelta diff`" in palette.highlight_code("yamldelta diff")
