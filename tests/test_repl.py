import io
import sys

import pytest

from minim import config
from minim.__main__ import main, repl
from minim.interpreter import Interpreter


def run_repl(text, prompt="> "):
    stdin = io.StringIO(text)
    stdout = io.StringIO()
    status = repl(Interpreter(), stdin, stdout, prompt)
    return status, stdout.getvalue()


def test_repl_prints_results_and_errors():
    status, out = run_repl("(def x 2)\n(+ x 3)\n(+ y 1)\n(+ 1 2\n")
    assert status == 0
    assert out.splitlines() == [
        "> => x",
        "> => 5",
        "> // unexpected symbol k='y'",
        "> // could not find closing )",
        "> ",
    ]


def test_repl_skips_blank_lines():
    status, out = run_repl("\n   \n(+ 1 1)\n")
    assert status == 0
    assert out.count("=> ") == 1
    assert "=> 2" in out


def test_repl_stops_on_exit():
    status, out = run_repl("(+ 1 1)\n(exit 4)\n(+ 2 2)\n")
    assert status == 4
    assert "=> 2" in out
    assert "=> 4" not in out


def test_interpreter_keeps_definitions():
    interp = Interpreter()
    interp.eval("(def sq (fn (n) (+ n n)))")
    assert str(interp.eval("(sq 21)")) == "42"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(+ 1 (- 4 2))\n"))
    monkeypatch.setenv("MINIM_PROMPT", "lisp> ")
    monkeypatch.setenv("MINIM_RECURSION_LIMIT", str(sys.getrecursionlimit()))
    assert main(["--no-color"]) == 0
    out = capsys.readouterr().out
    assert "lisp> => 3" in out


def test_main_exit_status(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(exit 7)\n"))
    monkeypatch.setenv("MINIM_RECURSION_LIMIT", str(sys.getrecursionlimit()))
    assert main(["--no-color"]) == 7


def test_main_applies_pprint_options_from_env(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(+ 1 2)\n"))
    monkeypatch.setenv("MINIM_PPRINT_OPTIONS", '{"display_legend": true}')
    monkeypatch.setenv("MINIM_RECURSION_LIMIT", str(sys.getrecursionlimit()))
    assert main(["--no-color"]) == 0
    out = capsys.readouterr().out
    assert "=> Color Key: " in out
    assert "\n3\n" in out


# -----------------------------------------------------
# config
# -----------------------------------------------------

def test_config_defaults(monkeypatch):
    for var in ("MINIM_PROMPT", "MINIM_RECURSION_LIMIT", "MINIM_COLOR", "MINIM_PPRINT_OPTIONS"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "minim> "
    assert config.get_recursion_limit() == 10000
    assert config.get_color_enabled() is True
    assert config.get_pprint_options() is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2500", 2500),
        (" 300 ", 300),
        ("lots", 10000),
        ("0", 10000),
        ("-5", 10000),
        ("", 10000),
    ]
)
def test_recursion_limit_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MINIM_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", False),
        ("false", False),
        ("No", False),
        ("1", True),
        ("yes", True),
        ("  ", True),
    ]
)
def test_color_flag_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MINIM_COLOR", raw)
    assert config.get_color_enabled() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"display_legend": true}', '{"display_legend": true}'),
        ("", None),
        ("   ", None),
    ]
)
def test_pprint_options_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MINIM_PPRINT_OPTIONS", raw)
    assert config.get_pprint_options() == expected
