"""Tests for the terminal runner."""
import pyperclip
import pytest

import main
from CalcEngine.CalculatorModel import CalculatorModel
from CalcEngine.MathEngine import create_session


@pytest.fixture
def model():
    return CalculatorModel(session=create_session(decimal_places=6))


def test_expression_line(model):
    assert main.handle_line(model, "0", "2 * 3") == ("6", None)
    assert main.handle_line(model, "0", "1/0") == ("Error", None)


def test_clear_and_backspace(model):
    assert main.handle_line(model, "42", "AC") == ("0", None)
    assert main.handle_line(model, "42", "back") == ("4", None)
    assert main.handle_line(model, "42", "←") == ("4", None)


def test_set_vars_and_reset(model):
    display, message = main.handle_line(model, "0", "set x 2.5")
    assert message == "x = 2.5"
    assert main.handle_line(model, "0", "x * 2") == ("5", None)

    _, message = main.handle_line(model, "5", "vars")
    assert message == "x = 2.5"

    main.handle_line(model, "5", "reset")
    _, message = main.handle_line(model, "5", "vars")
    assert message == "No variables set."


def test_set_rejects_bad_input(model):
    assert main.handle_line(model, "0", "set x")[1].startswith("Usage")
    assert main.handle_line(model, "0", "set x abc")[1].startswith("Usage")
    assert main.handle_line(model, "0", "set 1x 2")[1] == "Invalid variable name: 1x"


def test_copy_result(model, monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    assert main.handle_line(model, "42", "copy") == ("42", "Copied.")
    assert copied == ["42"]


def test_copy_without_clipboard(model, monkeypatch):
    def no_clipboard(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", no_clipboard)
    display, message = main.handle_line(model, "42", "copy")
    assert display == "42"
    assert message.startswith("Clipboard not available")


def test_main_with_arguments(capsys):
    assert main.main(["1", "+", "2"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_main_loop(monkeypatch, capsys):
    inputs = iter(["2*3", "AC", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "= 6" in out
    assert "= 0" in out


def test_main_loop_stops_at_end_of_input(monkeypatch, capsys):
    def end_of_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", end_of_input)
    assert main.main([]) == 0


def test_decimals_sets_and_saves(model, tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(main.config_manager, "config_json", path)

    assert main.handle_line(model, "0", "decimals 2") == ("0", "Decimal places set to 2.")
    assert main.handle_line(model, "0", "1/3") == ("0.33", None)
    assert main.config_manager.load_setting_value("decimal_places") == 2
    # The other settings are written along with it
    assert main.config_manager.load_setting_value("log_level") == "WARNING"


def test_decimals_rejects_bad_input(model):
    for line in ("decimals", "decimals two", "decimals -1"):
        assert main.handle_line(model, "0", line)[1] == "Usage: decimals <whole number>"
    assert model.session.decimal_places == 6
