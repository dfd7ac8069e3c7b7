import pytest

from calculator.repl import main


def test_one_shot(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2*(4+3)"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_one_shot_decimal(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["0.1+0.2"]) == 0
    assert capsys.readouterr().out == "0.3\n"


def test_one_shot_precision(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--precision", "5", "1/3"]) == 0
    assert capsys.readouterr().out == "0.33333\n"


def test_one_shot_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["5/0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Division by zero" in captured.err


def test_invalid_precision(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--precision", "0", "1"]) == 2
    assert "Precision" in capsys.readouterr().err


def test_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    lines = iter(["1+2", "1++2", "(1", "2^10", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("3\n[Runtime error] ")
    assert "[Tokenizer error] Expected ')'" in out
    assert out.endswith("1024\n")


def test_interactive_stops_on_eof(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def raise_eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_deep_nesting_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["(" * 400 + "1" + ")" * 400]) == 1
    assert "nested deeper than" in capsys.readouterr().err
