from rustlings.ui import no_emoji, style, success, warn

import pytest


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True


def test_style_red_exact():
    assert style("x", "red") == "\x1b[31mx\x1b[0m"


def test_style_without_attributes_is_plain():
    assert style("plain") == "plain"
    assert style(12) == "12"


def test_style_bold_and_color_wraps_text():
    styled = style("hello", "blue", bold=True)
    assert styled.startswith("\x1b[")
    assert styled.endswith("\x1b[0m")
    assert "hello" in styled
    assert "1" in styled.split("m", 1)[0]


def test_style_unknown_color_raises():
    with pytest.raises(ValueError):
        style("text", "purple")


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran thing with errors")
    out = capsys.readouterr().out
    assert "Ran thing with errors" in out
    assert "!" in out
    assert "⚠" not in out


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("careful")
    out = capsys.readouterr().out
    assert "⚠" in out
    assert "careful" in out


def test_success_symbols(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran x")
    out = capsys.readouterr().out
    assert "✓" in out
    assert "Successfully ran x" in out
    monkeypatch.delenv("NO_EMOJI")
    success("again")
    out = capsys.readouterr().out
    assert "✅" in out