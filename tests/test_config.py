import io

import pytest

from frothy.config import int_from_env, flag_from_env, get_recursion_limit, use_color


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_int_from_env(monkeypatch):
    monkeypatch.delenv("FROTHY_TEST_INT", raising=False)
    assert int_from_env("FROTHY_TEST_INT", 3) == 3
    monkeypatch.setenv("FROTHY_TEST_INT", " 12 ")
    assert int_from_env("FROTHY_TEST_INT") == 12
    monkeypatch.setenv("FROTHY_TEST_INT", "twelve")
    with pytest.raises(ValueError):
        int_from_env("FROTHY_TEST_INT")


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("yes", True), ("0", False), ("off", False), ("maybe", True)],
)
def test_flag_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("FROTHY_TEST_FLAG", raw)
    assert flag_from_env("FROTHY_TEST_FLAG", True) is expected


def test_recursion_limit(monkeypatch):
    monkeypatch.delenv("FROTHY_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() is None
    monkeypatch.setenv("FROTHY_RECURSION_LIMIT", "20000")
    assert get_recursion_limit() == 20000


def test_use_color(monkeypatch):
    monkeypatch.delenv("FROTHY_COLOR", raising=False)
    assert use_color(_Tty()) is True
    assert use_color(io.StringIO()) is False
    monkeypatch.setenv("FROTHY_COLOR", "0")
    assert use_color(_Tty()) is False
    monkeypatch.setenv("FROTHY_COLOR", "1")
    assert use_color(io.StringIO()) is True


@pytest.mark.parametrize("raw", ["0", "-5"])
def test_recursion_limit_must_be_positive(monkeypatch, raw):
    monkeypatch.setenv("FROTHY_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError, match="at least 1"):
        get_recursion_limit()
