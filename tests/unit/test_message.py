"""
Unit tests for kind/message normalization (message.py).
"""
from enum import Enum

import pytest

from modelerrors.message import (
    DEFAULT_KIND,
    Deferred,
    ErrorKind,
    Kind,
    LiteralMessage,
    SymbolicKind,
    classify,
    is_symbolic,
    to_kind,
)


class Reason(str, Enum):
    BLANK = "blank"
    TAKEN = "taken"


def test_kind_compares_equal_to_plain_string():
    assert Kind("blank") == "blank"
    assert ErrorKind.BLANK == Kind("blank")
    assert repr(Kind("blank")) == "Kind('blank')"


def test_default_kind_is_invalid():
    assert DEFAULT_KIND == "invalid"


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        (Kind("blank"), SymbolicKind(Kind("blank"))),
        (Reason.TAKEN, SymbolicKind(Kind("taken"))),
        ("custom msg", LiteralMessage("custom msg")),
    ],
)
def test_classify(value, expected):
    assert classify(value) == expected


def test_classify_callable_is_deferred():
    producer = lambda owner, context: "later"  # noqa: E731
    parsed = classify(producer)
    assert isinstance(parsed, Deferred)
    assert parsed.producer is producer


def test_classify_rejects_other_values():
    with pytest.raises(TypeError):
        classify(42)


def test_deferred_resolve_classifies_result():
    assert Deferred(lambda owner, context: Kind("empty")).resolve(None, {}) == SymbolicKind(
        Kind("empty")
    )
    assert Deferred(lambda owner, context: "text").resolve(None, {}) == LiteralMessage("text")
    assert Deferred(lambda owner, context: None).resolve(None, {}) is None


def test_deferred_receives_arguments():
    seen = []
    Deferred(lambda owner, context: seen.append((owner, context))).resolve("owner", {"a": 1})
    assert seen == [("owner", {"a": 1})]


def test_to_kind_and_is_symbolic():
    assert isinstance(to_kind(Reason.BLANK), Kind)
    assert to_kind(Reason.BLANK) == "blank"
    assert is_symbolic(Kind("x"))
    assert is_symbolic(Reason.BLANK)
    assert not is_symbolic("x")
