from typing import Union

import pytest

from cortex.utils import Match, MatchAny


def on_int(value: int):
    return "Int"


def on_str(value: str):
    return "String"


def on_float(value: float):
    return "Float"


@pytest.fixture
def names():
    return Match(on_int, on_str, on_float, (MatchAny, lambda value: "Other"))


@pytest.mark.parametrize(
    "value,expected",
    [(7, "Int"), ("hello", "String"), (6.78, "Float"), ([1, 2], "Other"), (None, "Other")],
)
def test_dispatch(names, value, expected):
    assert names(value) == expected


def test_dispatch_returning_the_result(names):
    assert (7 << names) == "Int"
    assert ("hello" << names) == "String"
    assert (b"bytes" << names) == "Other"


def test_dispatch_discarding_the_result():
    seen = []
    record = Match((int, seen.append), (str, lambda value: seen.append(value.upper())))

    assert (7 >> record) is None
    assert ("abc" >> record) is None
    assert seen == [7, "ABC"]


def test_subclasses_use_the_closest_handler(names):
    assert names(True) == "Int"
    assert Match(on_int, (bool, lambda value: "Bool"))(True) == "Bool"


def test_missing_handler():
    numbers_only = Match(on_int)

    with pytest.raises(TypeError):
        numbers_only("text")


def test_alternatives_are_covered():
    Match(on_int, on_str, alternatives=(int, str))
    Match(on_int, on_str, alternatives=Union[int, str])
    Match(on_int, alternatives=(int, bool))
    Match(on_int, (MatchAny, repr), alternatives=Union[int, str, float])


def test_uncovered_alternative():
    with pytest.raises(TypeError):
        Match(on_int, alternatives=(int, str))

    with pytest.raises(TypeError):
        Match(on_int, on_str, alternatives=Union[int, str, float])


def test_duplicate_handlers():
    with pytest.raises(TypeError):
        Match(on_int, (int, lambda value: "Again"))


def test_single_wildcard():
    with pytest.raises(TypeError):
        Match((MatchAny, repr), (MatchAny, str))


def test_handlers_must_name_their_type():
    def untyped(value):
        return value

    def two_arguments(value: int, other: int):
        return value

    with pytest.raises(TypeError):
        Match(untyped)

    with pytest.raises(TypeError):
        Match(two_arguments)
