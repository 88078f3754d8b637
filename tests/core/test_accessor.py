import pytest

from hybrid_bar.core.accessor import TypedValue, get_or_default, try_get
from hybrid_bar.core.errors import ConfigValueError


@pytest.fixture
def cache(make_cache):
    return make_cache({
        "hybrid": {
            "update_rate": 250,
            "title": "Hybrid",
            "negative": -12,
            "whole_float": 7.0,
            "fraction": 1.5,
            "flag": True,
            "nothing": None,
            "numeric_text": "42",
            "huge": 2 ** 31,
            "nested": {"a": 1},
            "greeting": "Hi %user%",
        },
        "not_a_section": "plain",
        "variables": {"%user%": "alice"},
    })


def test_integer_lane(cache):
    value = try_get(cache, "hybrid", "update_rate", False, False)
    assert value == TypedValue("", 250)
    assert value.string == ""


@pytest.mark.parametrize(
    "key, expected",
    [("negative", -12), ("whole_float", 7)],
)
def test_integer_shapes_accepted(cache, key, expected):
    assert try_get(cache, "hybrid", key, False).integer == expected


@pytest.mark.parametrize(
    "key",
    ["title", "fraction", "flag", "nothing", "numeric_text", "huge", "nested"],
)
def test_non_integer_is_fatal(cache, key):
    with pytest.raises(ConfigValueError) as exc:
        try_get(cache, "hybrid", key, False)

    assert exc.value.root == "hybrid"
    assert exc.value.key == key
    assert f"hybrid:{key}" in str(exc.value)


def test_string_lane(cache):
    value = try_get(cache, "hybrid", "title", True, False)
    assert value == TypedValue("Hybrid", 0)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("update_rate", "250"),
        ("flag", "true"),
        ("nothing", "null"),
        ("nested", '{"a":1}'),
        ("negative", "-12"),
    ],
)
def test_any_value_converts_to_string(cache, key, expected):
    assert try_get(cache, "hybrid", key, True).string == expected


def test_missing_key_and_root(cache):
    assert try_get(cache, "hybrid", "missing", True) is None
    assert try_get(cache, "hybrid", "missing", False) is None
    assert try_get(cache, "missing", "title", True) is None
    assert try_get(cache, "not_a_section", "plain", True) is None


def test_get_or_default(cache):
    assert get_or_default(cache, "missing", "x", True) == TypedValue("", 0)
    assert get_or_default(cache, "hybrid", "missing", False) == TypedValue("", 0)
    assert get_or_default(cache, "hybrid", "update_rate", False).integer == 250


def test_substitution_only_when_requested(cache):
    assert try_get(cache, "hybrid", "greeting", True, False).string == "Hi %user%"
    assert try_get(cache, "hybrid", "greeting", True, True).string == "Hi alice"


def test_substitution_ignored_for_integer_lane(cache):
    assert try_get(cache, "hybrid", "update_rate", False, True).integer == 250
