import pytest

from labels import LABELS, balance_message, label, toggle_language
from utils import (
    clamp,
    format_friend,
    format_money,
    format_percent,
    format_signed_money,
    non_negative_amount,
    safe_float,
)


def test_label_tables_have_same_keys():
    assert set(LABELS["en"]) == set(LABELS["ar"])


def test_label_lookup_and_fallback():
    assert label("en", "title") == "Split Bills"
    assert label("ar", "title") == LABELS["ar"]["title"]
    assert label("fr", "title") == "Split Bills"
    assert label("en", "no_such_key") == "no_such_key"
    assert label("en", "balance_with", name="Alice") == "Balance with Alice"


def test_toggle_language():
    assert toggle_language("en") == "ar"
    assert toggle_language("ar") == "en"
    assert toggle_language("xx") == "en"


def test_balance_message():
    assert balance_message("en", "Alice", 10) == "Alice owes you $10.00"
    assert balance_message("en", "Alice", -50) == "You owe Alice $50.00"
    assert balance_message("en", "Alice", 0) == "You are all settled up!"
    assert "Alice" in balance_message("ar", "Alice", 3.5)


@pytest.mark.parametrize("raw,expected", [("12.5", 12.5), (3, 3.0), ("", 0.0), (None, 0.0),
                                          ("abc", 0.0), ("nan", 0.0), ("-inf", 0.0)])
def test_safe_float(raw, expected):
    assert safe_float(raw) == expected


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_formatting():
    assert format_money(12.5) == "$12.50"
    assert format_signed_money(10) == "+$10.00"
    assert format_signed_money(-50) == "$-50.00"
    assert format_signed_money(0) == "$0.00"
    assert format_percent(37.54) == "37.5%"


@pytest.mark.parametrize("raw,expected", [("12.5", 12.5), ("-3", 0.0), ("abc", 0.0), ("", 0.0), ("inf", 0.0)])
def test_non_negative_amount(raw, expected):
    assert non_negative_amount(raw) == expected


def test_format_friend_shows_image_reference():
    assert format_friend("Alice", "http://x/a.png") == "Alice  [http://x/a.png]"
    assert format_friend("Me", None) == "Me"
    assert format_friend("Bob", "") == "Bob"
