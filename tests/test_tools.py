import pytest

from symhashkit.hashing import hash_string
from symhashkit.tools import inverse_hash_report, kmp_summary, parse_hex


def test_parse_hex_plain_and_prefixed() -> None:
    assert parse_hex("1505") == 0x1505
    assert parse_hex("0x1505") == 0x1505
    assert parse_hex("  0X1505 ") == 0x1505


@pytest.mark.parametrize("text", ["", "zz", "12_34", "100000000", "-1", "0x"])
def test_parse_hex_invalid_gives_zero(text: str) -> None:
    assert parse_hex(text) == 0


def test_parse_hex_max() -> None:
    assert parse_hex("ffffffff") == 0xFFFFFFFF


def test_inverse_report_round_trip() -> None:
    value = hash_string("abc", 0x1505)
    assert inverse_hash_report(format(value, "x"), "abc") == "0x1505\n"


def test_inverse_report_accepts_prefix() -> None:
    value = hash_string("Actor", 0x1505)
    assert inverse_hash_report(f"0x{value:X}", "Actor") == "0x1505\n"


def test_inverse_report_multiple_lines_and_shortest_wins() -> None:
    first = hash_string("x", 0x1505)
    second = hash_string("yz", 0x1505)
    report = inverse_hash_report(f"{first:x}\n{second:x}\nffff", "x\nyz")
    assert report == "0x1505\n0x1505\n"


def test_inverse_report_empty_chars_keeps_value() -> None:
    assert inverse_hash_report("abc", "") == "0xabc\n"


def test_kmp_summary() -> None:
    assert kmp_summary("foo", "bar") == "(...)foo<unknown>bar"
    assert kmp_summary("", "") == "(...)<unknown>"