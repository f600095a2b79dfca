import io

import pytest

from pushswap.fmt import format_string, ft_printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_string_argument():
    assert format_string("[%s]", "abc") == "[abc]"


def test_nil_pointer():
    assert format_string("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2**63])
def test_pointer_round_trip(address):
    text = format_string("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text[2:] == text[2:].lower()


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -2147483647, 2147483647])
@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_signed_round_trip(spec, number):
    assert int(format_string(spec, number)) == number


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative():
    assert int(format_string("%u", -1)) == 0xFFFFFFFF


@pytest.mark.parametrize("number", [0, 9, 10, 255, 4096, 0xFFFFFFFF])
def test_hex_round_trip(number):
    lower = format_string("%x", number)
    upper = format_string("%X", number)
    assert int(lower, 16) == number
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_produces_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_char_from_str_and_int():
    assert format_string("%c%c", "z", ord("y")) == "zy"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_extra_arguments_ignored():
    assert format_string("%d", 5, 6) == "5"


def test_ft_printf_writes_and_counts():
    buffer = io.StringIO()
    count = ft_printf("content: %i ", -42, file=buffer)
    assert buffer.getvalue() == "content: -42 "
    assert count == len(buffer.getvalue())


def test_ft_printf_default_stdout(capsys):
    count = ft_printf("%s|%d", "x", 3)
    captured = capsys.readouterr().out
    assert captured == "x|3"
    assert count == len(captured)