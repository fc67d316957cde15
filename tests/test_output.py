import io

import pytest

from pushswap.output import (
    format_printf,
    print_char,
    print_dec,
    print_hex,
    print_hex_upper,
    print_pointer,
    print_str,
    print_unsigned,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


@pytest.fixture
def out():
    return io.StringIO()


def test_print_char_from_str(out):
    assert print_char("x", out) == 1
    assert out.getvalue() == "x"


def test_print_char_from_int_uses_low_byte(out):
    assert print_char(ord("A") + 256, out) == 1
    assert out.getvalue() == "A"


def test_print_char_rejects_long_string(out):
    with pytest.raises(ValueError):
        print_char("ab", out)


def test_print_str_none(out):
    assert print_str(None, out) == 6
    assert out.getvalue() == "(null)"


def test_print_str_stops_at_nul(out):
    count = print_str("ab\0cd", out)
    assert out.getvalue() == "ab"
    assert count == len(out.getvalue())


def test_print_dec_minimum(out):
    assert print_dec(-2147483648, out) == 11
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 1234, 2147483647, -99999])
def test_print_dec_round_trip(out, n):
    count = print_dec(n, out)
    text = out.getvalue()
    assert int(text) == n
    assert count == len(text)


def test_print_dec_out_of_range(out):
    with pytest.raises(OverflowError):
        print_dec(2**31, out)


def test_print_unsigned_wraps_negative(out):
    count = print_unsigned(-1, out)
    assert int(out.getvalue()) == 2**32 - 1
    assert count == len(out.getvalue())


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 2**32 - 1])
def test_print_hex_round_trip(out, n):
    count = print_hex(n, out)
    text = out.getvalue()
    assert int(text, 16) == n
    assert text == text.lower()
    assert count == len(text)


@pytest.mark.parametrize("n", [0, 10, 255, 48879, 2**32 - 1])
def test_print_hex_upper_round_trip(out, n):
    count = print_hex_upper(n, out)
    text = out.getvalue()
    assert int(text, 16) == n
    assert text == text.upper()
    assert count == len(text)


def test_print_hex_rejects_too_large(out):
    with pytest.raises(OverflowError):
        print_hex(2**32, out)


@pytest.mark.parametrize("address", [None, 0])
def test_print_pointer_null(out, address):
    assert print_pointer(address, out) == 5
    assert out.getvalue() == "(nil)"


def test_print_pointer_round_trip(out):
    address = 0x7FFDEADBEEF0
    count = print_pointer(address, out)
    text = out.getvalue()
    assert text.startswith("0x")
    assert int(text, 16) == address
    assert count == len(text)


def test_print_pointer_rejects_negative(out):
    with pytest.raises(ValueError):
        print_pointer(-1, out)


def test_format_printf_mixed():
    assert format_printf("%s-%d", "abc", 42) == "abc-42"


def test_format_printf_percent_escape():
    assert format_printf("100%%") == "100%"


def test_format_printf_unknown_conversion_consumes_no_argument():
    assert format_printf("%q%d", 5) == "5"


def test_format_printf_trailing_percent_dropped():
    assert format_printf("ab%") == "ab"


def test_format_printf_null_string():
    assert format_printf("%s", None) == "(null)"


def test_format_printf_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_format_printf_matches_single_printers(out):
    print_hex(3054, out)
    print_hex_upper(3054, out)
    print_unsigned(3054, out)
    assert format_printf("%x%X%u", 3054, 3054, 3054) == out.getvalue()


def test_printf_returns_count(out):
    count = printf("%c%s %i\n", "z", "word", -3, stream=out)
    assert count == len(out.getvalue())
    assert out.getvalue() == format_printf("%c%s %i\n", "z", "word", -3)


def test_put_char_and_put_str(out):
    put_char("q", out)
    put_str("rest", out)
    assert out.getvalue() == "q" + "rest"


def test_put_endl_appends_newline(out):
    put_endl("line", out)
    assert out.getvalue() == "line" + "\n"


@pytest.mark.parametrize("n", [-2147483648, -1, 0, 42, 2147483647])
def test_put_nbr_round_trip(out, n):
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_out_of_range(out):
    with pytest.raises(OverflowError):
        put_nbr(-(2**31) - 1, out)