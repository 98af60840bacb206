import pytest

from ftformat.conversions import (
    Rendered,
    render_char,
    render_hex,
    render_int,
    render_percent,
    render_pointer,
    render_string,
    render_unsigned,
)
from ftformat.spec import FormatSpec


def _spec(flag="", width=0, precision=None, conversion=None):
    return FormatSpec(flag=flag, width=width, precision=precision, conversion=conversion)


def _pyfmt(flag, width, precision, conv):
    text = "%" + flag
    if width:
        text += str(width)
    if precision is not None:
        text += "." + str(precision)
    return text + conv


INT_CASES = [
    ("", 0, None, 42),
    ("", 5, None, 42),
    ("-", 5, None, 42),
    ("0", 5, None, 42),
    ("", 5, None, -42),
    ("-", 6, None, -42),
    ("0", 5, None, -42),
    ("0", 3, None, -42),
    ("", 0, 5, -42),
    ("", 0, 5, 42),
    ("", 8, 5, -42),
    ("-", 8, 5, -42),
    ("", 8, 5, 42),
    ("-", 8, 5, 42),
    ("", 3, None, 12345),
    ("", 2, 3, -5),
    ("", 5, 2, -42),
    ("", 0, 3, 0),
    ("", 0, None, 0),
]


@pytest.mark.parametrize("flag,width,precision,value", INT_CASES)
def test_render_int_matches_printf(flag, width, precision, value):
    result = render_int(_spec(flag, width, precision, "d"), value)
    expected = _pyfmt(flag, width, precision, "d") % value
    assert result.text == expected
    assert result.length == len(expected)


def test_render_int_zero_with_zero_precision_is_empty():
    result = render_int(_spec(precision=0), 0)
    assert result == Rendered("", 0)


def test_render_int_zero_with_zero_precision_and_width_is_blank():
    result = render_int(_spec(width=4, precision=0), 0)
    assert result.text == " " * 4
    assert result.length == 4


def test_render_int_wraps_to_32_bits():
    spec = _spec()
    assert render_int(spec, 2**31) == render_int(spec, -(2**31))
    assert render_int(spec, 2**32 + 7).text == "%d" % 7


def test_render_int_precision_cancels_zero_flag():
    spec = _spec("0", 6, 3, "d")
    assert render_int(spec, 42).text == "%6.3d" % 42


UNSIGNED_CASES = [
    ("", 0, None, 7),
    ("", 6, None, 123),
    ("-", 6, None, 123),
    ("0", 6, None, 123),
    ("", 0, 5, 123),
    ("", 8, 5, 123),
    ("-", 8, 5, 123),
    ("", 2, None, 4294967295),
]


@pytest.mark.parametrize("flag,width,precision,value", UNSIGNED_CASES)
def test_render_unsigned_matches_printf(flag, width, precision, value):
    result = render_unsigned(_spec(flag, width, precision, "u"), value)
    expected = _pyfmt(flag, width, precision, "d") % value
    assert result.text == expected
    assert result.length == len(expected)


def test_render_unsigned_wraps_negative():
    assert render_unsigned(_spec(), -1).text == "%d" % 4294967295


def test_render_unsigned_zero_with_zero_precision():
    result = render_unsigned(_spec(width=3, precision=0), 0)
    assert result.text == " " * 3
    assert result.length == 3


HEX_CASES = [
    ("", 0, None, 255, "x"),
    ("", 0, None, 255, "X"),
    ("0", 8, None, 255, "x"),
    ("-", 8, None, 255, "x"),
    ("", 8, None, 3054, "X"),
    ("", 0, 4, 255, "x"),
    ("", 8, 4, 3054, "X"),
    ("-", 8, 4, 255, "x"),
    ("0", 8, 4, 255, "x"),
    ("", 0, None, 0, "x"),
]


def test_render_hex_wraps_to_32_bits():
    assert render_hex(_spec(conversion="x"), -1).text == "%x" % 0xFFFFFFFF


def test_render_hex_zero_with_zero_precision_is_blank():
    result = render_hex(_spec(width=2, precision=0, conversion="x"), 0)
    assert result.text == " " * 2
    assert result.length == 2


def test_render_pointer_null():
    assert render_pointer(_spec(), 0).text == "0x0"
    assert render_pointer(_spec(), None).text == "0x0"
    assert render_pointer(_spec(precision=0), 0).text == "0x"


def test_render_pointer_null_padded():
    right = render_pointer(_spec(width=6), 0)
    left = render_pointer(_spec("-", 6), 0)
    assert right.text == "0x0".rjust(6)
    assert left.text == "0x0".ljust(6)
    assert right.length == left.length == 6


@pytest.mark.parametrize("value", [1, 255, 0xDEADBEEF, 2**48 + 5])
def test_render_pointer_matches_hex(value):
    result = render_pointer(_spec(), value)
    assert result.text == hex(value)
    assert result.length == len(hex(value))


def test_render_pointer_width():
    assert render_pointer(_spec(width=12), 255).text == hex(255).rjust(12)
    assert render_pointer(_spec("-", 12), 255).text == hex(255).ljust(12)
    assert render_pointer(_spec(width=2), 255).text == hex(255)


STRING_CASES = [
    ("", 0, None, "hello"),
    ("", 8, None, "hello"),
    ("-", 8, None, "hello"),
    ("", 0, 2, "hello"),
    ("", 5, 2, "hello"),
    ("-", 5, 2, "hello"),
    ("", 3, None, "hello"),
    ("", 0, 10, "hello"),
    ("", 0, None, ""),
]


@pytest.mark.parametrize("flag,width,precision,value", STRING_CASES)
def test_render_string_matches_printf(flag, width, precision, value):
    result = render_string(_spec(flag, width, precision, "s"), value)
    expected = _pyfmt(flag, width, precision, "s") % value
    assert result.text == expected
    assert result.length == len(expected)


def test_render_string_null():
    assert render_string(_spec(), None).text == "(null)"
    assert render_string(_spec(precision=3), None).text == "(null)"[:3]


def test_render_string_zero_flag_pads_with_zeros():
    assert render_string(_spec("0", 5), "ab").text == "ab".rjust(5, "0")


def test_render_string_zero_flag_with_cut_writes_nothing():
    result = render_string(_spec("0", 5, 2), "hello")
    assert result.text == ""
    assert result.length == 5


def test_render_string_rejects_non_string():
    with pytest.raises(TypeError):
        render_string(_spec(), 12)


def test_render_char_plain_and_padded():
    assert render_char(_spec(), "a") == Rendered("a", 1)
    assert render_char(_spec(width=3), "a").text == "%3c" % "a"
    assert render_char(_spec("-", 3), "a").text == "%-3c" % "a"
    assert render_char(_spec(width=3), "a").length == 3


def test_render_char_from_code():
    assert render_char(_spec(), 65).text == chr(65)
    assert render_char(_spec(), 256 + 66).text == chr(66)


def test_render_char_rejects_long_string():
    with pytest.raises(ValueError):
        render_char(_spec(), "ab")


def test_render_percent():
    assert render_percent(_spec()) == Rendered("%", 1)
    assert render_percent(_spec(width=4)).text == "%".rjust(4)
    assert render_percent(_spec("-", 4)).text == "%".ljust(4)
    assert render_percent(_spec("0", 4)).text == "%".rjust(4, "0")
    assert render_percent(_spec(width=4)).length == 4


def test_rendered_str_is_text():
    result = render_int(_spec(width=4), 7)
    assert str(result) == result.text == "%4d" % 7