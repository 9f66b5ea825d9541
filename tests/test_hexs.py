import pytest

from hex2b64.errors import DecodeHexError, InvalidDigitError, OddLengthError
from hex2b64.utils.hexs import hex_to_bytes


def test_happy_path_hex_to_bytes():
    assert hex_to_bytes("afbe") == bytes([0xaf, 0xbe])


def test_empty_string_decodes_to_no_bytes():
    assert hex_to_bytes("") == b""


def test_fail_hex_to_bytes_odd_length():
    with pytest.raises(OddLengthError) as exc_info:
        hex_to_bytes("afb")
    assert exc_info.value.message == "input string has an odd number of bytes"


@pytest.mark.parametrize("text", ["a", "abc", "zzz", "+1f", "0123456"])
def test_odd_length_wins_over_bad_digits(text):
    with pytest.raises(OddLengthError):
        hex_to_bytes(text)


def test_case_insensitive():
    assert hex_to_bytes("AF") == hex_to_bytes("af") == bytes([0xAF])
    assert hex_to_bytes("DeadBEEF") == bytes([0xde, 0xad, 0xbe, 0xef])


@pytest.mark.parametrize("data", [
    b"",
    b"\x00",
    bytes(range(256)),
    b"Hello World",
    bytes([0xff, 0x00, 0x7f, 0x80]),
])
def test_recovers_bytes_from_their_hex_form(data):
    assert hex_to_bytes(data.hex()) == data
    assert hex_to_bytes(data.hex().upper()) == data


@pytest.mark.parametrize("text, window, offset", [
    ("zz", "zz", 0),
    ("00g1", "g1", 2),
    ("0011x2", "x2", 4),
    ("+f", "+f", 0),
    ("-1", "-1", 0),
    (" f", " f", 0),
    ("f ", "f ", 0),
    ("1_", "1_", 0),
    ("0x10", "0x", 0),
    ("١٢", "١٢", 0),
])
def test_invalid_digit(text, window, offset):
    with pytest.raises(InvalidDigitError) as exc_info:
        hex_to_bytes(text)
    err = exc_info.value
    assert err.window == window
    assert err.offset == offset
    assert err.message == "invalid digit found in string"
    assert isinstance(err.__cause__, ValueError)


def test_first_bad_window_is_reported():
    with pytest.raises(InvalidDigitError) as exc_info:
        hex_to_bytes("00zz11yy")
    assert exc_info.value.offset == 2


def test_errors_share_a_base_class():
    for text in ("abc", "zz"):
        with pytest.raises(DecodeHexError):
            hex_to_bytes(text)
        with pytest.raises(ValueError):
            hex_to_bytes(text)


def test_non_string_input_is_a_type_error():
    with pytest.raises(TypeError):
        hex_to_bytes(b"afbe")


def test_invalid_digit_cause_names_bad_characters():
    with pytest.raises(InvalidDigitError) as exc_info:
        hex_to_bytes("a+")
    assert "'+'" in str(exc_info.value.__cause__)
