"""
Tests for the 8/16/32-bit encoding strategies.
"""

import pytest

from cxxtarget.codegen.encoding import (
    DEFAULT_ENCODING,
    DecodeError,
    Encoding,
    supports_encoding,
    utf16_units,
)

WELL_FORMED = ["", "abc", "héllo", "\U0001F600x", "\n\t\\", "￿"]

GRINNING = "\U0001F600"
HIGH, LOW = "\ud83d", "\ude00"


class TestEncodingSelection:

    def test_unset_option_uses_default(self):
        assert Encoding.from_option(None) is DEFAULT_ENCODING
        assert DEFAULT_ENCODING is Encoding.UTF16

    @pytest.mark.parametrize("name, expected", [
        ("UTF8", Encoding.UTF8),
        ("UTF16", Encoding.UTF16),
        ("UTF32", Encoding.UTF32),
        ("utf-8", Encoding.UTF8),
        ("utf_32", Encoding.UTF32),
    ])
    def test_known_names(self, name, expected):
        assert Encoding.from_option(name) is expected

    def test_unknown_option_falls_back_silently(self):
        assert Encoding.from_option("EBCDIC") is DEFAULT_ENCODING
        assert supports_encoding("EBCDIC")

    def test_attributes(self):
        assert Encoding.UTF8.max_code_value() == 0xFF
        assert Encoding.UTF16.max_code_value() == 0xFFFF
        assert Encoding.UTF32.max_code_value() == 0x10FFFF
        assert [e.encoding_name() for e in Encoding] == ["UTF8", "UTF16", "UTF32"]


class TestDecode:

    def test_utf16_units_split_astral_chars(self):
        assert utf16_units(GRINNING) == [0xD83D, 0xDE00]
        assert utf16_units(HIGH) == [0xD83D]

    def test_utf8_bytes(self):
        assert Encoding.UTF8.decode("aé") == [0x61, 0xC3, 0xA9]

    def test_utf16_code_units(self):
        assert Encoding.UTF16.decode(GRINNING + "x") == [0xD83D, 0xDE00, 0x78]

    def test_utf32_combines_pairs(self):
        assert Encoding.UTF32.decode(GRINNING) == [0x1F600]
        assert Encoding.UTF32.decode(HIGH + LOW) == [0x1F600]

    def test_utf32_rejects_two_high_surrogates(self):
        with pytest.raises(DecodeError):
            Encoding.UTF32.decode(HIGH + HIGH)

    def test_utf32_rejects_lone_low_surrogate(self):
        with pytest.raises(DecodeError):
            Encoding.UTF32.decode("a" + LOW)

    def test_utf8_rejects_lone_surrogate(self):
        with pytest.raises(DecodeError):
            Encoding.UTF8.decode(HIGH)

    @pytest.mark.parametrize("enc", list(Encoding))
    @pytest.mark.parametrize("text", WELL_FORMED)
    def test_round_trip(self, enc, text):
        codes = enc.decode(text)
        assert enc.decode(enc.encode(codes)) == codes


class TestSingleCode:

    def test_utf32_surrogate_pair_is_single(self):
        assert Encoding.UTF32.is_single_code(HIGH + LOW)
        assert Encoding.UTF32.decode(HIGH + LOW) == [0x1F600]

    def test_utf32_two_highs_is_not_single(self):
        assert not Encoding.UTF32.is_single_code(HIGH + HIGH)

    def test_utf32_unpaired_is_not_single(self):
        assert not Encoding.UTF32.is_single_code(HIGH)

    def test_utf16_counts_units(self):
        assert Encoding.UTF16.is_single_code("a")
        assert Encoding.UTF16.is_single_code(HIGH)
        assert not Encoding.UTF16.is_single_code(GRINNING)

    def test_utf8_counts_bytes(self):
        assert Encoding.UTF8.is_single_code("a")
        assert not Encoding.UTF8.is_single_code("é")

    @pytest.mark.parametrize("enc", list(Encoding))
    @pytest.mark.parametrize("text", WELL_FORMED + [HIGH, HIGH + HIGH, HIGH + LOW, "ab"])
    def test_consistent_with_decode(self, enc, text):
        try:
            n = len(enc.decode(text))
        except DecodeError:
            n = None
        assert enc.is_single_code(text) == (n == 1)
