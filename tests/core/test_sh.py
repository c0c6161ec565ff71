"""Tests for POSIX sh quoting."""

from __future__ import annotations

import pytest

from shellquote.core import sh
from shellquote.core.ascii import NulByteError


class TestShQuote:
    def test_empty(self):
        assert sh.quote(b"") == b"''"

    def test_simple_word(self):
        assert sh.quote(b"hello") == b"hello"

    def test_safe_chars(self):
        assert sh.quote(b"foo-bar_baz.txt") == b"foo-bar_baz.txt"
        assert sh.quote(b"/path/to/file") == b"/path/to/file"
        assert sh.quote(b"key=value") == b"key=value"

    def test_with_spaces(self):
        assert sh.quote(b"hello world") == b"'hello world'"

    def test_with_single_quote(self):
        assert sh.quote(b"it's") == b"'it'\\''s'"

    def test_leading_and_trailing_quotes(self):
        assert sh.quote(b"'x'") == b"\\''x'\\'"

    def test_only_quotes(self):
        assert sh.quote(b"'") == b"\\'"
        assert sh.quote(b"''") == b"\\'\\'"

    def test_special_chars(self):
        assert sh.quote(b"$HOME") == b"'$HOME'"
        assert sh.quote(b"a*b") == b"'a*b'"
        assert sh.quote(b"a;b") == b"'a;b'"
        assert sh.quote(b"a\\b") == b"'a\\b'"

    def test_control_bytes_stay_literal(self):
        assert sh.quote(b"\x07A") == b"'\x07A'"
        assert sh.quote(b"line1\nline2") == b"'line1\nline2'"
        assert sh.quote(b"a\tb") == b"'a\tb'"

    def test_high_bytes_use_printf(self):
        assert sh.quote(b"\xff") == b"\"$(printf '\\377')\""

    def test_high_byte_run_is_one_printf(self):
        assert sh.quote("café!".encode()) == b"'caf'\"$(printf '\\303\\251')\"'!'"

    def test_high_bytes_next_to_quote(self):
        assert sh.quote(b"\x80'") == b"\"$(printf '\\200')\"\\'"

    def test_output_is_ascii(self):
        for b in range(1, 256):
            assert max(sh.quote(bytes([b, ord("x")]))) < 0x80

    def test_nul_rejected(self):
        with pytest.raises(NulByteError):
            sh.quote(b"a\x00b")


class TestShQuoteInto:
    def test_appends(self):
        out = bytearray(b"echo ")
        sh.quote_into(b"it's", out)
        assert out == b"echo 'it'\\''s'"

    def test_matches_quote(self):
        for word in [b"", b"plain", b"two words", b"it's", b"\x01\xfe"]:
            out = bytearray()
            sh.quote_into(word, out)
            assert bytes(out) == sh.quote(word)

    def test_nul_leaves_buffer_untouched(self):
        out = bytearray(b"prefix")
        with pytest.raises(NulByteError):
            sh.quote_into(b"bad\x00", out)
        assert out == b"prefix"


class TestShRoundTrip:
    @pytest.mark.parametrize("shell", ["sh", "bash"])
    @pytest.mark.parametrize(
        "word",
        [
            b"",
            b"hello",
            b"hello world",
            b"it's",
            b"'",
            b"''''",
            b"\x07A",
            b"trailing newline\n",
            b"\n\n",
            b"$(rm -rf /) `id` ${HOME} !! *",
            "naïve café ☃".encode(),
            b"\xff\xfe\x80 invalid utf-8",
        ],
    )
    def test_round_trip(self, shell_eval, shell, word):
        assert shell_eval(shell, sh.quote(word)) == word

    @pytest.mark.parametrize("shell", ["sh", "bash"])
    def test_every_byte(self, shell_eval, shell):
        word = bytes(range(1, 256))
        assert shell_eval(shell, sh.quote(word)) == word
