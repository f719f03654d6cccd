"""
Unit tests for the card content fingerprint.
"""

import hashlib
import re

from flashdeck.domain_core.value_objects.fingerprint import (
    FINGERPRINT_LENGTH,
    SEPARATOR,
    fingerprint,
    normalize,
)


class TestNormalize:
    def test_collapses_whitespace_runs(self):
        assert normalize("What \t is\n\nATP?") == "what is atp?"

    def test_trims_surrounding_whitespace(self):
        assert normalize("  What is ATP? \n") == "what is atp?"

    def test_none_is_empty(self):
        assert normalize(None) == ""

    def test_separator_never_survives(self):
        assert SEPARATOR not in normalize("a\nb\r\nc")


class TestFingerprint:
    def test_is_64_char_lowercase_hex(self):
        value = fingerprint("What is ATP?", "Energy currency")
        assert len(value) == FINGERPRINT_LENGTH
        assert re.fullmatch(r"[0-9a-f]{64}", value)

    def test_deterministic(self):
        assert fingerprint("Q", "A") == fingerprint("Q", "A")

    def test_case_and_whitespace_insensitive(self):
        assert fingerprint("What  is\tATP?", "Energy\ncurrency") == fingerprint(
            "what is atp?", "energy currency"
        )

    def test_surrounding_whitespace_is_ignored(self):
        assert fingerprint(" q", "a ") == fingerprint("q", "a")
        assert fingerprint("What is ATP? ", "Energy") == fingerprint("What is ATP?", "Energy")

    def test_front_and_back_are_not_interchangeable(self):
        assert fingerprint("q", "a") != fingerprint("a", "q")

    def test_split_point_is_unambiguous(self):
        assert fingerprint("a b", "c") != fingerprint("a", "b c")
        assert fingerprint("a||", "b") != fingerprint("a", "||b")

    def test_absent_sides_hash_as_empty(self):
        assert fingerprint(None, None) == fingerprint("", "")

    def test_matches_sha256_of_normalized_content(self):
        expected = hashlib.sha256("hello world\nbye".encode("utf-8")).hexdigest()
        assert fingerprint("Hello   World", "BYE") == expected

    def test_unicode_content(self):
        assert fingerprint("ÄPFEL", "Birne") == fingerprint("äpfel", "birne")
