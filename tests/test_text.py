"""Tests for label normalization and string unescaping."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdlinkref.text import normalize_label, unescape_string


class TestNormalizeLabel:
    """normalize_label produces case-insensitive lookup keys."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("foo", "foo"),
            ("FOO", "foo"),
            ("  Foo \t Bar  ", "foo bar"),
            ("foo\nbar", "foo bar"),
            ("\nfoo", "foo"),
            ("Straße", "strasse"),
            ("ẞ", "ss"),
            ("ΑΓΩ", "αγω"),
            ("foo\\]", "foo\\]"),
            ("   ", ""),
            ("\n", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        """Case fold, collapse whitespace, strip."""
        assert normalize_label(raw) == expected

    def test_non_commonmark_whitespace_is_content(self) -> None:
        """Non-breaking spaces are not collapsed."""
        assert normalize_label("a\u00a0\u00a0b") == "a\u00a0\u00a0b"

    @given(raw=st.text(max_size=40))
    def test_idempotent(self, raw: str) -> None:
        """PROPERTY: normalizing twice equals normalizing once."""
        once = normalize_label(raw)

        assert normalize_label(once) == once


class TestUnescapeString:
    """unescape_string resolves escapes and entity references."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            ("\\*", "*"),
            ("\\\\", "\\"),
            ("\\a", "\\a"),
            ("a\\", "a\\"),
            ("&amp;", "&"),
            ("&copy;", "©"),
            ("&#35;", "#"),
            ("&#x22;", '"'),
            ("&#X22;", '"'),
            ("&#0;", "\ufffd"),
            ("&#xD800;", "\ufffd"),
            ("&#1234567;", "\ufffd"),
            ("&bogus;", "&bogus;"),
            ("&notit;", "&notit;"),
            ("&amp", "&amp"),
            ("\\&amp;", "&amp;"),
            ("&#87654321;", "&#87654321;"),
        ],
    )
    def test_unescape(self, raw: str, expected: str) -> None:
        """Escapes, entities, and things that are neither."""
        assert unescape_string(raw) == expected

    @given(text=st.text(alphabet=st.characters(exclude_characters="\\&"), max_size=40))
    def test_identity_without_specials(self, text: str) -> None:
        """PROPERTY: text without `\\` or `&` is returned unchanged."""
        assert unescape_string(text) == text

    @given(ch=st.sampled_from("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"))
    def test_escaped_punctuation_once(self, ch: str) -> None:
        """PROPERTY: every escaped ASCII punctuation char unescapes to itself."""
        assert unescape_string("\\" + ch) == ch
