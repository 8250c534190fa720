"""Tests for wiki name encoding and appendix handling."""

import pytest

from wiki_export.naming import (
    appendix_name,
    fixup_path,
    is_appendix,
    is_appendix_section,
    wiki_decode,
    wiki_encode,
)


class TestWikiEncoding:
    """Tests for wiki_encode and wiki_decode."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My Title", "My-Title"),
            ("Conceptual Level: Behaviour", "Conceptual-Level%3A-Behaviour"),
            ("Non-Functional Requirements", "Non%2DFunctional-Requirements"),
        ],
    )
    def test_encode(self, name: str, expected: str) -> None:
        """Spaces become hyphens and hyphens are protected."""
        assert wiki_encode(name) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My-Title", "My Title"),
            ("Conceptual-Level%3A-Behaviour", "Conceptual Level: Behaviour"),
            ("Non%2DFunctional-Requirements", "Non-Functional Requirements"),
        ],
    )
    def test_decode(self, name: str, expected: str) -> None:
        """Hyphens become spaces before percent decoding."""
        assert wiki_decode(name) == expected

    def test_decode_reverses_encode(self) -> None:
        """Names of letters, digits, spaces, hyphens and colons survive."""
        name = "Release 2-B: Go-Live Plan"

        assert wiki_decode(wiki_encode(name)) == name


class TestFixupPath:
    """Tests for fixup_path."""

    def test_windows_path(self) -> None:
        """Drive letter and separators are restored, names stay encoded."""
        candidate = fixup_path(wiki_encode("C:\\Sample.wiki\\S2-Foo\\S3: Bar"))

        assert candidate == "C:\\Sample.wiki\\S2%2DFoo\\S3%3A-Bar"

    def test_posix_path(self) -> None:
        """Forward slashes are restored."""
        candidate = fixup_path(wiki_encode("/data/Sample.wiki/My Page"))

        assert candidate == "/data/Sample.wiki/My-Page"

    def test_percent_sign_unescaped(self) -> None:
        """Encoded percent signs go back to literal ones."""
        assert fixup_path("100%25-Done") == "100%-Done"

    def test_colon_elsewhere_kept(self) -> None:
        """Only a colon straight after a drive letter is restored."""
        assert fixup_path("Notes%3A-Today") == "Notes%3A-Today"


class TestAppendix:
    """Tests for appendix detection and naming."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My Title", "My Title"),
            ("Appendix Bibliography", "Bibliography"),
            ("Appendix: Bibliography", "Bibliography"),
            ("Appendix - Bibliography", "Bibliography"),
            ("Appendix A: Bibliography", "Bibliography"),
            ("Appendix 1 - Glossary", "Glossary"),
            ("APPENDIX B Acronyms", "Acronyms"),
        ],
    )
    def test_appendix_name(self, name: str, expected: str) -> None:
        """Prefix, separators and short labels are removed."""
        assert appendix_name(name) == expected

    def test_appendix_name_without_title(self) -> None:
        """Running out of characters returns the name unchanged."""
        assert appendix_name("Appendix") == "Appendix"
        assert appendix_name("Appendix A") == "Appendix A"

    def test_multi_character_label_kept(self) -> None:
        """Only single characters before a separator count as labels."""
        assert appendix_name("Appendix 12: Data") == "12: Data"

    def test_is_appendix(self) -> None:
        """Detection ignores case."""
        assert is_appendix("appendix-A%3A-Bibliography")
        assert not is_appendix("Appendices")
        assert not is_appendix("My Appendix")

    def test_is_appendix_section(self) -> None:
        """Sections are named Appendices."""
        assert is_appendix_section("Appendices")
        assert not is_appendix_section("Appendix A")
