"""Tests for text_chunking.splitter."""

from text_chunking.splitter import (
    HEADING_PATTERN,
    split_by_pattern,
    split_paragraphs,
    split_sentences,
)


class TestParagraphs:
    def test_empty_string(self):
        assert split_paragraphs("") == []

    def test_single_paragraph(self):
        assert split_paragraphs("Only one paragraph.") == ["Only one paragraph."]

    def test_blank_line_separates(self):
        assert split_paragraphs("First.\n\nSecond.") == ["First.", "Second."]

    def test_blank_line_with_spaces(self):
        assert split_paragraphs("First.\n  \nSecond.") == ["First.", "Second."]

    def test_single_newline_does_not_split(self):
        assert split_paragraphs("Line one\nline two") == ["Line one\nline two"]

    def test_fragments_trimmed(self):
        assert split_paragraphs(" First. \n\n Second. ") == ["First.", "Second."]


class TestSentences:
    def test_empty_string(self):
        assert split_sentences("") == []

    def test_two_sentences(self):
        assert split_sentences("First sentence. Second sentence.") == [
            "First sentence.",
            "Second sentence.",
        ]

    def test_question_and_exclamation(self):
        assert split_sentences("Why? Because! Fine.") == ["Why?", "Because!", "Fine."]

    def test_no_whitespace_no_split(self):
        """A period inside a token is not a boundary."""
        assert split_sentences("Version 1.5 is out.") == ["Version 1.5 is out."]

    def test_newline_after_period_splits(self):
        assert split_sentences("Line one.\nLine two.") == ["Line one.", "Line two."]

    def test_no_terminal_punctuation(self):
        assert split_sentences("no punctuation here") == ["no punctuation here"]


class TestHeadings:
    def test_markdown_heading_boundary(self):
        text = "Intro text\n## Section\nBody text"
        assert split_by_pattern(text, HEADING_PATTERN) == ["Intro text", "Section\nBody text"]
