"""
Paragraph and Sentence Splitting for the Chunking Pipeline

Boundaries are plain regular expressions:
- paragraph: a newline, optional whitespace, another newline
- sentence: whitespace directly after '.', '!' or '?'
- heading: a markdown heading line or a setext underline

Fragments are stripped and empty fragments dropped.

Usage:
    from text_chunking.splitter import split_paragraphs, split_sentences

    split_sentences("Satz eins. Satz zwei!")
    # ["Satz eins.", "Satz zwei!"]
"""

import re

PARAGRAPH_PATTERN = re.compile(r"\n\s*\n")
SENTENCE_PATTERN = re.compile(r"(?<=[.!?])\s+")
HEADING_PATTERN = re.compile(r"\n#{1,6}\s+|\n[A-Z][^\n]+\n(?:[-=]{2,})\n")


def split_by_pattern(text: str, pattern: re.Pattern) -> list[str]:
    """
    Split text at every match of pattern.

    Args:
        text: Text to split.
        pattern: Compiled boundary pattern.

    Returns:
        Stripped, non-empty fragments in order.
    """
    if not text:
        return []
    fragments = []
    for part in pattern.split(text):
        part = part.strip()
        if part:
            fragments.append(part)
    return fragments


def split_paragraphs(text: str) -> list[str]:
    return split_by_pattern(text, PARAGRAPH_PATTERN)


def split_sentences(text: str) -> list[str]:
    return split_by_pattern(text, SENTENCE_PATTERN)
