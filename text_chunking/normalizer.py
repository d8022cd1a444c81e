"""
Text Normalizer for the Chunking Pipeline

Brings raw document text into the canonical form every later pass relies on:
valid Unicode (NFC), LF line endings, single spaces between words and at
most one blank line between paragraphs.

Broken encodings are repaired on a best-effort basis instead of rejected:
bytes that are not valid UTF-8 are read as Latin-1, strings carrying lone
surrogates get replacement characters, and a leading byte order mark is
dropped.

Usage:
    from text_chunking.normalizer import normalize_text

    normalize_text("Erster Absatz.\\r\\n\\r\\n\\r\\nZweiter   Absatz.")
    # "Erster Absatz.\\n\\nZweiter Absatz."
"""

import re
import unicodedata

_HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")
_BLANK_LINE_RUNS = re.compile(r"\n{3,}")
_BOM = "\ufeff"


def ensure_unicode(text: str | bytes) -> str:
    """
    Return text as a string that can be encoded as UTF-8.

    Args:
        text: Raw text, either already decoded or as bytes.

    Returns:
        A valid Unicode string. Never raises for str or bytes input.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8-sig")
        except UnicodeDecodeError:
            return bytes(text).decode("latin-1")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="replace").decode("utf-8")
    return text


def normalize_text(text: str | bytes) -> str:
    """
    Normalize text for consistent chunking.

    Args:
        text: Raw text.

    Returns:
        Normalized text; empty string for empty or whitespace-only input.
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFC", ensure_unicode(text)).removeprefix(_BOM)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    text = _BLANK_LINE_RUNS.sub("\n\n", text)
    return text.strip()
