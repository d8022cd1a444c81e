"""
Text Chunker - Core chunking logic for the ingestion pipeline

Splits raw prose into ordered, size-bounded chunks that overlap their
neighbors, ready for embedding.

Algorithm:
1. Normalize the text (Unicode, line endings, whitespace).
2. Split it into paragraphs at blank lines.
3. Re-split paragraphs longer than chunk_size at sentence boundaries and
   greedily pack the sentences back into chunks of at most chunk_size.
4. Merge chunks smaller than min_chunk_size with their successors; a small
   trailing chunk is folded into its predecessor when both fit chunk_size.
5. Copy up to chunk_overlap characters from each neighbor into a chunk and
   attach positional metadata. Overlaps are dropped again when they would
   push a chunk past 1.5 * chunk_size.

All lengths are code point counts. split_text() never raises and keeps no
state between calls, so one TextChunker can serve many threads.

Usage:
    from text_chunking import TextChunker, ChunkerConfig

    chunker = TextChunker(ChunkerConfig(chunk_size=800, chunk_overlap=100))
    chunks = chunker.split_text(text, {"document_id": "handbook"})
"""

from collections.abc import Mapping
from typing import Any, Optional

from .logging_config import get_logger
from .models import Chunk, ChunkerConfig
from .normalizer import normalize_text
from .splitter import split_paragraphs, split_sentences

logger = get_logger(__name__)

# Overlapped content may grow to this multiple of chunk_size.
MAX_OVERLAP_GROWTH = 1.5


class _TextBuffer:
    """Space-joined accumulator that tracks its length without re-joining."""

    def __init__(self, text: str = ""):
        self._parts: list[str] = []
        self.length = 0
        if text:
            self.append(text)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def append(self, text: str) -> None:
        if self._parts:
            self.length += 1
        self._parts.append(text)
        self.length += len(text)

    def text(self) -> str:
        return " ".join(self._parts)


class TextChunker:
    """
    Splits text into overlapping, size-bounded chunks with positional
    metadata.
    """

    def __init__(self, config: Optional[ChunkerConfig] = None):
        self.config = config or ChunkerConfig()
        if self.config.min_chunk_size > self.config.chunk_size:
            logger.warning(
                "min_chunk_size (%d) exceeds chunk_size (%d); chunks will "
                "rarely reach the minimum",
                self.config.min_chunk_size,
                self.config.chunk_size,
            )

    def split_text(
        self,
        text: str | bytes,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Raw document text. Bytes are decoded best-effort.
            metadata: Fields copied into every chunk's metadata. Keys the
                chunker computes itself take precedence.

        Returns:
            Chunks in document order; empty for empty or blank text.
        """
        normalized = normalize_text(text)
        if not normalized:
            return []

        # Step 1: Paragraph split
        paragraphs = split_paragraphs(normalized)

        # Step 2: Re-split oversized paragraphs by sentence
        optimized = self._optimize_chunks(paragraphs)

        # Step 3: Merge small chunks
        merged = self._merge_small_chunks(optimized)

        logger.debug(
            "Chunked %d characters: %d paragraphs, %d after size "
            "optimization, %d after merging",
            len(normalized),
            len(paragraphs),
            len(optimized),
            len(merged),
        )

        # Step 4: Overlaps and metadata
        return self._process_chunks(merged, metadata or {})

    def get_settings(self) -> dict[str, int]:
        """Return the effective chunker settings (overlap after clamping)."""
        return {
            "chunk_size": self.config.chunk_size,
            "chunk_overlap": self.config.chunk_overlap,
            "min_chunk_size": self.config.min_chunk_size,
        }

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    def _optimize_chunks(self, fragments: list[str]) -> list[str]:
        """
        Re-split fragments longer than chunk_size at sentence boundaries.

        Sentences are packed greedily: a sentence joins the current buffer
        while buffer length plus sentence length stays within chunk_size.
        A single sentence longer than chunk_size becomes its own chunk.
        """
        chunk_size = self.config.chunk_size
        optimized: list[str] = []

        for fragment in fragments:
            if len(fragment) <= chunk_size:
                optimized.append(fragment)
                continue

            buffer = _TextBuffer()
            for sentence in split_sentences(fragment):
                if buffer.length + len(sentence) <= chunk_size:
                    buffer.append(sentence)
                    continue
                if buffer:
                    optimized.append(buffer.text())
                buffer = _TextBuffer(sentence)

            if buffer:
                optimized.append(buffer.text())

        return optimized

    def _merge_small_chunks(self, chunks: list[str]) -> list[str]:
        """
        Merge chunks below min_chunk_size with the chunks that follow them.

        A trailing chunk that is still too small is merged into the previous
        one if their combined length (without the joining space) fits
        chunk_size; otherwise both are kept.
        """
        if not chunks:
            return []

        chunk_size = self.config.chunk_size
        min_size = self.config.min_chunk_size
        merged: list[str] = []
        current = _TextBuffer()

        for chunk in chunks:
            if current.length >= min_size:
                merged.append(current.text())
                current = _TextBuffer(chunk)
                continue

            if current.length + len(chunk) <= chunk_size:
                current.append(chunk)
            else:
                if current:
                    merged.append(current.text())
                current = _TextBuffer(chunk)

        if not current:
            return merged

        if current.length < min_size and merged:
            previous = merged.pop()
            if len(previous) + current.length <= chunk_size:
                merged.append(f"{previous} {current.text()}")
            else:
                merged.append(previous)
                merged.append(current.text())
        else:
            merged.append(current.text())

        return merged

    def _process_chunks(
        self,
        chunks: list[str],
        metadata: Mapping[str, Any],
    ) -> list[Chunk]:
        """Inject neighbor overlaps and build Chunk records."""
        overlap = self.config.chunk_overlap
        size_limit = self.config.chunk_size * MAX_OVERLAP_GROWTH
        total = len(chunks)
        processed: list[Chunk] = []

        for i, chunk_text in enumerate(chunks):
            prev_overlap = ""
            next_overlap = ""

            if i > 0:
                prev_text = chunks[i - 1]
                overlap_size = min(overlap, len(prev_text))
                if overlap_size > 0:
                    prev_overlap = prev_text[-overlap_size:]

            if i < total - 1:
                next_text = chunks[i + 1]
                overlap_size = min(overlap, len(next_text))
                if overlap_size > 0:
                    next_overlap = next_text[:overlap_size]

            parts = []
            if prev_overlap:
                parts.append(prev_overlap)
            parts.append(chunk_text)
            if next_overlap:
                parts.append(next_overlap)
            content = "\n".join(parts)

            if len(content) > size_limit:
                content = chunk_text

            chunk_metadata = dict(metadata)
            chunk_metadata.update(
                chunk_index=i,
                total_chunks=total,
                has_previous=i > 0,
                has_next=i < total - 1,
                size=len(content),
                original_size=len(chunk_text),
                has_overlap_prev=bool(prev_overlap),
                has_overlap_next=bool(next_overlap),
            )
            processed.append(Chunk(content=content, metadata=chunk_metadata))

        return processed
