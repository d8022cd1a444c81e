"""
Custom Exceptions for the Chunking Service.

The chunker itself never raises; these exceptions cover the layers around
it that read documents and persist results.

Exception Hierarchy:
    ChunkingError (base)
    ├── DocumentError
    │   ├── DocumentNotFoundError
    │   └── DocumentReadError
    └── StorageError
        ├── ResultNotFoundError
        └── InvalidDocumentIdError

Usage:
    from text_chunking.exceptions import ChunkingError, DocumentNotFoundError

    try:
        result = service.chunk_file("docs/handbook.txt")
    except DocumentNotFoundError as e:
        print(f"File not found: {e.path}")
    except ChunkingError as e:
        print(f"Chunking failed: {e}")
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class ChunkingError(Exception):
    """
    Base exception for all chunking service errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A chunking error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# DOCUMENT ERRORS
# =============================================================================


class DocumentError(ChunkingError):
    """Base class for errors reading a source document."""

    def __init__(
        self,
        message: str = "Document error",
        path: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.path = path
        if path:
            message = f"{message} [{path}]"
        super().__init__(message, details)


class DocumentNotFoundError(DocumentError):
    """
    Raised when the source document does not exist.

    Attributes:
        path: Path to the missing file
    """

    def __init__(self, path: str):
        super().__init__(
            message=f"Document not found: {path}",
            path=path,
        )


class DocumentReadError(DocumentError):
    """
    Raised when the source document exists but cannot be read.

    Attributes:
        path: Path to the unreadable file
        original_error: The underlying OS error
    """

    def __init__(
        self,
        path: str,
        original_error: Optional[Exception] = None,
    ):
        self.original_error = original_error
        details = str(original_error) if original_error else None
        super().__init__(
            message=f"Document could not be read: {path}",
            path=path,
            details=details,
        )


# =============================================================================
# STORAGE ERRORS
# =============================================================================


class StorageError(ChunkingError):
    """Raised when a chunking result cannot be written or read back."""

    pass


class ResultNotFoundError(StorageError):
    """
    Raised when no stored chunking result exists for a document.

    Attributes:
        document_id: The document that was looked up
    """

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"No chunking result stored for document: {document_id}")


class InvalidDocumentIdError(StorageError):
    """
    Raised when a document ID cannot be used as a storage directory name.

    IDs must be a single path segment below the data directory.

    Attributes:
        document_id: The rejected ID
    """

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Invalid document ID for storage: {document_id!r}")
