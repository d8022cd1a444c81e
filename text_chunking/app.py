from fastapi import FastAPI, HTTPException

from .config import ChunkingServiceConfig
from .exceptions import (
    ChunkingError,
    DocumentNotFoundError,
    InvalidDocumentIdError,
    ResultNotFoundError,
)
from .models import (
    ChunkFileRequest,
    ChunkingResult,
    ChunkResponse,
    ChunkTextRequest,
    SettingsResponse,
)
from .service import ChunkingService


def _to_http_error(exc: ChunkingError) -> HTTPException:
    if isinstance(exc, InvalidDocumentIdError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, (DocumentNotFoundError, ResultNotFoundError)):
        return HTTPException(status_code=404, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def _response(result: ChunkingResult, output_path: str | None = None) -> ChunkResponse:
    return ChunkResponse(
        document_id=result.document_id,
        total_chunks=result.total_chunks,
        output_path=output_path,
        stats=result.stats,
        chunks=result.chunks,
    )


def create_app(config: ChunkingServiceConfig | None = None) -> FastAPI:
    service = ChunkingService(config or ChunkingServiceConfig.from_env())
    app = FastAPI(
        title="Text Chunking Service",
        version="1.0.0",
        description="Paragraph and sentence aware text chunking with neighbor overlap.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/settings", response_model=SettingsResponse)
    def settings() -> SettingsResponse:
        return SettingsResponse(**service.chunker.get_settings())

    @app.post("/chunk", response_model=ChunkResponse)
    def chunk(request: ChunkTextRequest) -> ChunkResponse:
        try:
            if request.persist:
                result, output_path = service.chunk_text_and_save(
                    request.text, request.metadata, document_id=request.document_id
                )
                return _response(result, output_path)
            result = service.chunk_text(
                request.text, request.metadata, document_id=request.document_id
            )
            return _response(result)
        except ChunkingError as exc:
            raise _to_http_error(exc) from exc

    @app.post("/chunk/file", response_model=ChunkResponse)
    def chunk_file(request: ChunkFileRequest) -> ChunkResponse:
        try:
            result, output_path = service.chunk_and_save(request.path, request.metadata)
            return _response(result, output_path)
        except ChunkingError as exc:
            raise _to_http_error(exc) from exc

    @app.get("/documents/{document_id}/chunks", response_model=ChunkResponse)
    def document_chunks(document_id: str) -> ChunkResponse:
        try:
            return _response(service.load_result(document_id))
        except ChunkingError as exc:
            raise _to_http_error(exc) from exc

    return app


app = create_app()
