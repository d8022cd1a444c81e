import argparse
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv(ROOT / ".env")

from text_chunking.app import create_app
from text_chunking.config import ChunkingServiceConfig
from text_chunking.exceptions import ChunkingError
from text_chunking.logging_config import setup_logging
from text_chunking.service import ChunkingService
import uvicorn


def run_chunk(file_path: str, output_path: str | None = None) -> None:
    service = ChunkingService(ChunkingServiceConfig.from_env())
    result, stored_path = service.chunk_and_save(file_path)
    print(f"document_id: {result.document_id}")
    print(f"output_path: {stored_path}")
    print(f"chunks: {result.total_chunks}")
    print(f"avg_chunk_size: {result.stats.avg_original_size:.1f}")
    if output_path:
        result.save(output_path)
        print(f"saved_copy: {output_path}")


def run_server(host: str, port: int) -> None:
    app = create_app(ChunkingServiceConfig.from_env())
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Text chunking runner (CLI chunking or API server)."
    )
    parser.add_argument("--serve", action="store_true", help="Run FastAPI server")
    parser.add_argument("--host", default="0.0.0.0", help="Server host")
    parser.add_argument("--port", type=int, default=8002, help="Server port")
    parser.add_argument("--file", help="Path to a text file to chunk")
    parser.add_argument("--output", help="Optional output path for chunks JSON")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    setup_logging(level=getattr(logging, args.log_level.upper(), logging.INFO))

    if args.serve:
        run_server(args.host, args.port)
        return

    if not args.file:
        parser.error("Provide --file or use --serve to run the API.")
    try:
        run_chunk(args.file, args.output)
    except ChunkingError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
