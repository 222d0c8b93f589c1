"""
Offline indexing entry point.

Indexes PDF files from disk into the configured vector collection without
starting the HTTP server. Uses the same ingestion pipeline as uploads, so
entries written here are searched by chat once the server has content.

Dependencies: ragchat.api.deps, ragchat.core.ingestion, python-dotenv
System role: Bulk indexing command (ragchat-index)
"""

import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from ragchat.api.deps import ServiceCache
from ragchat.configs import get_settings
from ragchat.core.exceptions import RAGChatException
from ragchat.core.ingestion import IngestionResult, ensure_pdf
from ragchat.core.ingestion.parsing_task import PDF_CONTENT_TYPE, PDF_MAGIC
from ragchat.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def index_pdf(cache: ServiceCache, path: Path) -> IngestionResult:
    """
    Validate and ingest one PDF file.

    Raises:
        UnsupportedFormatError: File is not a PDF
        IngestionError: Parsing, embedding or index write failed
    """
    with path.open("rb") as f:
        head = f.read(len(PDF_MAGIC))
    ensure_pdf(PDF_CONTENT_TYPE, head)
    return await cache.ingestion_pipeline.ingest_pdf(str(path), path.name)


async def index_files(cache: ServiceCache, paths: list[Path]) -> int:
    """
    Index every path, continuing past failures.

    Returns:
        int: Number of files that failed
    """
    failures = 0
    try:
        for path in paths:
            try:
                result = await index_pdf(cache, path)
            except (RAGChatException, OSError) as e:
                failures += 1
                logger.error(f"{__name__}:index_files - FAILED {path}: {e}")
                continue
            print(f"Indexed {path.name}: {result.page_count} pages, {result.chunk_count} chunks")
    finally:
        await cache.close()

    print(f"Indexing done: {len(paths) - failures} / {len(paths)} files")
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ragchat-index",
        description="Index PDF files into the configured vector collection.",
    )
    parser.add_argument("pdfs", nargs="+", type=Path, help="PDF files to index")
    args = parser.parse_args(argv)

    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.vector_store.store_type == "faiss" and not settings.vector_store.persist_directory:
        logger.warning(
            f"{__name__}:main - FAISS without VECTOR_STORE_PERSIST_DIRECTORY keeps vectors "
            "in memory only; they are lost when this command exits"
        )

    failures = asyncio.run(index_files(ServiceCache(settings=settings), args.pdfs))
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
