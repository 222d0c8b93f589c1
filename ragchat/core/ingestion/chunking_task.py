"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits page or text documents that exceed the chunk size into deterministic
windows and converts them into DocumentChunk models.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from ragchat.core.ingestion.models import DocumentChunk


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 4000,
        chunk_overlap: int = 0,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[DocumentChunk]:
        """
        Split documents into chunks, dropping whitespace-only spans.

        PyPDFLoader numbers pages from 0; chunks carry 1-based page numbers.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[DocumentChunk]: Chunks in document order
        """
        chunks: list[DocumentChunk] = []
        for doc in self._splitter.split_documents(documents):
            if not doc.page_content.strip():
                continue
            page = doc.metadata.get("page")
            chunks.append(
                DocumentChunk(
                    text=doc.page_content,
                    source=doc.metadata.get("source", ""),
                    page=page + 1 if isinstance(page, int) else None,
                    offset=doc.metadata.get("start_index"),
                    chunk_index=len(chunks),
                )
            )
        return chunks
