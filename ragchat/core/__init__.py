"""Core domain logic: ingestion, retrieval and the RAG flow."""
