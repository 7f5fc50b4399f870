from .base import DocumentStore, MemoryDocumentStore
from .jsonl_store import JSONLDocumentStore, read_documents

__all__ = ["DocumentStore", "MemoryDocumentStore", "JSONLDocumentStore", "read_documents"]
