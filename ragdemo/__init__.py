"""
RAG demo service.

HTTP front for populating and querying a vector store with an LLM.
"""

__version__ = "0.1.0"
