"""Boundary adapters: vector store, chat model and Chroma admin API."""
