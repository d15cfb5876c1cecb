"""Core orchestration, prompts and document processing."""
