"""
Observability module.

Provides logging configuration, structured log helpers, correlation ID
tracking and the observer the orchestration layer reports through.
"""

from ragdemo.observability.observer import LoggingRagObserver, RagObserver

__all__ = ["LoggingRagObserver", "RagObserver"]
