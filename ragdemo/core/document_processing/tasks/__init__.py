"""
Task modules for document processing pipeline.

Exports: UrlDownloadTask, ParsingTask, ChunkingTask
"""

from .chunking_task import ChunkingTask
from .parsing_task import ParsingTask
from .url_download_task import UrlDownloadTask

__all__ = [
    "UrlDownloadTask",
    "ParsingTask",
    "ChunkingTask",
]
