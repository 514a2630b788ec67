"""Data models for the Q&A generator."""

from .article import Article
from .qa import QAPair

__all__ = ["Article", "QAPair"]
