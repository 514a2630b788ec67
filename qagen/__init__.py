"""Extended Q&A generator backed by an article database."""

__version__ = "0.1.0"
