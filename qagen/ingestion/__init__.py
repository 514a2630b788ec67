"""Article database ingestion."""

from .csv_loader import load_articles
from .models import LoadResult

__all__ = ["LoadResult", "load_articles"]
