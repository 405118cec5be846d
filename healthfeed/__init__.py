"""Health news feed with keyword categorization and AI enrichment."""

__version__ = "0.1.0"
