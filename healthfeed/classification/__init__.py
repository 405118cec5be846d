"""Health relevance classification."""

from .classifier import Classification, HealthClassifier, classify

__all__ = ["HealthClassifier", "Classification", "classify"]
