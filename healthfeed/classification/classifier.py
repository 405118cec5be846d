"""Keyword-based health relevance classifier."""

import re
from typing import Dict, List, Optional, Pattern, Tuple

from pydantic import BaseModel, Field

from ..models import Category
from .keywords import (
    DISEASE_TERMS,
    HEALTH_KEYWORDS,
    MENTAL_HEALTH_TERMS,
    NON_HEALTH_INDICATORS,
    RESEARCH_TERMS,
    WELLNESS_TERMS,
)

# Minimum distinct health keywords that outweigh a non-health indicator.
STRONG_HEALTH_SIGNAL = 2


class Classification(BaseModel):
    """Classifier decision with the evidence behind it."""

    category: Category = Field(..., description="Assigned category")
    health_matches: List[str] = Field(default_factory=list, description="Distinct health keywords found")
    exclusion_matches: List[str] = Field(default_factory=list, description="Non-health phrases found")
    reason: str = Field(..., description="Human-readable decision reason")


def _term_pattern(term: str) -> Pattern:
    """Word-boundary pattern accepting -s/-es plurals, or y -> ies after a consonant."""
    term = term.lower()
    if len(term) > 1 and term.endswith("y") and term[-2] not in "aeiou":
        return re.compile(r"\b" + re.escape(term[:-1]) + r"(?:y|ies)\b")
    return re.compile(r"\b" + re.escape(term) + r"(?:s|es)?\b")


def _compile(terms: List[str]) -> Dict[str, Pattern]:
    return {term: _term_pattern(term) for term in terms}


class HealthClassifier:
    """Decide whether an article is health news and which category it fits."""

    def __init__(
        self,
        extra_health_keywords: Optional[List[str]] = None,
        extra_exclusion_phrases: Optional[List[str]] = None,
    ) -> None:
        """
        Initialize classifier.

        Args:
            extra_health_keywords: Additional terms for the health gate
            extra_exclusion_phrases: Additional strong non-health phrases
        """
        health_terms = list(HEALTH_KEYWORDS)
        for term in extra_health_keywords or []:
            if term.lower() not in health_terms:
                health_terms.append(term.lower())

        self.health_patterns = _compile(health_terms)
        self.exclusion_patterns = _compile(
            NON_HEALTH_INDICATORS + [p.lower() for p in (extra_exclusion_phrases or [])]
        )
        # Checked in order; the first bucket with a hit wins.
        self.buckets: List[Tuple[Category, Dict[str, Pattern]]] = [
            (Category.MENTAL_HEALTH, _compile(MENTAL_HEALTH_TERMS)),
            (Category.DISEASES_AND_TREATMENT, _compile(DISEASE_TERMS)),
            (Category.MEDICAL_RESEARCH, _compile(RESEARCH_TERMS)),
            (Category.NUTRITION_AND_WELLNESS, _compile(WELLNESS_TERMS)),
        ]

    @staticmethod
    def _find(text: str, patterns: Dict[str, Pattern]) -> List[str]:
        return [term for term, pattern in patterns.items() if pattern.search(text)]

    def explain(self, title: Optional[str], content: Optional[str]) -> Classification:
        """Classify and report which keywords drove the decision."""
        text = f"{title or ''} {content or ''}".lower()

        health_matches = self._find(text, self.health_patterns)
        if not health_matches:
            return Classification(
                category=Category.EXCLUDED,
                reason="no health keywords",
            )

        exclusion_matches = self._find(text, self.exclusion_patterns)
        if exclusion_matches and len(health_matches) < STRONG_HEALTH_SIGNAL:
            return Classification(
                category=Category.EXCLUDED,
                health_matches=health_matches,
                exclusion_matches=exclusion_matches,
                reason="non-health indicator outweighs a single health keyword",
            )

        for category, patterns in self.buckets:
            hits = self._find(text, patterns)
            if hits:
                return Classification(
                    category=category,
                    health_matches=health_matches,
                    exclusion_matches=exclusion_matches,
                    reason=f"matched {', '.join(hits[:3])}",
                )

        return Classification(
            category=Category.EXCLUDED,
            health_matches=health_matches,
            exclusion_matches=exclusion_matches,
            reason="general health terms only, no specific category",
        )

    def classify(self, title: Optional[str], content: Optional[str]) -> Category:
        """Return the category for an article."""
        return self.explain(title, content).category


_default_classifier = HealthClassifier()


def classify(title: Optional[str], content: Optional[str]) -> Category:
    """Classify with the built-in keyword lists."""
    return _default_classifier.classify(title, content)
