from __future__ import annotations

import os
from typing import Optional

from .matching import (
    DEFAULT_SIMILARITY_THRESHOLD,
    FuzzyMatcher,
    SimilarityMatcher,
    SubsequenceMatcher,
)


MATCHER_NAMES = ("subsequence", "similarity")


def fuzzy_matcher_name() -> str:
    return os.getenv("REMINDERS_FUZZY_MATCHER", "subsequence").strip().lower()


def fuzzy_threshold() -> float:
    raw = os.getenv("REMINDERS_FUZZY_THRESHOLD")
    if raw is None or not raw.strip():
        return DEFAULT_SIMILARITY_THRESHOLD
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"REMINDERS_FUZZY_THRESHOLD must be a number, got {raw!r}") from exc
    if not 0 < value <= 1:
        raise ValueError("REMINDERS_FUZZY_THRESHOLD must be in (0, 1]")
    return value


def service_name() -> str:
    return os.getenv("REMINDERS_SERVICE_NAME", "tagged-reminders")


def build_matcher(name: Optional[str] = None, threshold: Optional[float] = None) -> FuzzyMatcher:
    matcher_name = (name or fuzzy_matcher_name()).strip().lower()
    if matcher_name == "subsequence":
        return SubsequenceMatcher()
    if matcher_name == "similarity":
        return SimilarityMatcher(threshold if threshold is not None else fuzzy_threshold())
    raise ValueError(
        f"Unknown fuzzy matcher {matcher_name!r}; expected one of {', '.join(MATCHER_NAMES)}"
    )
