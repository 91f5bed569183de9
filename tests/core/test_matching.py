import pytest

from packages.core.reminders.matching import FuzzyMatcher, SimilarityMatcher, SubsequenceMatcher


def test_subsequence_matcher():
    matcher = SubsequenceMatcher()
    candidates = ["Buy milk", "buy shoes", "call mom"]
    assert matcher.match("buy", candidates) == ["Buy milk", "buy shoes"]
    assert matcher.match("bsh", candidates) == ["buy shoes"]
    assert matcher.match("klim", candidates) == []
    assert matcher.match("", candidates) == candidates


def test_subsequence_matcher_case_sensitive():
    matcher = SubsequenceMatcher(case_sensitive=True)
    assert matcher.match("buy", ["Buy milk", "buy shoes"]) == ["buy shoes"]


def test_similarity_matcher_tolerates_typos():
    matcher = SimilarityMatcher()
    candidates = ["buy groceries", "call mom", "pick up laundry"]
    assert matcher.match("grocerys", candidates) == ["buy groceries"]
    assert matcher.match("MOM", candidates) == ["call mom"]
    assert matcher.match("dentist", candidates) == []


def test_similarity_matcher_threshold_bounds():
    with pytest.raises(ValueError):
        SimilarityMatcher(threshold=0)
    with pytest.raises(ValueError):
        SimilarityMatcher(threshold=1.5)


def test_matchers_satisfy_protocol():
    assert isinstance(SubsequenceMatcher(), FuzzyMatcher)
    assert isinstance(SimilarityMatcher(), FuzzyMatcher)
