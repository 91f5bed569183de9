from .collection import SearchResult, ReminderCollection
from .config import build_matcher
from .errors import EmptyStateError, ReminderError, ReminderIndexError, ValidationError
from .matching import FuzzyMatcher, SimilarityMatcher, SubsequenceMatcher
from .models import Reminder

__all__ = [
    "EmptyStateError",
    "FuzzyMatcher",
    "Reminder",
    "ReminderCollection",
    "ReminderError",
    "ReminderIndexError",
    "SearchResult",
    "SimilarityMatcher",
    "SubsequenceMatcher",
    "ValidationError",
    "build_matcher",
]
