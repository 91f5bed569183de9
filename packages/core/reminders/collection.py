from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import EmptyStateError, ReminderIndexError
from .matching import FuzzyMatcher, SubsequenceMatcher
from .models import Reminder


STAGE_TAG = "tag"
STAGE_DESCRIPTION = "description"
STAGE_NONE = "none"


@dataclass(frozen=True)
class SearchResult:
    keyword: str
    stage: str
    reminders: List[Reminder]


class ReminderCollection:
    """Ordered reminders addressed by 1-based position.

    Search looks for tags equal to the keyword (ignoring case) and only falls
    back to fuzzy description matching when no tag matches. Grouping keeps tags
    as written, so "Work" and "work" are separate groups.

    Not thread-safe; callers sharing a collection must serialize access.
    """

    def __init__(
        self,
        matcher: Optional[FuzzyMatcher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._reminders: Optional[List[Reminder]] = []
        self._matcher = matcher or SubsequenceMatcher()
        self._logger = logger

    @property
    def reminders(self) -> List[Reminder]:
        if self._reminders is None:
            raise EmptyStateError("Reminder storage is not initialized")
        return list(self._reminders)

    def add_reminder(self, description: str, tag: str) -> Reminder:
        reminder = Reminder(description, tag)
        self._reminders.append(reminder)
        return reminder

    def get_reminder(self, position: int) -> Reminder:
        self._check_position(position)
        return self._reminders[position - 1]

    def is_index_valid(self, position: int) -> bool:
        if isinstance(position, bool) or not isinstance(position, int):
            return False
        if self.size() == 0:
            return False
        return 1 <= position <= self.size()

    def size(self) -> int:
        return len(self._reminders)

    def __len__(self) -> int:
        return self.size()

    def modify_reminder(self, position: int, description: str) -> Reminder:
        reminder = self.get_reminder(position)
        reminder.description = description
        return reminder

    def toggle_completion(self, position: int) -> Reminder:
        reminder = self.get_reminder(position)
        reminder.toggle_completion()
        return reminder

    def search(self, keyword: str) -> List[Reminder]:
        return self.search_stage(keyword).reminders

    def search_stage(self, keyword: str) -> SearchResult:
        by_tag = self._search_tags(keyword)
        if by_tag:
            return SearchResult(keyword=keyword, stage=STAGE_TAG, reminders=by_tag)
        by_description = self._search_descriptions(keyword)
        stage = STAGE_DESCRIPTION if by_description else STAGE_NONE
        return SearchResult(keyword=keyword, stage=stage, reminders=by_description)

    def group_by_tag(self) -> Dict[str, List[Reminder]]:
        groups: Dict[str, List[Reminder]] = {}
        for reminder in self.reminders:
            groups.setdefault(reminder.tag, []).append(reminder)
        return groups

    def _check_position(self, position: int) -> None:
        if not self.is_index_valid(position):
            raise ReminderIndexError(f"Position {position!r} is not valid")

    def _search_tags(self, keyword: str) -> List[Reminder]:
        needle = keyword.casefold()
        return [reminder for reminder in self.reminders if reminder.tag.casefold() == needle]

    def _search_descriptions(self, keyword: str) -> List[Reminder]:
        if self._logger is not None:
            self._logger.info(
                "No tag matched %r, searching descriptions instead", keyword
            )
        reminders = self.reminders
        if not reminders:
            return []
        matched = set(self._matcher.match(keyword, [r.description for r in reminders]))
        return [reminder for reminder in reminders if reminder.description in matched]
