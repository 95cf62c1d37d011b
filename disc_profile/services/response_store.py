"""
DiSC Profile — Response Store

Holds the respondent's (most, least) selection for each question group.
This is the only mutable state in the package and it belongs to the
presentation layer: the scoring code reads it through ``snapshot()`` and
never writes to it.

Picking a word records the trait code attached to that word's bubble, not
the word itself.  Two words in one group can share a code.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from disc_profile.data.questionnaire import QUESTION_GROUPS, find_word, get_group
from disc_profile.exceptions import InvalidResponseError
from disc_profile.schemas.questionnaire import (
    Choice,
    QuestionGroup,
    Response,
    ResponseSet,
    WordEntry,
)

logger = structlog.get_logger("disc_profile.response_store")


class ResponseStore:
    def __init__(self, groups: Sequence[QuestionGroup] = QUESTION_GROUPS):
        self.groups = tuple(groups)
        self._responses: list[Response] = [Response() for _ in self.groups]

    # ── Selection ─────────────────────────────────────────────────────────

    def select_most(self, group_index: int, word_index: int) -> Response:
        entry = self._entry(group_index, word_index)
        return self._replace(group_index, most=entry.most)

    def select_least(self, group_index: int, word_index: int) -> Response:
        entry = self._entry(group_index, word_index)
        return self._replace(group_index, least=entry.least)

    def select_words(
        self,
        group_index: int,
        most_word: Optional[str],
        least_word: Optional[str],
    ) -> Response:
        """Select by word text.  ``None`` leaves that slot unanswered."""
        most = Choice.NONE
        least = Choice.NONE
        if most_word is not None:
            word_index = find_word(group_index, most_word, self.groups)
            most = self._entry(group_index, word_index).most
        if least_word is not None:
            word_index = find_word(group_index, least_word, self.groups)
            least = self._entry(group_index, word_index).least
        return self.set_response(group_index, most, least)

    def set_response(self, group_index: int, most: Choice, least: Choice) -> Response:
        self._check_group(group_index)
        return self._replace(group_index, most=Choice(most), least=Choice(least))

    def clear(self, group_index: Optional[int] = None) -> None:
        """Reset one group, or every group when ``group_index`` is None."""
        if group_index is None:
            self._responses = [Response() for _ in self.groups]
            logger.debug("responses_cleared")
            return
        self._check_group(group_index)
        self._responses[group_index] = Response()

    # ── Reading ───────────────────────────────────────────────────────────

    def snapshot(self) -> ResponseSet:
        """Immutable copy of the current responses for scoring."""
        return ResponseSet(responses=tuple(self._responses))

    @property
    def responses(self) -> ResponseSet:
        return self.snapshot()

    def unanswered(self) -> list[int]:
        return [i for i, r in enumerate(self._responses) if not r.is_complete]

    @property
    def is_complete(self) -> bool:
        return not self.unanswered()

    def __len__(self) -> int:
        return len(self._responses)

    def __getitem__(self, group_index: int) -> Response:
        self._check_group(group_index)
        return self._responses[group_index]

    # ── Helpers ───────────────────────────────────────────────────────────

    def _replace(self, group_index: int, **changes: Choice) -> Response:
        updated = self._responses[group_index].model_copy(update=changes)
        self._responses[group_index] = updated
        logger.debug(
            "response_recorded",
            group=group_index,
            most=updated.most.value,
            least=updated.least.value,
        )
        return updated

    def _check_group(self, group_index: int) -> None:
        get_group(group_index, self.groups)

    def _entry(self, group_index: int, word_index: int) -> WordEntry:
        entries = get_group(group_index, self.groups).entries
        if not 0 <= word_index < len(entries):
            raise InvalidResponseError(
                f"Word index {word_index} out of range for group {group_index}"
            )
        return entries[word_index]

