"""
DiSC Profile — Questionnaire Catalog

The 28 forced-choice word groups, in presentation order.  Each tuple is
``(word, most_code, least_code)``: the codes the "most" and "least" bubbles
record when that word is picked.  ``E`` marks a word that carries no weight
in that column.
"""

from __future__ import annotations

from typing import Sequence

from disc_profile.exceptions import InvalidResponseError, UnknownWordError
from disc_profile.schemas.questionnaire import (
    GROUP_COUNT,
    Choice,
    QuestionGroup,
    WordEntry,
)


def _group(*entries: tuple[str, str, str]) -> QuestionGroup:
    return QuestionGroup(
        entries=tuple(
            WordEntry(word=word, most=Choice(most), least=Choice(least))
            for word, most, least in entries
        )
    )


QUESTION_GROUPS: tuple[QuestionGroup, ...] = (
    _group(
        ("enthusiastic", "I", "I"),
        ("daring", "D", "D"),
        ("diplomatic", "C", "C"),
        ("satisfied", "S", "S"),
    ),
    _group(
        ("cautious", "C", "C"),
        ("determined", "D", "D"),
        ("convincing", "I", "I"),
        ("good-natured", "S", "E"),
    ),
    _group(
        ("friendly", "I", "E"),
        ("accurate", "C", "C"),
        ("outspoken", "D", "D"),
        ("calm", "E", "S"),
    ),
    _group(
        ("talkative", "I", "I"),
        ("controlled", "C", "C"),
        ("conventional", "S", "S"),
        ("decisive", "D", "D"),
    ),
    _group(
        ("adventurous", "D", "D"),
        ("insightful", "C", "C"),
        ("outgoing", "I", "I"),
        ("moderate", "S", "S"),
    ),
    _group(
        ("gentle", "S", "S"),
        ("persuasive", "I", "E"),
        ("humble", "E", "C"),
        ("original", "E", "D"),
    ),
    _group(
        ("expressive", "I", "I"),
        ("conscientious", "C", "C"),
        ("dominant", "D", "D"),
        ("responsive", "E", "S"),
    ),
    _group(
        ("poised", "I", "I"),
        ("observant", "C", "E"),
        ("modest", "S", "S"),
        ("impatient", "D", "D"),
    ),
    _group(
        ("tactful", "C", "C"),
        ("agreeable", "S", "S"),
        ("magnetic", "I", "I"),
        ("insistent", "D", "D"),
    ),
    _group(
        ("brave", "D", "D"),
        ("inspiring", "I", "I"),
        ("submissive", "S", "S"),
        ("timid", "E", "C"),
    ),
    _group(
        ("reserved", "C", "C"),
        ("obliging", "S", "S"),
        ("strong-willed", "D", "D"),
        ("cheerful", "I", "I"),
    ),
    _group(
        ("stimulating", "I", "I"),
        ("kind", "S", "S"),
        ("perceptive", "C", "C"),
        ("independent", "D", "D"),
    ),
    _group(
        ("competitive", "D", "D"),
        ("considerate", "S", "S"),
        ("joyful", "I", "I"),
        ("private", "C", "C"),
    ),
    _group(
        ("fussy", "C", "C"),
        ("obedient", "S", "S"),
        ("firm", "D", "D"),
        ("playful", "I", "I"),
    ),
    _group(
        ("attractive", "I", "I"),
        ("introspective", "C", "E"),
        ("stubborn", "D", "D"),
        ("predictable", "S", "S"),
    ),
    _group(
        ("logical", "C", "C"),
        ("bold", "D", "D"),
        ("loyal", "S", "S"),
        ("charming", "I", "I"),
    ),
    _group(
        ("sociable", "I", "I"),
        ("patient", "S", "S"),
        ("self-reliant", "D", "D"),
        ("soft-spoken", "C", "C"),
    ),
    _group(
        ("willing", "S", "S"),
        ("eager", "D", "E"),
        ("thorough", "C", "C"),
        ("high-spirited", "I", "I"),
    ),
    _group(
        ("aggressive", "D", "D"),
        ("extroverted", "I", "I"),
        ("amiable", "S", "S"),
        ("fearful", "E", "C"),
    ),
    _group(
        ("confident", "I", "I"),
        ("sympathetic", "S", "S"),
        ("impartial", "E", "C"),
        ("assertive", "D", "D"),
    ),
    _group(
        ("well-disciplined", "C", "C"),
        ("generous", "S", "S"),
        ("animated", "I", "I"),
        ("persistent", "D", "D"),
    ),
    _group(
        ("impulsive", "I", "I"),
        ("introverted", "C", "C"),
        ("forceful", "D", "D"),
        ("easygoing", "S", "S"),
    ),
    _group(
        ("good mixer", "I", "I"),
        ("refined", "C", "C"),
        ("vigorous", "D", "D"),
        ("lenient", "S", "S"),
    ),
    _group(
        ("captivating", "I", "I"),
        ("contented", "S", "S"),
        ("demanding", "D", "D"),
        ("compliant", "C", "C"),
    ),
    _group(
        ("argumentative", "D", "D"),
        ("systematic", "C", "C"),
        ("cooperative", "S", "S"),
        ("light-hearted", "I", "I"),
    ),
    _group(
        ("jovial", "I", "I"),
        ("precise", "C", "C"),
        ("direct", "D", "D"),
        ("even-tempered", "S", "S"),
    ),
    _group(
        ("restless", "D", "D"),
        ("neighborly", "S", "S"),
        ("appealing", "I", "I"),
        ("careful", "C", "C"),
    ),
    _group(
        ("respectful", "C", "C"),
        ("pioneering", "D", "D"),
        ("optimistic", "I", "I"),
        ("helpful", "S", "S"),
    ),
)

if len(QUESTION_GROUPS) != GROUP_COUNT:
    raise ValueError(f"Expected {GROUP_COUNT} question groups, got {len(QUESTION_GROUPS)}")


def get_group(
    group_index: int, groups: Sequence[QuestionGroup] = QUESTION_GROUPS
) -> QuestionGroup:
    """Return the group at ``group_index`` (0-based)."""
    if not 0 <= group_index < len(groups):
        raise InvalidResponseError(
            f"Group index {group_index} out of range 0-{len(groups) - 1}"
        )
    return groups[group_index]


def find_word(
    group_index: int, word: str, groups: Sequence[QuestionGroup] = QUESTION_GROUPS
) -> int:
    """Return the index of ``word`` inside a group (case-insensitive)."""
    wanted = word.strip().lower()
    for idx, entry in enumerate(get_group(group_index, groups).entries):
        if entry.word.lower() == wanted:
            return idx
    raise UnknownWordError(group_index, word)
