"""
DiSC Profile — static reference data.

Re-exports the three read-only catalogs so callers can simply do
``from disc_profile.data import QUESTION_GROUPS, PROFILES``.
"""

from disc_profile.data.highlights import TRAIT_HIGHLIGHTS, get_highlight
from disc_profile.data.profiles import (
    ASPECT_LABELS,
    INVALID_PROFILE,
    PROFILES,
    get_profile,
)
from disc_profile.data.questionnaire import QUESTION_GROUPS, find_word, get_group

__all__ = [
    "ASPECT_LABELS",
    "INVALID_PROFILE",
    "PROFILES",
    "QUESTION_GROUPS",
    "TRAIT_HIGHLIGHTS",
    "find_word",
    "get_group",
    "get_highlight",
    "get_profile",
]
