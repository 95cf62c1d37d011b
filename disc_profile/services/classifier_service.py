"""
DiSC Profile — Profile Classifier

Maps a four-trait segment tuple onto one of the 15 profile patterns using an
ordered table of range rules.  Ranges overlap, so the table is evaluated top
to bottom and the first matching rule wins; a few rules carry an extra
comparison between two segments to split otherwise identical ranges.  When
nothing matches the ``Invalid`` sentinel is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from disc_profile.data.profiles import get_profile
from disc_profile.exceptions import ScoreRangeError
from disc_profile.schemas.profile import Profile, ProfileId
from disc_profile.schemas.questionnaire import TraitVector

logger = structlog.get_logger("disc_profile.classifier_service")

SegmentRange = tuple[int, int]


def _in_range(value: int, bounds: SegmentRange) -> bool:
    low, high = bounds
    return low <= value <= high


@dataclass(frozen=True)
class ProfileRule:
    """Inclusive segment ranges for D, I, S, C plus an optional tie-break."""

    profile_id: ProfileId
    d: SegmentRange
    i: SegmentRange
    s: SegmentRange
    c: SegmentRange
    tie_break: Optional[Callable[[TraitVector], bool]] = None
    tie_break_label: str = ""

    def matches(self, segment: TraitVector) -> bool:
        if not (
            _in_range(segment.d, self.d)
            and _in_range(segment.i, self.i)
            and _in_range(segment.s, self.s)
            and _in_range(segment.c, self.c)
        ):
            return False
        return self.tie_break is None or self.tie_break(segment)


# Order is significant.
PROFILE_RULES: tuple[ProfileRule, ...] = (
    ProfileRule(ProfileId.ACHIEVER, d=(5, 7), i=(1, 4), s=(5, 7), c=(1, 4)),
    ProfileRule(
        ProfileId.AGENT, d=(1, 5), i=(5, 7), s=(5, 7), c=(1, 4),
        tie_break=lambda seg: seg.i < seg.s, tie_break_label="i < s",
    ),
    ProfileRule(ProfileId.APPRAISER, d=(1, 7), i=(5, 7), s=(1, 4), c=(5, 7)),
    ProfileRule(
        ProfileId.COUNSELOR, d=(1, 5), i=(5, 7), s=(5, 7), c=(1, 4),
        tie_break=lambda seg: seg.i >= seg.s, tie_break_label="i >= s",
    ),
    ProfileRule(ProfileId.CREATIVE, d=(5, 7), i=(1, 4), s=(1, 4), c=(5, 7)),
    ProfileRule(ProfileId.DEVELOPER, d=(5, 7), i=(1, 3), s=(1, 4), c=(1, 4)),
    ProfileRule(ProfileId.INSPIRATIONAL, d=(5, 7), i=(5, 7), s=(1, 7), c=(1, 4)),
    ProfileRule(ProfileId.INVESTIGATOR, d=(5, 7), i=(1, 4), s=(5, 7), c=(5, 7)),
    ProfileRule(ProfileId.OBJECTIVE_THINKER, d=(1, 4), i=(1, 4), s=(1, 4), c=(5, 7)),
    ProfileRule(ProfileId.PERFECTIONIST, d=(1, 4), i=(1, 4), s=(5, 7), c=(5, 7)),
    ProfileRule(
        ProfileId.PERSUADER, d=(5, 6), i=(6, 7), s=(1, 5), c=(1, 4),
        tie_break=lambda seg: seg.d < seg.i, tie_break_label="d < i",
    ),
    ProfileRule(ProfileId.PRACTITIONER, d=(1, 4), i=(5, 7), s=(1, 7), c=(5, 7)),
    ProfileRule(ProfileId.PROMOTER, d=(1, 4), i=(5, 7), s=(1, 4), c=(1, 4)),
    ProfileRule(ProfileId.RESULT_ORIENTED, d=(5, 7), i=(4, 6), s=(1, 5), c=(1, 4)),
    ProfileRule(ProfileId.SPECIALIST, d=(1, 4), i=(1, 4), s=(5, 7), c=(1, 4)),
)


class ClassifierService:
    """First-match evaluation of ``PROFILE_RULES``."""

    SEGMENT_MIN: int = 1
    SEGMENT_MAX: int = 7

    def __init__(self, rules: tuple[ProfileRule, ...] = PROFILE_RULES):
        self.rules = rules

    def classify(self, segment: TraitVector | tuple[int, int, int, int]) -> ProfileId:
        """Return the identifier of the first rule matching ``segment``.

        Falls back to ``ProfileId.INVALID`` when no rule matches; that is a
        displayable result, not an error.
        """
        segment = self._validate(segment)
        for position, rule in enumerate(self.rules):
            if rule.matches(segment):
                logger.debug(
                    "classification_match",
                    rule=position,
                    profile=rule.profile_id.value,
                    tie_break=rule.tie_break_label or None,
                    segment=segment.as_dict(),
                )
                return rule.profile_id

        logger.info("classification_unmatched", segment=segment.as_dict())
        return ProfileId.INVALID

    def classify_profile(self, segment: TraitVector | tuple[int, int, int, int]) -> Profile:
        """Classify and resolve the identifier through the profile catalog."""
        return get_profile(self.classify(segment))

    def matching_rules(self, segment: TraitVector | tuple[int, int, int, int]) -> list[ProfileId]:
        """Every profile whose rule holds for ``segment``, in table order.

        Diagnostic only: ``classify`` still returns just the first entry.
        """
        segment = self._validate(segment)
        return [rule.profile_id for rule in self.rules if rule.matches(segment)]

    def _validate(self, segment: TraitVector | tuple[int, int, int, int]) -> TraitVector:
        segment = TraitVector(*segment)
        for value in segment:
            if not self.SEGMENT_MIN <= value <= self.SEGMENT_MAX:
                raise ScoreRangeError(
                    f"Segment {value} outside {self.SEGMENT_MIN}-{self.SEGMENT_MAX}"
                )
        return segment
