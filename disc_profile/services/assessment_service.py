"""
DiSC Profile — Assessment Pipeline

Runs the full scoring pipeline for one respondent:
  1. Snapshot and (optionally) completeness-check the responses
  2. Tally the most/least selections per trait
  3. Transform each tally into an intensity (1-28)
  4. Bin each intensity into a segment (1-7)
  5. Classify the segment tuple into a profile pattern

The service is stateless; callers decide when to re-run it.
"""

from __future__ import annotations

from typing import Iterable, Optional

import structlog

from disc_profile.config import Settings, get_settings
from disc_profile.data.highlights import get_highlight
from disc_profile.exceptions import IncompleteResponsesError
from disc_profile.schemas.profile import AssessmentResult, TraitHighlight
from disc_profile.schemas.questionnaire import Response, ResponseSet, Trait
from disc_profile.services.classifier_service import ClassifierService
from disc_profile.services.response_store import ResponseStore
from disc_profile.services.scoring_service import ScoringService

logger = structlog.get_logger("disc_profile.assessment_service")


class AssessmentService:
    """Orchestrates scoring and classification for a complete response set."""

    def __init__(
        self,
        scoring: Optional[ScoringService] = None,
        classifier: Optional[ClassifierService] = None,
        settings: Optional[Settings] = None,
    ):
        self.scoring = scoring or ScoringService()
        self.classifier = classifier or ClassifierService()
        self.settings = settings or get_settings()

    def evaluate(
        self,
        responses: ResponseSet | ResponseStore | Iterable[Response],
    ) -> AssessmentResult:
        """Score ``responses`` and return tally, intensity, segment and profile.

        Parameters
        ----------
        responses:
            A ``ResponseSet``, a live ``ResponseStore`` (snapshotted first),
            or any iterable of exactly 28 ``Response`` pairs.

        Raises
        ------
        IncompleteResponsesError
            Only when ``REQUIRE_COMPLETE_RESPONSES`` is enabled and at least
            one group has an unanswered slot.
        pydantic.ValidationError
            If the collection does not hold exactly 28 responses.
        """
        response_set = self._as_response_set(responses)
        unanswered = response_set.unanswered()

        log = logger.bind(unanswered=len(unanswered))
        log.info("assessment_start")

        # Step 1: completeness
        if unanswered and self.settings.REQUIRE_COMPLETE_RESPONSES:
            log.warning("assessment_incomplete", groups=unanswered)
            raise IncompleteResponsesError(unanswered)

        # Steps 2-4: tally, intensity, segment
        tally, intensity, segment = self.scoring.score(response_set)
        log.info(
            "scoring_complete",
            tally=tally.as_dict(),
            intensity=intensity.as_dict(),
            segment=segment.as_dict(),
        )

        # Step 5: classification
        profile = self.classifier.classify_profile(segment)
        log.info(
            "classification_complete",
            profile=profile.profile_id.value,
            classified=profile.is_classified,
        )

        return AssessmentResult(
            tally=tally,
            intensity=intensity,
            segment=segment,
            profile=profile,
            answered=len(response_set.responses) - len(unanswered),
            unanswered_groups=unanswered,
        )

    @staticmethod
    def describe_trait(trait: Trait | str) -> TraitHighlight:
        """Reference sheet for one trait, for the results view."""
        return get_highlight(trait)

    @staticmethod
    def _as_response_set(
        responses: ResponseSet | ResponseStore | Iterable[Response],
    ) -> ResponseSet:
        if isinstance(responses, ResponseSet):
            return responses
        if isinstance(responses, ResponseStore):
            return responses.snapshot()
        return ResponseSet(responses=tuple(responses))
