"""
DiSC Profile — Scoring Engine

Turns a response set into the three per-trait vectors the results view
displays:

  1. Tally      — net "most" minus "least" selections per trait
  2. Intensity  — trait-specific logistic curve, clamped to 1-28
  3. Segment    — seven equal-width bins over the intensity scale

Every step is a pure function of its input; nothing is cached between runs.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple

import structlog

from disc_profile.exceptions import ScoreRangeError
from disc_profile.schemas.questionnaire import (
    TRAITS,
    Response,
    ResponseSet,
    Trait,
    TraitVector,
)

logger = structlog.get_logger("disc_profile.scoring_service")


class LogisticCurve(NamedTuple):
    """``L / (1 + k * e^(-r * tally))``"""

    L: float
    k: float
    r: float

    def __call__(self, tally: int) -> float:
        try:
            growth = math.exp(-self.r * tally)
        except OverflowError:
            # denominator is unbounded, so the curve is at its floor
            return 0.0
        return self.L / (1.0 + self.k * growth)


class ScoringService:
    """Tally, intensity and segment computation.

    The curve constants were fitted to the printed reference chart and are
    exact calibration data.
    """

    # ── Constants ─────────────────────────────────────────────────────────

    CURVES: dict[Trait, LogisticCurve] = {
        Trait.D: LogisticCurve(L=27.38232853, k=0.297148753, r=0.1801194362),
        Trait.I: LogisticCurve(L=28.13823356, k=1.242064677, r=0.2464025952),
        Trait.S: LogisticCurve(L=29.51533099, k=2.209999802, r=0.1941614665),
        Trait.C: LogisticCurve(L=27.31404101, k=0.5608447664, r=0.2479183241),
    }

    INTENSITY_MIN: int = 1
    INTENSITY_MAX: int = 28
    SEGMENT_WIDTH: int = 4

    # ══════════════════════════════════════════════════════════════════════
    # 1. compute_tally
    # ══════════════════════════════════════════════════════════════════════

    def compute_tally(self, responses: ResponseSet | Iterable[Response]) -> TraitVector:
        """Net count of "most" minus "least" selections for each trait.

        ``E`` and ``NONE`` choices contribute nothing, so an all-unanswered
        set yields ``(0, 0, 0, 0)``.  The result does not depend on the order
        of ``responses``.
        """
        if isinstance(responses, ResponseSet):
            responses = responses.responses

        counts = [0, 0, 0, 0]
        for response in responses:
            most = response.most.trait
            least = response.least.trait
            if most is not None:
                counts[most.position] += 1
            if least is not None:
                counts[least.position] -= 1

        tally = TraitVector(*counts)
        logger.debug("tally_computed", tally=tally.as_dict())
        return tally

    # ══════════════════════════════════════════════════════════════════════
    # 2. compute_intensity
    # ══════════════════════════════════════════════════════════════════════

    def trait_intensity(self, trait: Trait, tally_value: int) -> int:
        """Intensity (1-28) of a single trait for a given tally value.

        The logistic value is clamped to ``[INTENSITY_MIN, INTENSITY_MAX]``
        and then truncated toward zero.
        """
        raw = self.CURVES[trait](tally_value)
        clamped = max(float(self.INTENSITY_MIN), min(float(self.INTENSITY_MAX), raw))
        return int(clamped)

    def compute_intensity(self, tally: TraitVector | tuple[int, int, int, int]) -> TraitVector:
        """Apply each trait's logistic curve to the matching tally entry.

        Parameters
        ----------
        tally:
            Four signed integers in D, I, S, C order.

        Returns
        -------
        TraitVector
            Four integers, each in ``[1, 28]``.
        """
        intensity = TraitVector(
            *(self.trait_intensity(trait, value) for trait, value in zip(TRAITS, tally))
        )
        logger.debug("intensity_computed", intensity=intensity.as_dict())
        return intensity

    # ══════════════════════════════════════════════════════════════════════
    # 3. intensity → segment
    # ══════════════════════════════════════════════════════════════════════

    def intensity_to_segment(self, intensity: int) -> int:
        """Map one intensity to its segment: 1-4 → 1, 5-8 → 2, …, 25-28 → 7."""
        if not self.INTENSITY_MIN <= intensity <= self.INTENSITY_MAX:
            raise ScoreRangeError(
                f"Intensity {intensity} outside "
                f"{self.INTENSITY_MIN}-{self.INTENSITY_MAX}"
            )
        return (intensity - 1) // self.SEGMENT_WIDTH + 1

    def compute_segment(self, intensity: TraitVector | tuple[int, int, int, int]) -> TraitVector:
        segment = TraitVector(*(self.intensity_to_segment(v) for v in intensity))
        logger.debug("segment_computed", segment=segment.as_dict())
        return segment

    # ══════════════════════════════════════════════════════════════════════
    # 4. score (all three steps)
    # ══════════════════════════════════════════════════════════════════════

    def score(
        self, responses: ResponseSet | Iterable[Response]
    ) -> tuple[TraitVector, TraitVector, TraitVector]:
        """Return ``(tally, intensity, segment)`` for a response set."""
        tally = self.compute_tally(responses)
        intensity = self.compute_intensity(tally)
        segment = self.compute_segment(intensity)
        return tally, intensity, segment
