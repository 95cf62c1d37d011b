from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

GROUP_COUNT = 28
WORDS_PER_GROUP = 4


class Trait(str, Enum):
    """The four behavioural dimensions, in their fixed positional order."""

    D = "D"
    I = "I"  # noqa: E741
    S = "S"
    C = "C"

    @property
    def position(self) -> int:
        return _TRAIT_ORDER.index(self)

    @property
    def display_name(self) -> str:
        return _TRAIT_NAMES[self]


_TRAIT_ORDER = (Trait.D, Trait.I, Trait.S, Trait.C)
_TRAIT_NAMES = {
    Trait.D: "Dominance",
    Trait.I: "Influence",
    Trait.S: "Steadiness",
    Trait.C: "Conscientiousness",
}

TRAITS: tuple[Trait, ...] = _TRAIT_ORDER


class Choice(str, Enum):
    """Value recorded for one selection slot.

    ``E`` marks a filler word that carries no trait weight; ``NONE`` marks an
    unanswered slot.
    """

    D = "D"
    I = "I"  # noqa: E741
    S = "S"
    C = "C"
    E = "E"
    NONE = "NONE"

    @property
    def trait(self) -> Optional[Trait]:
        """The trait this choice counts towards, or ``None`` for E / NONE."""
        if self in (Choice.E, Choice.NONE):
            return None
        return Trait(self.value)

    @property
    def answered(self) -> bool:
        return self is not Choice.NONE


class TraitVector(NamedTuple):
    """Per-trait integers in D, I, S, C order (tally, intensity or segment)."""

    d: int
    i: int
    s: int
    c: int

    def for_trait(self, trait: Trait) -> int:
        return self[trait.position]

    def as_dict(self) -> dict[str, int]:
        return {t.value: v for t, v in zip(TRAITS, self)}


class WordEntry(BaseModel):
    """One descriptive word and the trait codes its two bubbles record."""

    model_config = ConfigDict(frozen=True)

    word: str
    most: Choice
    least: Choice

    @field_validator("most", "least")
    @classmethod
    def _code_must_be_scorable(cls, v: Choice) -> Choice:
        if v is Choice.NONE:
            raise ValueError("Catalog entries must carry a D, I, S, C or E code")
        return v


class QuestionGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: tuple[WordEntry, ...] = Field(
        min_length=WORDS_PER_GROUP, max_length=WORDS_PER_GROUP
    )

    @property
    def words(self) -> list[str]:
        return [e.word for e in self.entries]


class Response(BaseModel):
    """The (most, least) pair recorded for one group."""

    model_config = ConfigDict(frozen=True)

    most: Choice = Choice.NONE
    least: Choice = Choice.NONE

    @property
    def is_complete(self) -> bool:
        return self.most.answered and self.least.answered


class ResponseSet(BaseModel):
    """An immutable snapshot of all 28 responses, in group order."""

    model_config = ConfigDict(frozen=True)

    responses: tuple[Response, ...] = Field(
        min_length=GROUP_COUNT, max_length=GROUP_COUNT
    )

    @classmethod
    def blank(cls) -> "ResponseSet":
        return cls(responses=tuple(Response() for _ in range(GROUP_COUNT)))

    def unanswered(self) -> list[int]:
        return [i for i, r in enumerate(self.responses) if not r.is_complete]

