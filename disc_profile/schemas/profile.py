from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from disc_profile.schemas.questionnaire import TraitVector


class ProfileId(str, Enum):
    ACHIEVER = "achiever"
    AGENT = "agent"
    APPRAISER = "appraiser"
    COUNSELOR = "counselor"
    CREATIVE = "creative"
    DEVELOPER = "developer"
    INSPIRATIONAL = "inspirational"
    INVESTIGATOR = "investigator"
    OBJECTIVE_THINKER = "objective_thinker"
    PERFECTIONIST = "perfectionist"
    PERSUADER = "persuader"
    PRACTITIONER = "practitioner"
    PROMOTER = "promoter"
    RESULT_ORIENTED = "result_oriented"
    SPECIALIST = "specialist"
    INVALID = "invalid"


class ProfileAspect(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    text: str


class Profile(BaseModel):
    """A named behavioural pattern and its descriptive aspects."""

    model_config = ConfigDict(frozen=True)

    profile_id: ProfileId
    name: str
    aspects: tuple[ProfileAspect, ...] = ()
    narrative: str = ""

    @property
    def is_classified(self) -> bool:
        return self.profile_id is not ProfileId.INVALID


class TraitHighlight(BaseModel):
    """Reference sheet describing one trait's tendencies and needs."""

    model_config = ConfigDict(frozen=True)

    title: str
    emphasis: str
    tendencies: tuple[str, ...]
    desired_environment: tuple[str, ...]
    needs_others_who: tuple[str, ...]
    to_be_more_effective: tuple[str, ...]


class AssessmentResult(BaseModel):
    """Everything the results view needs after one scoring run."""

    model_config = ConfigDict(frozen=True)

    tally: TraitVector
    intensity: TraitVector
    segment: TraitVector
    profile: Profile
    answered: int = Field(ge=0)
    unanswered_groups: list[int] = []
