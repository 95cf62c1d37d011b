"""
DiSC Profile — Trait Highlights

Per-trait reference sheets shown next to the intensity graph when the
respondent selects one of the four traits.
"""

from __future__ import annotations

from disc_profile.schemas.profile import TraitHighlight
from disc_profile.schemas.questionnaire import Trait

TRAIT_HIGHLIGHTS: dict[Trait, TraitHighlight] = {
    Trait.D: TraitHighlight(
        title="DOMINANCE",
        emphasis="Emphasis is on shaping the environment by overcoming opposition to accomplish results.",
        tendencies=(
            "getting immediate results",
            "causing action",
            "accepting challenges",
            "making quick decisions",
            "questioning the status quo",
            "taking authority",
            "managing trouble",
            "solving problems",
        ),
        desired_environment=(
            "power and authority",
            "prestige and challenge",
            "opportunities for individual accomplishments",
            "a wide scope of operations",
            "direct answers",
            "opportunities for advancement",
            "freedom from controls and supervision",
            "many new and varied activities",
        ),
        needs_others_who=(
            "weigh pros and cons",
            "calculate risks",
            "use caution",
            "create a predictable environment",
            "research facts",
            "deliberate before deciding",
            "recognize the needs of others",
        ),
        to_be_more_effective=(
            "to receive difficult assignments",
            "to understand that they need people",
            "to base techniques on practical experience",
            "to receive an occasional shock",
            "to identify with a group",
            "to verbalize reasons for conclusions",
            "to be aware of existing sanctions",
            "to pace self and to relax more",
        ),
    ),
    Trait.I: TraitHighlight(
        title="INFLUENCE",
        emphasis="Emphasis is on shaping the environment by influencing or persuading others.",
        tendencies=(
            "contacting people",
            "making a favorable impression",
            "being articulate",
            "creating a motivating environment",
            "generating enthusiasm",
            "entertaining people",
            "viewing people and situations with optimism",
            "participating in a group",
        ),
        desired_environment=(
            "popularity, social recognition",
            "public recognition of ability",
            "freedom of expression",
            "group activities outside of job",
            "democratic relationships",
            "freedom from control and detail",
            "opportunities to verbalize proposals",
            "coaching and counseling",
            "favorable working conditions",
        ),
        needs_others_who=(
            "concentrate on the task",
            "seek facts",
            "speak directly",
            "respect sincerity",
            "develop systematic approaches",
            "prefer to deal with things instead of people",
            "take a logical approach",
            "demonstrate individual follow-through",
        ),
        to_be_more_effective=(
            "to control time, if 'D' or 'S' is low",
            "to make objective decisions",
            "to use hands-on management",
            "to be more realistic when appraising others",
            "to make priorities and deadlines",
            "to be more firm with others, if D is low",
        ),
    ),
    Trait.S: TraitHighlight(
        title="STEADINESS",
        emphasis="Emphasis is on cooperating with others within existing circumstances to carry out the task.",
        tendencies=(
            "performing in a consistent, predictable manner",
            "demonstrating patience",
            "developing specialized skills",
            "helping others",
            "showing loyalty",
            "being a good listener",
            "calming excited people",
            "creating a stable harmonious work environment",
        ),
        desired_environment=(
            "maintenance of the status quo unless given reasons for change",
            "predictable routines",
            "credit for work accomplished",
            "minimal work infringement on home life",
            "sincere appreciation",
            "identification with a group",
            "standard operating procedures",
            "minimal conflicts",
        ),
        needs_others_who=(
            "react quickly to unexpected change",
            "stretch toward the challenges of accepted tasks",
            "become involved in more than one thing",
            "are self-promoting",
            "apply pressure on others",
            "work comfortably in an unpredictable environment",
            "help to prioritize work",
            "are flexible in work procedures",
        ),
        to_be_more_effective=(
            "to be conditioned prior to change",
            "to validate self-worth",
            "to know how personal effort contributes to the group effort",
            "to have colleagues of similar competence and sincerity",
            "to know task guidelines",
            "to have creativity encouraged",
        ),
    ),
    Trait.C: TraitHighlight(
        title="CONSCIENTIOUSNESS",
        emphasis="Emphasis is on working conscientiously within existing circumstances to ensure quality and accuracy.",
        tendencies=(
            "adhering to key directives and standards",
            "concentrating on key details",
            "thinking analytically, weighing pros and cons",
            "being diplomatic with people",
            "using subtle or indirect approaches to conflict",
            "checking for accuracy",
            "analyzing performance critically",
            "using a systematic approach to situations or activities",
        ),
        desired_environment=(
            "clearly defined performance expectations",
            "values of quality and accuracy",
            "a reserved, business-like atmosphere",
            "opportunities to demonstrate expertise",
            "control over factors that affect their performance",
            "opportunities to ask \"why\" questions",
            "recognition for specific skills and accomplishments",
        ),
        needs_others_who=(
            "delegate important tasks",
            "make quick decisions",
            "use policies only as guidelines",
            "compromise with the opposition",
            "state unpopular positions",
            "initiate and facilitate discussions",
            "encourage teamwork",
        ),
        to_be_more_effective=(
            "to have time to plan carefully",
            "to know exact job descriptions and performance objectives",
            "to schedule performance appraisals",
            "to receive specific feedback on performance",
            "to respect people's personal worth as much as their accomplishments",
            "to develop tolerance for conflict",
        ),
    ),
}


def get_highlight(trait: Trait | str) -> TraitHighlight:
    return TRAIT_HIGHLIGHTS[Trait(trait)]
