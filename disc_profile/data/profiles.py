"""
DiSC Profile — Profile Catalog

Static descriptions of the 15 classical profile patterns plus the
``Invalid`` sentinel returned when no classification rule matches.  Every
profile lists the same nine aspects, in ``ASPECT_LABELS`` order.
"""

from __future__ import annotations

from disc_profile.schemas.profile import Profile, ProfileAspect, ProfileId

ASPECT_LABELS: tuple[str, ...] = (
    "Emotions:",
    "Goal:",
    "Judges others by:",
    "Influences others by:",
    "Value to the organization:",
    "Overuses:",
    "Under pressure:",
    "Fears:",
    "Would increase effectiveness through:",
)


def _profile(profile_id: ProfileId, name: str, texts: tuple[str, ...]) -> Profile:
    if len(texts) != len(ASPECT_LABELS):
        raise ValueError(f"{name}: expected {len(ASPECT_LABELS)} aspects, got {len(texts)}")
    return Profile(
        profile_id=profile_id,
        name=name,
        aspects=tuple(
            ProfileAspect(label=label, text=text)
            for label, text in zip(ASPECT_LABELS, texts)
        ),
    )


_NAMED_PROFILES: tuple[Profile, ...] = (
    _profile(
        ProfileId.ACHIEVER,
        "Achiever",
        (
            "is industrious and diligent; displays frustration",
            "personal accomplishments, sometimes at the expense of the group's goal",
            "ability to achieve concrete results",
            "accountability for own work",
            "sets and completes key result areas for self",
            "self-reliance; absorption in the task",
            "becomes frustrated and impatient; becomes more of a \"do-er\" and less of a \"delegator\"",
            "others with competing or inferior work standards affecting results",
            "less \"either-or\" thinking; cleaner task priorities; consideration of optional approaches; willingness to compromise short-term for long-range benefits",
        ),
    ),
    _profile(
        ProfileId.AGENT,
        "Agent",
        (
            "accepts affection; rejects aggression",
            "group acceptance",
            "commitment to tolerate and include everyone",
            "empathy; friendship",
            "supports, harmonizes, empathizes; focuses on service",
            "kindness",
            "becomes persuasive, using information or key friendships if necessary",
            "dissent; conflict",
            "strength in the realization of who they are and what they can do; firmness and self-assertion; ability to say \"no\" when appropriate",
        ),
    ),
    _profile(
        ProfileId.APPRAISER,
        "Appraiser",
        (
            "is driven to look good",
            "\"victory\" with flair",
            "ability to initiate activities",
            "competitive recognition",
            "accomplishes goals with the team",
            "authority; ingenuity",
            "becomes restless, critical, impatient",
            "\"loss\" or \"failure\"; others' disapproval",
            "individual follow-through; empathy when showing disapproval; steadier pace",
        ),
    ),
    _profile(
        ProfileId.COUNSELOR,
        "Counselor",
        (
            "is approachable; shows affection and understanding",
            "friendship; happiness",
            "positive acceptance of others; ability to look for the good in people",
            "personal relationships; \"open door\" policy",
            "remains stable and predictable; develops a wide range of friendships; listens to others' feelings",
            "indirect approach; tolerance",
            "becomes overly flexible and intimate; is too trusting without differentiating among people",
            "pressuring people; being accused of causing harm",
            "attention to realistic deadlines; initiative to complete the task",
        ),
    ),
    _profile(
        ProfileId.CREATIVE,
        "Creative",
        (
            "accepts aggression; restrains expression",
            "dominance; unique accomplishments",
            "personal standards; progressive ideas for accomplishing tasks",
            "ability to pace development of systems and innovative approaches",
            "initiates or designs change",
            "bluntness; critical or condescending attitude",
            "becomes bored with routine work; sulks when restrained; acts independently",
            "lack of influence; failure to achieve their standards",
            "warmth; tactful communication; effective team cooperation; recognition of existing sanctions",
        ),
    ),
    _profile(
        ProfileId.DEVELOPER,
        "Developer",
        (
            "is concerned with meeting personal needs",
            "new opportunities",
            "ability to meet the Developer's standards",
            "finding solutions to problems; projecting a personal sense of power",
            "avoids \"passing the buck\"; seeks new or innovative problem-solving methods",
            "control over people and situations to accomplish his or her own results",
            "works alone to complete tasks; is belligerent if individualism is threatened or challenging opportunities disappear",
            "boredom; loss of control",
            "patience, empathy; participation and collaboration with others; follow-through and attention to quality control",
        ),
    ),
    _profile(
        ProfileId.INSPIRATIONAL,
        "Inspirational",
        (
            "accepts aggression; downplays need for affection",
            "control of their environment or audience",
            "projection of personal strength, character, and social power",
            "charm, direction, intimidation; use of rewards",
            "acts as a \"people mover\"; initiates, demands, compliments, disciplines",
            "attitude that \"the ends justify the means\"",
            "becomes manipulative, quarrelsome or belligerent",
            "weak behavior; loss of social status",
            "genuine sensitivity; willingness to help others to succeed in their own personal development",
        ),
    ),
    _profile(
        ProfileId.INVESTIGATOR,
        "Investigator",
        (
            "is dispassionate; demonstrates self-discipline",
            "power through formal roles and positions of authority",
            "use of factual information",
            "determination, tenacity",
            "offers comprehensive follow-through; works determinedly on tasks individually or in a small group",
            "bluntness; suspicion of others",
            "tends to internalize conflict; holds on to grudges",
            "involvement with the masses; responsibility to sell abstract ideas",
            "flexibility; acceptance of others; personal involvement with others",
        ),
    ),
    _profile(
        ProfileId.OBJECTIVE_THINKER,
        "Objective Thinker",
        (
            "rejects interpersonal aggression",
            "correctness",
            "ability to think logically",
            "use of facts, data, and logical arguments",
            "defines and clarifies; obtains, evaluates, and tests information",
            "analysis",
            "becomes worrisome",
            "irrational acts; ridicule",
            "self-disclosure; public discussion of their insights and opinions",
        ),
    ),
    _profile(
        ProfileId.PERFECTIONIST,
        "Perfectionist",
        (
            "displays competence; is restrained and cautious",
            "stability; predictable accomplishments",
            "precise standards",
            "attention to detail; accuracy",
            "is conscientious; maintains standards; controls quality",
            "procedures and \"fail-safe\" controls; overdependence on people, products, and processes that have worked in past",
            "becomes tactful and diplomatic",
            "antagonism",
            "role flexibility; independence and interdependence; belief in self-worth",
        ),
    ),
    _profile(
        ProfileId.PERSUADER,
        "Persuader",
        (
            "trusts others; is enthusiastic",
            "authority and prestige; status symbols",
            "ability to express themselves; flexibility",
            "friendly, open manner; verbal skills",
            "sells and closes; delegates responsibility; is poised and confident",
            "enthusiasm; selling ability; optimism",
            "becomes indecisive and is easily persuaded; becomes organized in order to look good",
            "fixed environment; complex relationships",
            "challenging assignments; attention to task-oriented service and key details; objective data analysis",
        ),
    ),
    _profile(
        ProfileId.PRACTITIONER,
        "Practitioner",
        (
            "wants to keep up with others in effort and technical performance",
            "personal growth",
            "self-discipline; position and promotions",
            "confidence in their ability to master new skills; development of \"proper\" procedures and actions",
            "is skilled in technical and people problem-solving; displays proficiency and specialization",
            "overattention to personal objectives; unrealistic expectations of others",
            "becomes restrained; is sensitive to criticism",
            "being too predictable; no recognition as an \"expert\"",
            "genuine collaboration for common benefit; delegation of key tasks to appropriate individuals",
        ),
    ),
    _profile(
        ProfileId.PROMOTER,
        "Promoter",
        (
            "is willing to accept others",
            "approval, popularity",
            "verbal skills",
            "praise, opportunities, favors",
            "relieves tension; promotes projects and people, including him or herself",
            "praise, optimism",
            "becomes careless and sentimental; is disorganized",
            "loss of social acceptance and self-worth",
            "control of time; objectivity; sense of urgency; emotional control; follow-through on promises and tasks",
        ),
    ),
    _profile(
        ProfileId.RESULT_ORIENTED,
        "Result-Oriented",
        (
            "verbalizes ego strength; displays rugged individualism",
            "dominance and independence",
            "ability to accomplish tasks quickly",
            "force of character; diligence",
            "persistence; doggedness",
            "impatience; \"win-lose\" competition",
            "becomes critical and fault-finding; resists participating with a team; may overstep boundaries",
            "others will take advantage of them; slowness, especially in task activities; being a pushover",
            "explanation of their reasoning and consideration of other views and ideas about goals and solutions to problems; genuine concern for others; patience and humility",
        ),
    ),
    _profile(
        ProfileId.SPECIALIST,
        "Specialist",
        (
            "is calculatingly moderate; accommodates others",
            "maintenance of the status quo; controlled environment",
            "friendship standards; competence",
            "consistent performance; accommodating others",
            "plans short term; is predictable, consistent; maintains steady pace",
            "modesty; low risk-taking; passive resistance to innovation",
            "becomes adaptable to those in authority and think with the group",
            "change, disorganization",
            "public discussion of their ideas; self-confidence based on feedback; shortcut methods",
        ),
    ),
)

INVALID_PROFILE = Profile(profile_id=ProfileId.INVALID, name="Invalid")

PROFILES: dict[ProfileId, Profile] = {p.profile_id: p for p in _NAMED_PROFILES}
PROFILES[ProfileId.INVALID] = INVALID_PROFILE


def get_profile(profile_id: ProfileId | str) -> Profile:
    """Look up a catalog profile by identifier."""
    return PROFILES[ProfileId(profile_id)]
