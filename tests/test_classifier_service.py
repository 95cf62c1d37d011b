"""Unit tests for ClassifierService — first-match profile rules."""
import itertools

import pytest

from disc_profile.exceptions import ScoreRangeError
from disc_profile.schemas.profile import ProfileId
from disc_profile.services.classifier_service import PROFILE_RULES, ClassifierService


@pytest.fixture
def classifier_service():
    return ClassifierService()


ALL_SEGMENTS = list(itertools.product(range(1, 8), repeat=4))


class TestRuleTable:
    """Tests for the shape and order of the rule table."""

    def test_fifteen_rules(self):
        assert len(PROFILE_RULES) == 15

    def test_rule_order(self):
        assert [r.profile_id for r in PROFILE_RULES] == [
            ProfileId.ACHIEVER,
            ProfileId.AGENT,
            ProfileId.APPRAISER,
            ProfileId.COUNSELOR,
            ProfileId.CREATIVE,
            ProfileId.DEVELOPER,
            ProfileId.INSPIRATIONAL,
            ProfileId.INVESTIGATOR,
            ProfileId.OBJECTIVE_THINKER,
            ProfileId.PERFECTIONIST,
            ProfileId.PERSUADER,
            ProfileId.PRACTITIONER,
            ProfileId.PROMOTER,
            ProfileId.RESULT_ORIENTED,
            ProfileId.SPECIALIST,
        ]

    def test_invalid_has_no_rule(self):
        assert ProfileId.INVALID not in {r.profile_id for r in PROFILE_RULES}


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "segment,expected",
        [
            ((6, 2, 6, 2), ProfileId.ACHIEVER),
            ((3, 5, 6, 2), ProfileId.AGENT),
            ((2, 6, 2, 6), ProfileId.APPRAISER),
            ((3, 6, 5, 2), ProfileId.COUNSELOR),
            ((6, 2, 2, 6), ProfileId.CREATIVE),
            ((6, 2, 2, 2), ProfileId.DEVELOPER),
            ((6, 6, 2, 2), ProfileId.INSPIRATIONAL),
            ((6, 2, 6, 6), ProfileId.INVESTIGATOR),
            ((2, 2, 2, 6), ProfileId.OBJECTIVE_THINKER),
            ((2, 2, 6, 6), ProfileId.PERFECTIONIST),
            ((2, 6, 6, 6), ProfileId.PRACTITIONER),
            ((2, 6, 2, 2), ProfileId.PROMOTER),
            ((6, 4, 2, 2), ProfileId.RESULT_ORIENTED),
            ((2, 2, 6, 2), ProfileId.SPECIALIST),
        ],
    )
    def test_representative_segments(self, classifier_service, segment, expected):
        assert classifier_service.classify(segment) == expected

    def test_achiever_example(self, classifier_service):
        assert classifier_service.classify((6, 2, 6, 2)) is ProfileId.ACHIEVER

    def test_all_twos_is_invalid(self, classifier_service):
        assert classifier_service.classify((2, 2, 2, 2)) is ProfileId.INVALID

    def test_zero_tally_segment_is_creative(self, classifier_service):
        """Blank responses land on segments (6, 3, 3, 5)."""
        assert classifier_service.classify((6, 3, 3, 5)) is ProfileId.CREATIVE

    def test_deterministic(self, classifier_service):
        results = {classifier_service.classify((4, 5, 6, 3)) for _ in range(10)}
        assert len(results) == 1


class TestTieBreaks:
    """Agent and Counselor share ranges and are split on i < s / i >= s."""

    @pytest.mark.parametrize("d", [1, 3, 5])
    @pytest.mark.parametrize("c", [1, 4])
    def test_agent_when_i_below_s(self, classifier_service, d, c):
        assert classifier_service.classify((d, 5, 7, c)) is ProfileId.AGENT

    @pytest.mark.parametrize("d", [1, 3, 5])
    @pytest.mark.parametrize("i,s", [(7, 5), (6, 6), (5, 5)])
    def test_counselor_when_i_at_least_s(self, classifier_service, d, i, s):
        assert classifier_service.classify((d, i, s, 2)) is ProfileId.COUNSELOR

    def test_never_both(self, classifier_service):
        for segment in ALL_SEGMENTS:
            matched = classifier_service.matching_rules(segment)
            assert not (ProfileId.AGENT in matched and ProfileId.COUNSELOR in matched)


class TestFirstMatch:
    """Overlapping ranges are resolved purely by table order."""

    def test_earlier_rule_shadows_later(self, classifier_service):
        """(5, 6, 2, 2) satisfies Inspirational, Persuader and Result-Oriented."""
        segment = (5, 6, 2, 2)
        assert classifier_service.matching_rules(segment) == [
            ProfileId.INSPIRATIONAL,
            ProfileId.PERSUADER,
            ProfileId.RESULT_ORIENTED,
        ]
        assert classifier_service.classify(segment) is ProfileId.INSPIRATIONAL

    def test_persuader_is_shadowed_by_inspirational(self, classifier_service):
        """Every Persuader segment also satisfies the earlier Inspirational rule."""
        outcomes = {classifier_service.classify(seg) for seg in ALL_SEGMENTS}
        assert ProfileId.PERSUADER not in outcomes

    def test_classify_returns_first_of_matching_rules(self, classifier_service):
        for segment in ALL_SEGMENTS:
            matched = classifier_service.matching_rules(segment)
            expected = matched[0] if matched else ProfileId.INVALID
            assert classifier_service.classify(segment) is expected


class TestClassifyProfile:
    def test_resolves_catalog_entry(self, classifier_service):
        profile = classifier_service.classify_profile((6, 2, 6, 2))
        assert profile.name == "Achiever"
        assert len(profile.aspects) == 9

    def test_unmatched_gives_empty_sentinel(self, classifier_service):
        profile = classifier_service.classify_profile((2, 2, 2, 2))
        assert profile.profile_id is ProfileId.INVALID
        assert profile.aspects == ()
        assert profile.narrative == ""
        assert not profile.is_classified


class TestValidation:
    @pytest.mark.parametrize("segment", [(0, 2, 2, 2), (2, 8, 2, 2), (2, 2, 2, -1)])
    def test_out_of_range_segment_rejected(self, classifier_service, segment):
        with pytest.raises(ScoreRangeError):
            classifier_service.classify(segment)
