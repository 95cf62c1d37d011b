"""Shared pytest fixtures for disc_profile tests."""
import logging

import pytest
import structlog

from disc_profile.config import Settings
from disc_profile.schemas.questionnaire import GROUP_COUNT, Choice, Response, ResponseSet
from disc_profile.services.response_store import ResponseStore


@pytest.fixture(autouse=True)
def quiet_structlog():
    """Keep log output out of captured stdout; restore defaults afterwards."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def strict_settings():
    return Settings(_env_file=None, REQUIRE_COMPLETE_RESPONSES=True)


@pytest.fixture
def blank_responses():
    """All 28 groups unanswered."""
    return ResponseSet.blank()


@pytest.fixture
def store():
    return ResponseStore()


@pytest.fixture
def achiever_responses():
    """D and S picked as most, I and C as least, alternating across groups.

    Tally (14, -14, 14, -14) gives intensities (26, 1, 25, 1) and segments
    (7, 1, 7, 1).
    """
    responses = []
    for idx in range(GROUP_COUNT):
        if idx % 2 == 0:
            responses.append(Response(most=Choice.D, least=Choice.I))
        else:
            responses.append(Response(most=Choice.S, least=Choice.C))
    return ResponseSet(responses=tuple(responses))


@pytest.fixture
def sample_answers():
    """A D-heavy answer sheet in the word form the CLI reads.

    Tally (27, 0, -26, -1), segments (7, 3, 1, 4): Developer.
    """
    return [
        {"most": "daring", "least": "diplomatic"},
        {"most": "determined", "least": "good-natured"},
        {"most": "outspoken", "least": "calm"},
        {"most": "decisive", "least": "conventional"},
        {"most": "adventurous", "least": "moderate"},
        {"most": "original", "least": "gentle"},
        {"most": "dominant", "least": "responsive"},
        {"most": "impatient", "least": "modest"},
        {"most": "insistent", "least": "agreeable"},
        {"most": "brave", "least": "submissive"},
        {"most": "strong-willed", "least": "obliging"},
        {"most": "independent", "least": "kind"},
        {"most": "competitive", "least": "considerate"},
        {"most": "firm", "least": "obedient"},
        {"most": "stubborn", "least": "predictable"},
        {"most": "bold", "least": "loyal"},
        {"most": "self-reliant", "least": "patient"},
        {"most": "eager", "least": "willing"},
        {"most": "aggressive", "least": "amiable"},
        {"most": "assertive", "least": "sympathetic"},
        {"most": "persistent", "least": "generous"},
        {"most": "forceful", "least": "easygoing"},
        {"most": "vigorous", "least": "lenient"},
        {"most": "demanding", "least": "contented"},
        {"most": "argumentative", "least": "cooperative"},
        {"most": "direct", "least": "even-tempered"},
        {"most": "restless", "least": "neighborly"},
        {"most": "pioneering", "least": "helpful"},
    ]
