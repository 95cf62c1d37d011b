"""
DiSC Profile — command-line tool

Developer tool for inspecting the reference data and scoring a saved set of
answers without a user interface.  Provides three subcommands:

  questions — Print the 28 word groups with their trait codes.
  profiles  — Print every profile pattern and its aspects.
  score     — Score a JSON answer file and print the results.

Usage examples
--------------
  # Score an answer file
  disc-profile score answers.json

  # Same, emitting the result as JSON
  disc-profile score answers.json --json

The answer file holds 28 objects, one per group, in group order::

  [{"most": "daring", "least": "satisfied"}, {"most": null, "least": null}, ...]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import structlog
from pydantic import ValidationError

from disc_profile.config import get_settings
from disc_profile.data.highlights import get_highlight
from disc_profile.data.profiles import PROFILES
from disc_profile.data.questionnaire import QUESTION_GROUPS
from disc_profile.exceptions import InvalidResponseError, ProfileError
from disc_profile.logging_config import configure_logging
from disc_profile.schemas.profile import AssessmentResult, ProfileId
from disc_profile.schemas.questionnaire import TRAITS
from disc_profile.services.assessment_service import AssessmentService
from disc_profile.services.response_store import ResponseStore

logger = structlog.get_logger("disc_profile.cli")


# ──────────────────────────────────────────────────────────────────────────────
# Subcommand: questions
# ──────────────────────────────────────────────────────────────────────────────

def cmd_questions(args: argparse.Namespace) -> int:
    """Print every group with the codes recorded by each bubble."""
    print(f"\n{'=' * 60}")
    print(f"  Questionnaire ({len(QUESTION_GROUPS)} groups)")
    print(f"{'=' * 60}")
    for idx, group in enumerate(QUESTION_GROUPS, start=1):
        print(f"\n  {idx:>2}.")
        for entry in group.entries:
            print(f"      {entry.word:<18} most={entry.most.value:<2} least={entry.least.value}")
    print()
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# Subcommand: profiles
# ──────────────────────────────────────────────────────────────────────────────

def cmd_profiles(args: argparse.Namespace) -> int:
    for profile_id, profile in PROFILES.items():
        if profile_id is ProfileId.INVALID:
            continue
        print(f"\n  {profile.name} Pattern")
        print(f"  {'-' * (len(profile.name) + 8)}")
        for aspect in profile.aspects:
            print(f"    {aspect.label} {aspect.text}")
    print()
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# Subcommand: score
# ──────────────────────────────────────────────────────────────────────────────

def load_answers(path: Path) -> ResponseStore:
    """Read an answer file into a fresh ``ResponseStore``."""
    payload: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("responses", [])
    if not isinstance(payload, list) or len(payload) != len(QUESTION_GROUPS):
        raise InvalidResponseError(
            f"Expected a list of {len(QUESTION_GROUPS)} answers in {path}"
        )

    store = ResponseStore()
    for group_index, answer in enumerate(payload):
        if answer is None:
            answer = {}
        if not isinstance(answer, dict):
            raise InvalidResponseError(
                f"Answer {group_index + 1} must be an object, got {type(answer).__name__}"
            )
        words = (answer.get("most"), answer.get("least"))
        for word in words:
            if word is not None and not isinstance(word, str):
                raise InvalidResponseError(
                    f"Answer {group_index + 1}: expected a word or null, got {word!r}"
                )
        store.select_words(group_index, *words)
    return store


def _print_result(result: AssessmentResult) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Results")
    print(f"{'=' * 60}")
    print(f"  Answered groups:  {result.answered}/{len(QUESTION_GROUPS)}")
    if result.unanswered_groups:
        groups = ", ".join(str(i + 1) for i in result.unanswered_groups)
        print(f"  Unanswered:       {groups}")

    print(f"\n  {'':<10}{'tally':>8}{'intensity':>12}{'segment':>10}")
    for trait in TRAITS:
        print(
            f"  {trait.display_name:<10.10}"
            f"{result.tally.for_trait(trait):>8}"
            f"{result.intensity.for_trait(trait):>12}"
            f"{result.segment.for_trait(trait):>10}"
        )

    profile = result.profile
    print(f"\n  {profile.name} Pattern")
    for aspect in profile.aspects:
        print(f"    {aspect.label} {aspect.text}")
    if profile.narrative:
        print(f"\n  {profile.narrative}")
    print(f"{'=' * 60}\n")


def cmd_score(args: argparse.Namespace) -> int:
    store = load_answers(Path(args.file))
    result = AssessmentService().evaluate(store)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        _print_result(result)

    if args.highlight:
        sheet = get_highlight(args.highlight.upper())
        print(f"  {sheet.title}")
        print(f"  {sheet.emphasis}")
        for heading, items in (
            ("This person's tendencies include", sheet.tendencies),
            ("This person desires an environment that includes", sheet.desired_environment),
            ("This person needs others who", sheet.needs_others_who),
            ("To be more effective, this person needs", sheet.to_be_more_effective),
        ):
            print(f"\n    {heading}:")
            for item in items:
                print(f"      - {item}")
        print()
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# CLI entry point
# ──────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disc-profile",
        description="DiSC profile scoring — inspect reference data and score answers.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    subparsers.add_parser("questions", help="Print the 28 word groups.")
    subparsers.add_parser("profiles", help="Print every profile pattern.")

    score_parser = subparsers.add_parser("score", help="Score a JSON answer file.")
    score_parser.add_argument("file", help="Path to the answer file.")
    score_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON instead of a table.",
    )
    score_parser.add_argument(
        "--highlight",
        choices=[t.value for t in TRAITS] + [t.value.lower() for t in TRAITS],
        default=None,
        help="Also print the reference sheet for one trait.",
    )
    return parser


_COMMANDS = {
    "questions": cmd_questions,
    "profiles": cmd_profiles,
    "score": cmd_score,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(get_settings())

    try:
        return _COMMANDS[args.command](args)
    except (ProfileError, ValidationError, json.JSONDecodeError, OSError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
