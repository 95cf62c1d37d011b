"""Exceptions raised when callers break the scoring engine's input contract."""


class ProfileError(Exception):
    """Base class for all disc_profile errors."""


class InvalidResponseError(ProfileError, ValueError):
    """A selection refers to a group or word that does not exist."""


class UnknownWordError(InvalidResponseError):
    """The word is not one of the four offered in the group."""

    def __init__(self, group_index: int, word: str):
        self.group_index = group_index
        self.word = word
        super().__init__(f"Word {word!r} is not offered in group {group_index}")


class ScoreRangeError(ProfileError, ValueError):
    """An intensity or segment value lies outside its defined scale."""


class IncompleteResponsesError(ProfileError, ValueError):
    """Raised in strict mode when some groups are still unanswered."""

    def __init__(self, unanswered: list[int]):
        self.unanswered = unanswered
        super().__init__(
            f"{len(unanswered)} group(s) unanswered: "
            + ", ".join(str(i) for i in unanswered)
        )
