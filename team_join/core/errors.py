# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Join error taxonomy.

UnresolvedReferenceError     non-fatal, folded into a project's error list
MalformedReferenceError      fatal, a structured reference names nobody
UnknownSnippetUsernameError  fatal in private mode, absorbed in public mode
"""

from typing import Any


class TeamJoinError(Exception):
    """Base class for every error raised by the join pass."""


class UnresolvedReferenceError(TeamJoinError, LookupError):
    """A reference resolved to a key with no matching team member."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown Team Member: {key}")

    def __str__(self) -> str:
        return self.args[0]


class MalformedReferenceError(TeamJoinError, ValueError):
    """A reference carries none of the recognized identifying fields."""

    def __init__(self, reference: Any) -> None:
        self.reference = reference
        super().__init__(
            f"Malformed team member reference (expected a string or a mapping "
            f"with id, email, github or deprecated_name): {reference!r}"
        )


class UnknownSnippetUsernameError(TeamJoinError, LookupError):
    """A snippet author does not match any team member."""

    def __init__(self, username: Any) -> None:
        self.username = username
        super().__init__(f"Unknown snippet username: {username!r}")

    def __str__(self) -> str:
        return self.args[0]
