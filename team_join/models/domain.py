# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: team members, references and join results.
"""

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from team_join.core.config import settings
from team_join.core.errors import MalformedReferenceError

# Precedence order for structured references: first present wins.
REFERENCE_FIELDS: tuple[str, ...] = ("id", "email", "github", "deprecated_name")

# Fields indexed for lookup, in lookup order.
INDEXED_FIELDS: tuple[str, ...] = ("email", "github", "deprecated_name")


class Visibility(str, Enum):
    """Tier a team member was loaded into."""

    PUBLIC = "public"
    PRIVATE = "private"


class TeamMember(BaseModel):
    """A single team directory entry tagged with its visibility tier."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Key of the member in its team collection")
    name: str = Field(..., description="Display name, original case")
    visibility: Visibility = Visibility.PUBLIC
    record: dict[str, Any] = Field(default_factory=dict)

    @property
    def canonical_key(self) -> str:
        return self.name.lower()

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    def field(self, name: str, private_key: str = settings.PRIVATE_KEY) -> Any:
        """Look up a field, falling back to the member's own private block."""
        value = self.record.get(name)
        if value is None:
            nested = self.record.get(private_key)
            if isinstance(nested, dict):
                value = nested.get(name)
        return value


class Reference(BaseModel):
    """
    A reference naming a team member.

    ``kind`` records which shape the reference arrived in: ``name`` for a
    plain string, otherwise the structured field that supplied the value.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["name", "id", "email", "github", "deprecated_name"]
    value: str

    @classmethod
    def parse(cls, raw: Any) -> "Reference":
        """Reduce a string or mapping reference to a tagged Reference."""
        if isinstance(raw, Reference):
            return raw
        if isinstance(raw, str):
            return cls(kind="name", value=raw)
        if isinstance(raw, dict):
            for field in REFERENCE_FIELDS:
                value = raw.get(field)
                if value is not None:
                    return cls(kind=field, value=str(value))
        raise MalformedReferenceError(raw)

    @property
    def lookup_key(self) -> str:
        return self.value.lower()


class JoinResult(BaseModel):
    """Outcome of one join pass: the joined collections and error report."""

    team: dict[str, Any] = Field(default_factory=dict)
    projects: dict[str, Any] = Field(default_factory=dict)
    snippets: Optional[dict[str, list[dict[str, Any]]]] = None
    errors: dict[str, list[str]] = Field(default_factory=dict)
    public_mode: bool = False
