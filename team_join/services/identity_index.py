# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Identity index. Pure lookups, no I/O, no metrics.

Builds case-insensitive lookup tables over a team directory snapshot and
resolves references (strings or mappings) to canonical member keys.
The index is built once over a deep copy and is read-only afterwards.
"""

import copy
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from team_join.core.config import settings
from team_join.models.domain import (
    INDEXED_FIELDS,
    Reference,
    TeamMember,
    Visibility,
)


class IdentityIndex:
    """Lookup tables from email / github / deprecated name to member keys."""

    def __init__(
        self,
        team: Optional[Mapping[str, Any]],
        private_key: str = settings.PRIVATE_KEY,
    ) -> None:
        self._private_key = private_key
        snapshot = copy.deepcopy(dict(team or {}))
        private = snapshot.get(private_key)

        public_members = [
            self._member(key, record, Visibility.PUBLIC)
            for key, record in snapshot.items()
            if key != private_key and isinstance(record, dict)
        ]
        private_members = [
            self._member(key, record, Visibility.PRIVATE)
            for key, record in (private.items() if isinstance(private, dict) else ())
            if isinstance(record, dict)
        ]
        self._members: tuple[TeamMember, ...] = tuple(public_members + private_members)

        self._public = self._tier(m for m in self._members if not m.is_private)
        self._private = self._tier(m for m in self._members if m.is_private)
        self._indexes = MappingProxyType(
            {field: self._index_by_field(field) for field in INDEXED_FIELDS}
        )

    # ── Construction helpers ──

    @staticmethod
    def _member(key: str, record: dict[str, Any], visibility: Visibility) -> TeamMember:
        return TeamMember(
            key=key,
            name=str(record.get("name") or key),
            visibility=visibility,
            record=record,
        )

    @staticmethod
    def _tier(members: Iterable[TeamMember]) -> MappingProxyType:
        """Members by lower-cased key. An already lower-case key wins a clash."""
        by_key: dict[str, TeamMember] = {}
        for member in members:
            folded = member.key.lower()
            if member.key == folded:
                by_key[folded] = member
            else:
                by_key.setdefault(folded, member)
        return MappingProxyType(by_key)

    def _index_by_field(self, field: str) -> MappingProxyType:
        # Later members overwrite earlier ones sharing the same value.
        index: dict[str, str] = {}
        for member in self._members:
            value = member.field(field, self._private_key)
            if value is not None:
                index[str(value).lower()] = member.canonical_key
        return MappingProxyType(index)

    # ── Read ──

    @property
    def members(self) -> tuple[TeamMember, ...]:
        return self._members

    @property
    def team_by_email(self) -> Mapping[str, str]:
        return self._indexes["email"]

    @property
    def team_by_github(self) -> Mapping[str, str]:
        return self._indexes["github"]

    @property
    def team_by_deprecated_name(self) -> Mapping[str, str]:
        return self._indexes["deprecated_name"]

    def team_member_key(self, reference: Any) -> str:
        """
        Resolve a reference to a canonical key.
        Falls back to the lower-cased raw identifier when no index matches.
        Raises MalformedReferenceError for a mapping with no identifying field.
        """
        key = Reference.parse(reference).lookup_key
        for field in INDEXED_FIELDS:
            canonical = self._indexes[field].get(key)
            if canonical is not None:
                return canonical
        return key

    def team_member_from_reference(self, reference: Any) -> Optional[TeamMember]:
        """Public tier first, then private. None when nobody matches."""
        key = self.team_member_key(reference)
        return self._public.get(key) or self._private.get(key)

    def team_member_is_private(self, reference: Any) -> bool:
        """True when the key names a member loaded into the private tier."""
        return self.team_member_key(reference) in self._private
