# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Data joiner. Rewrites project team lists and snippet authors
into canonical team member data, honoring the public/private policy.
"""

from typing import Any, Optional

from team_join.core.config import settings
from team_join.core.errors import UnknownSnippetUsernameError, UnresolvedReferenceError
from team_join.core.logging import get_logger
from team_join.services.identity_index import IdentityIndex
from team_join.services.visibility import promote_or_remove_data

logger = get_logger(__name__)

SNIPPET_JOIN_FIELDS: tuple[str, ...] = (
    "name",
    "full_name",
    "first_name",
    "last_name",
    "self",
)


class Joiner:
    """Joins projects and snippets against one IdentityIndex snapshot."""

    def __init__(
        self,
        index: IdentityIndex,
        public_mode: bool,
        hold_status: str = settings.HOLD_STATUS,
        private_key: str = settings.PRIVATE_KEY,
    ) -> None:
        self._index = index
        self._public_mode = bool(public_mode)
        self._hold_status = hold_status
        self._private_key = private_key
        self.unknown_members = 0
        self.held_projects = 0
        self.dropped_snippets = 0

    @property
    def index(self) -> IdentityIndex:
        return self._index

    @property
    def public_mode(self) -> bool:
        return self._public_mode

    # ── Visibility ──

    def promote_or_remove_data(self, data: Any) -> None:
        promote_or_remove_data(data, self._public_mode, self._private_key)

    # ── Team lists ──

    def should_exclude_member(self, reference: Any) -> bool:
        return self._public_mode and self._index.team_member_is_private(reference)

    def canonical_reference(self, reference: Any) -> str:
        """
        Return the canonical key for a reference.
        Raises UnresolvedReferenceError if no member matches.
        """
        member = self._index.team_member_from_reference(reference)
        if member is None:
            raise UnresolvedReferenceError(self._index.team_member_key(reference))
        return member.canonical_key

    def join_team_list(
        self,
        team_list: Optional[list[Any]],
        errors: Optional[list[str]],
    ) -> list[str]:
        """
        Replace each reference with a key into the team collection.
        Unknown members are reported in ``errors`` and dropped; private
        members are dropped silently in public mode.
        """
        joined: list[str] = []
        for reference in team_list or []:
            try:
                key = self.canonical_reference(reference)
            except UnresolvedReferenceError as e:
                self.unknown_members += 1
                logger.warning("Team list reference dropped: %s", e, extra={"reference": e.key})
                if errors is not None:
                    errors.append(str(e))
                continue
            if self.should_exclude_member(reference):
                continue
            joined.append(key)
        return joined

    # ── Projects ──

    def join_projects(
        self,
        projects: dict[str, Any],
        report: Optional[dict[str, list[str]]] = None,
    ) -> dict[str, list[str]]:
        """
        Join every project's team list in place. Returns the error report,
        keyed by project identifier, for projects that produced errors.
        """
        report = {} if report is None else report
        if self._public_mode:
            held = [
                key
                for key, project in projects.items()
                if isinstance(project, dict) and project.get("status") == self._hold_status
            ]
            for key in held:
                del projects[key]
            self.held_projects += len(held)

        for key, project in projects.items():
            if not isinstance(project, dict):
                continue
            errors = list(project.get("errors") or [])
            if project.get("team") is not None:
                project["team"] = self.join_team_list(project["team"], errors)
            if errors:
                self.store_project_errors(key, project, errors, report)
        return report

    @staticmethod
    def project_identifier(key: str, project: dict[str, Any]) -> str:
        """First github identifier, else the project name, else its key."""
        github = project.get("github")
        if isinstance(github, list):
            github = github[0] if github else None
        return github or project.get("name") or key

    def store_project_errors(
        self,
        key: str,
        project: dict[str, Any],
        errors: list[str],
        report: dict[str, list[str]],
    ) -> None:
        project["errors"] = errors
        report[self.project_identifier(key, project)] = errors

    # ── Snippets ──

    def join_snippet(self, snippet: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Merge member fields into a snippet entry. Returns None when the
        author is unknown in public mode.
        Raises UnknownSnippetUsernameError when unknown in private mode.
        """
        username = snippet.get("username")
        member = self._index.team_member_from_reference(username)
        if member is None:
            if not self._public_mode:
                raise UnknownSnippetUsernameError(username)
            self.dropped_snippets += 1
            logger.info("Snippet dropped, unknown author", extra={"username": username})
            return None

        source = dict(member.record)
        nested = source.get(self._private_key)
        if not self._public_mode and isinstance(nested, dict):
            source.update(nested)
        joined = dict(snippet)
        joined.update(
            {field: source[field] for field in SNIPPET_JOIN_FIELDS if field in source}
        )
        joined.pop("username", None)
        return joined

    def join_snippets(
        self,
        snippets: Optional[dict[str, list[dict[str, Any]]]],
    ) -> Optional[dict[str, list[dict[str, Any]]]]:
        """Join every snippet group; groups left empty are omitted."""
        if snippets is None:
            return None
        result: dict[str, list[dict[str, Any]]] = {}
        for timestamp, group in snippets.items():
            joined = [
                entry
                for entry in (self.join_snippet(s) for s in group or [])
                if entry is not None
            ]
            if joined:
                result[timestamp] = joined
        return result
