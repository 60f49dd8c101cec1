# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Join pass orchestration.
Builds the identity index, applies the visibility policy, then joins
projects and snippets. Coordinates the pure joiner with metrics and logs.
"""

import time
from typing import Any, Optional

from team_join.core.config import settings
from team_join.core.errors import UnknownSnippetUsernameError
from team_join.core.logging import get_logger
from team_join.metrics.prometheus import (
    JOIN_DURATION,
    JOIN_PASSES,
    PROJECTS_HELD,
    SNIPPET_FAILURES,
    SNIPPETS_DROPPED,
    UNKNOWN_MEMBERS,
)
from team_join.models.domain import JoinResult
from team_join.services.identity_index import IdentityIndex
from team_join.services.joiner import Joiner

logger = get_logger(__name__)


class JoinService:
    """Runs join passes. Stateless between calls."""

    def __init__(
        self,
        default_public_mode: bool = settings.PUBLIC_MODE,
        private_key: str = settings.PRIVATE_KEY,
        hold_status: str = settings.HOLD_STATUS,
    ) -> None:
        self._default_public_mode = default_public_mode
        self._private_key = private_key
        self._hold_status = hold_status

    def _mode(self, public_mode: Optional[bool]) -> bool:
        return self._default_public_mode if public_mode is None else bool(public_mode)

    def _joiner(self, team: Optional[dict[str, Any]], public_mode: bool) -> Joiner:
        index = IdentityIndex(team, private_key=self._private_key)
        return Joiner(
            index,
            public_mode,
            hold_status=self._hold_status,
            private_key=self._private_key,
        )

    # ── Commands ──

    def join(
        self,
        data: dict[str, Any],
        public_mode: Optional[bool] = None,
    ) -> JoinResult:
        """
        Join ``data`` in place and return the result.
        Raises UnknownSnippetUsernameError in private mode and
        MalformedReferenceError for references naming no field.
        """
        public = self._mode(public_mode)
        start = time.time()

        # The index must see the two-tier layout, so build it first.
        joiner = self._joiner(data.get("team"), public)
        joiner.promote_or_remove_data(data)

        projects = data.get("projects")
        if projects is None:
            projects = data["projects"] = {}
        report = dict(data.get("errors") or {})
        joiner.join_projects(projects, report)
        data["errors"] = report

        try:
            if data.get("snippets") is not None:
                data["snippets"] = joiner.join_snippets(data["snippets"])
        except UnknownSnippetUsernameError as e:
            SNIPPET_FAILURES.inc()
            logger.error("Join aborted: %s", e, extra={"mode": "private", "username": e.username})
            raise
        finally:
            UNKNOWN_MEMBERS.inc(joiner.unknown_members)
            PROJECTS_HELD.inc(joiner.held_projects)
            SNIPPETS_DROPPED.inc(joiner.dropped_snippets)

        mode = "public" if public else "private"
        JOIN_PASSES.labels(mode=mode).inc()
        JOIN_DURATION.observe(time.time() - start)
        logger.info(
            "Join pass complete: mode=%s, members=%d, projects=%d, "
            "projects_with_errors=%d, snippet_groups=%d",
            mode,
            len(joiner.index.members),
            len(projects),
            len(report),
            len(data.get("snippets") or {}),
            extra={"mode": mode},
        )
        return JoinResult(
            team=data.get("team") or {},
            projects=projects,
            snippets=data.get("snippets"),
            errors=report,
            public_mode=public,
        )

    # ── Queries ──

    def resolve_team(
        self,
        team: Optional[dict[str, Any]],
        references: Optional[list[Any]],
        public_mode: Optional[bool] = None,
    ) -> tuple[list[str], list[str]]:
        """Resolve one team list against a team snapshot."""
        joiner = self._joiner(team, self._mode(public_mode))
        errors: list[str] = []
        keys = joiner.join_team_list(references, errors)
        UNKNOWN_MEMBERS.inc(joiner.unknown_members)
        return keys, errors
