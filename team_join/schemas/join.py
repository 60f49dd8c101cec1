# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request and response bodies of the join API.
Only controllers use these; services take plain dicts.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# ── Join Schemas ──

class JoinRequest(BaseModel):
    team: dict[str, Any] = Field(
        default_factory=dict, description="Team collection, with optional 'private' tier"
    )
    projects: Optional[dict[str, Any]] = Field(
        default=None, description="Project collection keyed by project id"
    )
    snippets: Optional[dict[str, list[dict[str, Any]]]] = Field(
        default=None, description="Snippet entries grouped by timestamp"
    )
    public: Optional[bool] = Field(
        default=None, description="Public mode; defaults to the service setting"
    )


class JoinResponse(BaseModel):
    team: dict[str, Any]
    projects: dict[str, Any]
    snippets: Optional[dict[str, list[dict[str, Any]]]] = None
    errors: dict[str, list[str]]
    public: bool


# ── Team Resolution Schemas ──

class ResolveTeamRequest(BaseModel):
    team: dict[str, Any] = Field(default_factory=dict)
    references: Optional[list[Any]] = Field(
        default=None, description="Names, emails, GitHub usernames or objects"
    )
    public: Optional[bool] = None


class ResolveTeamResponse(BaseModel):
    team: list[str]
    errors: list[str]


class ErrorResponse(BaseModel):
    error: str
    detail: str
    request_id: Optional[str] = None
