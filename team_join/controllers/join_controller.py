# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Join and team resolution endpoints.
Maps join errors to HTTP status codes; the work happens in JoinService.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from team_join.core.dependencies import get_join_service
from team_join.core.errors import MalformedReferenceError, UnknownSnippetUsernameError
from team_join.schemas.join import (
    ErrorResponse,
    JoinRequest,
    JoinResponse,
    ResolveTeamRequest,
    ResolveTeamResponse,
)
from team_join.services.join_service import JoinService

router = APIRouter(prefix="/api/v1", tags=["Join"])


@router.post(
    "/join",
    response_model=JoinResponse,
    responses={422: {"model": ErrorResponse, "description": "Unknown snippet author"}},
)
def join_data(
    payload: JoinRequest,
    request: Request,
    service: JoinService = Depends(get_join_service),
):
    """Join team, project and snippet collections under one visibility policy."""
    data = {"team": payload.team}
    if payload.projects is not None:
        data["projects"] = payload.projects
    if payload.snippets is not None:
        data["snippets"] = payload.snippets
    try:
        result = service.join(data, public_mode=payload.public)
    except MalformedReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownSnippetUsernameError as e:
        return JSONResponse(
            status_code=422,
            content={
                "error": "unknown_snippet_username",
                "detail": str(e),
                "request_id": getattr(request.state, "request_id", None),
            },
        )
    return {
        "team": result.team,
        "projects": result.projects,
        "snippets": result.snippets,
        "errors": result.errors,
        "public": result.public_mode,
    }


@router.post("/team/resolve", response_model=ResolveTeamResponse)
def resolve_team(
    payload: ResolveTeamRequest,
    service: JoinService = Depends(get_join_service),
):
    """Resolve a list of team member references to canonical keys."""
    try:
        team, errors = service.resolve_team(
            payload.team, payload.references, public_mode=payload.public
        )
    except MalformedReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"team": team, "errors": errors}
