# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""

from team_join.services.join_service import JoinService

_join_service = JoinService()


def get_join_service() -> JoinService:
    return _join_service
