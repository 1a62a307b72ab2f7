"""Progress API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

from progress_tracker.config import parse_timezone
from progress_tracker.domain.goals import InsufficientProfileData
from progress_tracker.domain.progress import EngineError

if TYPE_CHECKING:
    from progress_tracker.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}/progress", tags=["progress"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/trajectory", dependencies=[Depends(require_token)])
async def trajectory(
    user_id: UUID,
    request: Request,
    today: date | None = None,
    timezone: str | None = None,
) -> dict[str, object]:
    """Return planned and calorie-adjusted weight curves."""
    container: AppContainer = request.app.state.container
    resolved_today = today or _today(container, timezone)
    report = container.progress_service.get_trajectory(user_id, resolved_today)
    return _payload(report, "trajectory")


@router.get("/consistency", dependencies=[Depends(require_token)])
async def consistency(  # noqa: PLR0913
    user_id: UUID,
    request: Request,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
    timezone: str | None = None,
) -> dict[str, object]:
    """Return the consistency score for a date range."""
    container: AppContainer = request.app.state.container
    resolved_today = today or _today(container, timezone)
    result = container.progress_service.get_consistency(
        user_id, resolved_today, start=start, end=end
    )
    return _payload(result, "consistency")


@router.get("/streak", dependencies=[Depends(require_token)])
async def streak(
    user_id: UUID,
    request: Request,
    today: date | None = None,
    timezone: str | None = None,
) -> dict[str, object]:
    """Return consecutive tracked days ending today."""
    container: AppContainer = request.app.state.container
    resolved_today = today or _today(container, timezone)
    result = container.progress_service.get_day_streak(user_id, resolved_today)
    if isinstance(result, InsufficientProfileData):
        return _payload(result, "streak")
    return {"status": "ok", "streak": result}


def _today(container: AppContainer, timezone_name: str | None) -> date:
    tz = ZoneInfo(parse_timezone(timezone_name, container.settings.default_timezone))
    return datetime.now(tz=tz).date()


def _payload(result: object, key: str) -> dict[str, object]:
    if isinstance(result, InsufficientProfileData):
        return {
            "status": "insufficient_profile",
            "reason": result.reason,
            "message": result.message,
        }
    if isinstance(result, EngineError):
        return {
            "status": "disabled",
            "reason": result.reason,
            "message": result.message,
        }
    return {"status": "ok", key: jsonable_encoder(asdict(result))}
