# modules/analytics/router.py
"""
Per-question analytics for the manager dashboard.
On store failure the UI gets its placeholder body with a 503, never a trace.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from wishwello.core.exceptions import StoreError
from wishwello.modules.analytics.schemas import TeamAnalyticsOut
from wishwello.modules.analytics.service import unavailable_analytics
from wishwello.shared.deps import AnalyticsServiceDep, DateRangeDep, DbDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["Analytics"])


@router.get(
    "/{team_id}/analytics",
    response_model=TeamAnalyticsOut,
    summary="Question analytics of a team",
    description=(
        "Per-question summaries (average, distribution, yes/no split, themes) "
        "over the optional [from, to] range, plus overall insights."
    ),
)
async def get_team_analytics(
    team_id: UUID, window: DateRangeDep, db: DbDep, service: AnalyticsServiceDep
):
    try:
        return await service.get_team_analytics(db, team_id, window.date_from, window.date_to)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
    except StoreError as e:
        logger.error("Analytics unavailable for team %s: %s", team_id, e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unavailable_analytics(),
        )
    except Exception:
        logger.exception("Analytics failed for team %s", team_id)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unavailable_analytics(),
        )
