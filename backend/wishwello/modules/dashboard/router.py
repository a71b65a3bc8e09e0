# modules/dashboard/router.py
import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from wishwello.core.exceptions import StoreError
from wishwello.modules.dashboard.schemas import DashboardOut
from wishwello.modules.dashboard.service import unavailable_dashboard
from wishwello.shared.deps import DashboardServiceDep, DateRangeDep, DbDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teams", tags=["Dashboard"])


@router.get(
    "/{team_id}/dashboard",
    response_model=DashboardOut,
    summary="Manager dashboard",
    description=(
        "Current pulse, trend, estimated response rate, pulse history "
        "and recent comments. Range defaults to the last 30 days."
    ),
)
async def get_dashboard(
    team_id: UUID, window: DateRangeDep, db: DbDep, service: DashboardServiceDep
):
    try:
        return await service.get_dashboard(db, team_id, window.date_from, window.date_to)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
    except StoreError as e:
        logger.error("Dashboard unavailable for team %s: %s", team_id, e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unavailable_dashboard(),
        )
    except Exception:
        logger.exception("Dashboard failed for team %s", team_id)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unavailable_dashboard(),
        )
