# modules/feedback/router.py
"""
Public survey endpoints, reached through the share link.
No authentication and no respondent identity.
"""
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from wishwello.modules.feedback.schemas import FeedbackFormOut, FeedbackSubmitIn, FeedbackSubmitOut
from wishwello.shared.deps import DbDep, FeedbackServiceDep

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.get(
    "/{team_id}",
    response_model=FeedbackFormOut,
    summary="Survey form of a team",
)
async def get_form(team_id: UUID, db: DbDep, service: FeedbackServiceDep):
    try:
        return await service.get_form(db, team_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")


@router.post(
    "/{team_id}",
    response_model=FeedbackSubmitOut,
    status_code=status.HTTP_201_CREATED,
    summary="Submit anonymous feedback",
)
async def submit_feedback(
    team_id: UUID, payload: FeedbackSubmitIn, db: DbDep, service: FeedbackServiceDep
):
    try:
        return await service.submit(
            db, team_id, [a.model_dump() for a in payload.answers]
        )
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
