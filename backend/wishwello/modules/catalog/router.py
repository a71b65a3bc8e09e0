# modules/catalog/router.py
"""
Endpoints of the question catalog (manager side).
Authentication is handled upstream of this service.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from wishwello.modules.catalog.schemas import CatalogReplaceIn, QuestionOut, TemplateOut
from wishwello.shared.deps import CatalogServiceDep, DbDep

router = APIRouter(prefix="/teams", tags=["Catalog"])
template_router = APIRouter(prefix="/templates", tags=["Catalog"])


@router.get(
    "/{team_id}/questions",
    response_model=List[QuestionOut],
    summary="Question catalog of a team",
)
async def list_questions(team_id: UUID, db: DbDep, service: CatalogServiceDep):
    try:
        return await service.list_questions(db, team_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")


@router.put(
    "/{team_id}/questions",
    response_model=List[QuestionOut],
    summary="Replace the question catalog",
    description=(
        "Deletes every question of the team and inserts the new list. "
        "Orders are renumbered 0..n-1. Past responses are kept."
    ),
)
async def replace_questions(
    team_id: UUID, payload: CatalogReplaceIn, db: DbDep, service: CatalogServiceDep
):
    try:
        return await service.replace_questions(
            db, team_id, [q.model_dump() for q in payload.questions]
        )
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")


@template_router.get(
    "",
    response_model=List[TemplateOut],
    summary="Built-in question templates",
)
async def list_templates(db: DbDep, service: CatalogServiceDep):
    return await service.list_templates(db)
