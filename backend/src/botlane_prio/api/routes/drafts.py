"""REST endpoints for saved drafts."""

from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field, field_validator

from botlane_prio.models.champions import ThreatType
from botlane_prio.repositories.draft_repository import DraftRepository
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

router = APIRouter(prefix="/api/drafts", tags=["drafts"])


class CreateDraftRequest(BaseModel):
    """Request body for saving a draft."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    adc_champion: str = Field(min_length=1)
    ally_support: str | None = None
    enemy_adc: str | None = None
    enemy_support: str | None = None
    enemy_threat: ThreatType | None = None
    notes: str | None = None


class UpdateDraftRequest(BaseModel):
    """Partial update; only fields present in the body are changed."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    adc_champion: str | None = Field(default=None, min_length=1)
    ally_support: str | None = None
    enemy_adc: str | None = None
    enemy_support: str | None = None
    enemy_threat: ThreatType | None = None
    notes: str | None = None

    @field_validator("name", "adc_champion")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("field cannot be null")
        return value


def _get_repository(request: Request) -> DraftRepository:
    return request.app.state.draft_repository


@router.get("")
async def list_drafts(request: Request):
    """All saved drafts, newest first."""
    return [draft.to_dict() for draft in _get_repository(request).list_drafts()]


@router.get("/{draft_id}")
async def get_draft(request: Request, draft_id: str):
    draft = _get_repository(request).get_draft(draft_id)
    if draft is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft.to_dict()


@router.post("", status_code=201)
async def create_draft(request: Request, body: CreateDraftRequest):
    try:
        draft = _get_repository(request).create_draft(body.model_dump(mode="json"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return draft.to_dict()


@router.patch("/{draft_id}")
async def update_draft(request: Request, draft_id: str, body: UpdateDraftRequest):
    try:
        draft = _get_repository(request).update_draft(
            draft_id, body.model_dump(mode="json", exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if draft is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft.to_dict()


@router.delete("/{draft_id}")
async def delete_draft(request: Request, draft_id: str):
    if not _get_repository(request).delete_draft(draft_id):
        raise HTTPException(status_code=404, detail="Draft not found")
    return {"message": "Draft deleted successfully"}


@router.get("/{draft_id}/recommendations")
async def get_draft_recommendations(
    request: Request,
    draft_id: str,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
):
    """Re-run ADC recommendations for a saved draft's selections."""
    draft = _get_repository(request).get_draft(draft_id)
    if draft is None:
        raise HTTPException(status_code=404, detail="Draft not found")

    engine: PickRecommendationEngine = request.app.state.engine
    filters = engine.filters_from_draft(draft)
    return {
        "draft": draft.to_dict(),
        "recommendations": engine.get_bot_lane_recommendations(filters, limit),
    }
