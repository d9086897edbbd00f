"""REST endpoints for ADC and support recommendations."""

from typing import Annotated, Callable, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from botlane_prio.models.champions import ThreatType
from botlane_prio.models.filters import BotLaneFilters, SupportFilters
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


def _resolve(find: Callable, value: Optional[str], slot: str) -> Optional[str]:
    """Resolve a selection to a champion id, rejecting unknown champions."""
    if not value:
        return None
    champion = find(value)
    if champion is None:
        raise HTTPException(status_code=400, detail=f"Unknown {slot}: {value}")
    return champion.id


@router.get("/bot")
async def get_bot_lane_recommendations(
    request: Request,
    ally_support: Optional[str] = None,
    enemy_support: Optional[str] = None,
    enemy_bottom: Optional[str] = None,
    threat: Optional[ThreatType] = None,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
):
    """Rank ADCs for the selected ally support, enemy bot lane and threat.

    Selecting the same champion as ally and enemy support keeps it as the
    enemy support only.
    """
    engine: PickRecommendationEngine = request.app.state.engine
    catalog = engine.catalog

    filters = (
        BotLaneFilters(
            enemy_bottom=_resolve(catalog.find_bot_laner, enemy_bottom, "enemy bot-laner"),
            threat=threat,
        )
        .select_ally_support(_resolve(catalog.find_support, ally_support, "ally support"))
        .select_enemy_support(_resolve(catalog.find_support, enemy_support, "enemy support"))
    )
    return {
        "filters": {
            "ally_support": filters.ally_support,
            "enemy_support": filters.enemy_support,
            "enemy_bottom": filters.enemy_bottom,
            "threat": filters.threat.value if filters.threat else None,
        },
        "recommendations": engine.get_bot_lane_recommendations(filters, limit),
    }


@router.get("/support")
async def get_support_recommendations(
    request: Request,
    ally_adc: Optional[str] = None,
    enemy_support: Optional[str] = None,
    enemy_bottom: Optional[str] = None,
    threat: Optional[ThreatType] = None,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
):
    """Rank supports for the selected ally ADC, enemy bot lane and threat."""
    engine: PickRecommendationEngine = request.app.state.engine
    catalog = engine.catalog

    filters = SupportFilters(
        ally_adc=_resolve(catalog.find_adc, ally_adc, "ally ADC"),
        enemy_support=_resolve(catalog.find_support, enemy_support, "enemy support"),
        enemy_bottom=_resolve(catalog.find_bot_laner, enemy_bottom, "enemy bot-laner"),
        threat=threat,
    )
    return {
        "filters": {
            "ally_adc": filters.ally_adc,
            "enemy_support": filters.enemy_support,
            "enemy_bottom": filters.enemy_bottom,
            "threat": filters.threat.value if filters.threat else None,
        },
        "recommendations": engine.get_support_recommendations(filters, limit),
    }
