"""REST endpoint for the static champion pools."""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api", tags=["champions"])


@router.get("/champions")
async def list_champions(request: Request):
    """ADC, support and bot-laner candidate pools."""
    return request.app.state.engine.catalog.to_dict()
