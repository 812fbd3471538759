"""Training volume routes."""

from fastapi import APIRouter, Depends

from ...services import DashboardService, TrainerService
from .deps import get_trainer

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def volume(trainer: TrainerService = Depends(get_trainer)):
    """Total volume per workout, oldest first."""
    points = await DashboardService(trainer.workouts).volume_series(trainer.context.user_id)
    return [
        {"date": p.date.isoformat(), "volume": p.volume, "theme": p.theme}
        for p in points
    ]
