"""Completed workout history routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...services import TrainerService
from .deps import get_trainer

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def list_history(trainer: TrainerService = Depends(get_trainer)):
    """Completed workouts, newest first."""
    return [stored.to_dict() for stored in await trainer.history()]


@router.get("/{workout_id}")
async def get_history_entry(workout_id: str, trainer: TrainerService = Depends(get_trainer)):
    stored = await trainer.history_detail(workout_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return stored.to_dict()


@router.delete("/{workout_id}")
async def delete_history_entry(workout_id: str, trainer: TrainerService = Depends(get_trainer)):
    """Delete a completed workout. This cannot be undone."""
    if not await trainer.delete_workout(workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
    return {"status": "deleted", "id": workout_id}
