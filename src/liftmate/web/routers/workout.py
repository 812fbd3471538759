"""Routes for the workout in progress."""

from typing import Literal

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field

from ...services import TrainerService
from ...session.rest_timer import RestTimer, format_seconds
from .deps import get_trainer

router = APIRouter(prefix="/workout", tags=["workout"])


class SetRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(alias="exerciseId")
    set_id: str = Field(alias="setId")


class SetFieldUpdate(SetRef):
    field: Literal["weight", "reps"]
    value: str = ""


class Substitution(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(alias="exerciseId")
    new_name: str = Field(alias="newName", min_length=1)


def _timer_state(timer: RestTimer) -> dict:
    timer.check_expired()
    seconds = timer.remaining_seconds()
    return {
        "state": timer.state.value,
        "expiry": timer.expiry.isoformat() if timer.expiry else None,
        "remainingSeconds": seconds,
        "display": format_seconds(seconds),
    }


@router.get("")
async def get_workout(trainer: TrainerService = Depends(get_trainer)):
    """The workout in progress."""
    return trainer.session.workout.to_dict()


@router.delete("")
async def discard_workout(trainer: TrainerService = Depends(get_trainer)):
    """Throw away the workout in progress."""
    trainer.session.finish()
    return {"status": "discarded"}


@router.patch("/sets")
async def update_set(body: SetFieldUpdate, trainer: TrainerService = Depends(get_trainer)):
    """Set weight or reps; an empty value clears the field."""
    workout = trainer.session.edit_set(body.exercise_id, body.set_id, body.field, body.value)
    return workout.to_dict()


@router.post("/sets/toggle")
async def toggle_set(body: SetRef, trainer: TrainerService = Depends(get_trainer)):
    """Mark a set done or not done."""
    workout = trainer.session.toggle_set(body.exercise_id, body.set_id)
    return {"workout": workout.to_dict(), "timer": _timer_state(trainer.session.timer)}


@router.post("/exercises/substitute")
async def substitute(body: Substitution, trainer: TrainerService = Depends(get_trainer)):
    """Replace an exercise's name, keeping its sets."""
    workout = trainer.session.substitute(body.exercise_id, body.new_name)
    return workout.to_dict()


@router.post("/complete")
async def complete(trainer: TrainerService = Depends(get_trainer)):
    """Save the workout to history and drop the draft."""
    workout_id = await trainer.complete_workout()
    return {"id": workout_id}


@router.get("/timer")
async def get_timer(trainer: TrainerService = Depends(get_trainer)):
    """Rest timer state."""
    return _timer_state(trainer.session.timer)


@router.delete("/timer")
async def dismiss_timer(trainer: TrainerService = Depends(get_trainer)):
    """Dismiss the rest timer."""
    trainer.session.timer.cancel()
    return _timer_state(trainer.session.timer)


@router.get("/notifications")
async def pop_notifications(request: Request):
    """Rest-over notifications raised since the last call."""
    pending = list(request.app.state.notifications)
    request.app.state.notifications.clear()
    return {"notifications": pending}
