"""Generative-AI routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ...services import TrainerService
from .deps import get_trainer

router = APIRouter(prefix="/api", tags=["ai"])


class GenerateMenuRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    training_time: int = Field(alias="trainingTime", gt=0)
    user_request: str = Field(default="", alias="userRequest")


class ChangeExerciseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_name: str = Field(alias="exerciseName", min_length=1)


class AskQuestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_name: str = Field(alias="exerciseName", min_length=1)
    question: str = Field(min_length=1)


@router.post("/generate-menu")
async def generate_menu(body: GenerateMenuRequest, trainer: TrainerService = Depends(get_trainer)):
    """Generate today's workout and make it the draft."""
    workout = await trainer.create_menu(body.training_time, body.user_request)
    return workout.to_dict()


@router.post("/change-exercise")
async def change_exercise(body: ChangeExerciseRequest, trainer: TrainerService = Depends(get_trainer)):
    """Three alternative exercise names."""
    return await trainer.suggest_alternatives(body.exercise_name)


@router.post("/ask-question")
async def ask_question(body: AskQuestionRequest, trainer: TrainerService = Depends(get_trainer)):
    """Free-text answer about an exercise."""
    answer = await trainer.ask_question(body.exercise_name, body.question)
    return {"answer": answer}
