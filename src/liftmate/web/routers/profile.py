"""User profile routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ...models.profile import Goal, Language, Level, Profile
from ...services import TrainerService
from .deps import get_trainer

router = APIRouter(prefix="/profile", tags=["profile"])


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    goal: Goal | None = None
    level: Level | None = None
    personal_info: str | None = Field(default=None, alias="personalInfo")
    language: Language | None = None


@router.get("")
async def get_profile(trainer: TrainerService = Depends(get_trainer)):
    """Current profile; an empty one when onboarding has not happened."""
    user_id = trainer.context.user_id
    profile = await trainer.profiles.get(user_id) or Profile(user_id=user_id)
    return {**profile.to_dict(), "onboarded": profile.is_onboarded}


@router.put("")
async def save_profile(update: ProfileUpdate, trainer: TrainerService = Depends(get_trainer)):
    """Save goal, level, personal info and language."""
    user_id = trainer.context.user_id
    if update.language is not None:
        trainer.context.language = update.language
    if update.model_fields_set <= {"language"}:
        # Settings page: language switch only
        if update.language is not None:
            await trainer.profiles.set_language(user_id, update.language)
        profile = await trainer.profiles.get(user_id) or Profile(user_id=user_id)
        return {**profile.to_dict(), "onboarded": profile.is_onboarded}

    profile = await trainer.profiles.get(user_id) or Profile(user_id=user_id)
    if update.goal is not None:
        profile.goal = update.goal
    if update.level is not None:
        profile.level = update.level
    if update.personal_info is not None:
        profile.personal_info = update.personal_info.strip()
    if update.language is not None:
        profile.language = update.language

    await trainer.profiles.upsert(profile)
    return {**profile.to_dict(), "onboarded": profile.is_onboarded}
