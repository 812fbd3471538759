"""Profile (onboarding and settings) commands."""

import click
import questionary
from questionary import Style

from ..config import settings
from ..db import ProfileRepository
from ..models.profile import Goal, Language, Level, Profile
from .base import async_command, echo_info, echo_success, ensure_initialized

custom_style = Style(
    [
        ("qmark", "fg:#2196f3 bold"),
        ("question", "bold"),
        ("answer", "fg:#4caf50 bold"),
        ("pointer", "fg:#2196f3 bold"),
        ("highlighted", "fg:#2196f3 bold"),
        ("selected", "fg:#4caf50"),
        ("instruction", ""),
        ("text", ""),
    ]
)

GOAL_CHOICES = [
    ("Muscle hypertrophy (build muscle)", Goal.MUSCLE_HYPERTROPHY),
    ("Strength (lift heavier)", Goal.STRENGTH),
    ("Diet (burn fat)", Goal.DIET),
    ("Health (stay active)", Goal.HEALTH),
]

LEVEL_CHOICES = [
    ("Beginner (up to 6 months)", Level.BEGINNER),
    ("Intermediate (6 months - 2 years)", Level.INTERMEDIATE),
    ("Advanced (2+ years)", Level.ADVANCED),
]

LANGUAGE_CHOICES = [
    ("日本語", Language.JA),
    ("English", Language.EN),
    ("Italiano", Language.IT),
]


@click.group()
@click.pass_context
def profile(ctx):
    """Show or change your training profile."""
    ensure_initialized(ctx)


@profile.command()
@async_command
async def show():
    """Show the current profile."""
    current = await ProfileRepository(settings.db_path).get(settings.USER_ID)
    if current is None:
        echo_info("No profile yet. Run 'liftmate profile setup'.")
        return
    click.echo()
    click.echo(current.get_summary())


@profile.command()
@async_command
async def setup():
    """Interactive onboarding questionnaire."""
    repo = ProfileRepository(settings.db_path)
    current = await repo.get(settings.USER_ID) or Profile(user_id=settings.USER_ID)

    goal = await questionary.select(
        "What is your main goal?",
        choices=[questionary.Choice(title, value) for title, value in GOAL_CHOICES],
        style=custom_style,
    ).ask_async()
    level = await questionary.select(
        "How much training experience do you have?",
        choices=[questionary.Choice(title, value) for title, value in LEVEL_CHOICES],
        style=custom_style,
    ).ask_async()
    language = await questionary.select(
        "Language for generated workouts",
        choices=[questionary.Choice(title, value) for title, value in LANGUAGE_CHOICES],
        style=custom_style,
    ).ask_async()
    personal_info = await questionary.text(
        "Injuries, conditions, disliked exercises, focus areas (optional):",
        default=current.personal_info,
        style=custom_style,
    ).ask_async()

    if goal is None or level is None or language is None:
        echo_info("Setup cancelled")
        return

    current.goal = goal
    current.level = level
    current.language = language
    current.personal_info = (personal_info or "").strip()
    await repo.upsert(current)
    echo_success("Profile saved")


@profile.command(name="set")
@click.option("--goal", type=click.Choice([g.value for g in Goal]), help="Training goal")
@click.option("--level", type=click.Choice([lv.value for lv in Level]), help="Experience level")
@click.option("--info", "personal_info", help="Personal information for the AI trainer")
@click.option("--language", type=click.Choice([lang.value for lang in Language]), help="Output language")
@async_command
async def set_profile(
    goal: str | None,
    level: str | None,
    personal_info: str | None,
    language: str | None,
):
    """Update individual profile fields."""
    repo = ProfileRepository(settings.db_path)
    if language and not (goal or level or personal_info is not None):
        await repo.set_language(settings.USER_ID, Language(language))
        echo_success(f"Language set to {Language(language).display_name}")
        return

    current = await repo.get(settings.USER_ID) or Profile(user_id=settings.USER_ID)
    if goal:
        current.goal = Goal(goal)
    if level:
        current.level = Level(level)
    if personal_info is not None:
        current.personal_info = personal_info.strip()
    if language:
        current.language = Language(language)

    await repo.upsert(current)
    echo_success("Profile updated")
