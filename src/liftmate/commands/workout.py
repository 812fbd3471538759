"""Commands for the workout in progress."""

import asyncio

import click
import questionary

from ..models.workout import SET_FIELDS
from ..services import TrainerService
from ..session.mutations import locate
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    get_trainer,
)


def _notify(title: str, body: str) -> None:
    click.echo()
    click.echo("\a" + click.style(f"{title}! ", fg="green", bold=True) + body)


async def _wait_for_rest(trainer: TrainerService) -> None:
    """Show the countdown until the rest interval ends."""
    timer = trainer.session.timer
    while timer.is_running:
        click.echo(f"\rRest {timer.display()} ", nl=False)
        await asyncio.sleep(min(1.0, timer.remaining().total_seconds()))
        timer.check_expired()
    click.echo()


@click.group()
@click.pass_context
def workout(ctx):
    """Follow, edit and finish the workout in progress."""
    ensure_initialized(ctx)


@workout.command()
@async_command
async def show():
    """Show the workout in progress."""
    trainer = await get_trainer()
    current = trainer.session.workout
    done = current.completed_set_count()
    click.echo()
    click.echo(current.get_summary())
    click.echo(f"Progress: {done}/{current.set_count()} sets")


@workout.command(name="set")
@click.argument("exercise_id")
@click.argument("set_id")
@click.argument("field", type=click.Choice(SET_FIELDS))
@click.argument("value", default="")
@async_command
async def set_value(exercise_id: str, set_id: str, field: str, value: str):
    """Set the weight or reps of a set.

    Pass an empty VALUE ("") to clear the field.
    """
    trainer = await get_trainer()
    if locate(trainer.session.workout, exercise_id, set_id) is None:
        echo_warning(f"No set {set_id} in exercise {exercise_id}; nothing changed")
        return
    try:
        trainer.session.edit_set(exercise_id, set_id, field, value)
    except ValueError as e:
        echo_error(str(e))
        raise SystemExit(1) from e
    echo_success(f"{field} updated")


@workout.command()
@click.argument("exercise_id")
@click.argument("set_id")
@click.option(
    "--wait/--no-wait",
    default=True,
    help="Count down the rest interval in the foreground (default) or skip it",
)
@async_command
async def toggle(exercise_id: str, set_id: str, wait: bool):
    """Mark a set as done (or undo it)."""
    trainer = await get_trainer(notify=_notify)
    updated = trainer.session.toggle_set(exercise_id, set_id)
    location = locate(updated, exercise_id, set_id)
    if location is None:
        echo_warning(f"No set {set_id} in exercise {exercise_id}; nothing changed")
        return

    if not location.set.is_completed:
        echo_info(f"{location.exercise.name}: set marked as not done")
        return

    echo_success(f"{location.exercise.name}: set done")
    if not trainer.session.timer.is_running:
        return
    if wait:
        await _wait_for_rest(trainer)
    else:
        # The countdown lives on this process's event loop
        trainer.session.timer.cancel()
        echo_info("Countdown skipped; no rest signal will follow")


@workout.command()
@click.argument("exercise_id")
@click.option("--name", "-n", help="New exercise name (skips AI suggestions)")
@async_command
async def swap(exercise_id: str, name: str | None):
    """Replace an exercise, keeping its sets."""
    trainer = await get_trainer()
    current = trainer.session.workout
    exercise = next(
        (ex for section in current.sections for ex in section.exercises if ex.id == exercise_id),
        None,
    )
    if exercise is None:
        echo_warning(f"No exercise {exercise_id}; nothing changed")
        return

    if not name:
        echo_info(f"Asking the AI trainer for alternatives to {exercise.name}...")
        alternatives = await trainer.suggest_alternatives(exercise.name)
        name = await questionary.select(
            "Replace with:", choices=alternatives
        ).ask_async()
        if not name:
            echo_info("Kept the current exercise")
            return

    try:
        trainer.session.substitute(exercise_id, name)
    except ValueError as e:
        echo_error(str(e))
        raise SystemExit(1) from e
    echo_success(f"{exercise.name} -> {name}")


@workout.command()
@click.argument("exercise_id")
@click.argument("question")
@async_command
async def ask(exercise_id: str, question: str):
    """Ask the AI trainer about an exercise."""
    trainer = await get_trainer()
    current = trainer.session.workout
    exercise = next(
        (ex for section in current.sections for ex in section.exercises if ex.id == exercise_id),
        None,
    )
    if exercise is None:
        echo_error(f"No exercise {exercise_id}")
        raise SystemExit(1)

    answer = await trainer.ask_question(exercise.name, question)
    click.echo()
    click.echo(answer)


@workout.command()
@async_command
async def complete():
    """Save the workout to your history."""
    trainer = await get_trainer()
    workout_id = await trainer.complete_workout()
    echo_success(f"Good job! Workout saved ({workout_id})")


@workout.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@async_command
async def discard(yes: bool):
    """Throw away the workout in progress without saving it."""
    trainer = await get_trainer()
    if not trainer.session.has_draft():
        echo_info("No workout in progress")
        return
    if not yes and not click.confirm("Discard the current workout?"):
        return
    trainer.session.finish()
    echo_success("Workout discarded")
