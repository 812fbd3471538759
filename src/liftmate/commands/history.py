"""Completed workout history commands."""

import click

from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table, get_trainer


@click.group()
@click.pass_context
def history(ctx):
    """Browse and delete completed workouts."""
    ensure_initialized(ctx)


@history.command(name="list")
@async_command
async def list_history():
    """List completed workouts, newest first."""
    trainer = await get_trainer()
    workouts = await trainer.history()

    if not workouts:
        echo_info("No workouts yet. Finish one with 'liftmate workout complete'")
        return

    headers = ["ID", "Date", "Theme", "Exercises"]
    rows = []
    for stored in workouts:
        names = [ex.name for section in stored.workout.sections for ex in section.exercises]
        preview = ", ".join(names[:2]) + (", ..." if len(names) > 2 else "")
        theme = stored.theme[:30] + "..." if len(stored.theme) > 30 else stored.theme
        rows.append([stored.id[:8], stored.date.isoformat(), theme, preview])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(workouts)} workout(s)")


async def _resolve(trainer, workout_id: str):
    """Find a workout by full ID or by a unique ID prefix."""
    stored = await trainer.history_detail(workout_id)
    if stored is not None:
        return stored
    matches = [w for w in await trainer.history() if w.id.startswith(workout_id)]
    return matches[0] if len(matches) == 1 else None


@history.command()
@click.argument("workout_id")
@async_command
async def show(workout_id: str):
    """Show a completed workout."""
    trainer = await get_trainer()
    stored = await _resolve(trainer, workout_id)
    if stored is None:
        echo_error(f"Workout {workout_id} not found")
        raise SystemExit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"Workout {stored.id}")
    click.echo("=" * 60)
    click.echo(stored.workout.get_summary())
    click.echo(f"Total volume: {stored.workout.total_volume():g} kg")


@history.command()
@click.argument("workout_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@async_command
async def delete(workout_id: str, yes: bool):
    """Delete a completed workout. This cannot be undone."""
    trainer = await get_trainer()
    stored = await _resolve(trainer, workout_id)
    if stored is None:
        echo_error(f"Workout {workout_id} not found")
        raise SystemExit(1)

    if not yes and not click.confirm(
        f"Delete the workout of {stored.date.isoformat()} ({stored.theme})? This cannot be undone."
    ):
        return

    await trainer.delete_workout(stored.id)
    echo_success("Workout deleted")
