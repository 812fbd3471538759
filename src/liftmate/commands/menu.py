"""Generate today's workout command."""

import click

from .base import async_command, echo_info, echo_success, echo_warning, ensure_initialized, get_trainer


@click.command()
@click.argument("request", required=False, default="")
@click.option(
    "--time",
    "-t",
    "training_time",
    type=click.IntRange(min=1),
    default=60,
    help="Available training time in minutes (default: 60)",
)
@click.option("--force", "-f", is_flag=True, help="Replace an unfinished workout")
@click.pass_context
@async_command
async def menu(ctx, request: str, training_time: int, force: bool):
    """Generate today's workout with the AI trainer.

    REQUEST is an optional note about today's condition or wishes.

    Examples:

        # 45 minutes, no special request
        liftmate menu --time 45

        # With a request
        liftmate menu -t 60 "Shoulder hurts a little, more abs please"
    """
    ensure_initialized(ctx)

    trainer = await get_trainer()
    if trainer.session.has_draft() and not force:
        echo_warning(
            "A workout is already in progress. Resume it with 'liftmate workout show' "
            "or replace it with --force."
        )
        ctx.exit(1)

    echo_info("The AI trainer is putting your plan together...")
    workout = await trainer.create_menu(training_time, request)

    echo_success(f"Workout ready: {workout.theme}")
    click.echo()
    click.echo(workout.get_summary())
    click.echo("Start with 'liftmate workout toggle EXERCISE_ID SET_ID' after each set.")
