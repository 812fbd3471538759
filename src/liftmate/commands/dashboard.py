"""Training volume dashboard command."""

import click

from ..services import DashboardService
from .base import async_command, echo_info, ensure_initialized, format_table, get_trainer

BAR_WIDTH = 30


@click.command()
@click.pass_context
@async_command
async def dashboard(ctx):
    """Show total volume per workout over time."""
    ensure_initialized(ctx)

    trainer = await get_trainer()
    points = await DashboardService(trainer.workouts).volume_series(trainer.context.user_id)

    if len(points) < 2:
        echo_info("Complete at least two workouts to see a trend.")
        if not points:
            return

    peak = max(p.volume for p in points) or 1
    rows = [
        [
            p.date.isoformat(),
            f"{p.volume:g}",
            "#" * round(BAR_WIDTH * p.volume / peak),
        ]
        for p in points
    ]
    click.echo()
    click.echo(format_table(["Date", "Volume (kg)", ""], rows))
