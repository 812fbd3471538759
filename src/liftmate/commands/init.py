"""Initialize project command."""

import click

from ..config import settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the liftmate data directory and database.

    Creates the data directory and the SQLite record store that holds
    profiles and completed workouts.
    """
    data_dir = settings.DATA_DIR
    echo_info(f"Initializing liftmate in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("liftmate is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set up your profile:")
    click.echo("     liftmate profile setup")
    click.echo()
    click.echo("  2. Generate today's workout:")
    click.echo('     liftmate menu --time 45 "Shoulder is sore, more core work"')
