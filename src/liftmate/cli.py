"""CLI entry point for liftmate."""

import logging

import click

from . import __version__
from .commands import dashboard, history, init, menu, prefs, profile, serve, workout


@click.group()
@click.version_option(version=__version__, prog_name="liftmate")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (default: WARNING)",
)
def main(log_level: str):
    """liftmate: your AI personal trainer.

    Tell it how much time you have; it plans today's workout, counts your
    rest between sets and keeps your training history.

    Example usage:

        # Initialize the project
        liftmate init

        # Set goal, level and language
        liftmate profile setup

        # Generate today's workout
        liftmate menu --time 45

        # Log sets as you go, then save
        liftmate workout toggle EXERCISE_ID SET_ID --wait
        liftmate workout complete
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(menu)
main.add_command(workout)
main.add_command(history)
main.add_command(dashboard)
main.add_command(prefs)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
