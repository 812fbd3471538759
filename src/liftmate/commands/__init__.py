"""CLI commands for liftmate."""

from .dashboard import dashboard
from .history import history
from .init import init
from .menu import menu
from .prefs import prefs
from .profile import profile
from .serve import serve
from .workout import workout

__all__ = [
    "dashboard",
    "history",
    "init",
    "menu",
    "prefs",
    "profile",
    "serve",
    "workout",
]
