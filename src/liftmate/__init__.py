"""liftmate: AI personal trainer for day-to-day workout sessions."""

__version__ = "0.1.0"
