"""Training volume aggregation."""

from dataclasses import dataclass
from datetime import date

from ..db.repositories import WorkoutRepository


@dataclass(frozen=True)
class VolumePoint:
    """Total volume (kg x reps) of one workout."""

    date: date
    volume: float
    theme: str = ""


class DashboardService:
    """Builds the volume-over-time series."""

    def __init__(self, workouts: WorkoutRepository):
        self.workouts = workouts

    async def volume_series(self, user_id: str) -> list[VolumePoint]:
        """Volume per workout in ascending date order."""
        stored = await self.workouts.list_for_user(user_id, descending=False)
        return [
            VolumePoint(date=w.date, volume=w.workout.total_volume(), theme=w.theme)
            for w in stored
        ]
