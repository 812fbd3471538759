"""Exception hierarchy for liftmate."""


class LiftmateError(Exception):
    """Base class for all liftmate errors."""


class RemoteStoreError(LiftmateError):
    """The record store could not complete a read or write."""


class GenerationError(LiftmateError):
    """The generative-AI service failed or returned nothing usable."""


class WorkoutParseError(GenerationError):
    """A payload did not match the workout schema."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class NoDraftError(LiftmateError):
    """No in-progress workout exists."""


class ProfileRequiredError(LiftmateError):
    """The user has not completed onboarding (goal and level)."""
