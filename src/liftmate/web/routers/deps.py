"""Shared router dependencies."""

from fastapi import Request

from ...services import TrainerService


def get_trainer(request: Request) -> TrainerService:
    """Get the trainer service from app state."""
    return request.app.state.trainer
