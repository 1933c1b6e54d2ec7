"""Route exports."""

from voice_intake.routes.intake import router as intake_router

__all__ = ["intake_router"]
