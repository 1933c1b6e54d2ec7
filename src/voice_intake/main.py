"""
Voice Intake entry points.

``handler`` is the AWS Lambda entrypoint; ``app`` serves the same pipeline
over HTTP.
"""

from ddtrace import patch_all
from fastapi import FastAPI

from voice_intake.dependencies import get_handler
from voice_intake.logging import setup_logging
from voice_intake.routes import intake_router

patch_all()

logger = setup_logging()

app = FastAPI(title="Voice Vacancy Intake")
app.include_router(intake_router)


def handler(event, context):
    """Lambda proxy handler."""
    logger.info(
        "Event received",
        extra={"aws_request_id": getattr(context, "aws_request_id", None)},
    )
    return get_handler().handle_event(event)
