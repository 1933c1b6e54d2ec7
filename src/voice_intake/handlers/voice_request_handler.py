"""Handler sequencing transcription, model call and speech synthesis."""

import base64
import json
import time
from contextlib import contextmanager
from typing import Any

from voice_intake.domain import ResponseExtractor, VoiceRequest, VoiceResponse
from voice_intake.domain.response_generator import ResponseGenerator
from voice_intake.domain.speech_synthesis import SpeechSynthesisSubmitter
from voice_intake.domain.transcription import TranscriptionOrchestrator
from voice_intake.logging import setup_logging

logger = setup_logging()

RESPONSE_HEADERS = {"Content-Type": "application/json"}


@contextmanager
def _timed(stage: str):
    started = time.perf_counter()
    try:
        yield
    finally:
        logger.info(
            "Stage finished",
            extra={
                "stage": stage,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )


class VoiceRequestHandler:
    """Orchestrates one voice request from audio reference to response payload."""

    def __init__(
        self,
        transcriber: TranscriptionOrchestrator,
        generator: ResponseGenerator,
        extractor: ResponseExtractor,
        synthesizer: SpeechSynthesisSubmitter,
    ):
        self._transcriber = transcriber
        self._generator = generator
        self._extractor = extractor
        self._synthesizer = synthesizer

    def handle_event(self, event: dict[str, Any] | None) -> dict[str, Any]:
        """
        Handles an API Gateway proxy event.

        The status code is always 200; degraded stages are reported in the
        ``errors`` field of the body.
        """
        try:
            request = self.parse_event(event)
        except ValueError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            response = VoiceResponse(errors=[f"invalid request: {e}"])
        else:
            response = self.process(request)

        return {
            "statusCode": 200,
            "headers": RESPONSE_HEADERS,
            "body": json.dumps(response.to_payload(), ensure_ascii=False),
        }

    @staticmethod
    def parse_event(event: dict[str, Any] | None) -> VoiceRequest:
        """
        Extracts the request body from a proxy event.

        Raises:
            ValueError: If the body is missing, not JSON, or lacks ``s3URL``.
        """
        body = (event or {}).get("body")
        if body is None:
            raise ValueError("missing body")

        if isinstance(body, str):
            if (event or {}).get("isBase64Encoded"):
                body = base64.b64decode(body).decode("utf-8")
            try:
                body = json.loads(body)
            except json.JSONDecodeError as e:
                raise ValueError(f"body is not valid JSON: {e.msg}") from e

        return VoiceRequest.model_validate(body)

    def process(self, request: VoiceRequest) -> VoiceResponse:
        """
        Runs the pipeline for a parsed request.

        Every stage runs even when an earlier optional result is missing:
        an absent transcript is still sent to the model. Synthesis only runs
        when the model asked the user a follow-up question.

        Returns:
            VoiceResponse with the raw model text, the audio reply URI (or
            None) and the reasons of any degraded stages.
        """
        logger.info("Processing voice request", extra={"s3_url": request.s3_url})
        errors: list[str] = []

        with _timed("transcription"):
            transcription = self._transcriber.transcribe(request.s3_url)
        if not transcription.succeeded:
            errors.append(f"{transcription.stage}: {transcription.error}")

        with _timed("generation"):
            generation = self._generator.generate(transcription.value)
        if not generation.succeeded:
            errors.append(f"{generation.stage}: {generation.error}")
            return VoiceResponse(errors=errors)

        completion = generation.value
        answers = self._extractor.extract_answers(completion)
        follow_up = self._extractor.extract_request(completion)

        if not follow_up:
            logger.info("No follow-up question in model response")
            return VoiceResponse(responses=completion, answers=answers, errors=errors)

        with _timed("synthesis"):
            synthesis = self._synthesizer.submit(follow_up)
        if not synthesis.succeeded:
            errors.append(f"{synthesis.stage}: {synthesis.error}")

        return VoiceResponse(
            responses=completion,
            audio_response=synthesis.value,
            answers=answers,
            errors=errors,
        )
