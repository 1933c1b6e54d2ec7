import base64
import json

import pytest
from conftest import (
    FakeLLM,
    FakeStorage,
    FakeSynthesis,
    FakeTranscriptionService,
    transcript_document,
)

from voice_intake.domain import ResponseExtractor, VoiceRequest
from voice_intake.domain.response_generator import ResponseGenerator
from voice_intake.domain.speech_synthesis import SpeechSynthesisSubmitter
from voice_intake.domain.transcription import TranscriptionOrchestrator
from voice_intake.handlers import VoiceRequestHandler

TRANSCRIPT = "vaga de desenvolvedor remoto, nível sênior"
FOLLOW_UP = "Qual a remuneração oferecida?"
MODEL_TEXT = (
    "<resposta-1>Desenvolvedor</resposta-1>\n"
    "<resposta-2>Remoto</resposta-2>\n"
    "<resposta-3>Sênior</resposta-3>\n"
    f"<solicitacao>{FOLLOW_UP}</solicitacao>"
)
KEY = ("out", "teste-1700000000123.json")


@pytest.fixture
def build_handler(poller, transcribe_config, polly_config, frozen_clock):
    def _build(service, storage, llm, synthesis):
        return VoiceRequestHandler(
            TranscriptionOrchestrator(
                service, storage, poller, transcribe_config, clock=frozen_clock
            ),
            ResponseGenerator(llm),
            ResponseExtractor(),
            SpeechSynthesisSubmitter(synthesis, polly_config),
        )

    return _build


def event(body):
    return {"body": json.dumps(body)}


def test_end_to_end_with_follow_up_question(build_handler):
    llm = FakeLLM(MODEL_TEXT)
    synthesis = FakeSynthesis("s3://out/reply.mp3")
    handler = build_handler(
        FakeTranscriptionService(["COMPLETED"]),
        FakeStorage({KEY: transcript_document(TRANSCRIPT)}),
        llm,
        synthesis,
    )

    result = handler.handle_event(event({"s3URL": "s3://bucket/clip.ogg"}))

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert body["responses"] == MODEL_TEXT
    assert body["audioResponse"] == "s3://out/reply.mp3"
    assert body["answers"] == {"1": "Desenvolvedor", "2": "Remoto", "3": "Sênior"}
    assert "errors" not in body
    assert llm.inputs == [TRANSCRIPT]
    assert [task["text"] for task in synthesis.tasks] == [FOLLOW_UP]


def test_no_follow_up_skips_synthesis(build_handler):
    model_text = "<resposta-1>Desenvolvedor</resposta-1>"
    synthesis = FakeSynthesis()
    handler = build_handler(
        FakeTranscriptionService(["COMPLETED"]),
        FakeStorage({KEY: transcript_document(TRANSCRIPT)}),
        FakeLLM(model_text),
        synthesis,
    )

    body = json.loads(handler.handle_event(event({"s3URL": "s3://bucket/clip.ogg"}))["body"])

    assert body["responses"] == model_text
    assert body["audioResponse"] is None
    assert synthesis.tasks == []


def test_empty_follow_up_skips_synthesis(build_handler):
    synthesis = FakeSynthesis()
    handler = build_handler(
        FakeTranscriptionService(["COMPLETED"]),
        FakeStorage({KEY: transcript_document(TRANSCRIPT)}),
        FakeLLM("<solicitacao></solicitacao>"),
        synthesis,
    )

    response = handler.process(VoiceRequest(s3_url="s3://bucket/clip.ogg"))

    assert response.audio_response is None
    assert synthesis.tasks == []


def test_absent_transcript_still_completes(build_handler):
    llm = FakeLLM(f"<solicitacao>{FOLLOW_UP}</solicitacao>")
    handler = build_handler(
        FakeTranscriptionService(["FAILED"]),
        FakeStorage(),
        llm,
        FakeSynthesis("s3://out/reply.mp3"),
    )

    result = handler.handle_event(event({"s3URL": "s3://bucket/clip.ogg"}))

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert body["audioResponse"] == "s3://out/reply.mp3"
    assert llm.inputs == [""]
    assert len(body["errors"]) == 1
    assert body["errors"][0].startswith("transcription:")


def test_model_failure_returns_payload_error(build_handler):
    synthesis = FakeSynthesis()
    handler = build_handler(
        FakeTranscriptionService(["COMPLETED"]),
        FakeStorage({KEY: transcript_document(TRANSCRIPT)}),
        FakeLLM(error="model unavailable"),
        synthesis,
    )

    result = handler.handle_event(event({"s3URL": "s3://bucket/clip.ogg"}))

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert body["responses"] is None
    assert body["audioResponse"] is None
    assert body["errors"] == ["generation: model unavailable"]
    assert synthesis.tasks == []


def test_synthesis_failure_leaves_audio_absent(build_handler):
    handler = build_handler(
        FakeTranscriptionService(["COMPLETED"]),
        FakeStorage({KEY: transcript_document(TRANSCRIPT)}),
        FakeLLM(MODEL_TEXT),
        FakeSynthesis(fail=True),
    )

    body = json.loads(handler.handle_event(event({"s3URL": "s3://bucket/clip.ogg"}))["body"])

    assert body["responses"] == MODEL_TEXT
    assert body["audioResponse"] is None
    assert body["errors"][0].startswith("synthesis:")


@pytest.mark.parametrize(
    "bad_event",
    [
        None,
        {},
        {"body": None},
        {"body": "not json"},
        {"body": json.dumps({"url": "s3://bucket/clip.ogg"})},
        {"body": json.dumps(["s3://bucket/clip.ogg"])},
    ],
)
def test_invalid_requests_answer_200_with_error(build_handler, bad_event):
    service = FakeTranscriptionService(["COMPLETED"])
    handler = build_handler(service, FakeStorage(), FakeLLM(MODEL_TEXT), FakeSynthesis())

    result = handler.handle_event(bad_event)

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert body["responses"] is None
    assert body["errors"][0].startswith("invalid request:")
    assert service.started == []


def test_parses_dict_and_base64_bodies():
    request = VoiceRequestHandler.parse_event({"body": {"s3URL": "s3://b/a.ogg"}})
    assert request.s3_url == "s3://b/a.ogg"

    encoded = base64.b64encode(json.dumps({"s3URL": "s3://b/c.ogg"}).encode()).decode()
    request = VoiceRequestHandler.parse_event({"body": encoded, "isBase64Encoded": True})
    assert request.s3_url == "s3://b/c.ogg"
