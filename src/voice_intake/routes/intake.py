"""Voice intake HTTP endpoint."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from voice_intake.dependencies import get_handler
from voice_intake.handlers import VoiceRequestHandler

router = APIRouter(prefix="/vacancies", tags=["vacancies"])

HandlerDep = Annotated[VoiceRequestHandler, Depends(get_handler)]


@router.post("/voice")
async def submit_voice(request: Request, handler: HandlerDep) -> JSONResponse:
    """
    Transcribes a recorded vacancy description and answers it.

    The raw body is handed to the request handler unparsed, so malformed
    JSON is reported like any other invalid request: status 200 with the
    reason in the ``errors`` field.
    """
    raw = await request.body()
    body = raw.decode("utf-8", errors="replace") if raw else None

    result = await run_in_threadpool(handler.handle_event, {"body": body})
    return JSONResponse(
        status_code=result["statusCode"], content=json.loads(result["body"])
    )
