"""Request handler exports."""

from voice_intake.handlers.voice_request_handler import VoiceRequestHandler

__all__ = ["VoiceRequestHandler"]
