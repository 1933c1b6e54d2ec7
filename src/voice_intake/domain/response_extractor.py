"""Parsing of tagged spans in the model's completion text."""

import re

_REQUEST_PATTERN = re.compile(r"<solicitacao>(.*?)</solicitacao>", re.DOTALL)
_ANSWER_PATTERN = re.compile(r"<resposta-(\d+)>(.*?)</resposta-\1>", re.DOTALL)


class ResponseExtractor:
    """Extracts the follow-up request and the answered fields from model output."""

    def extract_request(self, text: str | None) -> str | None:
        """
        Returns the inner text of the first ``<solicitacao>`` span.

        A missing span is the normal case when the model had everything it
        needed, so ``None`` is returned rather than raising.
        """
        if not text:
            return None
        match = _REQUEST_PATTERN.search(text)
        if match is None:
            return None
        return match.group(1)

    def extract_answers(self, text: str | None) -> dict[int, str]:
        """Maps question number to answer for every ``<resposta-N>`` span."""
        if not text:
            return {}
        return {
            int(number): answer.strip()
            for number, answer in _ANSWER_PATTERN.findall(text)
        }
