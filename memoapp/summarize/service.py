from __future__ import annotations
import logging
from typing import Any, Callable, Protocol

import google.generativeai as genai
from pydantic import BaseModel

from memoapp.shared.config import settings, gemini_api_key
from memoapp.shared.errors import ConfigurationError, ContentValidationError, ProviderError

logger = logging.getLogger(__name__)

SUMMARY_PROMPT = """
다음 메모를 간결하게 요약해줘.
제목: {title}
내용:
{content}

요약은 3-5줄 내외로 작성하고, 핵심 내용을 포함해야 해.
Markdown 형식으로 출력해줘.
"""


class SummaryRequest(BaseModel):
    title: str | None = None
    content: str | None = None


class SummaryProvider(Protocol):
    async def generate(self, prompt: str) -> str: ...


ProviderFactory = Callable[[str], SummaryProvider]


class GeminiProvider:
    """Single-shot text generation against the Gemini API, client defaults for timeouts."""

    def __init__(self, api_key: str, model_name: str | None = None):
        genai.configure(api_key=api_key)
        self.model_name = model_name or settings.GEMINI_MODEL
        self._model = genai.GenerativeModel(self.model_name)

    async def generate(self, prompt: str) -> str:
        response = await self._model.generate_content_async(prompt)
        return response.text


def require_api_key() -> str:
    api_key = gemini_api_key()
    if not api_key:
        logger.error("summarize called without a provider credential")
        raise ConfigurationError()
    return api_key


def parse_summary_request(payload: Any) -> SummaryRequest:
    # non-object bodies and wrong field types raise here and end up as the generic 500
    req = SummaryRequest.model_validate(payload)
    if not req.content:
        raise ContentValidationError()
    return req


def build_prompt(title: str | None, content: str) -> str:
    return SUMMARY_PROMPT.format(title=title or "", content=content)


async def generate_summary(provider: SummaryProvider, req: SummaryRequest) -> str:
    prompt = build_prompt(req.title, req.content)
    try:
        summary = await provider.generate(prompt)
    except Exception as e:
        logger.exception("Gemini API error")
        raise ProviderError() from e
    logger.info("summary generated (%d chars from %d)", len(summary), len(req.content))
    return summary
