"""Completion provider client. Turns a validated word into raw generated markdown."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import openai
from fastapi import Depends
from openai import OpenAI

from wordblog.config import Settings, get_settings
from wordblog.errors import (
    ConfigurationError,
    GenerationProviderError,
    GenerationProviderMalformedResponse,
    GenerationTimeout,
)
from wordblog.services.blog_prompts import build_messages

logger = logging.getLogger(__name__)

BODY_LOG_LIMIT = 500


@dataclass(frozen=True)
class CompletionSuccess:
    text: str


@dataclass(frozen=True)
class CompletionMalformed:
    reason: str


@dataclass(frozen=True)
class CompletionProviderError:
    status: Optional[int]
    body: str


CompletionResult = Union[CompletionSuccess, CompletionMalformed, CompletionProviderError]


class GenerationClient:
    """OpenAI-compatible chat completion call against OpenRouter.

    Never persists anything; callers extract title and tags from the text.
    """

    def __init__(self, settings: Settings, sdk_client: Any = None):
        self.settings = settings
        self.model_name = settings.AI_MODEL
        self._client = sdk_client

    def _get_client(self):
        if self._client is None:
            api_key = str(self.settings.OPENROUTER_API_KEY or "").strip()
            if not api_key:
                raise ConfigurationError("OpenRouter API key not configured")
            self._client = OpenAI(
                api_key=api_key,
                base_url=self.settings.OPENROUTER_BASE_URL,
                timeout=float(self.settings.AI_TIMEOUT_SECONDS),
                max_retries=0,
                default_headers=self.settings.openrouter_headers(),
            )
        return self._client

    def _normalize_content(self, content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            chunks: List[str] = []
            for part in content:
                if isinstance(part, dict) and part.get("type") == "text":
                    chunks.append(str(part.get("text", "")))
            return "".join(chunks)
        return ""

    def interpret(self, response: Any) -> CompletionResult:
        choices = getattr(response, "choices", None)
        if not choices:
            return CompletionMalformed("response has no choices")
        message = getattr(choices[0], "message", None)
        if message is None:
            return CompletionMalformed("first choice has no message")
        text = self._normalize_content(getattr(message, "content", None))
        if not text.strip():
            return CompletionMalformed("message content is empty")
        return CompletionSuccess(text)

    def complete(self, word: str) -> CompletionResult:
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model_name,
                messages=build_messages(word),
                temperature=float(self.settings.AI_TEMPERATURE),
                max_tokens=int(self.settings.AI_MAX_TOKENS),
            )
        except openai.APITimeoutError as exc:
            raise GenerationTimeout(
                f"Completion provider did not answer within {self.settings.AI_TIMEOUT_SECONDS:g}s"
            ) from exc
        except openai.APIStatusError as exc:
            return CompletionProviderError(exc.status_code, exc.response.text)
        except openai.APIConnectionError as exc:
            return CompletionProviderError(None, str(exc))
        return self.interpret(response)

    def generate(self, word: str) -> str:
        result = self.complete(word)
        if isinstance(result, CompletionSuccess):
            logger.info("[generate] model=%s word=%s chars=%s", self.model_name, word, len(result.text))
            return result.text
        if isinstance(result, CompletionProviderError):
            logger.warning(
                "[generate] provider error status=%s body=%s",
                result.status,
                result.body[:BODY_LOG_LIMIT],
            )
            raise GenerationProviderError(result.status, result.body)
        logger.warning("[generate] malformed provider response: %s", result.reason)
        raise GenerationProviderMalformedResponse()


def get_generation_client(settings: Settings = Depends(get_settings)) -> GenerationClient:
    return GenerationClient(settings)
