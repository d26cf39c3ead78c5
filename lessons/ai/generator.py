import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import openai

import config
from ..constants import (
    BASE_MAX_TOKENS,
    GLOBAL_MAX_TOKENS,
    BASE_TOP_P,
    GLOBAL_TOP_P,
    GLOBAL_TEMPERATURE_BOOST,
)
from ..contracts import LessonRequest, UploadAnalysisRequest
from .prompt_builder import build_system_prompt, build_lesson_prompt, build_upload_prompt

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n?|```\n?")


class LessonGenerationError(Exception):
    """The language model could not produce a usable lesson document."""


class LessonGenerator(ABC):
    """
    Produces structured lesson documents from wizard selections.

    Callers check configured() before relying on it; an unconfigured
    generator is never asked to generate.
    """

    @abstractmethod
    def configured(self) -> bool:
        ...

    @abstractmethod
    def generate_lesson(self, request: LessonRequest) -> Dict[str, Any]:
        """Return the raw lesson document or raise LessonGenerationError."""

    @abstractmethod
    def analyze_upload(self, request: UploadAnalysisRequest) -> str:
        """Return analysis text or raise LessonGenerationError."""


def parse_lesson_document(text: str) -> Dict[str, Any]:
    """Strip markdown code fences and parse the JSON lesson document."""
    cleaned = _JSON_FENCE.sub("", text).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise LessonGenerationError(f"Model reply is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LessonGenerationError("Model reply is not a JSON object")
    return data


class OpenAILessonGenerator(LessonGenerator):
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.client = None
        if self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)
        else:
            logger.warning("OpenAI API key not found. Using demo mode.")

        self.model = model or config.LESSON_MODEL
        self.temperature = config.LESSON_TEMPERATURE if temperature is None else temperature

    def configured(self) -> bool:
        return self.client is not None

    def _complete(self, messages, max_tokens: int, temperature: float, top_p: float, json_output: bool) -> str:
        if not self.client:
            raise LessonGenerationError("Lesson generator is not configured")

        kwargs = {}
        if json_output:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                top_p=top_p,
                max_tokens=max_tokens,
                **kwargs
            )
        except openai.OpenAIError as e:
            raise LessonGenerationError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content
        if not content:
            raise LessonGenerationError("OpenAI returned an empty reply")
        return content

    def generate_lesson(self, request: LessonRequest) -> Dict[str, Any]:
        if request.is_global_version:
            max_tokens, top_p = GLOBAL_MAX_TOKENS, GLOBAL_TOP_P
            temperature = self.temperature + GLOBAL_TEMPERATURE_BOOST
        else:
            max_tokens, top_p = BASE_MAX_TOKENS, BASE_TOP_P
            temperature = self.temperature

        content = self._complete(
            messages=[
                {"role": "system", "content": build_system_prompt()},
                {"role": "user", "content": build_lesson_prompt(request)},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            json_output=True,
        )
        return parse_lesson_document(content)

    def analyze_upload(self, request: UploadAnalysisRequest) -> str:
        prompt = build_upload_prompt(request)
        if prompt is None:
            raise LessonGenerationError(f"No analysis prompt for content type {request.content_type!r}")

        return self._complete(
            messages=[
                {"role": "system", "content": build_system_prompt()},
                {"role": "user", "content": prompt},
            ],
            max_tokens=BASE_MAX_TOKENS,
            temperature=self.temperature,
            top_p=BASE_TOP_P,
            json_output=False,
        )
