"""Together AI vision provider.

Together serves an OpenAI-compatible chat completions API, so requests go
through the ``openai`` client pointed at ``TOGETHER_BASE_URL``.
"""

import logging

from openai import AsyncOpenAI, OpenAI

from llama_ocr.config import TOGETHER_BASE_URL
from llama_ocr.errors import EmptyCompletionError
from llama_ocr.providers.base import AsyncBaseProvider, BaseProvider, build_messages

logger = logging.getLogger(__name__)


def _first_choice_text(response, model: str) -> str:
    if not response.choices:
        raise EmptyCompletionError(f"{model} returned no choices")
    text = response.choices[0].message.content or ""
    logger.debug("%s returned %d characters", model, len(text))
    return text


class TogetherProvider(BaseProvider):
    def __init__(self, api_key: str, model: str) -> None:
        self.client = OpenAI(api_key=api_key, base_url=TOGETHER_BASE_URL)
        self.model = model

    def close(self) -> None:
        self.client.close()

    def ocr(self, image_url: str, system_prompt: str) -> str:
        logger.debug("Requesting completion from %s", self.model)
        response = self.client.chat.completions.create(
            model=self.model,
            messages=build_messages(image_url, system_prompt),
        )
        return _first_choice_text(response, self.model)


class AsyncTogetherProvider(AsyncBaseProvider):
    def __init__(self, api_key: str, model: str) -> None:
        self.client = AsyncOpenAI(api_key=api_key, base_url=TOGETHER_BASE_URL)
        self.model = model

    async def close(self) -> None:
        await self.client.close()

    async def ocr(self, image_url: str, system_prompt: str) -> str:
        logger.debug("Requesting completion from %s", self.model)
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=build_messages(image_url, system_prompt),
        )
        return _first_choice_text(response, self.model)
