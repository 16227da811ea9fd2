"""Abstract bases for vision completion providers."""

from abc import ABC, abstractmethod
from typing import Any


def build_messages(image_url: str, system_prompt: str) -> list[dict[str, Any]]:
    """Build the single user message: prompt text first, then the image."""
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": system_prompt},
                {"type": "image_url", "image_url": {"url": image_url}},
            ],
        }
    ]


class BaseProvider(ABC):
    """Synchronous provider. Use as a context manager to release the client."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @abstractmethod
    def close(self) -> None:
        ...

    @abstractmethod
    def ocr(self, image_url: str, system_prompt: str) -> str:
        """Send one image (URL or data URI) with its prompt and return the Markdown."""
        ...


class AsyncBaseProvider(ABC):
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @abstractmethod
    async def close(self) -> None:
        ...

    @abstractmethod
    async def ocr(self, image_url: str, system_prompt: str) -> str:
        """Awaitable counterpart of :meth:`BaseProvider.ocr`."""
        ...
