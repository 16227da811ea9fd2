from llama_ocr.providers.base import AsyncBaseProvider, BaseProvider, build_messages
from llama_ocr.providers.together import AsyncTogetherProvider, TogetherProvider

__all__ = [
    "AsyncBaseProvider",
    "AsyncTogetherProvider",
    "BaseProvider",
    "TogetherProvider",
    "build_messages",
]
