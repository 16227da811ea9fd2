"""Image to Markdown OCR using Llama 3.2 Vision on Together AI."""

from llama_ocr.config import DEFAULT_MODEL, OcrParams, VisionModel, provider_model_id
from llama_ocr.core import ocr, ocr_async
from llama_ocr.errors import EmptyCompletionError, ProviderError, ValidationError
from llama_ocr.prompt import DEFAULT_SYSTEM_PROMPT

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_SYSTEM_PROMPT",
    "EmptyCompletionError",
    "OcrParams",
    "ProviderError",
    "ValidationError",
    "VisionModel",
    "ocr",
    "ocr_async",
    "provider_model_id",
]
