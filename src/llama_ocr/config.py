"""Call parameters, model variants and environment lookup."""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from llama_ocr.prompt import DEFAULT_SYSTEM_PROMPT

API_KEY_ENV = "TOGETHER_API_KEY"
TOGETHER_BASE_URL = "https://api.together.xyz/v1"

MODEL_NAMESPACE = "meta-llama"
FREE_MODEL_ID = f"{MODEL_NAMESPACE}/Llama-Vision-Free"


class VisionModel(str, Enum):
    LLAMA_90B = "Llama-3.2-90B-Vision"
    LLAMA_11B = "Llama-3.2-11B-Vision"
    FREE = "free"


DEFAULT_MODEL = VisionModel.LLAMA_90B


def provider_model_id(model: VisionModel) -> str:
    """Map a model variant to the identifier Together expects."""
    model = VisionModel(model)
    if model is VisionModel.FREE:
        return FREE_MODEL_ID
    return f"{MODEL_NAMESPACE}/{model.value}-Instruct-Turbo"


def _api_key_default() -> str:
    return os.environ.get(API_KEY_ENV, "")


class OcrParams(BaseModel):
    """Parameters for a single OCR call.

    Fields can be given by their Python names (``file_path``) or in camelCase
    (``filePath``).  An empty ``api_key`` is accepted here; the provider
    rejects it when the request is sent.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    file_path: str = Field(min_length=1)
    api_key: str = Field(default_factory=_api_key_default)
    model: VisionModel = DEFAULT_MODEL

    @property
    def provider_model(self) -> str:
        return provider_model_id(self.model)


def api_key_from_env(api_key_override: Optional[str] = None) -> str:
    api_key = api_key_override or _api_key_default()
    if not api_key:
        raise RuntimeError(
            f"No Together API key. "
            f"Set {API_KEY_ENV} in your environment or .env file, or pass --api-key."
        )
    return api_key
