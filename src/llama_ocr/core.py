"""The ``ocr`` entry points."""

import logging
from collections.abc import Mapping
from typing import Any, Union

from llama_ocr.config import OcrParams
from llama_ocr.image import resolve_image_url
from llama_ocr.providers.together import AsyncTogetherProvider, TogetherProvider

logger = logging.getLogger(__name__)

ParamsLike = Union[OcrParams, Mapping[str, Any]]


def _validate(params: ParamsLike) -> OcrParams:
    if isinstance(params, OcrParams):
        return params
    return OcrParams.model_validate(params)


def ocr(params: ParamsLike) -> str:
    """Convert an image to Markdown with a Together-hosted Llama vision model.

    ``params`` is an :class:`OcrParams` or a mapping with the same keys
    (``filePath``/``file_path``, ``model``, ``apiKey``, ``systemPrompt``).

    Raises:
        ValidationError: invalid parameters; no file or network access happens.
        OSError:         a local ``file_path`` could not be read.
        ProviderError:   the completion request failed, or returned no choices.
    """
    options = _validate(params)
    model = options.provider_model
    logger.debug("OCR %s with %s", options.file_path, model)

    image_url = resolve_image_url(options.file_path)
    with TogetherProvider(api_key=options.api_key, model=model) as provider:
        return provider.ocr(image_url=image_url, system_prompt=options.system_prompt)


async def ocr_async(params: ParamsLike) -> str:
    """Coroutine version of :func:`ocr`.

    The local file read is still synchronous; only the completion request is
    awaited.
    """
    options = _validate(params)
    model = options.provider_model
    logger.debug("OCR %s with %s", options.file_path, model)

    image_url = resolve_image_url(options.file_path)
    async with AsyncTogetherProvider(api_key=options.api_key, model=model) as provider:
        return await provider.ocr(image_url=image_url, system_prompt=options.system_prompt)
