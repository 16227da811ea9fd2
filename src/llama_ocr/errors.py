"""Exception types surfaced by :func:`llama_ocr.ocr`.

Nothing is caught inside the library. Callers see one of:

* ``ValidationError`` -- bad parameters, raised before any I/O.
* ``OSError``         -- the local image could not be read.
* ``ProviderError``   -- anything raised by the completion client
  (authentication, rate limits, connection failures, bad status codes).
"""

from openai import OpenAIError
from pydantic import ValidationError

ProviderError = OpenAIError


class EmptyCompletionError(ProviderError, IndexError):
    """The provider returned a completion with no choices."""


__all__ = ["EmptyCompletionError", "ProviderError", "ValidationError"]
