"""Shared fixtures for the test suite.

Image fixtures are real files written with Pillow; the OpenAI clients are
patched at their construction point so no request leaves the process.
"""

import io
import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner
from PIL import Image


# ── CLI runner ─────────────────────────────────────────────────────────────


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ── Image fixtures ─────────────────────────────────────────────────────────


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (10, 10), color=(255, 0, 0)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A real, valid 10×10 red JPEG image as raw bytes."""
    return _image_bytes("JPEG")


@pytest.fixture
def jpeg_file(tmp_path: Path, jpeg_bytes: bytes) -> Path:
    path = tmp_path / "page.jpg"
    path.write_bytes(jpeg_bytes)
    return path


@pytest.fixture
def png_bytes() -> bytes:
    """A real, valid 10×10 red PNG image as raw bytes."""
    return _image_bytes("PNG")


@pytest.fixture
def png_file(tmp_path: Path, png_bytes: bytes) -> Path:
    path = tmp_path / "page.png"
    path.write_bytes(png_bytes)
    return path


# ── Completion client mocks ────────────────────────────────────────────────


def make_response(*texts) -> MagicMock:
    """A chat completion response with one choice per text."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=text)) for text in texts]
    return response


@pytest.fixture
def openai_cls():
    """Patch openai.OpenAI where the Together provider imports it."""
    with patch("llama_ocr.providers.together.OpenAI") as MockCls:
        MockCls.return_value.chat.completions.create.return_value = make_response(
            "# Markdown"
        )
        yield MockCls


@pytest.fixture
def async_openai_cls():
    """Patch openai.AsyncOpenAI where the Together provider imports it."""
    with patch("llama_ocr.providers.together.AsyncOpenAI") as MockCls:
        MockCls.return_value.chat.completions.create = AsyncMock(
            return_value=make_response("# Markdown")
        )
        MockCls.return_value.close = AsyncMock()
        yield MockCls


@pytest.fixture
def unreadable_file(tmp_path: Path, jpeg_bytes: bytes):
    """A JPEG with all permission bits cleared."""
    if not hasattr(os, "geteuid") or os.geteuid() == 0:
        pytest.skip("file permissions are not enforced for this user")
    path = tmp_path / "locked.jpg"
    path.write_bytes(jpeg_bytes)
    path.chmod(0)
    yield path
    path.chmod(0o600)
