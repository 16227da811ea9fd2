"""Main CLI entry point."""

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from llama_ocr.config import DEFAULT_MODEL, OcrParams, VisionModel, api_key_from_env
from llama_ocr.core import ocr
from llama_ocr.errors import ProviderError
from llama_ocr.prompt import DEFAULT_SYSTEM_PROMPT

console = Console(stderr=True)
load_dotenv()


@click.command()
@click.argument("file_path")
@click.option(
    "--model", "-m",
    type=click.Choice([m.value for m in VisionModel]),
    default=DEFAULT_MODEL.value,
    show_default=True,
    help="Llama vision model to run the OCR with.",
)
@click.option(
    "--api-key",
    default=None,
    help="Together API key (overrides TOGETHER_API_KEY).",
)
@click.option(
    "--system-prompt",
    default=None,
    help="Replace the default Markdown conversion prompt.",
)
@click.option(
    "--prompt-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the system prompt from a file.",
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output file path. Defaults to stdout.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log request details to stderr.")
@click.version_option(package_name="llama-ocr")
def main(file_path, model, api_key, system_prompt, prompt_file, output, verbose):
    """Convert an image to Markdown using Llama 3.2 Vision on Together AI.

    FILE_PATH is a local image file or an http(s):// URL.
    Results are written to stdout unless --output is specified.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    if system_prompt is not None and prompt_file:
        raise click.UsageError("--system-prompt and --prompt-file are mutually exclusive.")
    if prompt_file:
        system_prompt = prompt_file.read_text(encoding="utf-8")

    try:
        params = OcrParams(
            file_path=file_path,
            api_key=api_key_from_env(api_key),
            model=VisionModel(model),
            system_prompt=DEFAULT_SYSTEM_PROMPT if system_prompt is None else system_prompt,
        )
    except (RuntimeError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    try:
        with console.status(f"[cyan]Running OCR via {params.provider_model}..."):
            result = ocr(params)
    except OSError as e:
        console.print(f"[red]Cannot read image:[/red] {e}")
        sys.exit(1)
    except ProviderError as e:
        console.print(f"[red]Provider error:[/red] {e}")
        sys.exit(1)

    if output:
        try:
            output.write_text(result, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot write output:[/red] {e}")
            sys.exit(1)
        console.print(f"[green]Written to {output}[/green]")
    else:
        click.echo(result)
