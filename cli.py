# cli.py
"""
cfg-gen: write C function flowcharts to Mermaid or DOT documents.

    cfg-gen example_code -o output
    cfg-gen src/max.c -o max.md --format mermaid
"""
import logging
from pathlib import Path
from typing import List, Optional

import typer

from c_parser import parse_c_code
from cfg_builder import build_cfg
from cfg_model import MergePolicy
from errors import CfgGenError, InputNotFoundError, OutputWriteError, SourceReadError
from flowchart_generator import render_document
from settings import OutputFormat, Settings
from utils import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cfg-gen",
    help="Control-flow flowchart generator for C functions",
    add_completion=False,
)


def generate_document(source: str, fmt=OutputFormat.MERMAID, merge_policy=MergePolicy.CONTRACT) -> str:
    """Render every function in ``source`` into one document."""
    cfgs = [build_cfg(func, merge_policy) for func in parse_c_code(source)]
    logger.debug("rendered %d function(s)", len(cfgs))
    return render_document(cfgs, fmt)


def process_single_file(input_path: Path, output_path: Path, settings: Settings) -> Path:
    fmt = settings.output_format
    if output_path.is_dir():
        output_path = output_path / f"{input_path.stem}{fmt.suffix}"

    try:
        source = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(input_path, e) from e

    document = generate_document(source, fmt, settings.merge_policy)

    try:
        output_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(output_path, e) from e
    return output_path


def process_directory(input_dir: Path, output_dir: Path, settings: Settings) -> List[Path]:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(output_dir, e) from e

    written = []
    for path in sorted(input_dir.iterdir()):
        if not path.is_file() or path.suffix not in settings.source_suffixes:
            continue
        target = output_dir / f"{path.stem}{settings.output_format.suffix}"
        typer.echo(f"Processing: {path} -> {target}")
        written.append(process_single_file(path, target, settings))
    return written


def run(input_path: Path, output_path: Path, settings: Settings) -> List[Path]:
    if not input_path.exists():
        raise InputNotFoundError(input_path)
    if input_path.is_dir():
        return process_directory(input_path, output_path, settings)
    return [process_single_file(input_path, output_path, settings)]


@app.command()
def generate(
    input_path: Path = typer.Argument(Path("example_code"), help="C file or directory of C files"),
    output: Path = typer.Option(Path("output"), "--output", "-o", help="Output file or directory"),
    fmt: Optional[OutputFormat] = typer.Option(None, "--format", "-f", help="Diagram notation"),
    merge_policy: Optional[MergePolicy] = typer.Option(
        None, "--merge-policy", help="How placeholder merge nodes are removed"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Generate one flowchart document per C source file."""
    overrides = {}
    if fmt is not None:
        overrides["output_format"] = fmt
    if merge_policy is not None:
        overrides["merge_policy"] = merge_policy
    if verbose:
        overrides["log_level"] = "DEBUG"
    settings = Settings(**overrides)
    configure_logging(settings.log_level)

    try:
        written = run(input_path, output, settings)
    except CfgGenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info("wrote %d document(s)", len(written))


def main():
    app()


if __name__ == "__main__":
    main()
