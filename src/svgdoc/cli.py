"""SVG Document Generator CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from svgdoc.config import settings
from svgdoc.errors import SVGDocError
from svgdoc.generator import generate_artifact, split_lines, validate_artifact
from svgdoc.log import configure_logging
from svgdoc.models import Artifact, PageConfig, RenderProfile
from svgdoc.pipeline import classify_line
from svgdoc.translation import placeholder_translation

app = typer.Typer(
    name="svgdoc",
    help="Lay out translated text as a paginated SVG document",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
) -> None:
    """Configure logging for every command."""
    configure_logging(log_level, handler=RichHandler(console=Console(stderr=True)))


def _page(width: Optional[float], height: Optional[float]) -> PageConfig:
    page = settings.page_config()
    updates = {}
    if width is not None:
        updates["width"] = width
    if height is not None:
        updates["height"] = height
    return PageConfig(**{**page.model_dump(), **updates})


def _read(input_path: Path) -> str:
    if not input_path.exists():
        console.print(f"[bold red]Input not found:[/bold red] {escape(str(input_path))}")
        raise typer.Exit(code=1)

    try:
        return input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        console.print(f"[bold red]Input is not UTF-8 text:[/bold red] {escape(str(input_path))}")
        raise typer.Exit(code=1)
    except OSError as exc:
        console.print(f"[bold red]Cannot read input:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _write(artifact: Artifact, output_dir: str) -> Path:
    out_dir = Path(output_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / artifact.file_name
        out_path.write_bytes(artifact.content)
    except OSError as exc:
        console.print(f"[bold red]Cannot write output:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    return out_path


def _generate_and_write(
    content: str,
    source_name: str,
    output_dir: str,
    profile: RenderProfile,
    page: Optional[PageConfig] = None,
) -> None:
    try:
        artifact = validate_artifact(
            generate_artifact(content, source_name, page=page, profile=profile)
        )
    except SVGDocError as exc:
        console.print(f"[bold red]Failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    out_path = _write(artifact, output_dir)
    console.print(f"[bold green]Wrote[/bold green] {out_path} ({artifact.size_bytes} bytes)")


@app.command()
def render(
    input_path: Path = typer.Argument(..., help="UTF-8 text file to lay out"),
    output_dir: str = typer.Option(settings.output_dir, help="Output directory"),
    source_name: Optional[str] = typer.Option(None, help="Display name (default: input file name)"),
    profile: RenderProfile = typer.Option(settings.default_profile, help="Rendering profile"),
    width: Optional[float] = typer.Option(None, help="Page width"),
    height: Optional[float] = typer.Option(None, help="Nominal page height"),
) -> None:
    """Render a text file as an HTML page with an embedded SVG document."""
    content = _read(input_path)

    try:
        page = _page(width, height)
    except ValueError as exc:
        console.print(f"[bold red]Invalid page size:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"[bold blue]Rendering:[/bold blue] {input_path}")
    _generate_and_write(
        content,
        source_name or input_path.name,
        output_dir,
        profile,
        page=page,
    )


@app.command()
def demo(
    file_name: str = typer.Argument(..., help="Source file name to simulate, e.g. report.pdf"),
    output_dir: str = typer.Option(settings.output_dir, help="Output directory"),
    profile: RenderProfile = typer.Option(settings.default_profile, help="Rendering profile"),
) -> None:
    """Render the placeholder translation for a source file name."""
    console.print(f"[bold blue]Simulating translation:[/bold blue] {file_name}")
    _generate_and_write(placeholder_translation(file_name), file_name, output_dir, profile)


@app.command()
def classify(
    input_path: Path = typer.Argument(..., help="UTF-8 text file to classify"),
) -> None:
    """Show the category assigned to each line."""
    content = _read(input_path)

    table = Table(title=str(input_path))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category", style="cyan")
    table.add_column("Text")

    for index, line in enumerate(split_lines(content)):
        table.add_row(str(index), classify_line(line).value, escape(line))

    console.print(table)


if __name__ == "__main__":
    app()
