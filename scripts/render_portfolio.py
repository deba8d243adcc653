#!/usr/bin/env python3
"""
Command-line interface for rendering portfolio drafts.

Subcommands:
- render: Render a draft file to a single-page HTML site
- preview: Render the sample draft with one or all layouts
- normalize: Write the normalized form of a draft as JSON
- info: Summarize a draft (declared vs. resolved layout, section sizes)
- templates: List available layouts
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from folio.contexts.drafting import TEMPLATE_IDS, get_default_draft, load_draft, load_raw_draft
from folio.contexts.drafting.logger import _log_info, setup_drafting_logger
from folio.contexts.drafting.normalizer import normalize_draft
from folio.contexts.rendering import (
    FALLBACK_TEMPLATE_ID,
    render_portfolio,
    render_portfolio_file,
    select_renderer,
)
from folio.utils.timestamp import format_updated_at, now

load_dotenv()
OUTPUT_PATH = Path(os.getenv("FOLIO_OUTPUT_PATH", "outs/sites"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Render portfolio drafts into single-page sites",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("templates")
def templates_command():
    """
    List available layouts.

    Example:\n

        $ render_portfolio.py templates
    """
    typer.secho(f"\nLayouts ({len(TEMPLATE_IDS)}):", fg=typer.colors.BLUE, bold=True)
    for template_id in sorted(TEMPLATE_IDS):
        marker = "  (fallback)" if template_id == FALLBACK_TEMPLATE_ID else ""
        typer.echo(f"  • {template_id}{marker}")


@app.command("render")
def render_command(
    draft_file: Path = typer.Argument(
        ...,
        help="Path to draft file (.json, .yaml, .yml)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML path (default: FOLIO_OUTPUT_PATH/<draft name>.html)",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Layout to use instead of the draft's templateId",
    ),
    log_dir: Path = typer.Option(
        LOGS_PATH,
        "--log-dir",
        help="Root directory for run logs",
    ),
):
    """
    Render a draft file to a single-page HTML site.

    Unknown layout ids fall back to the default layout rather than failing.

    Examples:\n

        $ render_portfolio.py render draft.json                    # Use the draft's layout

        $ render_portfolio.py render draft.yaml -t neo -o site.html
    """
    output_path = output if output else OUTPUT_PATH / f"{draft_file.stem}.html"

    result = render_portfolio_file(draft_file, output_path, template_id=template, log_root=log_dir)

    if not result.success:
        typer.secho(f"Error: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"✓ Rendered {draft_file.name} with '{result.template_id}' -> {result.output_path}",
        fg=typer.colors.GREEN,
    )


@app.command("preview")
def preview_command(
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Layout to preview (default: all layouts)",
    ),
    output_dir: Path = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for preview pages (default: FOLIO_OUTPUT_PATH/previews)",
    ),
):
    """
    Render the sample draft with one or all layouts.

    Examples:\n

        $ render_portfolio.py preview              # All layouts

        $ render_portfolio.py preview -t classic
    """
    output_dir = output_dir if output_dir else OUTPUT_PATH / "previews"
    output_dir.mkdir(parents=True, exist_ok=True)

    template_ids = [template] if template is not None else sorted(TEMPLATE_IDS)
    draft = get_default_draft()

    for template_id in template_ids:
        page = render_portfolio(draft, template_id=template_id)
        output_path = output_dir / f"preview_{page.template_id}.html"
        output_path.write_text(page.html, encoding="utf-8")
        typer.secho(f"  ✓ {page.template_id}: {output_path}", fg=typer.colors.GREEN)


@app.command("normalize")
def normalize_command(
    draft_file: Path = typer.Argument(
        ...,
        help="Path to draft file (.json, .yaml, .yml)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON path (if not specified, prints to stdout)",
    ),
):
    """
    Write the normalized form of a draft as JSON.

    Missing fields are filled with empty defaults; nothing is removed or reordered.

    Examples:\n

        $ render_portfolio.py normalize draft.yaml

        $ render_portfolio.py normalize draft.json -o draft.normalized.json
    """
    try:
        raw = load_raw_draft(draft_file)
    except (OSError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    normalized = json.dumps(normalize_draft(raw).to_dict(), ensure_ascii=False, indent=2)

    if output is None:
        typer.echo(normalized)
        return

    setup_drafting_logger(LOGS_PATH / f"normalize_{now()}", phase="normalize")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(normalized + "\n", encoding="utf-8")
    _log_info(f"Normalized {draft_file} -> {output}")
    typer.secho(f"✓ Normalized draft written to {output}", fg=typer.colors.GREEN)


@app.command("info")
def info_command(
    draft_file: Path = typer.Argument(
        ...,
        help="Path to draft file (.json, .yaml, .yml)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Summarize a draft.

    Example:\n

        $ render_portfolio.py info draft.json
    """
    try:
        draft = load_draft(draft_file)
    except (OSError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    renderer = select_renderer(draft.template_id)

    typer.secho(f"\n{draft_file.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Name:        {draft.profile.full_name or '(empty)'}")
    typer.echo(f"  Declared:    {draft.template_id or '(none)'}")
    typer.echo(f"  Layout:      {renderer.layout_id}")
    typer.echo(f"  Updated:     {format_updated_at(draft.updated_at)}")
    typer.echo(f"  Experience:  {len(draft.experience)}")
    typer.echo(f"  Projects:    {len(draft.projects)}")
    typer.echo(f"  Skills:      {len(draft.skills)}")
    typer.echo(f"  Education:   {len(draft.education)}")


if __name__ == "__main__":
    app()
