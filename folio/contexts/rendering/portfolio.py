"""
Portfolio rendering orchestration.

render_portfolio() is the in-memory pipeline:
    raw draft -> normalize_draft -> select_renderer -> TemplateRenderer.render -> Page

render_portfolio_file() wraps it for files on disk with a per-run log
directory and a RenderResult describing the outcome.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from folio.contexts.drafting.loader import load_draft
from folio.contexts.drafting.normalizer import normalize_draft
from folio.contexts.rendering.logger import (
    _log_debug,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from folio.contexts.rendering.page_structure import Page
from folio.contexts.rendering.selector import TemplateSelector, get_default_selector
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class RenderResult:
    """Result from render_portfolio_file() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    template_id: Optional[str] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def render_portfolio(
    raw: Any,
    template_id: Optional[str] = None,
    selector: TemplateSelector = None,
) -> Page:
    """
    Render a draft into a finished page.

    Args:
        raw: Draft or raw draft-shaped input
        template_id: Layout override; defaults to the draft's declared templateId
        selector: Selector to use (default: module-wide selector)

    Returns:
        Rendered Page (page.template_id is the layout actually used)
    """
    draft = normalize_draft(raw)
    selector = selector or get_default_selector()
    requested = template_id if template_id is not None else draft.template_id
    return selector.select(requested).render(draft)


def render_portfolio_file(
    input_path: Path,
    output_path: Path,
    template_id: Optional[str] = None,
    log_root: Path = None,
) -> RenderResult:
    """
    Render a draft file to an HTML file with logging.

    Handles:
    1. Setup per-run logging
    2. Load and normalize the draft
    3. Render with the requested (or declared) layout
    4. Write HTML to output_path

    Args:
        input_path: Draft file (.json, .yaml, .yml)
        output_path: Destination HTML file (parent directories are created)
        template_id: Layout override; defaults to the draft's declared templateId
        log_root: Root directory for run logs (default: LOGS_PATH)

    Returns:
        RenderResult with success status, paths, layout used, and timing
    """
    start_time = time.time()
    input_path = Path(input_path)
    output_path = Path(output_path)

    log_dir = (log_root or LOGS_PATH) / f"render_{now()}"
    log_file = setup_rendering_logger(log_dir, layout=template_id or "")
    log_render_start(input_path, log_file)

    try:
        draft = load_draft(input_path)
        page = render_portfolio(draft, template_id=template_id)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page.html, encoding="utf-8")
        _log_debug(f"Wrote {len(page.html)} chars to {output_path}")

        result = RenderResult(
            success=True,
            input_path=input_path,
            output_path=output_path,
            template_id=page.template_id,
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )
    except (OSError, ValueError) as e:
        result = RenderResult(
            success=False,
            input_path=input_path,
            error=str(e),
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )

    log_render_result(result, result.time_s)
    return result
