"""
Resume export.

Builds the resume blocks for a user, lays them out with the presets for the
resume template, checks the layout against the page margins and writes the
PDF with ReportLab.
"""

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from catalyst.contexts.layout.config_resolver import presets_for_template, resolve_layout
from catalyst.contexts.layout.diagnostics import DocumentDiagnostics, analyze_layout
from catalyst.contexts.layout.logger import log_diagnostics
from catalyst.contexts.layout.metrics import MetricsProvider, StandardFontMetrics
from catalyst.contexts.layout.pagination import PageGeometry, RenderCommand, layout_document
from catalyst.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_export_result,
    log_export_start,
    setup_rendering_logger,
)
from catalyst.contexts.rendering.pdf_writer import write_pdf
from catalyst.contexts.rendering.resume_document import build_resume_blocks
from catalyst.contexts.tracking.models import User
from catalyst.utils.event_logging import log_event
from catalyst.utils.logger import session_log_dir
from catalyst.utils.pdf_processing import page_count
from catalyst.utils.timestamp import today

load_dotenv()
RESULTS_PATH = Path(os.getenv("CATALYST_RESULTS_PATH", "outs/results"))


@dataclass
class ExportResult:
    """
    Result of a resume export.

    Attributes:
        success: Whether a valid PDF was written
        pdf_path: Path to generated PDF (None if not written)
        page_count: Number of pages in generated PDF (None if not available)
        commands: Render commands the PDF was drawn from
        diagnostics: Layout diagnostics (None if layout failed)
        errors: Fatal problems (unknown font or preset, layout issues, I/O)
        warnings: Non-fatal problems (words running past the right margin)
    """

    success: bool
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    commands: List[RenderCommand] = field(default_factory=list)
    diagnostics: Optional[DocumentDiagnostics] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def resume_filename(user: User) -> str:
    """File name for a user's resume (e.g., "Jane_Doe_Resume.pdf")."""
    stem = re.sub(r"[^A-Za-z0-9]+", "_", user.full_name).strip("_") or "resume"
    return f"{stem}_Resume.pdf"


def layout_resume(
    user: User,
    presets: Optional[List[str]] = None,
    metrics: Optional[MetricsProvider] = None,
) -> Tuple[List[RenderCommand], PageGeometry]:
    """
    Lay out a user's resume without writing anything.

    Args:
        user: User to print
        presets: Layout presets (default: presets_for_template(user.resume.template.name))
        metrics: Width provider (default: StandardFontMetrics())

    Returns:
        (render commands, page geometry)

    Raises:
        ValueError: If a preset is unknown
        MetricsError: If the style uses a font the metrics provider cannot measure
    """
    if presets is None:
        presets = presets_for_template(user.resume.template.name)
    geometry, style = resolve_layout(presets)
    blocks = build_resume_blocks(user)
    commands = layout_document(blocks, geometry, metrics or StandardFontMetrics(), style)
    return commands, geometry


def export_resume(
    user: User,
    output_path: Optional[Path] = None,
    presets: Optional[List[str]] = None,
    metrics: Optional[MetricsProvider] = None,
    log_dir: Optional[Path] = None,
    record_event: bool = True,
    verbose: bool = False,
) -> ExportResult:
    """
    Export a user's resume to PDF with logging and layout checks.

    Logs the run to a timestamped log directory (Tier 1) and records an
    export_completed or export_failed event (Tier 2).

    Args:
        user: User whose resume to export
        output_path: Destination .pdf (default: outs/results/YYYY-MM-DD/<Name>_Resume.pdf)
        presets: Layout presets (default: chain for the resume template)
        metrics: Width provider (default: StandardFontMetrics())
        log_dir: Log directory (default: outs/logs/export_<timestamp>)
        record_event: Write the Tier 2 event (default: True)
        verbose: Log every issue and warning

    Returns:
        ExportResult with success status and diagnostic information
    """
    if presets is None:
        presets = presets_for_template(user.resume.template.name)
    if log_dir is None:
        log_dir = session_log_dir("export")
    if output_path is None:
        output_path = RESULTS_PATH / today() / resume_filename(user)
    output_path = Path(output_path)
    metrics = metrics or StandardFontMetrics()

    setup_rendering_logger(log_dir, presets)
    log_export_start(user.email, presets, output_path)
    start_time = time.time()

    result = _export(user, output_path, presets, metrics, verbose)

    elapsed_s = time.time() - start_time
    log_export_result(user.email, result, elapsed_s, verbose=verbose)

    if record_event:
        if result.success:
            log_event(
                event_type="export_completed",
                subject=user.email,
                source="rendering",
                export_time_s=round(elapsed_s, 2),
                presets=presets,
                pdf_path=str(result.pdf_path),
                page_count=result.page_count,
                warning_count=len(result.warnings),
            )
        else:
            log_event(
                event_type="export_failed",
                subject=user.email,
                source="rendering",
                export_time_s=round(elapsed_s, 2),
                presets=presets,
                error_count=len(result.errors),
                errors=result.errors[:5],
            )

    return result


def _export(
    user: User,
    output_path: Path,
    presets: List[str],
    metrics: MetricsProvider,
    verbose: bool,
) -> ExportResult:
    try:
        commands, geometry = layout_resume(user, presets, metrics)
    except ValueError as e:
        # MetricsError is a ValueError; both mean nothing was laid out
        return ExportResult(success=False, errors=[str(e)])

    diagnostics = analyze_layout(commands, geometry, metrics)
    log_diagnostics(diagnostics, verbose=verbose)
    issues = diagnostics.get_inherited_issues()
    warnings = diagnostics.get_inherited_warnings()

    try:
        pdf_path = write_pdf(
            commands, geometry, output_path, title=user.resume.title, author=user.full_name
        )
    except OSError as e:
        return ExportResult(
            success=False,
            commands=commands,
            diagnostics=diagnostics,
            errors=[f"Could not write PDF: {e}"],
            warnings=warnings,
        )

    _log_info(f"PDF saved to: {pdf_path}")
    pdf_pages = page_count(pdf_path)
    if pdf_pages != diagnostics.page_count:
        _log_debug(f"Layout planned {diagnostics.page_count} page(s), PDF has {pdf_pages}")

    return ExportResult(
        success=not issues,
        pdf_path=pdf_path,
        page_count=pdf_pages,
        commands=commands,
        diagnostics=diagnostics,
        errors=issues,
        warnings=warnings,
    )
