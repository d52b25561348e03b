"""
PDF writer: replays render commands on a ReportLab canvas.

The layout engine already works in PDF points with a bottom-left origin, so
commands map one-to-one onto canvas calls. NewPage closes the current page.
"""

from pathlib import Path
from typing import Iterable, Optional

from reportlab.lib.colors import Color, HexColor, black
from reportlab.pdfgen import canvas

from catalyst.contexts.layout.pagination import (
    DrawLine,
    DrawText,
    NewPage,
    PageGeometry,
    RenderCommand,
)
from catalyst.contexts.rendering.logger import _log_debug


def _color(value: Optional[str]) -> Color:
    return HexColor(value) if value else black


def write_pdf(
    commands: Iterable[RenderCommand],
    geometry: PageGeometry,
    output_path: Path,
    title: Optional[str] = None,
    author: Optional[str] = None,
) -> Path:
    """
    Write render commands to a PDF file.

    Args:
        commands: Output of layout_document()
        geometry: Page size the commands were laid out for
        output_path: Destination .pdf (parent directories are created)
        title: Document title metadata (optional)
        author: Document author metadata (optional)

    Returns:
        Path to the written PDF
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pdf = canvas.Canvas(str(output_path), pagesize=(geometry.width, geometry.height))
    if title:
        pdf.setTitle(title)
    if author:
        pdf.setAuthor(author)

    pages = 1
    for command in commands:
        if isinstance(command, NewPage):
            pdf.showPage()
            pages += 1
        elif isinstance(command, DrawText):
            pdf.setFont(command.font, command.size)
            pdf.setFillColor(_color(command.color))
            pdf.drawString(command.x, command.y, command.text)
        elif isinstance(command, DrawLine):
            pdf.setStrokeColor(_color(command.color))
            pdf.setLineWidth(command.width)
            pdf.line(command.x1, command.y1, command.x2, command.y2)
        else:
            raise TypeError(f"Unsupported render command: {type(command).__name__}")

    pdf.save()
    _log_debug(f"Wrote {pages} page(s) to {output_path}")
    return output_path
