"""
Rendering Context

Responsibilities:
- Builds resume content blocks from a user's profile
- Writes laid-out render commands to PDF with ReportLab
- Orchestrates exports with logging and layout checks

Owns: Resume section order, PDF output, export results
Never: Decides line breaks or page breaks (delegated to the Layout context)
"""

from catalyst.contexts.rendering.exporter import ExportResult, export_resume, layout_resume
from catalyst.contexts.rendering.pdf_writer import write_pdf
from catalyst.contexts.rendering.resume_document import build_resume_blocks

__all__ = [
    "ExportResult",
    "export_resume",
    "layout_resume",
    "write_pdf",
    "build_resume_blocks",
]
