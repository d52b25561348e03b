"""
Layout Context

Responsibilities:
- Measures text through an injected metrics provider
- Wraps paragraphs and bullet items to the printable width
- Paginates content blocks into positioned render commands
- Checks command streams against page margins

Owns: Line wrapping, pagination, layout presets, layout diagnostics
Never: Writes files or knows what a resume is
"""

from catalyst.contexts.layout.blocks import (
    BulletList,
    ContentBlock,
    Divider,
    Heading,
    Paragraph,
    Spacer,
    SubHeading,
)
from catalyst.contexts.layout.exceptions import LayoutError, MetricsError
from catalyst.contexts.layout.metrics import FixedWidthMetrics, MetricsProvider, StandardFontMetrics
from catalyst.contexts.layout.pagination import (
    DrawLine,
    DrawText,
    FlowState,
    LayoutStyle,
    NewPage,
    PageCursor,
    PageFlowController,
    PageGeometry,
    RenderCommand,
    layout_document,
)
from catalyst.contexts.layout.wrapper import wrap_text

__all__ = [
    # Content blocks
    "ContentBlock",
    "Heading",
    "SubHeading",
    "Paragraph",
    "BulletList",
    "Divider",
    "Spacer",
    # Metrics
    "MetricsProvider",
    "StandardFontMetrics",
    "FixedWidthMetrics",
    # Wrapping and pagination
    "wrap_text",
    "PageGeometry",
    "LayoutStyle",
    "PageCursor",
    "FlowState",
    "PageFlowController",
    "layout_document",
    # Render commands
    "RenderCommand",
    "DrawText",
    "DrawLine",
    "NewPage",
    # Errors
    "MetricsError",
    "LayoutError",
]
