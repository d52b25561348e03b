"""
Page flow controller: turns content blocks into positioned render commands.

The controller keeps a single vertical cursor. Before every atomic unit (one
heading, one subheading, one wrapped line, one rule) it asks ensure_space for
the unit's height and starts a new page when the unit does not fit above the
bottom margin. Blocks are therefore never kept together: a paragraph or a
bullet list may continue on the next page between two of its lines.

Coordinates follow PDF conventions: origin at the bottom-left corner, y grows
upwards, and text is drawn on its baseline.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from catalyst.contexts.layout.blocks import (
    BulletList,
    ContentBlock,
    Divider,
    Heading,
    Paragraph,
    Spacer,
    SubHeading,
)
from catalyst.contexts.layout.exceptions import LayoutError
from catalyst.contexts.layout.logger import _log_debug, log_layout_summary
from catalyst.contexts.layout.metrics import MetricsProvider
from catalyst.contexts.layout.wrapper import wrap_text


@dataclass(frozen=True)
class PageGeometry:
    """
    Page size and uniform margin, in points.

    Attributes:
        width: Page width
        height: Page height
        margin: Margin applied to all four sides
    """

    width: float
    height: float
    margin: float

    @property
    def top(self) -> float:
        """Baseline of the first unit on a page."""
        return self.height - self.margin

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass(frozen=True)
class LayoutStyle:
    """
    Fonts, sizes and spacing used by the controller.

    Defaults reproduce the standard resume look: Helvetica, 18pt name line,
    12pt underlined section headings, 14pt entry titles, 10pt body text on a
    15pt line pitch.
    """

    body_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    italic_font: str = "Helvetica-Oblique"
    title_size: float = 18
    title_padding: float = 5
    heading_size: float = 12
    heading_padding: float = 3
    subtitle_size: float = 14
    subheading_gap: float = 5
    body_size: float = 10
    line_height: float = 15
    bullet_indent: float = 10
    bullet_glyph: str = "•"
    underline_headings: bool = True
    underline_offset: float = 2
    underline_width: float = 0.5
    rule_width: float = 1.0
    accent_color: str = "#0066CC"
    text_color: str = "#000000"

    def font_specs(self) -> List[Tuple[str, float]]:
        """Every (font, size) pair the controller may measure or draw with."""
        return [
            (self.bold_font, self.title_size),
            (self.bold_font, self.heading_size),
            (self.bold_font, self.subtitle_size),
            (self.body_font, self.body_size),
            (self.italic_font, self.body_size),
        ]

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


# =============================================================================
# Render commands
# =============================================================================


@dataclass(frozen=True)
class DrawText:
    text: str
    font: str
    size: float
    x: float
    y: float
    color: Optional[str] = None


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 1.0
    color: Optional[str] = None


@dataclass(frozen=True)
class NewPage:
    pass


RenderCommand = Union[DrawText, DrawLine, NewPage]


# =============================================================================
# Cursor and controller
# =============================================================================


@dataclass
class PageCursor:
    """
    Vertical position on the current page.

    Attributes:
        page_index: Zero-based index of the current page
        y: Baseline where the next unit will be drawn
        page_height: Fixed page height
        margin: Fixed top and bottom margin
    """

    page_index: int
    y: float
    page_height: float
    margin: float

    @classmethod
    def at_top(cls, geometry: PageGeometry) -> "PageCursor":
        return cls(page_index=0, y=geometry.top, page_height=geometry.height, margin=geometry.margin)

    @property
    def remaining(self) -> float:
        """Space left between the cursor and the bottom margin."""
        return self.y - self.margin

    def advance(self, height: float) -> None:
        self.y -= height

    def reset(self) -> None:
        """Move to the top of the next page."""
        self.page_index += 1
        self.y = self.page_height - self.margin


class FlowState(Enum):
    READY = "ready"
    DRAWING = "drawing"
    PAGE_BREAK = "page_break"
    FINISHED = "finished"


class PageFlowController:
    """
    Lays out content blocks one atomic unit at a time.

    One controller renders one document: it owns a fresh PageCursor and the
    command list, and finish() hands the list over and ends the run.

    Args:
        geometry: Page size and margins
        metrics: Width provider used for wrapping and right alignment
        style: Fonts and spacing (default: LayoutStyle())

    Raises:
        MetricsError: If any font/size pair in the style cannot be measured.
            Raised from the constructor, before any command exists.

    Example:
        >>> controller = PageFlowController(geometry, StandardFontMetrics())
        >>> controller.draw_heading("Experience")
        >>> controller.draw_paragraph("Led the platform team ...")
        >>> commands = controller.finish()
    """

    def __init__(
        self,
        geometry: PageGeometry,
        metrics: MetricsProvider,
        style: Optional[LayoutStyle] = None,
    ):
        self.geometry = geometry
        self.metrics = metrics
        self.style = style or LayoutStyle()

        for font, size in self.style.font_specs():
            self.metrics.measure("", font, size)

        self.cursor = PageCursor.at_top(geometry)
        self.commands: List[RenderCommand] = []
        self.state = FlowState.READY
        self._page_has_content = False

    @property
    def page_count(self) -> int:
        return self.cursor.page_index + 1

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def _check_active(self) -> None:
        if self.state is FlowState.FINISHED:
            raise LayoutError("Layout already finished; create a new controller per document")

    def ensure_space(self, height: float) -> None:
        """
        Start a new page if a unit of the given height does not fit.

        A fresh page is never broken: a unit taller than the whole printable
        area is drawn at the top of the current page. A page that only holds
        space is not fresh.
        """
        self._check_active()
        fresh = not self._page_has_content and self.cursor.y >= self.geometry.top
        if self.cursor.remaining < height and not fresh:
            self.commands.append(NewPage())
            self.cursor.reset()
            self._page_has_content = False
            self.state = FlowState.PAGE_BREAK
            _log_debug(f"Page break before {height:g}pt unit -> page {self.page_count}")

    def _text(self, text: str, font: str, size: float, x: float, y: float, color: str) -> None:
        self.state = FlowState.DRAWING
        self.commands.append(DrawText(text=text, font=font, size=size, x=x, y=y, color=color))
        self._page_has_content = True

    def _line(self, x1: float, y1: float, x2: float, y2: float, width: float, color: str) -> None:
        self.state = FlowState.DRAWING
        self.commands.append(DrawLine(x1=x1, y1=y1, x2=x2, y2=y2, width=width, color=color))
        self._page_has_content = True

    def _done(self) -> None:
        self.state = FlowState.READY

    # -------------------------------------------------------------------------
    # Block operations
    # -------------------------------------------------------------------------

    def draw_heading(self, text: str, level: int = 2) -> None:
        """Draw a heading: level 1 is the document title, level 2 a section title."""
        style = self.style
        margin = self.geometry.margin
        if level == 1:
            size, height = style.title_size, style.title_size + style.title_padding
        else:
            size, height = style.heading_size, style.heading_size + style.heading_padding

        self.ensure_space(height)
        y = self.cursor.y
        self._text(text, style.bold_font, size, margin, y, style.accent_color)

        if level != 1 and style.underline_headings:
            underline_y = y - style.underline_offset
            text_width = self.metrics.measure(text, style.bold_font, size)
            self._line(
                margin, underline_y, margin + text_width, underline_y,
                style.underline_width, style.accent_color,
            )

        self.cursor.advance(height)
        self._done()

    def draw_subheading(self, title: str, subtitle: str, date: Optional[str] = None) -> None:
        """Draw title and right-aligned date on one baseline and the subtitle below."""
        style = self.style
        geometry = self.geometry
        title_advance = style.body_size + style.subheading_gap
        height = title_advance + style.body_size

        self.ensure_space(height)
        y = self.cursor.y
        self._text(title, style.bold_font, style.subtitle_size, geometry.margin, y, style.text_color)

        if date:
            date_width = self.metrics.measure(date, style.body_font, style.body_size)
            date_x = geometry.width - geometry.margin - date_width
            self._text(date, style.body_font, style.body_size, date_x, y, style.text_color)

        self._text(
            subtitle, style.body_font, style.body_size,
            geometry.margin, y - title_advance, style.text_color,
        )
        self.cursor.advance(height)
        self._done()

    def draw_paragraph(self, text: str, italic: bool = False) -> None:
        """Wrap text to the printable width and draw it line by line."""
        style = self.style
        font = style.italic_font if italic else style.body_font
        lines = wrap_text(text, font, style.body_size, self.geometry.printable_width, self.metrics)

        for line in lines:
            self.ensure_space(style.line_height)
            self._text(line, font, style.body_size, self.geometry.margin, self.cursor.y, style.text_color)
            self.cursor.advance(style.line_height)
        self._done()

    def draw_bullet_list(self, items: Iterable[str]) -> None:
        """Draw each item under a bullet; continuation lines keep the item indent."""
        style = self.style
        margin = self.geometry.margin
        text_x = margin + style.bullet_indent
        max_width = self.geometry.printable_width - style.bullet_indent

        for item in items:
            lines = wrap_text(item, style.body_font, style.body_size, max_width, self.metrics)
            for index, line in enumerate(lines):
                self.ensure_space(style.line_height)
                y = self.cursor.y
                if index == 0:
                    self._text(style.bullet_glyph, style.body_font, style.body_size, margin, y, style.text_color)
                self._text(line, style.body_font, style.body_size, text_x, y, style.text_color)
                self.cursor.advance(style.line_height)
        self._done()

    def draw_divider(self) -> None:
        """Draw a full-width rule, taking one line height."""
        style = self.style
        geometry = self.geometry

        self.ensure_space(style.line_height)
        y = self.cursor.y
        self._line(geometry.margin, y, geometry.width - geometry.margin, y, style.rule_width, style.accent_color)
        self.cursor.advance(style.line_height)
        self._done()

    def add_space(self, height: float) -> None:
        """Move the cursor down, stopping at the bottom margin."""
        self._check_active()
        self.cursor.y = max(self.cursor.y - height, self.geometry.margin)

    def draw_block(self, block: ContentBlock) -> None:
        """Dispatch one content block to its drawing operation."""
        if isinstance(block, Heading):
            self.draw_heading(block.text, block.level)
        elif isinstance(block, SubHeading):
            self.draw_subheading(block.title, block.subtitle, block.date)
        elif isinstance(block, Paragraph):
            self.draw_paragraph(block.text, block.italic)
        elif isinstance(block, BulletList):
            self.draw_bullet_list(block.items)
        elif isinstance(block, Divider):
            self.draw_divider()
        elif isinstance(block, Spacer):
            self.add_space(block.height)
        else:
            raise TypeError(f"Unsupported content block: {type(block).__name__}")

    def finish(self) -> List[RenderCommand]:
        """End the run and return the accumulated commands."""
        self._check_active()
        self.state = FlowState.FINISHED
        return self.commands


def layout_document(
    blocks: Iterable[ContentBlock],
    geometry: PageGeometry,
    metrics: MetricsProvider,
    style: Optional[LayoutStyle] = None,
) -> List[RenderCommand]:
    """
    Lay out blocks in the given order and return the render commands.

    Args:
        blocks: Content blocks, drawn strictly in order
        geometry: Page size and margins
        metrics: Width provider
        style: Fonts and spacing (default: LayoutStyle())

    Returns:
        Commands for the whole document. Page 1 is implicit; each later page
        starts with a NewPage command. No blocks means no commands.

    Raises:
        MetricsError: If the style uses a font the provider does not know
    """
    controller = PageFlowController(geometry, metrics, style)
    for block in blocks:
        controller.draw_block(block)

    commands = controller.finish()
    log_layout_summary(controller.page_count if commands else 0, len(commands))
    return commands
