"""
Layout diagnostics for render command streams.

Replays a command list page by page and checks the placement of every text
and rule against the page geometry, producing a hierarchical diagnostics tree
(Document -> Page -> Command).

Detection capabilities:
- Content below the bottom margin (pagination failed to break)
- Content above the top margin
- Baselines moving upwards within a page (cursor went backwards)
- Empty pages (a break with nothing drawn after it)

Known limitation - horizontal overflow:
    A single word wider than the printable width is drawn unbroken and runs
    past the right margin. This is accepted behaviour of the wrapper, so it is
    reported as a warning rather than an issue and does not affect is_valid.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from catalyst.contexts.layout.metrics import MetricsProvider
from catalyst.contexts.layout.pagination import (
    DrawLine,
    DrawText,
    NewPage,
    PageGeometry,
    RenderCommand,
)

# Characters of command text quoted in messages
SNIPPET_LENGTH = 30

# Float slack when comparing positions against margins
TOLERANCE = 1e-6


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    # Page-level
    EMPTY_PAGE = "Page {page} has no content"

    # Command-level
    BELOW_MARGIN = "Page {page}: '{text}' at y={y:.2f} is below the bottom margin ({limit:.2f})"
    ABOVE_TOP = "Page {page}: '{text}' at y={y:.2f} is above the top margin ({limit:.2f})"
    MOVED_UP = "Page {page}: '{text}' at y={y:.2f} is above the previous baseline ({previous:.2f})"

    # Warnings
    PAST_RIGHT_MARGIN = "Page {page}: '{text}' extends {amount:.2f}pt past the right margin"


def _snippet(text: str) -> str:
    return text if len(text) <= SNIPPET_LENGTH else text[:SNIPPET_LENGTH] + "..."


# =============================================================================
# Diagnostics Hierarchy
# =============================================================================


@dataclass
class Diagnostics:
    """Base class for hierarchical diagnostics."""

    components: List["Diagnostics"] = field(default_factory=list)

    def get_issues(self) -> List[str]:
        """Generate issues for this level based on field values. Override in subclasses."""
        return []

    def get_warnings(self) -> List[str]:
        """Generate non-fatal warnings for this level. Override in subclasses."""
        return []

    def get_inherited_issues(self) -> List[str]:
        """Collect issues from this level and all descendants."""
        all_issues = list(self.get_issues())
        for component in self.components:
            all_issues.extend(component.get_inherited_issues())
        return all_issues

    def get_inherited_warnings(self) -> List[str]:
        """Collect warnings from this level and all descendants."""
        all_warnings = list(self.get_warnings())
        for component in self.components:
            all_warnings.extend(component.get_inherited_warnings())
        return all_warnings

    @property
    def is_valid(self) -> bool:
        """True if no issues at this level or any descendant."""
        return len(self.get_inherited_issues()) == 0


@dataclass
class CommandDiagnostics(Diagnostics):
    """Diagnostics for one DrawText or DrawLine command."""

    page_number: int = 1
    text: str = ""
    y: float = 0.0
    below_margin: bool = False
    above_top: bool = False
    previous_y: Optional[float] = None  # Set only when the baseline moved up
    overflow_amount: float = 0.0
    bottom_limit: float = 0.0
    top_limit: float = 0.0

    def get_issues(self) -> List[str]:
        issues = []
        text = _snippet(self.text)
        if self.below_margin:
            issues.append(
                IssueTemplates.BELOW_MARGIN.format(
                    page=self.page_number, text=text, y=self.y, limit=self.bottom_limit
                )
            )
        if self.above_top:
            issues.append(
                IssueTemplates.ABOVE_TOP.format(
                    page=self.page_number, text=text, y=self.y, limit=self.top_limit
                )
            )
        if self.previous_y is not None:
            issues.append(
                IssueTemplates.MOVED_UP.format(
                    page=self.page_number, text=text, y=self.y, previous=self.previous_y
                )
            )
        return issues

    def get_warnings(self) -> List[str]:
        if self.overflow_amount > TOLERANCE:
            return [
                IssueTemplates.PAST_RIGHT_MARGIN.format(
                    page=self.page_number, text=_snippet(self.text), amount=self.overflow_amount
                )
            ]
        return []


@dataclass
class PageDiagnostics(Diagnostics):
    """Diagnostics for a single page."""

    page_number: int = 1
    command_count: int = 0
    lowest_y: Optional[float] = None

    def get_issues(self) -> List[str]:
        if self.command_count == 0:
            return [IssueTemplates.EMPTY_PAGE.format(page=self.page_number)]
        return []


@dataclass
class DocumentDiagnostics(Diagnostics):
    """Top-level diagnostics for a whole command stream."""

    page_count: int = 0
    command_count: int = 0


# =============================================================================
# Main Analysis Function
# =============================================================================


def _split_pages(commands: Sequence[RenderCommand]) -> List[List[RenderCommand]]:
    """Group commands by page; NewPage commands separate the groups."""
    if not commands:
        return []
    pages: List[List[RenderCommand]] = [[]]
    for command in commands:
        if isinstance(command, NewPage):
            pages.append([])
        else:
            pages[-1].append(command)
    return pages


def analyze_layout(
    commands: Sequence[RenderCommand],
    geometry: PageGeometry,
    metrics: Optional[MetricsProvider] = None,
) -> DocumentDiagnostics:
    """
    Check every drawn command against the page geometry.

    Args:
        commands: Output of layout_document() or PageFlowController.finish()
        geometry: Geometry the commands were laid out for
        metrics: Width provider; when given, text past the right margin is
                 reported as a warning

    Returns:
        DocumentDiagnostics tree. Call .get_inherited_issues() for all issues,
        or .is_valid to check whether the layout respects its margins.
    """
    bottom_limit = geometry.margin
    top_limit = geometry.top
    right_limit = geometry.width - geometry.margin

    pages = _split_pages(commands)
    document = DocumentDiagnostics(page_count=len(pages), command_count=len(commands))

    for page_number, page_commands in enumerate(pages, start=1):
        page = PageDiagnostics(page_number=page_number, command_count=len(page_commands))
        previous_y: Optional[float] = None

        for command in page_commands:
            if isinstance(command, DrawText):
                text, y = command.text, command.y
                right_edge = command.x
                if metrics is not None:
                    right_edge += metrics.measure(command.text, command.font, command.size)
            elif isinstance(command, DrawLine):
                text, y = "<rule>", min(command.y1, command.y2)
                right_edge = max(command.x1, command.x2)
            else:
                continue

            diagnostics = CommandDiagnostics(
                page_number=page_number,
                text=text,
                y=y,
                below_margin=y < bottom_limit - TOLERANCE,
                above_top=y > top_limit + TOLERANCE,
                overflow_amount=max(0.0, right_edge - right_limit),
                bottom_limit=bottom_limit,
                top_limit=top_limit,
            )
            if previous_y is not None and y > previous_y + TOLERANCE:
                diagnostics.previous_y = previous_y

            page.components.append(diagnostics)
            previous_y = y
            page.lowest_y = y if page.lowest_y is None else min(page.lowest_y, y)

        document.components.append(page)

    return document
