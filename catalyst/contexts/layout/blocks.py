"""
Content blocks: the typed, immutable units of a document to be laid out.

Blocks are assembled by the caller (see rendering.resume_document) and
consumed once, in order, by the page flow controller. Blocks carry final text
only; substituting placeholders for missing values is the caller's job.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Heading:
    """
    Section heading.

    Attributes:
        text: Heading text
        level: 1 for the document title (name line), 2 for section headings
    """

    text: str
    level: int = 2


@dataclass(frozen=True)
class SubHeading:
    """
    Entry heading: bold title with an optional right-aligned date, subtitle below.

    Attributes:
        title: Entry title (degree, position, project name)
        subtitle: Second line (institution, company, timeline)
        date: Date range drawn right-aligned on the title baseline (None = no date)
    """

    title: str
    subtitle: str
    date: Optional[str] = None


@dataclass(frozen=True)
class Paragraph:
    """Free text wrapped to the printable width. Newlines are hard breaks."""

    text: str
    italic: bool = False


@dataclass(frozen=True)
class BulletList:
    """Ordered bullet items, each wrapped independently under its bullet."""

    items: Tuple[str, ...]

    def __post_init__(self):
        # Lists are accepted; stored as a tuple so the block stays hashable
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Divider:
    """Full-width horizontal rule."""


@dataclass(frozen=True)
class Spacer:
    """Vertical gap in points. Never starts a new page on its own."""

    height: float


ContentBlock = Union[Heading, SubHeading, Paragraph, BulletList, Divider, Spacer]
