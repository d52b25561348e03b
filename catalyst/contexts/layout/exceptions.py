"""Custom exceptions for the layout context."""

from typing import Optional


class MetricsError(ValueError):
    """
    Raised when text cannot be measured for a font/size combination.

    Always raised before layout emits any command, so a failed render never
    leaves a partial command list behind.

    Attributes:
        font: Font name that failed to resolve
        size: Requested point size
    """

    def __init__(self, message: str, font: Optional[str] = None, size: Optional[float] = None):
        self.message = message
        self.font = font
        self.size = size

        parts = [message]
        if font is not None:
            parts.append(f"Font: {font}")
        if size is not None:
            parts.append(f"Size: {size}")

        super().__init__("\n".join(parts))


class LayoutError(RuntimeError):
    """Raised when a page flow controller is used after it has finished."""
