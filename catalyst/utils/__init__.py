"""
Shared utilities for CareerCatalyst.

Common functionality used across contexts:
- Logging setup and pipeline events
- Timestamps
- Text report formatting
- PDF inspection
"""

from catalyst.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
