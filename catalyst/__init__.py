"""
CareerCatalyst - career management toolkit with a paginated resume layout engine

Tracks job applications, skills, goals and learning resources, and exports
resumes to PDF through a deterministic text layout engine.

Architecture:
- Layout Context: Line wrapping, pagination and layout diagnostics
- Rendering Context: Resume document assembly and PDF output
- Tracking Context: Career data model, JSON storage, recommendations and reminders
"""

__version__ = "0.1.0"
