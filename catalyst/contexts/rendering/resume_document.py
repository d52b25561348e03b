"""
Resume document builder.

Translates a User's resume content into the ordered content blocks consumed
by the layout engine:

    Header       name, contact line, divider
    Professional Summary
    Skills       resume-flagged skills as "Name (Level)" bullets
    Education
    Work Experience
    Projects
    Languages    comma-joined on one paragraph
    References
    Additional Information

A section is emitted only when it has content. Free text is trimmed here so
the layout engine never sees None or blank strings.
"""

from typing import List, Optional

from catalyst.contexts.layout.blocks import (
    BulletList,
    ContentBlock,
    Divider,
    Heading,
    Paragraph,
    Spacer,
    SubHeading,
)
from catalyst.contexts.tracking.models import Education, Experience, Project, User

PRESENT = "Present"

# Vertical gaps after entries, in points
HEADER_GAP = 15
EDUCATION_GAP = 5
EXPERIENCE_GAP = 10
PROJECT_GAP = 5
LANGUAGES_GAP = 10
REFERENCES_GAP = 5


def _clean(value: Optional[str]) -> Optional[str]:
    """Strip whitespace; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_all(values: List[str]) -> List[str]:
    return [cleaned for cleaned in (_clean(v) for v in values) if cleaned]


def date_range(start: Optional[str], end: Optional[str]) -> Optional[str]:
    """
    "start - end" label for an entry; a missing end date reads "Present".

    Returns None when neither date is known.
    """
    start, end = _clean(start), _clean(end)
    if start is None:
        return end
    return f"{start} - {end or PRESENT}"


def contact_line(user: User) -> str:
    parts = [f"Email: {user.email.strip()}"]
    if _clean(user.phone):
        parts.append(f"Phone: {_clean(user.phone)}")
    if _clean(user.address):
        parts.append(f"Address: {_clean(user.address)}")
    return " | ".join(parts)


def _header_blocks(user: User) -> List[ContentBlock]:
    return [
        Heading(user.full_name.strip(), level=1),
        Paragraph(contact_line(user)),
        Spacer(HEADER_GAP),
        Divider(),
    ]


def _education_blocks(entry: Education) -> List[ContentBlock]:
    blocks: List[ContentBlock] = [
        SubHeading(
            _clean(entry.degree) or "",
            _clean(entry.institution) or "",
            date_range(entry.start_date, entry.end_date),
        )
    ]
    if _clean(entry.location):
        blocks.append(Paragraph(_clean(entry.location)))
    if _clean(entry.gpa):
        blocks.append(Paragraph(f"GPA: {_clean(entry.gpa)}"))
    if _clean(entry.description):
        blocks.append(Paragraph(_clean(entry.description)))
    blocks.append(Spacer(EDUCATION_GAP))
    return blocks


def _experience_blocks(entry: Experience) -> List[ContentBlock]:
    blocks: List[ContentBlock] = [
        SubHeading(
            _clean(entry.position) or "",
            _clean(entry.company) or "",
            date_range(entry.start_date, entry.end_date),
        )
    ]
    if _clean(entry.location):
        blocks.append(Paragraph(_clean(entry.location)))
    if _clean(entry.description):
        blocks.append(Paragraph(_clean(entry.description)))
    responsibilities = _clean_all(entry.responsibilities)
    if responsibilities:
        blocks.append(BulletList(responsibilities))
    blocks.append(Spacer(EXPERIENCE_GAP))
    return blocks


def _project_blocks(entry: Project) -> List[ContentBlock]:
    timeline = date_range(entry.start_date, entry.end_date)
    blocks: List[ContentBlock] = [
        SubHeading(_clean(entry.name) or "", f"Timeline: {timeline}" if timeline else "")
    ]
    if _clean(entry.technologies):
        blocks.append(Paragraph(f"Technologies: {_clean(entry.technologies)}"))
    if _clean(entry.description):
        blocks.append(Paragraph(_clean(entry.description)))
    if _clean(entry.url):
        blocks.append(Paragraph(f"URL: {_clean(entry.url)}", italic=True))
    blocks.append(Spacer(PROJECT_GAP))
    return blocks


def build_resume_blocks(user: User) -> List[ContentBlock]:
    """
    Build the resume for a user as content blocks, in print order.

    Args:
        user: User whose profile and resume content to print

    Returns:
        Ordered content blocks ready for layout_document()
    """
    resume = user.resume
    blocks = _header_blocks(user)

    summary = _clean(resume.summary)
    if summary:
        blocks += [Heading("Professional Summary"), Paragraph(summary)]

    skills = [
        f"{skill.name.strip()} ({skill.proficiency_level})"
        for skill in user.resume_skills
        if _clean(skill.name)
    ]
    if skills:
        blocks += [Heading("Skills"), BulletList(skills)]

    if resume.education_list:
        blocks.append(Heading("Education"))
        for entry in resume.education_list:
            blocks += _education_blocks(entry)

    if resume.work_experience_list:
        blocks.append(Heading("Work Experience"))
        for entry in resume.work_experience_list:
            blocks += _experience_blocks(entry)

    if resume.projects_list:
        blocks.append(Heading("Projects"))
        for entry in resume.projects_list:
            blocks += _project_blocks(entry)

    languages = _clean_all(resume.languages)
    if languages:
        blocks += [Heading("Languages"), Paragraph(", ".join(languages)), Spacer(LANGUAGES_GAP)]

    references = _clean_all(resume.references)
    if references:
        blocks += [Heading("References"), BulletList(references), Spacer(REFERENCES_GAP)]

    additional_info = _clean(resume.additional_info)
    if additional_info:
        blocks += [Heading("Additional Information"), Paragraph(additional_info)]

    return blocks
