"""
Career Tracking Data Structures

Defines the user profile and everything hanging off it: job applications,
skills, achievements, goals, learning resources and the resume content that
the Rendering context turns into a PDF.

Enums store their display name as the value and are persisted by member name
(e.g., Job status OFFER_RECEIVED is shown as "Offer Received").
"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from catalyst.utils.timestamp import format_display_date

DEADLINE_WINDOW_DAYS = 10
MAX_RATING = 5.0


def new_id() -> str:
    return str(uuid.uuid4())


class DisplayEnum(Enum):
    """Enum whose value is the human-readable label."""

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class JobStatus(DisplayEnum):
    SAVED = "Saved"
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER_RECEIVED = "Offer Received"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"


class ProficiencyLevel(DisplayEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SkillCategory(DisplayEnum):
    TECHNICAL = "Technical"
    SOFT = "Soft"
    LANGUAGE = "Language"
    DOMAIN = "Domain Knowledge"
    OTHER = "Other"


class GoalStatus(DisplayEnum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DEFERRED = "Deferred"


class AchievementType(DisplayEnum):
    PROFESSIONAL = "Professional"
    ACADEMIC = "Academic"
    PERSONAL = "Personal"
    CERTIFICATION = "Certification"
    AWARD = "Award"
    OTHER = "Other"


class ResourceType(DisplayEnum):
    COURSE = "Course"
    BOOK = "Book"
    WEBSITE = "Website"
    VIDEO = "Video"
    PODCAST = "Podcast"
    ARTICLE = "Article"
    OTHER = "Other"


class ResumeTemplate(DisplayEnum):
    PROFESSIONAL = "Professional"
    CREATIVE = "Creative"
    MINIMALIST = "Minimalist"
    ACADEMIC = "Academic"
    TECHNICAL = "Technical"


# =============================================================================
# Tracked items
# =============================================================================


@dataclass
class Job:
    """
    A job application being tracked.

    Attributes:
        company_name: Employer name
        position: Job title
        location: Office location or "Remote"
        application_deadline: Last day to apply (None if unknown)
        status: Where the application stands
        date_added: Day the job was saved
        last_updated: Day of the last status change
    """

    company_name: str
    position: str
    location: str = ""
    application_deadline: Optional[date] = None
    status: JobStatus = JobStatus.SAVED
    id: str = field(default_factory=new_id)
    description: Optional[str] = None
    url: Optional[str] = None
    salary: float = 0.0
    date_added: date = field(default_factory=date.today)
    last_updated: date = field(default_factory=date.today)
    notes: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

    def is_deadline_approaching(
        self, today: Optional[date] = None, window_days: int = DEADLINE_WINDOW_DAYS
    ) -> bool:
        """True if the deadline falls between today and today + window_days (inclusive)."""
        if self.application_deadline is None:
            return False
        today = today or date.today()
        days_left = (self.application_deadline - today).days
        return 0 <= days_left <= window_days

    def update_status(self, status: JobStatus, today: Optional[date] = None) -> None:
        self.status = status
        self.last_updated = today or date.today()

    @property
    def formatted_deadline(self) -> str:
        return format_display_date(self.application_deadline, default="Not specified")

    def __str__(self) -> str:
        return f"{self.position} at {self.company_name}"


@dataclass
class Skill:
    name: str
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    category: SkillCategory = SkillCategory.OTHER
    id: str = field(default_factory=new_id)
    description: Optional[str] = None
    include_in_resume: bool = True

    @property
    def proficiency_value(self) -> int:
        """Numeric level from 1 (Beginner) to 4 (Expert)."""
        return list(ProficiencyLevel).index(self.proficiency_level) + 1


@dataclass
class Achievement:
    title: str
    description: Optional[str] = None
    date: date = field(default_factory=date.today)
    type: AchievementType = AchievementType.PROFESSIONAL
    id: str = field(default_factory=new_id)
    include_in_resume: bool = True


@dataclass
class Goal:
    """
    A short- or long-term career goal.

    Setting status to COMPLETED through set_status() stamps completion_date
    the first time; other statuses leave it untouched.
    """

    title: str
    description: Optional[str] = None
    short_term: bool = True
    target_date: Optional[date] = None
    status: GoalStatus = GoalStatus.NOT_STARTED
    id: str = field(default_factory=new_id)
    completion_date: Optional[date] = None
    action_plan: Optional[str] = None

    def set_status(self, status: GoalStatus, today: Optional[date] = None) -> None:
        self.status = status
        if status is GoalStatus.COMPLETED and self.completion_date is None:
            self.completion_date = today or date.today()

    @property
    def is_completed(self) -> bool:
        return self.status is GoalStatus.COMPLETED

    def is_overdue(self, today: Optional[date] = None) -> bool:
        """True if the target date has passed and the goal is not completed."""
        if self.target_date is None or self.is_completed:
            return False
        return self.target_date < (today or date.today())

    @property
    def term_type(self) -> str:
        return "Short-term" if self.short_term else "Long-term"

    def __str__(self) -> str:
        return f"{self.title} ({self.term_type})"


@dataclass
class Resource:
    """
    A learning resource (course, book, video, ...).

    Rating is kept within 0-5; out-of-range values are clamped on assignment.
    """

    title: str
    type: ResourceType = ResourceType.OTHER
    rating: float = 0.0
    description: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    provider: Optional[str] = None
    completed: bool = False
    notes: Optional[str] = None
    id: str = field(default_factory=new_id)

    def __setattr__(self, name, value):
        if name == "rating":
            value = min(max(float(value), 0.0), MAX_RATING)
        super().__setattr__(name, value)

    @property
    def star_rating(self) -> str:
        """Five-star string, e.g. 3.7 -> "★★★☆☆"."""
        full = int(math.floor(self.rating))
        return "★" * full + "☆" * (int(MAX_RATING) - full)


# =============================================================================
# Resume content
# =============================================================================


@dataclass
class Education:
    degree: str
    institution: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    gpa: Optional[str] = None


@dataclass
class Experience:
    position: str
    company: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    responsibilities: List[str] = field(default_factory=list)


@dataclass
class Project:
    name: str
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    technologies: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Resume:
    """
    Resume content for one user.

    Dates on education, experience and project entries are free text
    (e.g., "Sep 2014") and printed as entered.
    """

    title: str = "My Resume"
    template: ResumeTemplate = ResumeTemplate.PROFESSIONAL
    id: str = field(default_factory=new_id)
    summary: Optional[str] = None
    education_list: List[Education] = field(default_factory=list)
    work_experience_list: List[Experience] = field(default_factory=list)
    projects_list: List[Project] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    additional_info: Optional[str] = None


@dataclass
class User:
    """
    A CareerCatalyst user and everything they track.

    Attributes:
        full_name: Display name printed at the top of the resume
        email: Login identifier (matched case-insensitively)
        password_hash: SHA-256 hex digest of the password
        goals: Short- and long-term goals in one list (see Goal.short_term)
    """

    full_name: str
    email: str
    password_hash: str = ""
    id: str = field(default_factory=new_id)
    phone: Optional[str] = None
    address: Optional[str] = None
    job_applications: List[Job] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    achievements: List[Achievement] = field(default_factory=list)
    goals: List[Goal] = field(default_factory=list)
    resume: Resume = field(default_factory=Resume)

    @property
    def short_term_goals(self) -> List[Goal]:
        return [goal for goal in self.goals if goal.short_term]

    @property
    def long_term_goals(self) -> List[Goal]:
        return [goal for goal in self.goals if not goal.short_term]

    @property
    def resume_skills(self) -> List[Skill]:
        return [skill for skill in self.skills if skill.include_in_resume]

    def find_job(self, job_id: str) -> Optional[Job]:
        return next((job for job in self.job_applications if job.id == job_id), None)
