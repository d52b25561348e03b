"""
Tracking Context

Responsibilities:
- Holds users with their job applications, skills, goals and resume content
- Persists users and learning resources as JSON
- Recommends learning resources from a user's skills
- Reminds users of approaching application deadlines

Owns: Career data model, JSON persistence, recommendations, deadline reminders
Never: Lays out or renders documents
"""

from catalyst.contexts.tracking.exceptions import DataStoreError, DuplicateUserError
from catalyst.contexts.tracking.models import (
    Achievement,
    Education,
    Experience,
    Goal,
    GoalStatus,
    Job,
    JobStatus,
    ProficiencyLevel,
    Project,
    Resource,
    ResourceType,
    Resume,
    ResumeTemplate,
    Skill,
    SkillCategory,
    User,
)
from catalyst.contexts.tracking.store import CareerDataStore, create_user, hash_password

__all__ = [
    "Achievement",
    "Education",
    "Experience",
    "Goal",
    "GoalStatus",
    "Job",
    "JobStatus",
    "ProficiencyLevel",
    "Project",
    "Resource",
    "ResourceType",
    "Resume",
    "ResumeTemplate",
    "Skill",
    "SkillCategory",
    "User",
    "CareerDataStore",
    "create_user",
    "hash_password",
    "DataStoreError",
    "DuplicateUserError",
]
