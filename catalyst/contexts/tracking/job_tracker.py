"""
Job application search and dashboard statistics.

Pure functions over the tracking models; nothing here reads or writes files.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from catalyst.contexts.tracking.models import Goal, Job, JobStatus, SkillCategory, User


def search_jobs(
    jobs: Iterable[Job], text: str = "", status: Optional[JobStatus] = None
) -> List[Job]:
    """
    Filter job applications.

    Args:
        jobs: Applications to search
        text: Case-insensitive text matched against position, company and location
              (blank matches everything)
        status: Keep only applications with this status (optional)

    Returns:
        Matching jobs in their original order
    """
    needle = text.strip().lower()
    results = []
    for job in jobs:
        if status is not None and job.status is not status:
            continue
        if needle and not any(
            needle in (value or "").lower() for value in (job.position, job.company_name, job.location)
        ):
            continue
        results.append(job)
    return results


def status_counts(jobs: Iterable[Job]) -> Dict[JobStatus, int]:
    """Number of applications per status, with every status present."""
    counts = Counter(job.status for job in jobs)
    return {status: counts.get(status, 0) for status in JobStatus}


def goal_progress(goals: Iterable[Goal]) -> float:
    """Fraction of goals completed (0.0 when there are no goals)."""
    goals = list(goals)
    if not goals:
        return 0.0
    return sum(1 for goal in goals if goal.is_completed) / len(goals)


@dataclass
class DashboardSummary:
    """
    Snapshot of a user's progress.

    Attributes:
        full_name: User display name
        job_counts: Applications per status
        approaching_deadlines: Jobs whose deadline is within the reminder window
        short_term_progress: Completed fraction of short-term goals
        long_term_progress: Completed fraction of long-term goals
        overdue_goals: Goals past their target date and not completed
        skills_by_category: Number of skills per category
        achievement_count: Number of recorded achievements
    """

    full_name: str
    job_counts: Dict[JobStatus, int] = field(default_factory=dict)
    approaching_deadlines: List[Job] = field(default_factory=list)
    short_term_progress: float = 0.0
    long_term_progress: float = 0.0
    overdue_goals: List[Goal] = field(default_factory=list)
    skills_by_category: Dict[SkillCategory, int] = field(default_factory=dict)
    achievement_count: int = 0

    @property
    def total_jobs(self) -> int:
        return sum(self.job_counts.values())


def dashboard_summary(user: User, today: Optional[date] = None) -> DashboardSummary:
    today = today or date.today()
    skill_counts = Counter(skill.category for skill in user.skills)

    return DashboardSummary(
        full_name=user.full_name,
        job_counts=status_counts(user.job_applications),
        approaching_deadlines=sorted(
            (job for job in user.job_applications if job.is_deadline_approaching(today)),
            key=lambda job: job.application_deadline,
        ),
        short_term_progress=goal_progress(user.short_term_goals),
        long_term_progress=goal_progress(user.long_term_goals),
        overdue_goals=[goal for goal in user.goals if goal.is_overdue(today)],
        skills_by_category={category: skill_counts.get(category, 0) for category in SkillCategory},
        achievement_count=len(user.achievements),
    )
