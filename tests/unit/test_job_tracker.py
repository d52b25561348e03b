"""Unit tests for job search and dashboard statistics."""

from datetime import date, timedelta

import pytest

from catalyst.contexts.tracking.job_tracker import (
    dashboard_summary,
    goal_progress,
    search_jobs,
    status_counts,
)
from catalyst.contexts.tracking.models import (
    Achievement,
    Goal,
    GoalStatus,
    Job,
    JobStatus,
    Skill,
    SkillCategory,
    User,
)

TODAY = date(2026, 10, 19)


@pytest.fixture
def jobs():
    return [
        Job("Acme", "Backend Engineer", "Remote", status=JobStatus.APPLIED),
        Job("Globex", "Data Analyst", "Boston, MA", status=JobStatus.SAVED),
        Job("Initech", "Frontend Engineer", "Austin, TX", status=JobStatus.APPLIED),
    ]


@pytest.mark.unit
def test_search_by_text(jobs):
    assert [j.company_name for j in search_jobs(jobs, "engineer")] == ["Acme", "Initech"]
    assert [j.company_name for j in search_jobs(jobs, "  boston ")] == ["Globex"]
    assert [j.company_name for j in search_jobs(jobs, "GLOBEX")] == ["Globex"]


@pytest.mark.unit
def test_search_by_status(jobs):
    results = search_jobs(jobs, "frontend", JobStatus.APPLIED)

    assert [j.company_name for j in results] == ["Initech"]
    assert search_jobs(jobs, status=JobStatus.REJECTED) == []


@pytest.mark.unit
def test_blank_search_returns_everything(jobs):
    assert search_jobs(jobs) == jobs


@pytest.mark.unit
def test_status_counts_include_every_status(jobs):
    counts = status_counts(jobs)

    assert list(counts) == list(JobStatus)
    assert counts[JobStatus.APPLIED] == 2
    assert counts[JobStatus.OFFER_RECEIVED] == 0


@pytest.mark.unit
def test_goal_progress():
    done = Goal("Done", status=GoalStatus.COMPLETED)

    assert goal_progress([]) == 0.0
    assert goal_progress([done, Goal("Open"), Goal("Open"), Goal("Open")]) == 0.25


@pytest.mark.unit
def test_dashboard_summary():
    soon = Job("Acme", "Engineer", application_deadline=TODAY + timedelta(days=7))
    sooner = Job("Globex", "Analyst", application_deadline=TODAY + timedelta(days=2))
    later = Job("Initech", "Engineer", application_deadline=TODAY + timedelta(days=30))
    overdue = Goal("Certify", target_date=TODAY - timedelta(days=1))
    user = User(
        "Jane Doe",
        "jane@example.com",
        job_applications=[soon, sooner, later],
        skills=[Skill("Python", category=SkillCategory.TECHNICAL), Skill("Go", category=SkillCategory.TECHNICAL)],
        achievements=[Achievement("Award")],
        goals=[overdue, Goal("Lead", short_term=False, status=GoalStatus.COMPLETED)],
    )

    summary = dashboard_summary(user, TODAY)

    assert summary.full_name == "Jane Doe"
    assert summary.total_jobs == 3
    assert summary.approaching_deadlines == [sooner, soon]
    assert summary.short_term_progress == 0.0
    assert summary.long_term_progress == 1.0
    assert summary.overdue_goals == [overdue]
    assert summary.skills_by_category[SkillCategory.TECHNICAL] == 2
    assert summary.skills_by_category[SkillCategory.SOFT] == 0
    assert summary.achievement_count == 1
