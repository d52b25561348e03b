"""
Application deadline reminders.

DeadlineNotifier polls the current user's job applications on a daemon
timer (hourly by default) and reports every job whose deadline falls within
the reminder window. A job is reported once; clear_notified() forgets which
jobs were already reported.

Usage:
    notifier = DeadlineNotifier(
        user_provider=lambda: store.current_user,
        notify=lambda message, jobs: print(message),
    )
    notifier.start()
"""

import threading
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from catalyst.contexts.tracking.logger import _log_debug, _log_info, log_deadline_check
from catalyst.contexts.tracking.models import DEADLINE_WINDOW_DAYS, Job, User
from catalyst.utils.event_logging import log_event

TEMPLATES_PATH = Path(__file__).parent / "templates"
REMINDER_TEMPLATE = "deadline_reminder.txt.jinja"
DEFAULT_INTERVAL_S = 3600.0

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def find_approaching_deadlines(
    jobs: Iterable[Job], today: Optional[date] = None, window_days: int = DEADLINE_WINDOW_DAYS
) -> List[Job]:
    """Jobs whose deadline is between today and today + window_days, soonest first."""
    today = today or date.today()
    approaching = [job for job in jobs if job.is_deadline_approaching(today, window_days)]
    return sorted(approaching, key=lambda job: job.application_deadline)


def render_reminder(jobs: List[Job], window_days: int = DEADLINE_WINDOW_DAYS) -> str:
    """Render the reminder message for a list of jobs."""
    template = _env.get_template(REMINDER_TEMPLATE)
    return template.render(jobs=jobs, window_days=window_days)


class DeadlineNotifier:
    """
    Periodic deadline checker.

    Args:
        user_provider: Returns the logged-in user, or None when nobody is logged in
        notify: Called with (message, jobs) whenever new deadlines are found
        interval_s: Seconds between checks (default: one hour)
        window_days: Reminder window in days (default: 10)
    """

    def __init__(
        self,
        user_provider: Callable[[], Optional[User]],
        notify: Callable[[str, List[Job]], None],
        interval_s: float = DEFAULT_INTERVAL_S,
        window_days: int = DEADLINE_WINDOW_DAYS,
    ):
        self.user_provider = user_provider
        self.notify = notify
        self.interval_s = interval_s
        self.window_days = window_days

        self._notified: Set[str] = set()
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def check_deadlines(self, today: Optional[date] = None) -> List[Job]:
        """
        Run one check now.

        Returns:
            Jobs reported by this check (empty if none were new)
        """
        user = self.user_provider()
        if user is None:
            return []

        approaching = find_approaching_deadlines(user.job_applications, today, self.window_days)
        with self._lock:
            new_jobs = [job for job in approaching if job.id not in self._notified]
            self._notified.update(job.id for job in new_jobs)

        log_deadline_check(user.email, len(approaching), len(new_jobs))
        if not new_jobs:
            return []

        self.notify(render_reminder(new_jobs, self.window_days), new_jobs)
        log_event(
            event_type="deadline_reminder",
            subject=user.email,
            source="tracking",
            job_ids=[job.id for job in new_jobs],
            deadlines=[job.application_deadline for job in new_jobs],
        )
        return new_jobs

    def clear_notified(self) -> None:
        with self._lock:
            self._notified.clear()

    def start(self) -> None:
        """Check immediately, then every interval_s seconds on a daemon thread."""
        if self._running:
            return
        self._running = True
        _log_info(f"Deadline notifier started (every {self.interval_s:g}s)")
        self._schedule(0)

    def stop(self) -> None:
        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        _log_debug("Deadline notifier stopped")

    def _schedule(self, delay: float) -> None:
        self._timer = threading.Timer(delay, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        if not self._running:
            return
        try:
            self.check_deadlines()
        finally:
            if self._running:
                self._schedule(self.interval_s)
