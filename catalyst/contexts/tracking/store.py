"""
Career Data Store

JSON persistence for users and learning resources.

Files (under CATALYST_DATA_PATH, default ./data):
    users.json      Array of user records with nested jobs, skills, goals and resume
    resources.json  Array of learning resources shared by all users

Records use camelCase keys. Older files are read with these compatibility rules:
    - firstName/lastName without fullName are joined into the full name
    - integer ids are kept as strings; missing ids get a fresh UUID
    - a plaintext "password" is hashed and written back as "passwordHash"
    - split shortTermGoals/longTermGoals arrays merge into one goal list
    - deadlines stored as date-times keep only their date
    - missing collections load as empty lists
    - unknown enum names fall back to each field's default

Usage:
    from catalyst.contexts.tracking.store import CareerDataStore, create_user

    store = CareerDataStore()
    store.add_user(create_user("Jane Doe", "jane@example.com", "secret"))
    user = store.authenticate("jane@example.com", "secret")
"""

import hashlib
import json
import os
import shutil
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from dotenv import load_dotenv

from catalyst.contexts.tracking.exceptions import DataStoreError, DuplicateUserError
from catalyst.contexts.tracking.logger import _log_debug, _log_info, _log_warning, log_store_loaded
from catalyst.contexts.tracking.models import (
    Achievement,
    AchievementType,
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
    new_id,
)
from catalyst.utils.event_logging import log_event

load_dotenv()
DATA_PATH = Path(os.getenv("CATALYST_DATA_PATH", "data"))

USERS_FILE = "users.json"
RESOURCES_FILE = "resources.json"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo123"

E = TypeVar("E")


def hash_password(password: str) -> str:
    """SHA-256 hex digest of a password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def create_user(full_name: str, email: str, password: str, **fields) -> User:
    """Build a new User with a hashed password."""
    return User(full_name=full_name, email=email, password_hash=hash_password(password), **fields)


# =============================================================================
# Field readers
# =============================================================================


def _enum(enum_cls: Type[E], name: Optional[str], default: E) -> E:
    """Look up an enum member by name, falling back to default."""
    if not name:
        return default
    try:
        return enum_cls[str(name).upper()]
    except KeyError:
        return default


def _date(value: Optional[str]) -> Optional[date]:
    """Parse YYYY-MM-DD, ignoring any time part."""
    if not value:
        return None
    return date.fromisoformat(str(value)[:10])


def _id(value: Any) -> str:
    return str(value) if value not in (None, "") else new_id()


def _date_str(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _compact(record: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in record.items() if value is not None}


# =============================================================================
# Parsing (JSON -> models)
# =============================================================================


def _parse_job(data: Dict[str, Any]) -> Job:
    return Job(
        id=_id(data.get("id")),
        company_name=data.get("companyName", ""),
        position=data.get("position", ""),
        location=data.get("location") or "",
        description=data.get("description"),
        url=data.get("url"),
        salary=float(data.get("salary") or 0.0),
        status=_enum(JobStatus, data.get("status"), JobStatus.SAVED),
        date_added=_date(data.get("dateAdded")) or date.today(),
        application_deadline=_date(data.get("applicationDeadline")),
        last_updated=_date(data.get("lastUpdated")) or date.today(),
        notes=data.get("notes"),
        contact_name=data.get("contactName"),
        contact_email=data.get("contactEmail"),
        contact_phone=data.get("contactPhone"),
    )


def _parse_skill(data: Dict[str, Any]) -> Skill:
    return Skill(
        id=_id(data.get("id")),
        name=data.get("name", ""),
        proficiency_level=_enum(
            ProficiencyLevel, data.get("proficiencyLevel"), ProficiencyLevel.BEGINNER
        ),
        category=_enum(SkillCategory, data.get("category"), SkillCategory.OTHER),
        description=data.get("description"),
        include_in_resume=data.get("includeInResume", True),
    )


def _parse_achievement(data: Dict[str, Any]) -> Achievement:
    return Achievement(
        id=_id(data.get("id")),
        title=data.get("title", ""),
        description=data.get("description"),
        date=_date(data.get("date")) or date.today(),
        type=_enum(AchievementType, data.get("type"), AchievementType.PROFESSIONAL),
        include_in_resume=data.get("includeInResume", True),
    )


def _parse_goal(data: Dict[str, Any], short_term: Optional[bool] = None) -> Goal:
    if short_term is None:
        short_term = data.get("shortTerm", True)
    return Goal(
        id=_id(data.get("id")),
        title=data.get("title", ""),
        description=data.get("description"),
        short_term=short_term,
        status=_enum(GoalStatus, data.get("status"), GoalStatus.NOT_STARTED),
        target_date=_date(data.get("targetDate")),
        completion_date=_date(data.get("completionDate")),
        action_plan=data.get("actionPlan"),
    )


def _parse_goals(data: Dict[str, Any]) -> List[Goal]:
    if "goals" in data:
        return [_parse_goal(goal) for goal in data["goals"]]

    # Legacy layout: goals split by term, each list authoritative for its term
    goals = [_parse_goal(goal, short_term=True) for goal in data.get("shortTermGoals", [])]
    goals += [_parse_goal(goal, short_term=False) for goal in data.get("longTermGoals", [])]
    return goals


def _parse_resume(data: Optional[Dict[str, Any]]) -> Resume:
    if not data:
        return Resume()
    return Resume(
        id=_id(data.get("id")),
        title=data.get("title") or "My Resume",
        template=_enum(ResumeTemplate, data.get("template"), ResumeTemplate.PROFESSIONAL),
        summary=data.get("summary"),
        education_list=[
            Education(
                degree=entry.get("degree", ""),
                institution=entry.get("institution", ""),
                location=entry.get("location"),
                start_date=entry.get("startDate"),
                end_date=entry.get("endDate"),
                description=entry.get("description"),
                gpa=entry.get("gpa"),
            )
            for entry in data.get("educationList", [])
        ],
        work_experience_list=[
            Experience(
                position=entry.get("position", ""),
                company=entry.get("company", ""),
                location=entry.get("location"),
                start_date=entry.get("startDate"),
                end_date=entry.get("endDate"),
                description=entry.get("description"),
                responsibilities=list(entry.get("responsibilities", [])),
            )
            for entry in data.get("workExperienceList", [])
        ],
        projects_list=[
            Project(
                name=entry.get("name", ""),
                description=entry.get("description"),
                start_date=entry.get("startDate"),
                end_date=entry.get("endDate"),
                technologies=entry.get("technologies"),
                url=entry.get("url"),
            )
            for entry in data.get("projectsList", [])
        ],
        languages=list(data.get("languages", [])),
        references=list(data.get("references", [])),
        additional_info=data.get("additionalInfo"),
    )


def parse_user(data: Dict[str, Any]) -> User:
    """Build a User from a users.json record, applying compatibility rules."""
    full_name = data.get("fullName")
    if not full_name:
        full_name = " ".join(
            part for part in (data.get("firstName"), data.get("lastName")) if part
        )

    password_hash = data.get("passwordHash")
    if not password_hash and data.get("password"):
        password_hash = hash_password(data["password"])

    return User(
        id=_id(data.get("id")),
        full_name=full_name,
        email=data["email"],
        password_hash=password_hash or "",
        phone=data.get("phone"),
        address=data.get("address"),
        job_applications=[_parse_job(job) for job in data.get("jobApplications", [])],
        skills=[_parse_skill(skill) for skill in data.get("skills", [])],
        achievements=[_parse_achievement(a) for a in data.get("achievements", [])],
        goals=_parse_goals(data),
        resume=_parse_resume(data.get("resume")),
    )


def parse_resource(data: Dict[str, Any]) -> Resource:
    return Resource(
        id=_id(data.get("id")),
        title=data.get("title", ""),
        description=data.get("description"),
        type=_enum(ResourceType, data.get("type"), ResourceType.OTHER),
        url=data.get("url"),
        author=data.get("author"),
        provider=data.get("provider"),
        rating=float(data.get("rating") or 0.0),
        completed=bool(data.get("completed", False)),
        notes=data.get("notes"),
    )


# =============================================================================
# Serialization (models -> JSON)
# =============================================================================


def _job_to_dict(job: Job) -> Dict[str, Any]:
    return _compact(
        {
            "id": job.id,
            "companyName": job.company_name,
            "position": job.position,
            "location": job.location,
            "description": job.description,
            "url": job.url,
            "salary": job.salary if job.salary > 0 else None,
            "status": job.status.name,
            "dateAdded": _date_str(job.date_added),
            "applicationDeadline": _date_str(job.application_deadline),
            "lastUpdated": _date_str(job.last_updated),
            "notes": job.notes,
            "contactName": job.contact_name,
            "contactEmail": job.contact_email,
            "contactPhone": job.contact_phone,
        }
    )


def _goal_to_dict(goal: Goal) -> Dict[str, Any]:
    return _compact(
        {
            "id": goal.id,
            "title": goal.title,
            "description": goal.description,
            "shortTerm": goal.short_term,
            "status": goal.status.name,
            "targetDate": _date_str(goal.target_date),
            "completionDate": _date_str(goal.completion_date),
            "actionPlan": goal.action_plan,
        }
    )


def _resume_to_dict(resume: Resume) -> Dict[str, Any]:
    return _compact(
        {
            "id": resume.id,
            "title": resume.title,
            "template": resume.template.name,
            "summary": resume.summary,
            "educationList": [
                _compact(
                    {
                        "degree": e.degree,
                        "institution": e.institution,
                        "location": e.location,
                        "startDate": e.start_date,
                        "endDate": e.end_date,
                        "description": e.description,
                        "gpa": e.gpa,
                    }
                )
                for e in resume.education_list
            ],
            "workExperienceList": [
                _compact(
                    {
                        "position": e.position,
                        "company": e.company,
                        "location": e.location,
                        "startDate": e.start_date,
                        "endDate": e.end_date,
                        "description": e.description,
                        "responsibilities": list(e.responsibilities),
                    }
                )
                for e in resume.work_experience_list
            ],
            "projectsList": [
                _compact(
                    {
                        "name": p.name,
                        "description": p.description,
                        "startDate": p.start_date,
                        "endDate": p.end_date,
                        "technologies": p.technologies,
                        "url": p.url,
                    }
                )
                for p in resume.projects_list
            ],
            "languages": list(resume.languages),
            "references": list(resume.references),
            "additionalInfo": resume.additional_info,
        }
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialize a User to its users.json record."""
    return _compact(
        {
            "id": user.id,
            "fullName": user.full_name,
            "email": user.email,
            "passwordHash": user.password_hash,
            "phone": user.phone,
            "address": user.address,
            "jobApplications": [_job_to_dict(job) for job in user.job_applications],
            "skills": [
                _compact(
                    {
                        "id": s.id,
                        "name": s.name,
                        "proficiencyLevel": s.proficiency_level.name,
                        "category": s.category.name,
                        "description": s.description,
                        "includeInResume": s.include_in_resume,
                    }
                )
                for s in user.skills
            ],
            "achievements": [
                _compact(
                    {
                        "id": a.id,
                        "title": a.title,
                        "description": a.description,
                        "date": _date_str(a.date),
                        "type": a.type.name,
                        "includeInResume": a.include_in_resume,
                    }
                )
                for a in user.achievements
            ],
            "goals": [_goal_to_dict(goal) for goal in user.goals],
            "resume": _resume_to_dict(user.resume),
        }
    )


def resource_to_dict(resource: Resource) -> Dict[str, Any]:
    return _compact(
        {
            "id": resource.id,
            "title": resource.title,
            "description": resource.description,
            "type": resource.type.name,
            "url": resource.url,
            "author": resource.author,
            "provider": resource.provider,
            "rating": resource.rating,
            "completed": resource.completed,
            "notes": resource.notes,
        }
    )


# =============================================================================
# Store
# =============================================================================


def _read_json_array(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise DataStoreError(f"Not UTF-8 text: {e}", path) from e
    except json.JSONDecodeError as e:
        raise DataStoreError(f"Malformed JSON: {e}", path) from e
    if not isinstance(data, list):
        raise DataStoreError("Expected a JSON array at top level", path)
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise DataStoreError(f"Record {index} is not a JSON object", path)
    return data


def _write_json_array(path: Path, records: List[Dict[str, Any]]) -> None:
    """Write records to a temp file first, then move it over the existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=path.parent, text=True)
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
        shutil.move(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


class CareerDataStore:
    """
    In-memory users and resources backed by two JSON files.

    Loads on construction. Every mutating call saves the affected file.

    Args:
        data_dir: Directory holding users.json and resources.json
                  (default: CATALYST_DATA_PATH or ./data)

    Raises:
        DataStoreError: If a data file exists but cannot be parsed
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_PATH
        self.users: List[User] = []
        self.resources: List[Resource] = []
        self.current_user: Optional[User] = None
        self.load()

    @property
    def users_file(self) -> Path:
        return self.data_dir / USERS_FILE

    @property
    def resources_file(self) -> Path:
        return self.data_dir / RESOURCES_FILE

    def load(self) -> None:
        """
        (Re)load both files. Missing files load as empty.

        The current user, if any, is replaced by its reloaded record (or None
        if the email no longer exists).
        """
        users = []
        for record in _read_json_array(self.users_file):
            try:
                users.append(parse_user(record))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise DataStoreError(f"Invalid user record: {e!r}", self.users_file) from e

        resources = []
        for record in _read_json_array(self.resources_file):
            try:
                resources.append(parse_resource(record))
            except (AttributeError, TypeError, ValueError) as e:
                raise DataStoreError(
                    f"Invalid resource record: {e!r}", self.resources_file
                ) from e

        self.users = users
        self.resources = resources
        if self.current_user is not None:
            self.current_user = self.get_user(self.current_user.email)
        log_store_loaded(self.data_dir, len(users), len(resources))

    def save(self) -> None:
        self.save_users()
        self.save_resources()

    def save_users(self) -> None:
        _write_json_array(self.users_file, [user_to_dict(user) for user in self.users])
        _log_debug(f"Saved {len(self.users)} user(s) to {self.users_file}")

    def save_resources(self) -> None:
        _write_json_array(
            self.resources_file, [resource_to_dict(resource) for resource in self.resources]
        )
        _log_debug(f"Saved {len(self.resources)} resource(s) to {self.resources_file}")

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def get_user(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        email = email.strip().lower()
        return next((user for user in self.users if user.email.lower() == email), None)

    def user_exists(self, email: str) -> bool:
        return self.get_user(email) is not None

    def add_user(self, user: User) -> None:
        """
        Register a user and save users.json.

        Raises:
            DuplicateUserError: If the email is already registered
        """
        if self.user_exists(user.email):
            raise DuplicateUserError(user.email)
        self.users.append(user)
        self.save_users()
        _log_info(f"Registered user {user.email}")
        log_event(event_type="user_registered", subject=user.email, source="tracking")

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """
        Check credentials and make the user current on success.

        Returns:
            The matching User, or None if the email is unknown or the password is wrong
        """
        user = self.get_user(email)
        if user is None or user.password_hash != hash_password(password):
            _log_debug(f"Authentication failed for {email}")
            return None
        self.current_user = user
        return user

    def demo_user(self, today: Optional[date] = None) -> User:
        """Return the demo account, creating it with sample data on first use."""
        existing = self.get_user(DEMO_EMAIL)
        if existing is not None:
            return existing

        user = build_demo_user(today or date.today())
        self.add_user(user)
        return user

    # -------------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------------

    def add_resource(self, resource: Resource) -> None:
        self.resources.append(resource)
        self.save_resources()

    def remove_resource(self, resource_id: str) -> bool:
        """Remove a resource by id. Returns False if no resource had that id."""
        remaining = [r for r in self.resources if r.id != resource_id]
        if len(remaining) == len(self.resources):
            _log_warning(f"No resource with id {resource_id}")
            return False
        self.resources = remaining
        self.save_resources()
        return True


def build_demo_user(today: date) -> User:
    """Sample profile used by the demo account."""
    user = create_user("Demo User", DEMO_EMAIL, DEMO_PASSWORD)

    user.skills = [
        Skill(
            "Java Programming", ProficiencyLevel.ADVANCED, SkillCategory.TECHNICAL,
            description="Proficient in Java SE and Java EE development",
        ),
        Skill(
            "JavaFX", ProficiencyLevel.INTERMEDIATE, SkillCategory.TECHNICAL,
            description="Experience with JavaFX UI development",
        ),
        Skill(
            "Communication", ProficiencyLevel.ADVANCED, SkillCategory.SOFT,
            description="Strong verbal and written communication skills",
        ),
    ]
    user.achievements = [
        Achievement(
            "Java Developer Certification",
            "Oracle Certified Professional Java SE 8 Programmer",
            today - timedelta(days=182),
            AchievementType.CERTIFICATION,
        ),
        Achievement(
            "Team Lead Award",
            "Recognized for leadership in project delivery",
            today - timedelta(days=61),
            AchievementType.PROFESSIONAL,
        ),
    ]
    user.goals = [
        Goal(
            "Learn Spring Boot",
            "Complete Spring Boot course and build a sample application",
            short_term=True,
            target_date=today + timedelta(days=61),
            status=GoalStatus.IN_PROGRESS,
        ),
        Goal(
            "Become a Senior Developer",
            "Advance to a senior developer position",
            short_term=False,
            target_date=today + timedelta(days=730),
        ),
    ]
    user.job_applications = [
        Job(
            "ABC Tech Solutions",
            "Senior Java Developer",
            "New York, NY",
            application_deadline=today + timedelta(days=14),
            status=JobStatus.APPLIED,
            url="https://abctech.example.com/jobs/123",
            salary=95000.0,
            description="Senior Java Developer position with focus on enterprise applications",
            date_added=today,
            last_updated=today,
        )
    ]

    resume = user.resume
    resume.title = "Java Developer Resume"
    resume.summary = (
        "Experienced Java developer with expertise in JavaFX and desktop application "
        "development. Strong problem-solving skills and team collaboration experience."
    )
    resume.education_list.append(
        Education(
            "Bachelor of Science in Computer Science",
            "University of Technology",
            location="Boston, MA",
            start_date="Sep 2014",
            end_date="May 2018",
            gpa="3.8",
        )
    )
    resume.work_experience_list.append(
        Experience(
            "Java Developer",
            "Tech Innovations Inc.",
            location="Boston, MA",
            start_date="Jun 2018",
            end_date="Present",
            description="Developing enterprise Java applications",
            responsibilities=[
                "Designed and implemented Java desktop applications",
                "Collaborated with cross-functional teams to deliver high-quality software",
                "Mentored junior developers on Java best practices",
            ],
        )
    )
    resume.projects_list.append(
        Project(
            "Inventory Management System",
            description="A JavaFX-based inventory management system for retail businesses",
            start_date="Jan 2020",
            end_date="Apr 2020",
            technologies="Java, JavaFX, MySQL, Maven",
        )
    )
    resume.languages = ["English (Native)", "Spanish (Intermediate)"]
    return user
