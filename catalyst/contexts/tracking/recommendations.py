"""
Learning resource recommendations.

Keyword heuristic over the user's skills:
    1. A resource matches a skill if the skill name appears in its title or
       description, or if it fits the vocabulary of the skill's category.
    2. Completed resources are never recommended.
    3. With fewer than MIN_RECOMMENDATIONS matches, highly rated resources
       are added until the list reaches MAX_RECOMMENDATIONS.
    4. Results are ordered by rating, highest first.
"""

from typing import Iterable, List, Optional

from catalyst.contexts.tracking.logger import _log_debug
from catalyst.contexts.tracking.models import Resource, ResourceType, Skill, SkillCategory

MIN_RECOMMENDATIONS = 5
MAX_RECOMMENDATIONS = 10
POPULAR_RATING = 4.5

TECHNICAL_TYPES = (ResourceType.COURSE, ResourceType.VIDEO)
TECHNICAL_TITLE_WORDS = ("programming", "coding", "java", "algorithm")
SOFT_TITLE_WORDS = ("communication", "leadership", "team")
SOFT_DESCRIPTION_PHRASE = "soft skill"
LANGUAGE_TITLE_WORDS = ("language", "english", "spanish", "french")
DOMAIN_TITLE_WORDS = ("industry", "domain", "business")
DOMAIN_DESCRIPTION_PHRASE = "industry knowledge"


def _title(resource: Resource) -> str:
    return resource.title.lower()


def _description(resource: Resource) -> str:
    return (resource.description or "").lower()


def matches_category(resource: Resource, category: SkillCategory) -> bool:
    """True if the resource fits the vocabulary of a skill category. OTHER never matches."""
    title = _title(resource)

    if category is SkillCategory.TECHNICAL:
        return resource.type in TECHNICAL_TYPES or any(w in title for w in TECHNICAL_TITLE_WORDS)
    if category is SkillCategory.SOFT:
        return (
            any(w in title for w in SOFT_TITLE_WORDS)
            or SOFT_DESCRIPTION_PHRASE in _description(resource)
        )
    if category is SkillCategory.LANGUAGE:
        return any(w in title for w in LANGUAGE_TITLE_WORDS)
    if category is SkillCategory.DOMAIN:
        return (
            any(w in title for w in DOMAIN_TITLE_WORDS)
            or DOMAIN_DESCRIPTION_PHRASE in _description(resource)
        )
    return False


def _is_relevant(resource: Resource, skill: Skill) -> bool:
    name = skill.name.lower()
    if name and (name in _title(resource) or name in _description(resource)):
        return True
    # Domain vocabulary is only used for filtering, not for matching skills
    if skill.category is SkillCategory.DOMAIN:
        return False
    return matches_category(resource, skill.category)


def recommend_resources(skills: Iterable[Skill], resources: Iterable[Resource]) -> List[Resource]:
    """
    Recommend resources for a set of skills.

    Args:
        skills: The user's skills
        resources: All available resources

    Returns:
        Matching resources (no duplicates), highest rating first
    """
    skills = list(skills)
    resources = list(resources)

    recommended: List[Resource] = []
    seen = set()
    for skill in skills:
        for resource in resources:
            if resource.completed or resource.id in seen:
                continue
            if _is_relevant(resource, skill):
                recommended.append(resource)
                seen.add(resource.id)

    matched = len(recommended)
    if len(recommended) < MIN_RECOMMENDATIONS:
        for resource in resources:
            if resource.completed or resource.id in seen or resource.rating < POPULAR_RATING:
                continue
            recommended.append(resource)
            seen.add(resource.id)
            if len(recommended) >= MAX_RECOMMENDATIONS:
                break

    _log_debug(
        f"Recommendations: {matched} skill match(es), "
        f"{len(recommended) - matched} popular top-up(s)"
    )
    return sorted(recommended, key=lambda r: r.rating, reverse=True)


def filter_by_category(
    resources: Iterable[Resource], category: Optional[SkillCategory]
) -> List[Resource]:
    """Keep resources that fit a skill category; None keeps everything."""
    if category is None:
        return list(resources)
    return [resource for resource in resources if matches_category(resource, category)]
