"""Location and tag filters applied before query matching."""

from dataclasses import dataclass, field

from .models import Skill


@dataclass
class SearchFilters:
    """Filter selections for skills.

    Empty selections are no-ops. Across fields the relation is AND;
    within a field a skill needs any one of the selected values.
    """

    locations: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return bool(self.locations or self.tags)

    def accepts(self, skill: Skill) -> bool:
        """Check if a skill passes every active filter."""
        if self.locations:
            selected = {location.lower() for location in self.locations}
            if skill.location.lower() not in selected:
                return False

        if self.tags:
            skill_tags = {tag.lower() for tag in skill.tags}
            if not any(tag.lower() in skill_tags for tag in self.tags):
                return False

        return True

    def apply(self, skills: list[Skill]) -> list[Skill]:
        """Filter skills, preserving their order."""
        if not self.is_active:
            return skills
        return [skill for skill in skills if self.accepts(skill)]


def collect_tags(skills: list[Skill]) -> list[str]:
    """Get the sorted set of tags declared across skills."""
    tags = set()
    for skill in skills:
        tags.update(skill.tags)
    return sorted(tags)
