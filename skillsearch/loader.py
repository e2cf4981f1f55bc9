"""Loading skills from skill directories.

A skill is a directory containing a ``SKILL.md`` file, optionally with
``references/`` and ``scripts/`` subdirectories. The markdown may start
with a YAML frontmatter block delimited by ``---`` lines.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SkillLoadError
from .models import Skill

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"


def extract_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Split YAML frontmatter from markdown content.

    Args:
        content: Full markdown text

    Returns:
        Tuple of (frontmatter mapping or None, content without frontmatter)
    """
    lines = content.splitlines()

    if not lines or not lines[0].strip().startswith("---"):
        return None, content

    end_index = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip().startswith("---"):
            end_index = i
            break

    if end_index is None:
        return None, content

    yaml_content = "\n".join(lines[1:end_index])
    remaining = "\n".join(lines[end_index + 1 :])

    try:
        frontmatter = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML frontmatter: {e}")
        return None, remaining

    if not isinstance(frontmatter, dict):
        if frontmatter is not None:
            logger.warning(
                f"Frontmatter is not a mapping: {type(frontmatter).__name__}"
            )
        return None, remaining

    return frontmatter, remaining


def extract_description(content: str) -> str | None:
    """Get the first paragraph of markdown, skipping headers."""
    description_lines = []

    for line in content.splitlines():
        stripped = line.strip()

        if stripped.startswith("#"):
            continue

        if stripped:
            description_lines.append(stripped)
        elif description_lines:
            break

    if not description_lines:
        return None
    return " ".join(description_lines)


def load_skill(skill_file: Path, location: str) -> Skill:
    """Load a single skill from its SKILL.md file.

    Args:
        skill_file: Path to the SKILL.md file
        location: Location tag for the skill (e.g. "claude")

    Returns:
        Loaded skill

    Raises:
        SkillLoadError: If the file cannot be read
    """
    try:
        content = skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillLoadError(str(skill_file), str(e)) from e

    skill_dir = skill_file.parent
    metadata, body = extract_frontmatter(content)
    metadata = metadata or {}

    description = metadata.get("description")
    if not isinstance(description, str) or not description.strip():
        description = extract_description(body)
    else:
        description = description.strip()

    return Skill(
        name=skill_dir.name,
        location=location,
        path=str(skill_file),
        description=description,
        content=content,
        body=body,
        references=_list_files(skill_dir / "references"),
        scripts=_list_files(skill_dir / "scripts"),
        metadata=metadata,
    )


def scan_directory(directory: Path, location: str) -> list[Skill]:
    """Load every skill found directly under a directory.

    Skills that fail to load are logged and skipped.

    Raises:
        SkillLoadError: If the directory itself cannot be listed
    """
    if not directory.exists():
        logger.debug(f"Skill directory does not exist: {directory}")
        return []

    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        raise SkillLoadError(str(directory), str(e)) from e

    skills = []
    for child in children:
        skill_file = child / SKILL_FILENAME
        if not child.is_dir() or not skill_file.is_file():
            continue

        try:
            skills.append(load_skill(skill_file, location))
        except SkillLoadError as e:
            logger.warning(str(e))

    logger.info(f"Loaded {len(skills)} skills from {directory} ({location})")
    return skills


def scan_skills(directories: dict[str, Path]) -> list[Skill]:
    """Load skills from every configured location."""
    all_skills = []

    for location, directory in directories.items():
        try:
            all_skills.extend(scan_directory(Path(directory).expanduser(), location))
        except SkillLoadError as e:
            logger.error(f"Error scanning {location}: {e}")

    return all_skills


def _list_files(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    try:
        return sorted(str(path) for path in directory.iterdir() if path.is_file())
    except OSError as e:
        logger.warning(f"Cannot list {directory}: {e}")
        return []
