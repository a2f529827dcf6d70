"""
Profile Service - Data behind the CV landing page

Reads the hero, skills, experience and projects JSON files, validates each
entry, and lists the avatar images shown in the hero slideshow.
"""

import json
from pathlib import Path
from typing import Any, List, Optional

from flask import current_app
from pydantic import ValidationError

from models import Experience, Hero, Profile, Project, Skill, SkillFilter
from schemas import ExperienceSchema, HeroSchema, ProjectSchema, SkillSchema

AVATAR_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.webp', '.avif', '.gif'}


class ProfileService:
    """Service for loading the CV landing page content."""

    def __init__(self, profile_dir: Path, avatars_dir: Optional[Path] = None,
                 static_dir: Optional[Path] = None):
        """
        Initialize the profile service.

        Args:
            profile_dir: Directory containing hero/skills/experience/projects JSON
            avatars_dir: Directory containing avatar images
            static_dir: Static root that avatar paths are made relative to
        """
        self.profile_dir = Path(profile_dir)
        self.avatars_dir = Path(avatars_dir) if avatars_dir else None
        self.static_dir = Path(static_dir) if static_dir else None

    def read_json(self, filename: str) -> Optional[Any]:
        """
        Read a JSON file from the profile directory.

        Returns:
            Parsed data, or None if the file is missing or malformed
        """
        path = self.profile_dir / filename
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            current_app.logger.warning(f"Profile file not found: {filename}")
        except (PermissionError, json.JSONDecodeError) as e:
            current_app.logger.error(f"Could not read profile file {filename}: {e}")
        return None

    def load_list(self, filename: str, schema) -> list:
        """Validate each entry of a JSON list, skipping invalid ones."""
        data = self.read_json(filename)
        if data is None:
            return []
        if not isinstance(data, list):
            current_app.logger.error(f"{filename} must contain a list, got {type(data).__name__}")
            return []

        items = []
        for index, entry in enumerate(data):
            try:
                items.append(schema.model_validate(entry).to_model())
            except ValidationError as e:
                current_app.logger.warning(
                    f"Skipping invalid entry {index} in {filename}: {e.error_count()} error(s)"
                )
        return items

    def load_hero(self) -> Optional[Hero]:
        data = self.read_json("hero.json")
        if data is None:
            return None
        try:
            return HeroSchema.model_validate(data).to_model()
        except ValidationError as e:
            current_app.logger.warning(f"Invalid hero.json: {e.error_count()} error(s)")
            return None

    def load_skills(self) -> List[Skill]:
        return self.load_list("skills.json", SkillSchema)

    def load_experience(self) -> List[Experience]:
        return self.load_list("experience.json", ExperienceSchema)

    def load_projects(self) -> List[Project]:
        return self.load_list("projects.json", ProjectSchema)

    def list_avatars(self) -> List[str]:
        """
        List avatar images as paths relative to the static directory.

        Returns:
            Sorted relative paths usable with url_for('static', filename=...)
        """
        if not self.avatars_dir or not self.avatars_dir.is_dir():
            return []

        avatars = sorted(
            p for p in self.avatars_dir.iterdir()
            if p.is_file() and p.suffix.lower() in AVATAR_EXTENSIONS
        )
        if self.static_dir:
            try:
                return [p.relative_to(self.static_dir).as_posix() for p in avatars]
            except ValueError:
                current_app.logger.warning("Avatar directory is outside the static directory")
                return []
        return [p.name for p in avatars]

    def load_profile(self) -> Profile:
        """Load everything the landing page renders."""
        return Profile(
            hero=self.load_hero(),
            skills=self.load_skills(),
            experience=self.load_experience(),
            projects=self.load_projects(),
            avatars=self.list_avatars(),
        )

    @staticmethod
    def parse_skill_filter(value: Optional[str]) -> SkillFilter:
        """Parse the skills query parameter, defaulting to all skills."""
        try:
            return SkillFilter((value or '').strip().lower())
        except ValueError:
            return SkillFilter.ALL

    @staticmethod
    def filter_skills(skills: List[Skill], skill_filter: SkillFilter) -> List[Skill]:
        """
        Filter skills for the skills grid.

        Args:
            skills: All skills
            skill_filter: Selected filter

        Returns:
            Skills matching the filter, in their original order
        """
        if skill_filter == SkillFilter.CERTIFIED:
            return [s for s in skills if s.has_certification]
        if skill_filter in (SkillFilter.TECHNICAL, SkillFilter.TOOL, SkillFilter.LANGUAGE):
            return [s for s in skills if s.type == skill_filter.value]
        return list(skills)
