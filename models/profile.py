"""
CV landing page models: hero, skills, experience and projects.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Hero:
    """Represents the hero section at the top of the landing page."""
    name: str
    title: str
    summary: str = ""
    primary_cta_label: str = ""
    primary_cta_href: str = ""
    secondary_cta_label: str = ""
    secondary_cta_href: str = ""


@dataclass
class Certification:
    issuer: str
    name: str
    date: str = ""
    url: Optional[str] = None
    score: Optional[str] = None
    image: Optional[str] = None


@dataclass
class Skill:
    """Represents a skill, optionally backed by a certification."""
    label: str
    type: str  # technical, tool, language or soft
    level: Optional[str] = None
    certified: bool = False
    cert: Optional[Certification] = None
    usage: Optional[str] = None
    notes: Optional[str] = None

    @property
    def has_certification(self) -> bool:
        """A skill counts as certified only when the certificate details exist."""
        return self.certified and self.cert is not None


@dataclass
class Company:
    name: str
    link: Optional[str] = None


@dataclass
class Experience:
    """Represents one entry of the experience timeline."""
    title: str
    company: Company
    period: str
    desc: str = ""
    highlights: List[str] = field(default_factory=list)
    tech: List[str] = field(default_factory=list)
    logo: Optional[str] = None


@dataclass
class Project:
    """Represents a featured project card."""
    title: str
    desc: str = ""
    tags: List[str] = field(default_factory=list)
    image: str = ""
    blog_slug: Optional[str] = None


@dataclass
class Profile:
    """Everything the landing page renders."""
    hero: Optional[Hero] = None
    skills: List[Skill] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    avatars: List[str] = field(default_factory=list)

    @property
    def certified_skills(self) -> List[Skill]:
        return [s for s in self.skills if s.has_certification]
