"""
Profile Validation Schemas

Pydantic models for the JSON files behind the CV landing page
(hero.json, skills.json, experience.json, projects.json).
"""

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models import Certification, Company, Experience, Hero, Project, Skill


class SkillTypeEnum(str, Enum):
    """Valid skill type values."""
    TECHNICAL = 'technical'
    TOOL = 'tool'
    LANGUAGE = 'language'
    SOFT = 'soft'


class HeroSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=200)
    summary: str = ""
    primary_cta_label: str = Field(default="", validation_alias=AliasChoices('primaryCtaLabel', 'primary_cta_label'))
    primary_cta_href: str = Field(default="", validation_alias=AliasChoices('primaryCtaHref', 'primary_cta_href'))
    secondary_cta_label: str = Field(default="", validation_alias=AliasChoices('secondaryCtaLabel', 'secondary_cta_label'))
    secondary_cta_href: str = Field(default="", validation_alias=AliasChoices('secondaryCtaHref', 'secondary_cta_href'))

    def to_model(self) -> Hero:
        return Hero(**self.model_dump())


class CertificationSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    issuer: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    date: str = ""
    url: Optional[str] = None
    score: Optional[str] = None
    image: Optional[str] = None

    @field_validator('date', 'score', mode='before')
    @classmethod
    def coerce_text(cls, v):
        """Scores and dates may be written as numbers in JSON."""
        if v is None:
            return v
        return str(v)


class SkillSchema(BaseModel):
    """
    Validation schema for a single skill.

    A skill marked as certified without certificate details is kept, but it
    is not listed under the certified filter.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    label: str = Field(..., min_length=1, max_length=100)
    type: SkillTypeEnum
    level: Optional[str] = None
    certified: bool = False
    cert: Optional[CertificationSchema] = None
    usage: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('type', mode='before')
    @classmethod
    def normalize_type(cls, v):
        """Convert skill type to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    def to_model(self) -> Skill:
        return Skill(
            label=self.label,
            type=self.type.value,
            level=self.level,
            certified=self.certified,
            cert=Certification(**self.cert.model_dump()) if self.cert else None,
            usage=self.usage,
            notes=self.notes,
        )


class CompanySchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    link: Optional[str] = None


class ExperienceSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    company: CompanySchema
    period: str = ""
    desc: str = ""
    highlights: List[str] = Field(default_factory=list)
    tech: List[str] = Field(default_factory=list)
    logo: Optional[str] = None

    @field_validator('company', mode='before')
    @classmethod
    def expand_company(cls, v):
        """Allow a plain company name instead of {name, link}."""
        if isinstance(v, str):
            return {'name': v}
        return v

    @field_validator('highlights', 'tech', mode='before')
    @classmethod
    def default_lists(cls, v):
        return v or []

    def to_model(self) -> Experience:
        return Experience(
            title=self.title,
            company=Company(**self.company.model_dump()),
            period=self.period,
            desc=self.desc,
            highlights=list(self.highlights),
            tech=list(self.tech),
            logo=self.logo,
        )


class ProjectSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(..., min_length=1)
    desc: str = ""
    tags: List[str] = Field(default_factory=list)
    image: str = ""
    blog_slug: Optional[str] = Field(default=None, validation_alias=AliasChoices('blogSlug', 'blog_slug'))

    @field_validator('blog_slug', mode='before')
    @classmethod
    def blank_slug_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_model(self) -> Project:
        return Project(**self.model_dump())
