"""
Content Models - Portfolio profile and project schemas

These mirror the JSON documents exchanged with the content backend:
- PortfolioProfile -> GET /api/portfolio, POST /api/admin/portfolio
- Project          -> GET /api/projects
- ProjectDraft     -> POST /api/admin/projects
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOCIAL_ICON = 'globe'


class SocialLink(BaseModel):
    """
    One social link shown under the hero headline
    Every entry carries all three fields, unset ones as empty text
    """
    model_config = ConfigDict(extra='ignore')

    label: str = Field('', description="Display label, e.g. 'GitHub'")
    url: str = Field('', description="Target URL")
    icon: str = Field('', description="Icon name, e.g. 'github'")

    @field_validator('label', 'url', 'icon', mode='before')
    @classmethod
    def _none_to_empty(cls, value):
        return '' if value is None else value


class PortfolioProfile(BaseModel):
    """
    Singleton hero/about/social-links content block
    Always saved as a whole, never patched field by field
    """
    model_config = ConfigDict(extra='ignore')

    hero_title: str = ''
    hero_subtitle: str = ''
    about: str = ''
    socials: List[SocialLink] = Field(default_factory=list)

    @field_validator('hero_title', 'hero_subtitle', 'about', mode='before')
    @classmethod
    def _none_to_empty(cls, value):
        return '' if value is None else value

    @field_validator('socials', mode='before')
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


class ProjectDraft(BaseModel):
    """
    Project fields sent on creation; the backend assigns the id
    """
    model_config = ConfigDict(extra='ignore')

    title: str = Field(..., min_length=1, description="Project title")
    description: str = ''
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    link: Optional[str] = Field(None, description="External link; no link means the card is not linked out")
    featured: bool = False
    order: int = Field(0, description="Display priority hint, not re-sorted client side")

    @field_validator('title')
    @classmethod
    def _title_not_blank(cls, value):
        if not value.strip():
            raise ValueError('title must not be empty')
        return value

    @field_validator('description', mode='before')
    @classmethod
    def _none_to_empty(cls, value):
        return '' if value is None else value

    @field_validator('tags', mode='before')
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


class Project(ProjectDraft):
    """
    Project as returned by the backend
    """
    id: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def _id_to_text(cls, value):
        if value is None:
            return None
        return str(value)
