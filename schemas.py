"""
Request Schemas for the Portfolio API

Each pydantic model describes one request body: which fields are required,
which are optional, and how raw form/JSON values are coerced. Wire names are
camelCase (liveUrl, displayOrder, ...); Python attributes are snake_case and
match the model columns. Update schemas make every field optional and only
fields present in the request are applied.
"""

import json
import re
from typing import Annotated, List, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_camel

from models import ProjectCategory, ProjectStatus, SkillCategory, SiteCategory
from utils.errors import ValidationError
from utils.helpers import parse_active, parse_flag, parse_leading_int, parse_technologies

URL_PATTERN = re.compile(r'^https?://.+\..+')
EMAIL_PATTERN = re.compile(r'^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$')


def Trimmed(min_length=None, max_length=None):
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)]


class Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


def load_payload(schema, data):
    """Validate a raw request dict against a schema or raise ValidationError"""
    try:
        return schema.model_validate(data or {})
    except pydantic.ValidationError as e:
        raise ValidationError(describe_error(e.errors()[0]))


def describe_error(error):
    message = error.get('msg', 'Invalid value')
    if error.get('type') == 'value_error':
        return message.removeprefix('Value error, ')
    field = '.'.join(str(part) for part in error.get('loc', ()))
    return f"{field}: {message}" if field else message


def reject_nulls(payload, *fields):
    """Fields a client may omit on update but never clear"""
    for field in fields:
        if field in payload.model_fields_set and getattr(payload, field) is None:
            raise ValueError(f'{to_camel(field)} cannot be null')
    return payload


# Auth

class LoginPayload(Payload):
    username: Trimmed(min_length=1)
    password: str = Field(min_length=1)


class ChangePasswordPayload(Payload):
    current_password: str = ''
    new_password: str = ''


# Projects

class ProjectCreate(Payload):
    title: Trimmed(1, 100)
    category: ProjectCategory = ProjectCategory.WEB
    description: Trimmed(1, 1000)
    technologies: List[str] = Field(default_factory=list)
    live_url: Trimmed() = ''
    github_url: Trimmed() = ''
    featured: bool = False
    status: ProjectStatus = ProjectStatus.ACTIVE
    image_url: Optional[Trimmed()] = None

    @field_validator('technologies', mode='before')
    @classmethod
    def _coerce_technologies(cls, value):
        return parse_technologies(value)

    @field_validator('featured', mode='before')
    @classmethod
    def _coerce_featured(cls, value):
        return parse_flag(value)

    @field_validator('live_url', 'github_url')
    @classmethod
    def _optional_url(cls, value):
        if value and not URL_PATTERN.match(value):
            raise ValueError('Please provide a valid URL')
        return value


class ProjectUpdate(ProjectCreate):
    title: Optional[Trimmed(1, 100)] = None
    category: Optional[ProjectCategory] = None
    description: Optional[Trimmed(1, 1000)] = None
    technologies: Optional[List[str]] = None
    live_url: Optional[Trimmed()] = None
    github_url: Optional[Trimmed()] = None
    featured: Optional[bool] = None
    status: Optional[ProjectStatus] = None

    @model_validator(mode='after')
    def _required_not_null(self):
        return reject_nulls(self, 'title', 'category', 'description', 'status')


# Skills

class SkillCreate(Payload):
    name: Trimmed(1, 255)
    icon: Trimmed(max_length=255) = 'fas fa-code'
    category: SkillCategory = SkillCategory.FRONTEND
    description: Trimmed(max_length=200) = ''
    featured: bool = False

    @field_validator('icon', mode='before')
    @classmethod
    def _default_icon(cls, value):
        return value or 'fas fa-code'

    @field_validator('featured', mode='before')
    @classmethod
    def _coerce_featured(cls, value):
        return parse_flag(value)


class SkillUpdate(SkillCreate):
    name: Optional[Trimmed(1, 255)] = None
    icon: Optional[Trimmed(max_length=255)] = None
    category: Optional[SkillCategory] = None
    description: Optional[Trimmed(max_length=200)] = None
    featured: Optional[bool] = None

    @model_validator(mode='after')
    def _required_not_null(self):
        return reject_nulls(self, 'name', 'icon', 'category')


# Sites

class SiteCreate(Payload):
    name: Trimmed(1, 255)
    url: Trimmed(max_length=500)
    icon: Trimmed(max_length=255) = 'fas fa-globe'
    description: Trimmed(max_length=200) = ''
    category: SiteCategory = SiteCategory.SOCIAL
    display_order: int = 0
    active: bool = True

    @field_validator('url')
    @classmethod
    def _required_url(cls, value):
        if value is not None and not URL_PATTERN.match(value):
            raise ValueError('Please provide a valid URL')
        return value

    @field_validator('icon', mode='before')
    @classmethod
    def _default_icon(cls, value):
        return value or 'fas fa-globe'

    @field_validator('display_order', mode='before')
    @classmethod
    def _coerce_display_order(cls, value):
        return parse_leading_int(value)

    @field_validator('active', mode='before')
    @classmethod
    def _coerce_active(cls, value):
        return parse_active(value)


class SiteUpdate(SiteCreate):
    name: Optional[Trimmed(1, 255)] = None
    url: Optional[Trimmed(max_length=500)] = None
    icon: Optional[Trimmed(max_length=255)] = None
    description: Optional[Trimmed(max_length=200)] = None
    category: Optional[SiteCategory] = None
    display_order: Optional[int] = None
    active: Optional[bool] = None

    @model_validator(mode='after')
    def _required_not_null(self):
        return reject_nulls(self, 'name', 'url', 'icon', 'category')


# Messages

class MessageCreate(Payload):
    name: Trimmed(1, 50)
    email: Trimmed(1, 255)
    subject: Trimmed(1, 100)
    message: Trimmed(1, 1000)

    @field_validator('email')
    @classmethod
    def _valid_email(cls, value):
        value = value.lower()
        if not EMAIL_PATTERN.match(value):
            raise ValueError('Please provide a valid email')
        return value


# Settings

class SocialLinks(Payload):
    github: Optional[Trimmed(max_length=500)] = None
    linkedin: Optional[Trimmed(max_length=500)] = None
    twitter: Optional[Trimmed(max_length=500)] = None
    dribbble: Optional[Trimmed(max_length=500)] = None


class SettingsUpdate(Payload):
    site_title: Optional[str] = None
    site_description: Optional[str] = None
    about_name: Optional[str] = None
    about_description: Optional[str] = None
    about_image: Optional[Trimmed()] = None
    contact_location: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_website: Optional[str] = None
    footer_title: Optional[str] = None
    footer_description: Optional[str] = None
    copyright_name: Optional[str] = None
    social_links: Optional[SocialLinks] = None
    theme_color: Optional[Trimmed(max_length=20)] = None
    secondary_color: Optional[Trimmed(max_length=20)] = None

    @field_validator('social_links', mode='before')
    @classmethod
    def _decode_social_links(cls, value):
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                raise ValueError('socialLinks must be a JSON object')
        return value
