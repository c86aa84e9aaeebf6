from extensions import db
from datetime import datetime, date
from sqlalchemy import JSON
import enum
import uuid

# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class ProjectCategory(str, enum.Enum):
    WEB = 'web'
    MOBILE = 'mobile'
    DESIGN = 'design'
    OTHER = 'other'


class ProjectStatus(str, enum.Enum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'


class SkillCategory(str, enum.Enum):
    FRONTEND = 'frontend'
    BACKEND = 'backend'
    DATABASE = 'database'
    TOOL = 'tool'
    LANGUAGE = 'language'


class SiteCategory(str, enum.Enum):
    SOCIAL = 'social'
    PROFESSIONAL = 'professional'
    PORTFOLIO = 'portfolio'


class ActivityType(str, enum.Enum):
    LOGIN = 'login'
    PROJECT = 'project'
    SKILL = 'skill'
    SITE = 'site'
    MESSAGE = 'message'
    SETTINGS = 'settings'


class VisitorCountMode(str, enum.Enum):
    EVERY_VISIT = 'every-visit'
    UNIQUE_IP = 'unique-ip'


def _new_id():
    return str(uuid.uuid4())


def default_social_links():
    return {'github': '#', 'linkedin': '#', 'twitter': '#', 'dribbble': '#'}


class Admin(db.Model):
    __tablename__ = 'admins'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    username = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    title = db.Column(db.String(100), nullable=False)
    category = db.Column(db.String(20), nullable=False, default=ProjectCategory.WEB.value)
    description = db.Column(db.String(1000), nullable=False)
    image = db.Column(db.String(1000), nullable=False)  # cloud URL or legacy /uploads/ path
    technologies = db.Column(SafeJSON, default=list)
    live_url = db.Column(db.String(500), default='')
    github_url = db.Column(db.String(500), default='')
    date_posted = db.Column(db.String(10), default=lambda: date.today().isoformat())
    featured = db.Column(db.Boolean, default=False)
    status = db.Column(db.String(20), default=ProjectStatus.ACTIVE.value)
    tags = db.Column(SafeJSON, default=list)
    views = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_project_status_featured', 'status', 'featured', 'created_at'),
    )


class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(255), unique=True, nullable=False)
    icon = db.Column(db.String(255), nullable=False, default='fas fa-code')
    category = db.Column(db.String(20), default=SkillCategory.FRONTEND.value)
    description = db.Column(db.String(200), default='')
    featured = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Site(db.Model):
    __tablename__ = 'sites'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(255), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    icon = db.Column(db.String(255), nullable=False, default='fas fa-globe')
    description = db.Column(db.String(200), default='')
    category = db.Column(db.String(20), default=SiteCategory.SOCIAL.value)
    display_order = db.Column(db.Integer, default=0)
    active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Message(db.Model):
    __tablename__ = 'messages'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(100), nullable=False)
    message = db.Column(db.String(1000), nullable=False)
    read = db.Column(db.Boolean, default=False)
    ip_address = db.Column(db.String(45))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class VisitorDay(db.Model):
    __tablename__ = 'visitor_days'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    date = db.Column(db.String(32), unique=True, nullable=False)  # day key, e.g. 'Sat Oct 18 2026'
    count = db.Column(db.Integer, default=1, nullable=False)
    ip_addresses = db.Column(SafeJSON, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class ActivityLogEntry(db.Model):
    __tablename__ = 'activity_log'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    activity = db.Column(db.String(255), nullable=False)
    details = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), default=ActivityType.PROJECT.value)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class SiteSettings(db.Model):
    __tablename__ = 'site_settings'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    site_title = db.Column(db.String(255), default='My Portfolio')
    site_description = db.Column(db.String(500), default='Full Stack Developer & UI/UX Designer')
    about_name = db.Column(db.String(255), default='Your Name')
    about_description = db.Column(
        db.Text,
        default="I'm a passionate full-stack developer with expertise in modern web technologies...")
    about_image = db.Column(db.String(1000), default='')
    contact_location = db.Column(db.String(255), default='')
    contact_email = db.Column(db.String(255), default='hello@example.com')
    contact_phone = db.Column(db.String(50), default='')
    contact_website = db.Column(db.String(255), default='')
    footer_title = db.Column(db.String(255), default='My Portfolio')
    footer_description = db.Column(db.String(500), default='Creating digital experiences that inspire and engage users.')
    copyright_name = db.Column(db.String(255), default='Your Name')
    social_links = db.Column(SafeJSON, default=default_social_links)
    theme_color = db.Column(db.String(20), default='#3498db')
    secondary_color = db.Column(db.String(20), default='#2c3e50')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
