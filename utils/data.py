"""
Data Management Module - Record lookups, serialization and startup defaults
"""

from flask import current_app
from extensions import db
from models import (
    Admin, Project, Skill, Site, Message,
    ActivityLogEntry, SiteSettings, ActivityType, ProjectStatus,
    default_social_links
)
from .decorators import best_effort
from .errors import NotFound
from .security import hash_password


def _timestamp(value):
    return value.isoformat() if value else None


def get_or_404(model, record_id, label):
    """Fetch a record by id or raise NotFound('<label> not found')"""
    record = db.session.get(model, str(record_id))
    if record is None:
        raise NotFound(f'{label} not found')
    return record


def apply_updates(record, updates):
    """Copy validated field values onto a record"""
    for field, value in updates.items():
        setattr(record, field, value)
    return record


def get_settings():
    return SiteSettings.query.order_by(SiteSettings.created_at.asc()).first()


def get_or_create_settings():
    """Return the single SiteSettings record, creating it with defaults once"""
    settings = get_settings()
    if settings is None:
        settings = SiteSettings(social_links=default_social_links())
        db.session.add(settings)
        db.session.commit()
        current_app.logger.info("✓ Default settings created")
    return settings


def ensure_defaults():
    """Create the default admin and settings if they are missing"""
    username = current_app.config.get('ADMIN_USERNAME', 'admin')
    if not Admin.query.filter_by(username=username).first():
        db.session.add(Admin(
            username=username,
            password_hash=hash_password(current_app.config.get('ADMIN_PASSWORD', 'password123'))
        ))
        db.session.commit()
        current_app.logger.info(f"✓ Default admin user '{username}' created")
    get_or_create_settings()


@best_effort('Error logging activity', rollback=True)
def log_activity(activity, details, type=ActivityType.PROJECT):
    """Append an activity log entry; failures are logged and ignored"""
    entry = ActivityLogEntry(activity=activity, details=details, type=ActivityType(type).value)
    db.session.add(entry)
    db.session.commit()
    return entry


def active_projects(limit=None):
    """Active projects, featured first then newest first"""
    query = Project.query.filter_by(status=ProjectStatus.ACTIVE.value).order_by(
        Project.featured.desc(), Project.created_at.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def all_skills():
    return Skill.query.order_by(Skill.featured.desc(), Skill.created_at.desc()).all()


def active_sites():
    return Site.query.filter_by(active=True).order_by(Site.display_order.asc()).all()


def project_to_dict(project):
    """Convert project model to dictionary"""
    return {
        'id': project.id,
        '_id': project.id,  # older admin clients key records by _id
        'title': project.title,
        'category': project.category,
        'description': project.description,
        'image': project.image,
        'technologies': project.technologies or [],
        'liveUrl': project.live_url or '',
        'githubUrl': project.github_url or '',
        'datePosted': project.date_posted,
        'featured': bool(project.featured),
        'status': project.status,
        'tags': project.tags or [],
        'views': project.views or 0,
        'createdAt': _timestamp(project.created_at),
        'updatedAt': _timestamp(project.updated_at)
    }


def skill_to_dict(skill):
    return {
        'id': skill.id,
        '_id': skill.id,
        'name': skill.name,
        'icon': skill.icon,
        'category': skill.category,
        'description': skill.description or '',
        'featured': bool(skill.featured),
        'createdAt': _timestamp(skill.created_at),
        'updatedAt': _timestamp(skill.updated_at)
    }


def site_to_dict(site):
    return {
        'id': site.id,
        '_id': site.id,
        'name': site.name,
        'url': site.url,
        'icon': site.icon,
        'description': site.description or '',
        'category': site.category,
        'displayOrder': site.display_order or 0,
        'active': bool(site.active),
        'createdAt': _timestamp(site.created_at),
        'updatedAt': _timestamp(site.updated_at)
    }


def message_to_dict(message):
    return {
        'id': message.id,
        '_id': message.id,
        'name': message.name,
        'email': message.email,
        'subject': message.subject,
        'message': message.message,
        'read': bool(message.read),
        'ipAddress': message.ip_address,
        'createdAt': _timestamp(message.created_at)
    }


def activity_to_dict(entry):
    return {
        'id': entry.id,
        'activity': entry.activity,
        'details': entry.details,
        'type': entry.type,
        'date': entry.created_at.strftime('%Y-%m-%d %H:%M') if entry.created_at else '',
        'createdAt': _timestamp(entry.created_at)
    }


def settings_to_dict(settings):
    """Convert site settings to the camelCase shape the site expects"""
    if settings is None:
        return {}
    social = default_social_links()
    social.update(settings.social_links or {})
    return {
        'id': settings.id,
        'siteTitle': settings.site_title,
        'siteDescription': settings.site_description,
        'aboutName': settings.about_name,
        'aboutDescription': settings.about_description,
        'aboutImage': settings.about_image or '',
        'contactLocation': settings.contact_location,
        'contactEmail': settings.contact_email,
        'contactPhone': settings.contact_phone,
        'contactWebsite': settings.contact_website,
        'footerTitle': settings.footer_title,
        'footerDescription': settings.footer_description,
        'copyrightName': settings.copyright_name,
        'socialLinks': social,
        'themeColor': settings.theme_color,
        'secondaryColor': settings.secondary_color,
        'createdAt': _timestamp(settings.created_at),
        'updatedAt': _timestamp(settings.updated_at)
    }


__all__ = [
    'get_or_404',
    'apply_updates',
    'get_settings',
    'get_or_create_settings',
    'ensure_defaults',
    'log_activity',
    'active_projects',
    'all_skills',
    'active_sites',
    'project_to_dict',
    'skill_to_dict',
    'site_to_dict',
    'message_to_dict',
    'activity_to_dict',
    'settings_to_dict'
]
