"""
Portfolio Routes - Public site data and site settings
"""

from datetime import datetime
from flask import current_app, jsonify
from extensions import db
from models import ActivityType
from schemas import SettingsUpdate, load_payload
from utils.assets import PROFILES_FOLDER, discard_image, read_image_upload, resolve_image
from utils.data import (
    active_projects, active_sites, all_skills, apply_updates, get_or_create_settings,
    log_activity, project_to_dict, settings_to_dict, site_to_dict, skill_to_dict
)
from utils.decorators import admin_required, api_errors
from utils.helpers import get_payload
from utils.security import get_client_ip
from utils.visitors import summed_unique_visits, total_visits, track_visit
from . import portfolio_bp

PORTFOLIO_PROJECT_LIMIT = 6


@portfolio_bp.route('/portfolio-data', methods=['GET'])
@api_errors('Failed to fetch portfolio data')
def portfolio_data():
    """
    Everything the public page renders, in one read.

    Any failing sub-read fails the whole response; no partial data is sent.
    """
    settings = get_or_create_settings()
    projects = active_projects(limit=PORTFOLIO_PROJECT_LIMIT)
    skills = all_skills()
    sites = active_sites()

    return jsonify({
        'success': True,
        'data': {
            'settings': settings_to_dict(settings),
            'projects': [project_to_dict(p) for p in projects],
            'skills': [skill_to_dict(s) for s in skills],
            'sites': [site_to_dict(s) for s in sites],
            'analytics': {
                'totalVisitors': total_visits(),
                'uniqueVisitors': summed_unique_visits()
            }
        }
    })


@portfolio_bp.route('/visitors/track', methods=['POST'])
@api_errors('Failed to track visitor')
def track_visitor():
    visitor = track_visit(get_client_ip())
    return jsonify({
        'success': True,
        'count': visitor.count,
        'message': 'Visitor tracked successfully'
    })


@portfolio_bp.route('/settings', methods=['GET'])
@api_errors('Failed to fetch settings')
def get_settings():
    return jsonify({'success': True, 'data': settings_to_dict(get_or_create_settings())})


@portfolio_bp.route('/settings', methods=['PUT'])
@admin_required
@api_errors('Failed to update settings')
def update_settings():
    """
    Update site settings.

    Accepts multipart with an optional 'aboutImage' file and 'socialLinks'
    as a JSON string, or a plain JSON body. Social links are merged into the
    existing ones.
    """
    payload = load_payload(SettingsUpdate, get_payload())
    buffer = read_image_upload('aboutImage')

    settings = get_or_create_settings()
    previous_image = settings.about_image
    image, changed = resolve_image(buffer, payload.about_image, previous_image, PROFILES_FOLDER)

    updates = payload.model_dump(exclude_unset=True, exclude={'about_image', 'social_links'})
    apply_updates(settings, updates)
    if payload.social_links is not None:
        social = dict(settings.social_links or {})
        social.update(payload.social_links.model_dump(exclude_none=True))
        settings.social_links = social
    settings.about_image = image

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        if buffer:
            discard_image(image)
        raise

    if changed and previous_image:
        discard_image(previous_image)

    log_activity('Settings Updated', 'Website settings updated', ActivityType.SETTINGS)
    current_app.logger.info("Site settings updated")

    return jsonify({'success': True, 'data': settings_to_dict(settings)})


@portfolio_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        'success': True,
        'message': 'Server is running',
        'timestamp': datetime.utcnow().isoformat()
    })
