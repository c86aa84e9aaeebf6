"""
Sites Routes - Profile/site links shown on the public page
"""

from flask import jsonify
from extensions import db
from models import Site, ActivityType
from schemas import SiteCreate, SiteUpdate, load_payload
from utils.data import active_sites, apply_updates, get_or_404, log_activity, site_to_dict
from utils.decorators import admin_required, api_errors
from utils.helpers import get_payload
from . import sites_bp


@sites_bp.route('', methods=['GET'])
@api_errors('Failed to fetch sites')
def list_sites():
    """Active sites in display order"""
    return jsonify({'success': True, 'data': [site_to_dict(s) for s in active_sites()]})


@sites_bp.route('/<site_id>', methods=['GET'])
@api_errors('Failed to fetch site')
def get_site(site_id):
    return jsonify({'success': True, 'data': site_to_dict(get_or_404(Site, site_id, 'Site'))})


@sites_bp.route('', methods=['POST'])
@admin_required
@api_errors('Failed to create site')
def create_site():
    payload = load_payload(SiteCreate, get_payload())

    site = Site(**payload.model_dump())
    db.session.add(site)
    db.session.commit()

    log_activity('Site Created', f'Site "{site.name}" created', ActivityType.SITE)
    return jsonify({'success': True, 'data': site_to_dict(site)}), 201


@sites_bp.route('/<site_id>', methods=['PUT'])
@admin_required
@api_errors('Failed to update site')
def update_site(site_id):
    site = get_or_404(Site, site_id, 'Site')
    payload = load_payload(SiteUpdate, get_payload())

    apply_updates(site, payload.model_dump(exclude_unset=True))
    db.session.commit()

    log_activity('Site Updated', f'Site "{site.name}" updated', ActivityType.SITE)
    return jsonify({'success': True, 'data': site_to_dict(site)})


@sites_bp.route('/<site_id>', methods=['DELETE'])
@admin_required
@api_errors('Failed to delete site')
def delete_site(site_id):
    site = get_or_404(Site, site_id, 'Site')
    name = site.name

    db.session.delete(site)
    db.session.commit()

    log_activity('Site Deleted', f'Site "{name}" deleted', ActivityType.SITE)
    return jsonify({'success': True, 'message': 'Site deleted successfully'})
