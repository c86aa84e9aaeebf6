"""
Dashboard Routes - Admin statistics and recent activity
"""

from flask import current_app, jsonify, request
from models import ActivityLogEntry, Message, Project, Site, Skill
from utils.data import activity_to_dict
from utils.decorators import admin_required, api_errors
from utils.helpers import parse_leading_int
from utils.visitors import visitor_totals
from . import dashboard_bp

RECENT_ACTIVITY_LIMIT = 20


@dashboard_bp.route('/dashboard/stats', methods=['GET'])
@admin_required
@api_errors('Failed to fetch dashboard statistics')
def stats():
    """Counts per entity plus visitor aggregates"""
    data = {
        'totalProjects': Project.query.count(),
        'totalSkills': Skill.query.count(),
        'totalSites': Site.query.filter_by(active=True).count(),
        'unreadMessages': Message.query.filter_by(read=False).count(),
    }
    data.update(visitor_totals())

    current_app.logger.info(f"Dashboard stats: {data}")
    return jsonify({'success': True, 'data': data})


@dashboard_bp.route('/activities', methods=['GET'])
@admin_required
@api_errors('Failed to fetch activities')
def activities():
    """Most recent activity log entries, newest first"""
    limit = parse_leading_int(request.args.get('limit'), RECENT_ACTIVITY_LIMIT)
    limit = max(1, min(limit, 100))
    entries = ActivityLogEntry.query.order_by(ActivityLogEntry.created_at.desc()).limit(limit).all()
    return jsonify({'success': True, 'data': [activity_to_dict(e) for e in entries]})
