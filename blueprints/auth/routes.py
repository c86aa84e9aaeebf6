"""
Auth Routes - Admin authentication
"""

from flask import current_app, jsonify, request
from flask_login import current_user
from extensions import db, sessions
from models import Admin, ActivityType
from schemas import ChangePasswordPayload, LoginPayload, load_payload
from utils.data import log_activity
from utils.decorators import admin_required, api_errors
from utils.errors import InvalidCredentials, NotFound, ValidationError
from utils.helpers import get_payload
from utils.security import MIN_PASSWORD_LENGTH, get_client_ip, hash_password, verify_password
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
@api_errors('Login failed')
def login():
    """Exchange admin credentials for a session token"""
    payload = load_payload(LoginPayload, get_payload())

    admin = Admin.query.filter_by(username=payload.username).first()
    if not admin or not verify_password(payload.password, admin.password_hash):
        current_app.logger.warning(f"Failed login for '{payload.username}' from {get_client_ip()}")
        raise InvalidCredentials()

    token = sessions.create(admin)
    log_activity('Admin Login', f'Admin {admin.username} logged in', ActivityType.LOGIN)
    current_app.logger.info(f"Admin {admin.username} logged in")

    return jsonify({
        'success': True,
        'sessionId': token,
        'admin': {'username': admin.username}
    })


@auth_bp.route('/verify', methods=['GET'])
@admin_required
def verify():
    """Confirm the session token is still valid"""
    return jsonify({'success': True, 'valid': True, 'admin': current_user.to_dict()})


@auth_bp.route('/logout', methods=['POST'])
@admin_required
def logout():
    """Destroy the current session"""
    sessions.destroy(sessions.token_from_request(request))
    return jsonify({'success': True, 'message': 'Logged out successfully'})


@auth_bp.route('/change-password', methods=['PUT'])
@admin_required
@api_errors('Failed to change password')
def change_password():
    """Change the admin password after re-checking the current one"""
    payload = load_payload(ChangePasswordPayload, get_payload())

    if len(payload.new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long')

    admin = db.session.get(Admin, current_user.id)
    if admin is None:
        raise NotFound('Admin not found')

    if not verify_password(payload.current_password, admin.password_hash):
        raise ValidationError('Current password is incorrect')

    admin.password_hash = hash_password(payload.new_password)
    db.session.commit()

    log_activity('Password Changed', 'Admin password updated', ActivityType.SETTINGS)
    current_app.logger.info(f"Password changed for admin {admin.username}")

    return jsonify({'success': True, 'message': 'Password updated successfully'})
