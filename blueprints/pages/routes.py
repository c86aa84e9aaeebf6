"""
Pages Routes - Frontend files and legacy local uploads
"""

import os
from flask import current_app, send_from_directory
from werkzeug.security import safe_join
from utils.errors import NotFound
from . import pages_bp

INDEX_FILE = 'index.html'
API_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'PATCH']


@pages_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Images stored locally before the move to cloud storage"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


@pages_bp.route('/api', defaults={'path': ''}, methods=API_METHODS)
@pages_bp.route('/api/<path:path>', methods=API_METHODS)
def unknown_api(path):
    raise NotFound('API endpoint not found')


@pages_bp.route('/', defaults={'path': ''})
@pages_bp.route('/<path:path>')
def frontend(path):
    """
    Serve a frontend file when it exists, otherwise the single-page entry
    so client side routes resolve.
    """
    folder = current_app.config['FRONTEND_FOLDER']
    if path:
        target = safe_join(folder, path)
        if target and os.path.isfile(target):
            return send_from_directory(folder, path)

    if not os.path.isfile(os.path.join(folder, INDEX_FILE)):
        current_app.logger.warning(f"⚠️ Frontend entry missing in {folder}")
        raise NotFound('Page not found')
    return send_from_directory(folder, INDEX_FILE)
