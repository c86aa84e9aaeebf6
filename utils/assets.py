"""
Assets Module - Image CDN adapter and image lifecycle

Uploads go to Cloudinary under a folder prefix. Older images (legacy local
files under /uploads or Cloudinary assets) are removed when a record stops
referencing them. Removal is best-effort and never fails the request.
"""

import io
import os
import re
from collections import namedtuple
import cloudinary
import cloudinary.uploader
from flask import current_app, request
from werkzeug.security import safe_join
from .decorators import best_effort
from .errors import UploadFailed, ValidationError

PROJECTS_FOLDER = 'portfolio/projects'
PROFILES_FOLDER = 'portfolio/profiles'

CLOUD_HOST_MARKER = 'res.cloudinary.com'
PUBLIC_ID_PATTERN = re.compile(r'/upload/(?:v\d+/)?(.+)\.[a-zA-Z0-9]+(?:\?.*)?$')
LOCAL_PATH_PATTERN = re.compile(r'^/?uploads/(.+)$')

UploadedAsset = namedtuple('UploadedAsset', ['url', 'public_id'])


class AssetStore:
    """Thin wrapper around the Cloudinary uploader"""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        settings = {
            'cloud_name': app.config.get('CLOUDINARY_CLOUD_NAME'),
            'api_key': app.config.get('CLOUDINARY_API_KEY'),
            'api_secret': app.config.get('CLOUDINARY_API_SECRET'),
        }
        if not all(settings.values()):
            app.logger.warning(
                '⚠ Cloudinary configuration incomplete. Set CLOUDINARY_CLOUD_NAME, '
                'CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET.')
        cloudinary.config(secure=True, **{k: v for k, v in settings.items() if v})
        app.extensions['assets'] = self

    def upload(self, buffer, folder):
        """Upload raw image bytes and return the permanent URL and public id"""
        try:
            result = cloudinary.uploader.upload(io.BytesIO(buffer), folder=folder, resource_type='image')
        except Exception as e:
            current_app.logger.error(f"Cloudinary upload failed ({folder}): {str(e)}")
            raise UploadFailed()
        return UploadedAsset(url=result['secure_url'], public_id=result['public_id'])

    def destroy(self, public_id):
        return cloudinary.uploader.destroy(public_id)

    @staticmethod
    def is_cloud_url(value):
        return CLOUD_HOST_MARKER in (value or '')

    @staticmethod
    def public_id_from_url(url):
        """Extract 'folder/name' from a Cloudinary delivery URL"""
        match = PUBLIC_ID_PATTERN.search(url or '')
        return match.group(1) if match else None


def _assets():
    return current_app.extensions['assets']


def read_image_upload(field):
    """Return the bytes of an uploaded image field, or None when absent"""
    file = request.files.get(field)
    if not file or not file.filename:
        return None

    if not (file.mimetype or '').startswith('image/'):
        raise ValidationError('Only image files are allowed!')

    max_size = current_app.config.get('MAX_UPLOAD_SIZE', 5 * 1024 * 1024)
    buffer = file.read(max_size + 1)
    if len(buffer) > max_size:
        raise ValidationError('File too large. Maximum size is 5MB.')
    return buffer


def resolve_image(buffer, url, current, folder):
    """
    Decide the image value for a create/update.

    An uploaded buffer wins over an external URL; an external URL is only
    taken when it differs from the current value. Upload failures raise
    UploadFailed before anything is written.

    Returns:
        tuple: (new value, whether it differs from ``current``)
    """
    if buffer:
        return _assets().upload(buffer, folder).url, True
    if url and url != current:
        return url, True
    return current, False


def _local_upload_path(relative):
    return safe_join(current_app.config['UPLOAD_FOLDER'], relative)


def _remove_local_file(path):
    if path and os.path.isfile(path):
        os.remove(path)
        current_app.logger.info(f"✓ Deleted local image: {path}")
        return True
    current_app.logger.info(f"Image file not found: {path}")
    return False


@best_effort('Could not delete old image')
def discard_image(value, fallback=False):
    """
    Remove the asset behind an image value that is no longer referenced.

    Local '/uploads/...' paths are deleted from UPLOAD_FOLDER, Cloudinary
    URLs are destroyed by public id. With ``fallback`` any other value is
    treated as a file name under UPLOAD_FOLDER.
    """
    if not value:
        return

    local = LOCAL_PATH_PATTERN.match(value)
    if local:
        _remove_local_file(_local_upload_path(local.group(1)))
        return

    assets = _assets()
    if assets.is_cloud_url(value):
        public_id = assets.public_id_from_url(value)
        if public_id:
            assets.destroy(public_id)
            current_app.logger.info(f"✓ Deleted cloudinary image with public_id: {public_id}")
        else:
            current_app.logger.warning(f"Could not determine cloudinary public_id from URL: {value}")
        return

    if fallback:
        filename = value.split('?', 1)[0].rstrip('/').split('/')[-1]
        if filename:
            path = _local_upload_path(filename)
            if path and os.path.isfile(path):
                os.remove(path)
                current_app.logger.info(f"✓ Deleted fallback image: {path}")


__all__ = [
    'AssetStore',
    'UploadedAsset',
    'PROJECTS_FOLDER',
    'PROFILES_FOLDER',
    'read_image_upload',
    'resolve_image',
    'discard_image'
]
