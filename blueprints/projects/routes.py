"""
Projects Routes - Portfolio project management

Images are either uploaded (multipart field 'image') to the CDN or given as
an external 'imageUrl'. A replaced or deleted image is cleaned up after the
record change is committed.
"""

from flask import current_app, jsonify, request
from flask_login import current_user
from extensions import db
from models import Project, ProjectStatus, ActivityType
from schemas import ProjectCreate, ProjectUpdate, load_payload
from utils.assets import PROJECTS_FOLDER, discard_image, read_image_upload, resolve_image
from utils.data import active_projects, apply_updates, get_or_404, log_activity, project_to_dict
from utils.decorators import admin_required, api_errors
from utils.errors import NotFound, ValidationError
from utils.helpers import get_payload
from . import projects_bp


def _include_inactive():
    return current_user.is_authenticated and request.args.get('include') == 'inactive'


def _commit_or_discard(new_image, uploaded):
    """Commit, removing a freshly uploaded image if the write fails"""
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        if uploaded:
            discard_image(new_image)
        raise


@projects_bp.route('', methods=['GET'])
@api_errors('Failed to fetch projects')
def list_projects():
    """Active projects, featured first then newest first"""
    if _include_inactive():
        projects = Project.query.order_by(Project.featured.desc(), Project.created_at.desc()).all()
    else:
        projects = active_projects()
    return jsonify({'success': True, 'data': [project_to_dict(p) for p in projects]})


@projects_bp.route('/<project_id>', methods=['GET'])
@api_errors('Failed to fetch project')
def get_project(project_id):
    project = get_or_404(Project, project_id, 'Project')
    if project.status != ProjectStatus.ACTIVE.value and not current_user.is_authenticated:
        raise NotFound('Project not found')
    return jsonify({'success': True, 'data': project_to_dict(project)})


@projects_bp.route('', methods=['POST'])
@admin_required
@api_errors('Failed to create project')
def create_project():
    """Create a project; an uploaded image or an image URL is required"""
    payload = load_payload(ProjectCreate, get_payload())
    buffer = read_image_upload('image')
    if not buffer and not payload.image_url:
        raise ValidationError('Image is required')

    image, _ = resolve_image(buffer, payload.image_url, None, PROJECTS_FOLDER)

    project = Project(image=image, **payload.model_dump(exclude={'image_url'}))
    db.session.add(project)
    _commit_or_discard(image, uploaded=bool(buffer))

    log_activity('Project Created', f'Project "{project.title}" created', ActivityType.PROJECT)
    current_app.logger.info(f"✓ Project '{project.title}' created with image {project.image}")

    return jsonify({'success': True, 'data': project_to_dict(project)}), 201


@projects_bp.route('/<project_id>', methods=['PUT'])
@admin_required
@api_errors('Failed to update project')
def update_project(project_id):
    """Replace the supplied fields; a new image retires the old one"""
    project = get_or_404(Project, project_id, 'Project')
    payload = load_payload(ProjectUpdate, get_payload())
    buffer = read_image_upload('image')

    previous_image = project.image
    image, changed = resolve_image(buffer, payload.image_url, previous_image, PROJECTS_FOLDER)

    apply_updates(project, payload.model_dump(exclude_unset=True, exclude={'image_url'}))
    project.image = image
    _commit_or_discard(image, uploaded=bool(buffer))

    if changed and previous_image:
        discard_image(previous_image)

    log_activity('Project Updated', f'Project "{project.title}" updated', ActivityType.PROJECT)

    return jsonify({'success': True, 'data': project_to_dict(project)})


@projects_bp.route('/<project_id>', methods=['DELETE'])
@admin_required
@api_errors('Failed to delete project')
def delete_project(project_id):
    """Delete a project and, best-effort, its image"""
    project = get_or_404(Project, project_id, 'Project')
    title, image = project.title, project.image

    db.session.delete(project)
    db.session.commit()

    discard_image(image, fallback=True)
    log_activity('Project Deleted', f'Project "{title}" deleted', ActivityType.PROJECT)
    current_app.logger.info(f"✓ Project '{title}' deleted from system")

    return jsonify({'success': True, 'message': 'Project deleted successfully'})
