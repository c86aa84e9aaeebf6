"""
Skills Routes - Skill management (admin curated, listed publicly)
"""

from flask import jsonify
from sqlalchemy.exc import IntegrityError
from extensions import db
from models import Skill, ActivityType
from schemas import SkillCreate, SkillUpdate, load_payload
from utils.data import all_skills, apply_updates, get_or_404, log_activity, skill_to_dict
from utils.decorators import admin_required, api_errors
from utils.errors import Conflict
from utils.helpers import get_payload
from . import skills_bp

DUPLICATE_SKILL = 'Skill with this name already exists'


def _commit_unique_name():
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict(DUPLICATE_SKILL)


@skills_bp.route('', methods=['GET'])
@api_errors('Failed to fetch skills')
def list_skills():
    return jsonify({'success': True, 'data': [skill_to_dict(s) for s in all_skills()]})


@skills_bp.route('/<skill_id>', methods=['GET'])
@api_errors('Failed to fetch skill')
def get_skill(skill_id):
    return jsonify({'success': True, 'data': skill_to_dict(get_or_404(Skill, skill_id, 'Skill'))})


@skills_bp.route('', methods=['POST'])
@admin_required
@api_errors('Failed to create skill')
def create_skill():
    payload = load_payload(SkillCreate, get_payload())

    skill = Skill(**payload.model_dump())
    db.session.add(skill)
    _commit_unique_name()

    log_activity('Skill Created', f'Skill "{skill.name}" created', ActivityType.SKILL)
    return jsonify({'success': True, 'data': skill_to_dict(skill)}), 201


@skills_bp.route('/<skill_id>', methods=['PUT'])
@admin_required
@api_errors('Failed to update skill')
def update_skill(skill_id):
    skill = get_or_404(Skill, skill_id, 'Skill')
    payload = load_payload(SkillUpdate, get_payload())

    apply_updates(skill, payload.model_dump(exclude_unset=True))
    _commit_unique_name()

    log_activity('Skill Updated', f'Skill "{skill.name}" updated', ActivityType.SKILL)
    return jsonify({'success': True, 'data': skill_to_dict(skill)})


@skills_bp.route('/<skill_id>', methods=['DELETE'])
@admin_required
@api_errors('Failed to delete skill')
def delete_skill(skill_id):
    skill = get_or_404(Skill, skill_id, 'Skill')
    name = skill.name

    db.session.delete(skill)
    db.session.commit()

    log_activity('Skill Deleted', f'Skill "{name}" deleted', ActivityType.SKILL)
    return jsonify({'success': True, 'message': 'Skill deleted successfully'})
