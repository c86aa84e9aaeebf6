"""
Messages Routes - Contact form submissions and the admin inbox
"""

from flask import current_app, jsonify
from extensions import db
from models import Message, ActivityType
from schemas import MessageCreate, load_payload
from utils.data import get_or_404, log_activity, message_to_dict
from utils.decorators import admin_required, api_errors
from utils.helpers import get_payload
from utils.security import get_client_ip
from . import messages_bp


@messages_bp.route('', methods=['POST'])
@api_errors('Failed to send message')
def create_message():
    """Public contact form submission"""
    payload = load_payload(MessageCreate, get_payload())

    message = Message(ip_address=get_client_ip(), **payload.model_dump())
    db.session.add(message)
    db.session.commit()

    log_activity('New Message', f'Message from {message.name}', ActivityType.MESSAGE)
    current_app.logger.info(f"Message saved, message_id: {message.id}")

    return jsonify({'success': True, 'message': 'Message sent successfully'}), 201


@messages_bp.route('', methods=['GET'])
@admin_required
@api_errors('Failed to fetch messages')
def list_messages():
    messages = Message.query.order_by(Message.created_at.desc()).all()
    return jsonify({'success': True, 'data': [message_to_dict(m) for m in messages]})


@messages_bp.route('/<message_id>', methods=['GET'])
@admin_required
@api_errors('Failed to fetch message')
def get_message(message_id):
    return jsonify({'success': True, 'data': message_to_dict(get_or_404(Message, message_id, 'Message'))})


@messages_bp.route('/<message_id>', methods=['DELETE'])
@admin_required
@api_errors('Failed to delete message')
def delete_message(message_id):
    message = get_or_404(Message, message_id, 'Message')
    sender = message.name

    db.session.delete(message)
    db.session.commit()

    log_activity('Message Deleted', f'Message from {sender} deleted', ActivityType.MESSAGE)
    current_app.logger.info(f"Deleted message {message_id} from DB")

    return jsonify({'success': True, 'message': 'Message deleted successfully'})
