from datetime import datetime, timedelta

from extensions import db
from models import Message

VALID = {
    'name': 'Ada',
    'email': 'Ada@Example.com',
    'subject': 'Hello',
    'message': 'I liked your work.'
}


def test_visitor_can_send_message(client):
    response = client.post('/api/messages', json=VALID, headers={'X-Forwarded-For': '203.0.113.9, 10.0.0.1'})

    assert response.status_code == 201
    assert response.get_json() == {'success': True, 'message': 'Message sent successfully'}
    message = Message.query.one()
    assert message.email == 'ada@example.com'
    assert message.ip_address == '203.0.113.9'
    assert message.read is False


def test_invalid_email_is_rejected(client):
    response = client.post('/api/messages', json=dict(VALID, email='not-an-email'))

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Please provide a valid email'


def test_too_long_subject_is_rejected(client):
    response = client.post('/api/messages', json=dict(VALID, subject='x' * 101))

    assert response.status_code == 400
    assert Message.query.count() == 0


def test_inbox_requires_session(client):
    assert client.get('/api/messages').status_code == 401


def test_inbox_is_newest_first(client, auth_headers):
    now = datetime.utcnow()
    db.session.add_all([
        Message(name='Old', email='a@b.com', subject='s', message='m', created_at=now - timedelta(hours=1)),
        Message(name='New', email='a@b.com', subject='s', message='m', created_at=now),
    ])
    db.session.commit()

    names = [m['name'] for m in client.get('/api/messages', headers=auth_headers).get_json()['data']]

    assert names == ['New', 'Old']


def test_get_and_delete_message(client, auth_headers):
    client.post('/api/messages', json=VALID)
    message_id = Message.query.one().id

    assert client.get(f'/api/messages/{message_id}', headers=auth_headers).get_json()['data']['name'] == 'Ada'
    assert client.delete(f'/api/messages/{message_id}', headers=auth_headers).status_code == 200
    assert client.get(f'/api/messages/{message_id}', headers=auth_headers).status_code == 404
