import re

from conftest import login
from models import ActivityLogEntry


def test_login_with_wrong_password_is_rejected(client):
    response = login(client, password='wrong')

    assert response.status_code == 401
    body = response.get_json()
    assert body['success'] is False
    assert body['error'] == 'Invalid credentials'
    assert 'sessionId' not in body


def test_login_with_unknown_user_gives_same_error(client):
    response = login(client, username='nobody')

    assert response.status_code == 401
    assert response.get_json()['error'] == 'Invalid credentials'


def test_login_returns_hex_token(client):
    response = login(client)

    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert re.fullmatch(r'[0-9a-f]{32}', body['sessionId'])
    assert body['admin'] == {'username': 'admin'}


def test_login_requires_both_fields(client):
    response = client.post('/api/admin/login', json={'username': 'admin'})

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_login_is_logged_as_activity(client):
    login(client)

    entry = ActivityLogEntry.query.filter_by(type='login').one()
    assert entry.activity == 'Admin Login'


def test_verify_accepts_live_token(client, auth_headers):
    response = client.get('/api/admin/verify', headers=auth_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body['valid'] is True
    assert body['admin']['username'] == 'admin'


def test_verify_accepts_bearer_prefix(client, auth_headers):
    headers = {'Authorization': f"Bearer {auth_headers['Authorization']}"}

    assert client.get('/api/admin/verify', headers=headers).status_code == 200


def test_verify_without_token_is_unauthorized(client):
    response = client.get('/api/admin/verify')

    assert response.status_code == 401
    assert response.get_json() == {'success': False, 'error': 'Authentication required'}


def test_verify_with_unknown_token_is_unauthorized(client):
    response = client.get('/api/admin/verify', headers={'Authorization': 'f' * 32})

    assert response.status_code == 401


def test_token_expires_after_a_day(client, auth_headers, clock):
    assert client.get('/api/admin/verify', headers=auth_headers).status_code == 200

    clock.advance(24 * 60 * 60)

    response = client.get('/api/admin/verify', headers=auth_headers)
    assert response.status_code == 401
    assert response.get_json()['error'] == 'Authentication required'


def test_token_is_not_renewed_by_use(client, auth_headers, clock):
    clock.advance(23 * 60 * 60)
    assert client.get('/api/admin/verify', headers=auth_headers).status_code == 200

    clock.advance(60 * 60)
    assert client.get('/api/admin/verify', headers=auth_headers).status_code == 401


def test_logout_destroys_token(client, auth_headers):
    response = client.post('/api/admin/logout', headers=auth_headers)
    assert response.status_code == 200

    assert client.get('/api/admin/verify', headers=auth_headers).status_code == 401


def test_change_password(client, auth_headers):
    response = client.put('/api/admin/change-password', headers=auth_headers, json={
        'currentPassword': 'password123',
        'newPassword': 'better-secret'
    })

    assert response.status_code == 200
    assert login(client, password='password123').status_code == 401
    assert login(client, password='better-secret').status_code == 200


def test_change_password_rejects_wrong_current_password(client, auth_headers):
    response = client.put('/api/admin/change-password', headers=auth_headers, json={
        'currentPassword': 'not-it',
        'newPassword': 'better-secret'
    })

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Current password is incorrect'


def test_change_password_rejects_short_password(client, auth_headers):
    response = client.put('/api/admin/change-password', headers=auth_headers, json={
        'currentPassword': 'password123',
        'newPassword': '123'
    })

    assert response.status_code == 400
    assert 'at least 6 characters' in response.get_json()['error']


def test_change_password_requires_session(client):
    response = client.put('/api/admin/change-password', json={
        'currentPassword': 'password123',
        'newPassword': 'better-secret'
    })

    assert response.status_code == 401
