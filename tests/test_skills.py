from datetime import datetime, timedelta

from extensions import db
from models import Skill


def test_create_skill(client, auth_headers):
    response = client.post('/api/skills', headers=auth_headers, json={'name': 'Python', 'category': 'language'})

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['name'] == 'Python'
    assert data['icon'] == 'fas fa-code'
    assert data['category'] == 'language'


def test_duplicate_name_is_a_conflict(client, auth_headers):
    client.post('/api/skills', headers=auth_headers, json={'name': 'React'})

    response = client.post('/api/skills', headers=auth_headers, json={'name': 'React'})

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Skill with this name already exists'}
    assert Skill.query.count() == 1


def test_names_are_case_sensitive(client, auth_headers):
    client.post('/api/skills', headers=auth_headers, json={'name': 'React'})

    response = client.post('/api/skills', headers=auth_headers, json={'name': 'react'})

    assert response.status_code == 201
    assert Skill.query.count() == 2


def test_rename_to_existing_name_is_a_conflict(client, auth_headers):
    client.post('/api/skills', headers=auth_headers, json={'name': 'Vue'})
    other = client.post('/api/skills', headers=auth_headers, json={'name': 'Svelte'}).get_json()['data']

    response = client.put(f"/api/skills/{other['id']}", headers=auth_headers, json={'name': 'Vue'})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Skill with this name already exists'
    assert db.session.get(Skill, other['id']).name == 'Svelte'


def test_invalid_category_is_rejected(client, auth_headers):
    response = client.post('/api/skills', headers=auth_headers, json={'name': 'Go', 'category': 'cooking'})

    assert response.status_code == 400


def test_list_is_featured_first_then_newest(client):
    now = datetime.utcnow()
    db.session.add_all([
        Skill(name='Old', created_at=now - timedelta(days=2)),
        Skill(name='New', created_at=now),
        Skill(name='Starred', featured=True, created_at=now - timedelta(days=5)),
    ])
    db.session.commit()

    names = [s['name'] for s in client.get('/api/skills').get_json()['data']]

    assert names == ['Starred', 'New', 'Old']


def test_update_and_delete(client, auth_headers):
    skill = client.post('/api/skills', headers=auth_headers, json={'name': 'SQL'}).get_json()['data']

    updated = client.put(f"/api/skills/{skill['id']}", headers=auth_headers, json={'featured': 'true'})
    assert updated.get_json()['data']['featured'] is True

    assert client.delete(f"/api/skills/{skill['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/skills/{skill['id']}").status_code == 404


def test_writes_require_session(client):
    assert client.post('/api/skills', json={'name': 'Rust'}).status_code == 401
    assert client.delete('/api/skills/any').status_code == 401


def test_update_rejects_null_name(client, auth_headers):
    skill = client.post('/api/skills', headers=auth_headers, json={'name': 'Django'}).get_json()['data']

    response = client.put(f"/api/skills/{skill['id']}", headers=auth_headers, json={'name': None})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'name cannot be null'
    assert db.session.get(Skill, skill['id']).name == 'Django'
