import io

import cloudinary.uploader
import pytest
from flask import g

from app import create_app
from extensions import db, sessions

CLOUD_URL = 'https://res.cloudinary.com/demo/image/upload/v1700000000/{public_id}.png'


class FakeCloud:
    """Records CDN calls instead of talking to Cloudinary"""

    def __init__(self):
        self.uploads = []
        self.destroyed = []
        self.fail_uploads = False

    def upload(self, file, folder=None, **options):
        if self.fail_uploads:
            raise RuntimeError('cdn unavailable')
        public_id = f'{folder}/asset{len(self.uploads) + 1}'
        self.uploads.append({'public_id': public_id, 'bytes': file.read(), 'options': options})
        return {'secure_url': CLOUD_URL.format(public_id=public_id), 'public_id': public_id}

    def destroy(self, public_id, **options):
        self.destroyed.append(public_id)
        return {'result': 'ok'}


class FakeClock:
    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def cloud(monkeypatch):
    fake = FakeCloud()
    monkeypatch.setattr(cloudinary.uploader, 'upload', fake.upload)
    monkeypatch.setattr(cloudinary.uploader, 'destroy', fake.destroy)
    return fake


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(sessions, 'clock', fake)
    return fake


@pytest.fixture
def app(tmp_path, cloud, clock):
    upload_folder = tmp_path / 'uploads'
    frontend_folder = tmp_path / 'frontend'
    upload_folder.mkdir()
    frontend_folder.mkdir()
    (frontend_folder / 'index.html').write_text('<html><body>portfolio</body></html>')
    (frontend_folder / 'app.js').write_text('console.log("portfolio");')

    app = create_app('testing', {
        'UPLOAD_FOLDER': str(upload_folder),
        'FRONTEND_FOLDER': str(frontend_folder),
    })

    # The test keeps one app context open, so every client request shares
    # its `g`. Drop the user Flask-Login cached there by earlier requests.
    @app.before_request
    def forget_cached_user():
        g.pop('_login_user', None)

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username='admin', password='password123'):
    return client.post('/api/admin/login', json={'username': username, 'password': password})


@pytest.fixture
def auth_headers(client):
    response = login(client)
    assert response.status_code == 200
    return {'Authorization': response.get_json()['sessionId']}


def image_file(name='photo.png', content=b'\x89PNG fake image bytes', mimetype='image/png'):
    return (io.BytesIO(content), name, mimetype)
