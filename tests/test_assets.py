import pytest

from utils.assets import AssetStore, discard_image, resolve_image
from utils.errors import UploadFailed

CLOUD_IMAGE = 'https://res.cloudinary.com/demo/image/upload/v1699999999/portfolio/profiles/me.jpg'


@pytest.mark.parametrize('url, public_id', [
    (CLOUD_IMAGE, 'portfolio/profiles/me'),
    ('https://res.cloudinary.com/demo/image/upload/portfolio/projects/shot.png?w=200', 'portfolio/projects/shot'),
    ('https://example.com/image.png', None),
])
def test_public_id_from_url(url, public_id):
    assert AssetStore.public_id_from_url(url) == public_id


def test_is_cloud_url():
    assert AssetStore.is_cloud_url(CLOUD_IMAGE)
    assert not AssetStore.is_cloud_url('/uploads/old.png')
    assert not AssetStore.is_cloud_url(None)


def test_resolve_prefers_upload_over_url(app, cloud):
    value, changed = resolve_image(b'bytes', 'https://example.com/x.png', None, 'portfolio/projects')

    assert changed is True
    assert value.startswith('https://res.cloudinary.com/')
    assert cloud.uploads[0]['bytes'] == b'bytes'


def test_resolve_keeps_current_for_same_url(app, cloud):
    assert resolve_image(None, '/uploads/a.png', '/uploads/a.png', 'x') == ('/uploads/a.png', False)
    assert resolve_image(None, None, '/uploads/a.png', 'x') == ('/uploads/a.png', False)
    assert cloud.uploads == []


def test_upload_failure_raises(app, cloud):
    cloud.fail_uploads = True

    with pytest.raises(UploadFailed):
        resolve_image(b'bytes', None, None, 'portfolio/projects')


def test_discard_local_path(app, tmp_path):
    image = tmp_path / 'uploads' / 'nested' / 'old.png'
    image.parent.mkdir()
    image.write_bytes(b'x')

    discard_image('uploads/nested/old.png')

    assert not image.exists()


def test_discard_cloud_url(app, cloud):
    discard_image(CLOUD_IMAGE)

    assert cloud.destroyed == ['portfolio/profiles/me']


def test_discard_external_url_without_fallback_does_nothing(app, cloud, tmp_path):
    image = tmp_path / 'uploads' / 'shot.png'
    image.write_bytes(b'x')

    discard_image('https://example.com/images/shot.png')

    assert image.exists()
    assert cloud.destroyed == []


def test_discard_fallback_uses_last_segment(app, tmp_path):
    image = tmp_path / 'uploads' / 'shot.png'
    image.write_bytes(b'x')

    discard_image('https://example.com/images/shot.png', fallback=True)

    assert not image.exists()


def test_discard_refuses_paths_outside_upload_folder(app, tmp_path):
    secret = tmp_path / 'secret.txt'
    secret.write_text('keep')

    discard_image('/uploads/../secret.txt')

    assert secret.exists()


def test_discard_swallows_failures(app, monkeypatch):
    import cloudinary.uploader

    def broken(public_id, **options):
        raise RuntimeError('cdn down')

    monkeypatch.setattr(cloudinary.uploader, 'destroy', broken)

    assert discard_image(CLOUD_IMAGE) is None
    assert discard_image.best_effort is True
