from rest_framework.test import APIClient


def test_unmatched_route_serves_client_index(settings, tmp_path):
    (tmp_path / 'index.html').write_text('<app-root></app-root>')
    settings.CLIENT_DIST_DIR = tmp_path
    response = APIClient().get('/patients/list')
    assert response.status_code == 200
    assert b''.join(response.streaming_content) == b'<app-root></app-root>'


def test_missing_bundle_answers_404(settings, tmp_path):
    settings.CLIENT_DIST_DIR = tmp_path / 'missing'
    response = APIClient().get('/reports')
    assert response.status_code == 404
    assert response.json() == {'message': 'Client bundle not found!'}


def test_api_prefix_never_falls_back(settings, tmp_path):
    (tmp_path / 'index.html').write_text('<app-root></app-root>')
    settings.CLIENT_DIST_DIR = tmp_path
    response = APIClient().get('/api/patients/extra/segment')
    assert response.status_code == 404
    assert response.json() == {'message': 'Resource not found!'}
