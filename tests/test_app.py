import io
from unittest import mock

import pytest

from app import app

CHAT = (
    b"1/2/23, 10:00 am - Alice: Good morning\n"
    b"2/2/23, 11:00 am - Bob: Happy Pongal https://www.profraguram.com/pongal\n"
)


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def upload(client, data=CHAT, filename='chat.txt', query='', **form):
    form['file'] = (io.BytesIO(data), filename)
    return client.post('/' + query, data=form, content_type='multipart/form-data')


def test_index_form(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'WhatsApp Chat Organizer' in response.data
    assert b'type="file"' in response.data


def test_health(client):
    assert client.get('/health').get_json() == {'status': 'ok'}


def test_missing_file(client):
    response = client.post('/', data={'note': 'no file'}, content_type='multipart/form-data')
    assert response.status_code == 400
    assert b'No file selected' in response.data


def test_empty_filename(client):
    response = upload(client, filename='')
    assert response.status_code == 400
    assert b'No file selected' in response.data


def test_upload_renders_organized_page(client):
    response = upload(client)
    assert response.status_code == 200
    assert b'<h2 id="2023" class="year">2023</h2>' in response.data
    assert b'Festivals &amp; Celebrations' in response.data


def test_upload_json(client):
    response = upload(client, query='?format=json')
    data = response.get_json()

    assert data['message_count'] == 2
    assert data['category_counts'] == {'general': 1, 'blog-posts': 1, 'festivals': 1}
    assert data['summary'] == [{'year': '2023', 'message_count': 3, 'category_count': 3}]
    assert data['groups']['2023']['general'][0]['sender'] == 'Alice'


def test_non_chat_upload_is_not_an_error(client):
    response = upload(client, data=b'hello there', query='?format=json')
    assert response.status_code == 200
    assert response.get_json()['message_count'] == 0


def test_strict_upload_rejects_non_chat(client):
    response = upload(client, data=b'hello there', query='?format=json&strict=1')
    assert response.status_code == 400
    assert 'error' in response.get_json()


@mock.patch('app.collect_blog_titles')
def test_fetch_titles_option(mock_collect, client):
    mock_collect.return_value = [{'url': 'https://www.profraguram.com/pongal', 'title': 'Pongal 2023'}]

    response = upload(client, fetch_titles='1')

    assert mock_collect.called
    assert b'Pongal 2023</a>' in response.data


def test_upload_too_large(client):
    limit = app.config['MAX_CONTENT_LENGTH']
    app.config['MAX_CONTENT_LENGTH'] = 100
    try:
        response = upload(client, data=b'x' * 500)
    finally:
        app.config['MAX_CONTENT_LENGTH'] = limit
    assert response.status_code == 413
    assert b'File too large' in response.data
