from unittest import mock

import requests

from link_titles import collect_blog_titles, extract_urls, fetch_url_title


def make_response(text):
    response = mock.Mock()
    response.text = text
    response.raise_for_status.return_value = None
    return response


def test_extract_urls_unique_in_order():
    messages = [
        {'content': 'see https://b.org and http://a.org'},
        {'content': 'again https://b.org\nhttps://c.org/x'},
    ]
    assert extract_urls(messages) == ['https://b.org', 'http://a.org', 'https://c.org/x']


@mock.patch('link_titles.requests.get')
def test_fetch_url_title(mock_get):
    mock_get.return_value = make_response('<html><head><title> Hampi Diaries </title></head></html>')

    assert fetch_url_title('https://www.profraguram.com/hampi', timeout=3) == 'Hampi Diaries'
    args, kwargs = mock_get.call_args
    assert args == ('https://www.profraguram.com/hampi',)
    assert kwargs['timeout'] == 3
    assert 'User-Agent' in kwargs['headers']


@mock.patch('link_titles.requests.get')
def test_fetch_url_title_without_title_tag(mock_get):
    mock_get.return_value = make_response('<html><body>no title</body></html>')
    assert fetch_url_title('https://www.profraguram.com/x') == 'https://www.profraguram.com/x'


@mock.patch('link_titles.requests.get')
def test_fetch_url_title_on_request_error(mock_get):
    mock_get.side_effect = requests.ConnectionError('offline')
    assert fetch_url_title('https://www.profraguram.com/x') == 'https://www.profraguram.com/x'


@mock.patch('link_titles.fetch_url_title')
def test_collect_blog_titles_only_looks_up_blog_links(mock_fetch):
    mock_fetch.side_effect = lambda url: f'Title of {url}'
    messages = [
        {'content': 'https://www.profraguram.com/a and https://example.com', 'categories': ['blog-posts']},
        {'content': 'https://www.profraguram.com/b', 'categories': ['general']},
    ]

    assert collect_blog_titles(messages) == [
        {'url': 'https://www.profraguram.com/a', 'title': 'Title of https://www.profraguram.com/a'}
    ]
    mock_fetch.assert_called_once_with('https://www.profraguram.com/a')
