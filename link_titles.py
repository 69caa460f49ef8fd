import re
from typing import Dict, List

import requests
from bs4 import BeautifulSoup

from categorizer import BLOG_URLS
from config import Config

URL_PATTERN = re.compile(r'https?://[^\s<]+')


def extract_urls(messages: List[Dict]) -> List[str]:
    """Extract URLs from messages, first occurrence order."""
    urls = []
    seen = set()
    for msg in messages:
        for url in URL_PATTERN.findall(msg['content']):
            if url not in seen:
                seen.add(url)
                urls.append(url)
    return urls


def fetch_url_title(url: str, timeout: int = None) -> str:
    """Fetch the title of a webpage."""
    if timeout is None:
        timeout = Config.REQUEST_TIMEOUT
    try:
        headers = {
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
        }
        resp = requests.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
        soup = BeautifulSoup(resp.text, 'html.parser')
        title = soup.title.string if soup.title and soup.title.string else url
        return title.strip()
    except requests.RequestException as e:
        print(f"Error fetching title for {url}: {e}")
        return url


def collect_blog_titles(messages: List[Dict]) -> List[Dict[str, str]]:
    """Look up titles for the blog post links in the chat."""
    blog_messages = [msg for msg in messages if 'blog-posts' in msg['categories']]
    link_titles = []
    for url in extract_urls(blog_messages):
        if url.startswith(BLOG_URLS):
            link_titles.append({'url': url, 'title': fetch_url_title(url)})
    return link_titles
