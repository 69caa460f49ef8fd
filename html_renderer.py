"""
Render grouped chat messages as a single static HTML page
with year and category filters.
"""
import html
import os
import re
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from categorizer import MEDIA_MARKER
from config import Config
from link_titles import URL_PATTERN

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
TEMPLATE_NAME = 'organized_chat.html'

DISPLAY_NAMES = {
    'art-culture': 'Art & Culture',
    'photography': 'Photography',
    'blog-posts': 'Blog Posts',
    'festivals': 'Festivals & Celebrations',
    'philosophy': 'Philosophy & Spirituality',
    'professional': 'Professional Communications',
    'general': 'General'
}

# Media-only buckets are not shown as sections
HIDDEN_CATEGORIES = {'media'}

CONTENT_TOKEN_PATTERN = re.compile('(' + URL_PATTERN.pattern + '|' + re.escape(MEDIA_MARKER) + ')')

_environment = None


def get_display_name(category: str) -> str:
    if category in DISPLAY_NAMES:
        return DISPLAY_NAMES[category]
    return category[:1].upper() + category[1:].replace('-', ' & ', 1)


def category_slug(category: str) -> str:
    return re.sub(r'[^a-z0-9]', '-', category, flags=re.IGNORECASE).lower()


def sender_class(sender: str, primary_sender: str = None) -> str:
    if primary_sender is None:
        primary_sender = Config.PRIMARY_SENDER
    if primary_sender and primary_sender.lower() in sender.lower():
        return 'primary'
    return 'secondary'


def format_content(content: str, link_titles: Optional[Dict[str, str]] = None) -> Markup:
    """Escape message text, turning links, media markers and newlines into markup."""
    link_titles = link_titles or {}
    parts = []

    for i, piece in enumerate(CONTENT_TOKEN_PATTERN.split(content)):
        if i % 2 == 0:
            parts.append(html.escape(piece).replace('\n', '<br>'))
        elif piece == MEDIA_MARKER:
            parts.append('<div class="media-indicator">[Media omitted]</div>')
        else:
            url = html.escape(piece)
            label = html.escape(link_titles.get(piece, piece))
            parts.append(f'<a href="{url}" class="blog-link" target="_blank">{label}</a>')

    return Markup(''.join(parts))


def get_environment() -> Environment:
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(['html'])
        )
        _environment.globals.update(
            display_name=get_display_name,
            category_slug=category_slug,
            sender_class=sender_class,
            format_content=format_content
        )
    return _environment


def build_page_context(grouped: Dict[str, Dict[str, List[Dict]]], title: str = None,
                       link_titles: Optional[List[Dict[str, str]]] = None) -> Dict:
    """Collect everything the page template needs from the grouped index."""
    years = sorted(grouped)

    all_categories = []
    for year in years:
        for category in grouped[year]:
            if category not in HIDDEN_CATEGORIES and category not in all_categories:
                all_categories.append(category)

    sections = []
    for year in years:
        sections.append({
            'year': year,
            'categories': [
                (category, messages) for category, messages in grouped[year].items()
                if category not in HIDDEN_CATEGORIES
            ]
        })

    total_messages = sum(
        len(messages) for categories in grouped.values() for messages in categories.values()
    )

    return {
        'title': title or Config.CHAT_TITLE,
        'years': years,
        'all_categories': all_categories,
        'sections': sections,
        'total_messages': total_messages,
        'link_titles': {item['url']: item['title'] for item in (link_titles or [])}
    }


def generate_complete_html(grouped: Dict[str, Dict[str, List[Dict]]], title: str = None,
                           link_titles: Optional[List[Dict[str, str]]] = None) -> str:
    template = get_environment().get_template(TEMPLATE_NAME)
    return template.render(**build_page_context(grouped, title, link_titles))
