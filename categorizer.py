import json
from typing import Dict, List, Optional

from errors import ChatFormatError

MEDIA_MARKER = '<Media omitted>'
BLOG_URLS = ('http://www.profraguram.com', 'https://www.profraguram.com')
DEFAULT_CATEGORY = 'general'

# Keyword categories, evaluated in this order after the media and blog checks
DEFAULT_KEYWORDS = {
    'art-culture': [
        'temple', 'sculpture', 'art', 'architecture', 'heritage', 'monument', 'hampi',
        'angkor', 'kanchipuram', 'lepakshi', 'banteay', 'hoysala', 'vijayanagar', 'khmer',
        'gopuram', 'mural', 'carving', 'statue', 'shiva', 'vishnu', 'ganesha', 'durga',
        'mahisasura', 'deity', 'devi', 'kailasanathar', 'nuggehalli', 'mosale'
    ],
    'photography': [
        'photo', 'photograph', 'camera', 'image', 'shot', 'picture', 'lens', 'light',
        'captured', 'frame', 'beauty', 'landscape', 'portrait', 'sunrise', 'sunset',
        'big sur', 'bixby', 'monarch', 'butterfly', 'bird', 'nature'
    ],
    'festivals': [
        'happy', 'festival', 'celebration', 'wish', 'diwali', 'deepavali', 'onam', 'pongal',
        'new year', 'christmas', 'ganesha', 'chaturthi', 'navaratri', "teacher's day",
        'shivarathri', 'durga', 'ashtami'
    ],
    'philosophy': [
        'philosophy', 'spiritual', 'meditation', 'mindfulness', 'consciousness', 'buddha',
        'dharma', 'enlightenment', 'soul', 'peace', 'divine', 'sacred', 'blessing', 'prayer',
        'devotion', 'transcend', 'sublime', 'within', 'haiku', 'reflection', 'musing',
        'contemplat', 'introspect'
    ],
    'professional': [
        'patient', 'consult', 'report', 'assessment', 'therapy', 'medication', 'diagnosis',
        'clinic', 'refer', 'resperidone', 'prodep', 'swimming', 'dr.', 'sir', 'medical',
        'treatment', 'session', 'psychology', 'clinical', 'nimhans', 'prabhu'
    ],
}

STRUCTURAL_CATEGORIES = ('media', 'blog-posts')


def load_keyword_rules(path: Optional[str]) -> Dict[str, List[str]]:
    """
    Build the keyword rules, optionally overridden by a JSON file.

    The file holds an object of label -> list of keywords. A known label has
    its keyword list replaced; an unknown label is added after the built-in
    ones. Keywords are lower-cased since matching runs on lower-cased text.
    """
    rules = {category: list(keywords) for category, keywords in DEFAULT_KEYWORDS.items()}
    if not path:
        return rules

    try:
        with open(path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except (OSError, ValueError) as e:
        raise ChatFormatError(f"Could not read keyword rules from {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise ChatFormatError(f"Keyword rules in {path} must be a JSON object")

    for category, keywords in overrides.items():
        if category in STRUCTURAL_CATEGORIES or category == DEFAULT_CATEGORY:
            raise ChatFormatError(f"Category '{category}' is not keyword based and cannot be overridden")
        if not isinstance(keywords, list) or not all(isinstance(k, str) and k for k in keywords):
            raise ChatFormatError(f"Keywords for '{category}' must be a list of non-empty strings")
        rules[category] = [k.lower() for k in keywords]

    return rules


def categorize_message(content: str, rules: Optional[Dict[str, List[str]]] = None) -> List[str]:
    """Return the categories of a message, in rule order. Never empty."""
    if rules is None:
        rules = DEFAULT_KEYWORDS

    categories = []
    lower_content = content.lower()

    # Media marker is matched case-sensitively
    if MEDIA_MARKER in content:
        categories.append('media')

    if any(url in content for url in BLOG_URLS):
        categories.append('blog-posts')

    for category, keywords in rules.items():
        if any(keyword.lower() in lower_content for keyword in keywords):
            categories.append(category)

    if not categories:
        categories.append(DEFAULT_CATEGORY)

    return categories
