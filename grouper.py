from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from chat_parser import parse_whatsapp_chat


def group_messages(messages: List[Dict]) -> Dict[str, Dict[str, List[Dict]]]:
    """
    Index messages by year, then by category.

    A message with several categories lands in each of their buckets.
    Buckets keep input order; years and categories are not sorted.
    """
    grouped = {}

    for message in messages:
        year_groups = grouped.setdefault(message['year'], {})
        for category in message['categories']:
            year_groups.setdefault(category, []).append(message)

    return grouped


def summarize_groups(grouped: Dict[str, Dict[str, List[Dict]]]) -> List[Dict]:
    """Per-year totals, oldest year first."""
    summary = []
    for year in sorted(grouped):
        categories = grouped[year]
        summary.append({
            'year': year,
            'message_count': sum(len(msgs) for msgs in categories.values()),
            'category_count': len(categories)
        })
    return summary


def count_by_category(messages: List[Dict]) -> Dict[str, int]:
    counts = defaultdict(int)
    for message in messages:
        for category in message['categories']:
            counts[category] += 1
    return dict(counts)


def parse_and_group(text: str, rules: Optional[Dict[str, List[str]]] = None,
                    strict: bool = False) -> Tuple[List[Dict], Dict[str, Dict[str, List[Dict]]]]:
    messages = parse_whatsapp_chat(text, rules, strict=strict)
    return messages, group_messages(messages)
