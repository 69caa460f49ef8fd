#!/usr/bin/env python3
"""
WhatsApp Chat Organizer

Reads a WhatsApp chat export and writes a single HTML page with the
messages organized by year and category.
"""
import argparse
import json
import os
import sys

from categorizer import load_keyword_rules
from chat_parser import read_chat_file
from config import Config
from errors import ChatFormatError
from grouper import count_by_category, parse_and_group, summarize_groups
from html_renderer import generate_complete_html
from link_titles import collect_blog_titles


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Organize a WhatsApp chat export by year and category')
    parser.add_argument('chat_file', nargs='?', default=Config.CHAT_FILE, help='WhatsApp chat export file (.txt)')
    parser.add_argument('--output', default=Config.OUTPUT_FILE, help='HTML file to write')
    parser.add_argument('--json', dest='json_output', help='Also save the parsed messages as JSON')
    parser.add_argument('--keywords', default=Config.KEYWORDS_FILE, help='JSON file overriding the category keywords')
    parser.add_argument('--title', default=Config.CHAT_TITLE, help='Page title')
    parser.add_argument('--fetch-titles', action='store_true', default=Config.FETCH_TITLES,
                        help='Look up the titles of blog post links')
    parser.add_argument('--strict', action='store_true', help='Fail if the file has no WhatsApp messages')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not os.path.isfile(args.chat_file):
        print(f"Error: File {args.chat_file} not found", file=sys.stderr)
        return 1

    try:
        rules = load_keyword_rules(args.keywords)

        print('Reading WhatsApp chat file...')
        chat_text = read_chat_file(args.chat_file)

        print('Parsing messages...')
        messages, grouped = parse_and_group(chat_text, rules, strict=args.strict)
    except ChatFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: Could not read {args.chat_file}: {e}", file=sys.stderr)
        return 1

    print(f"Found {len(messages)} messages")

    print('Grouping messages by year and category...')
    for item in summarize_groups(grouped):
        print(f"{item['year']}: {item['message_count']} messages across {item['category_count']} categories")

    link_titles = []
    if args.fetch_titles:
        print('Fetching blog post titles...')
        link_titles = collect_blog_titles(messages)

    print('Generating HTML...')
    html = generate_complete_html(grouped, title=args.title, link_titles=link_titles)

    print(f"Writing organized chat to {args.output}...")
    with open(args.output, 'w', encoding='utf-8') as f:
        f.write(html)

    if args.json_output:
        output = {
            'message_count': len(messages),
            'category_counts': count_by_category(messages),
            'summary': summarize_groups(grouped),
            'messages': messages
        }
        with open(args.json_output, 'w', encoding='utf-8') as f:
            json.dump(output, f, ensure_ascii=False, indent=2)
        print(f"Results saved to {args.json_output}")

    print(f"Complete! WhatsApp chat has been organized and saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
