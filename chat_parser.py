import re
from typing import Dict, List, Optional

from categorizer import categorize_message
from errors import ChatFormatError

# 1/2/23, 10:00 am - Alice: Hello
HEADER_PATTERN = re.compile(
    r'^([0-9]{1,2}/[0-9]{1,2}/(?:[0-9]{4}|[0-9]{1,2})), ([0-9]{1,2}:[0-9]{1,2}\s*[ap]m) - ([^:]+): (.*)',
    re.IGNORECASE
)


def expand_year(year: str) -> str:
    """Two-digit years are taken to be in the 2000s."""
    if len(year) == 2:
        return '20' + year
    return year


def classify_line(line: str) -> Optional[Dict[str, str]]:
    """
    Return the header fields of a line that starts a new message.

    Lines that don't start a message give None; the parser decides
    whether they continue the current one.
    """
    match = HEADER_PATTERN.match(line)
    if not match:
        return None

    date, time, sender, text = match.groups()
    day, month, year = date.split('/')
    return {
        'date': date,
        'time': time,
        'sender': sender.strip(),
        'text': text,
        'year': expand_year(year),
        'month': month,
        'day': day
    }


def parse_whatsapp_chat(text: str, rules: Optional[Dict[str, List[str]]] = None,
                        strict: bool = False) -> List[Dict]:
    """Parse a WhatsApp chat export into message records, in input order."""
    messages = []
    current_message = None
    header_count = 0

    for line in text.split('\n'):
        line = line.rstrip('\r')
        header = classify_line(line)

        if header:
            header_count += 1
            if current_message:
                messages.append(current_message)

            current_message = {
                'date': header['date'],
                'time': header['time'],
                'sender': header['sender'],
                'content': header['text'],
                'year': header['year'],
                'month': header['month'],
                'day': header['day'],
                'categories': categorize_message(header['text'], rules)
            }
        elif current_message and line.strip():
            # Continuation of the previous message
            current_message['content'] += '\n' + line
            current_message['categories'] = categorize_message(current_message['content'], rules)

    # Add the last message
    if current_message:
        messages.append(current_message)

    if strict and header_count == 0 and text.strip():
        raise ChatFormatError("No WhatsApp message headers found in chat export")

    return messages


def read_chat_file(file_path: str) -> str:
    with open(file_path, 'r', encoding='utf-8-sig', errors='replace') as file:
        return file.read()
