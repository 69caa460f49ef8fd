"""
Settings for the chat organizer, read from the environment.
A .env file in the working directory is loaded first.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    CHAT_FILE = os.getenv('CHAT_FILE', 'WhatsApp Chat.txt')
    OUTPUT_FILE = os.getenv('OUTPUT_FILE', 'index.html')
    CHAT_TITLE = os.getenv('CHAT_TITLE', 'WhatsApp Chat - Organized')
    PRIMARY_SENDER = os.getenv('PRIMARY_SENDER', 'raguram')
    KEYWORDS_FILE = os.getenv('KEYWORDS_FILE') or None
    FETCH_TITLES = _env_flag('FETCH_TITLES')
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', 5))
    MAX_UPLOAD_MB = int(os.getenv('MAX_UPLOAD_MB', 10))
    PORT = int(os.getenv('PORT', 5000))
