"""Shared constants and configuration."""

import re

# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red',
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

# Timestamp layout accepted on the command line
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
TIMESTAMP_REGEX = re.compile(r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}', re.ASCII)

# Zone the input timestamps are interpreted in
DEFAULT_TIMEZONE = 'Asia/Tokyo'

# Pattern assembly
DATE_SEPARATOR = '-'
DATE_TIME_SEPARATOR = ' '
TIME_SEPARATOR = ':'
FULL_DIGIT_CLASS = '[0-9]'
DIGIT_SHORTHAND = r'\d'
