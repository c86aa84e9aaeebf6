"""
Helpers Module - Request payload access and raw input coercion
"""

import json
import re
from flask import request

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def get_payload():
    """Request body as a plain dict, from JSON or (multipart) form data"""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def _technology_name(item):
    if isinstance(item, str):
        return item.strip()
    if isinstance(item, dict) and item.get('name'):
        return str(item['name']).strip()
    return str(item).strip()


def parse_technologies(value):
    """
    Normalize a technologies field into a list of trimmed strings.

    Accepts a list, a JSON array of strings or {name} objects, or a comma
    separated string. Anything that is not a JSON array is comma split.
    Empty entries are dropped.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        items = value
    else:
        text = str(value)
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        items = parsed if isinstance(parsed, list) else text.split(',')
    names = (_technology_name(item) for item in items if item is not None)
    return [name for name in names if name]


def parse_flag(value):
    """True only for boolean true or the literal string 'true'"""
    return value is True or value == 'true'


def parse_active(value):
    """True unless explicitly false"""
    return not (value is False or value == 'false')


def parse_leading_int(value, default=0):
    """Integer prefix of a value ('12abc' -> 12), else ``default``"""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else default


__all__ = [
    'get_payload',
    'parse_technologies',
    'parse_flag',
    'parse_active',
    'parse_leading_int'
]
