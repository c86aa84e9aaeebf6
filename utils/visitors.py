"""
Visitors Module - Per-day visitor counting

One VisitorDay record per calendar day (server local time). Two counting
modes are supported:

- every-visit: each tracking call adds one to the day's count
- unique-ip: only the first call from an IP on that day adds one

In both modes the day's IP list keeps each address once. The read-then-write
below is not atomic, so concurrent hits on the same day can under-count.
"""

from datetime import datetime
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from extensions import db
from models import VisitorDay, VisitorCountMode

DAY_KEY_FORMAT = '%a %b %d %Y'


def today_key(now=None):
    """Day key for the given (or current) local time, e.g. 'Sat Oct 18 2026'"""
    return (now or datetime.now()).strftime(DAY_KEY_FORMAT)


def count_mode():
    return VisitorCountMode(current_app.config.get('VISITOR_COUNT_MODE', VisitorCountMode.EVERY_VISIT.value))


def _find_day(day):
    return VisitorDay.query.filter_by(date=day).first()


def _create_day(day, client_ip):
    """Insert the day's first visit, or return None if another request won the insert"""
    visitor = VisitorDay(date=day, count=1, ip_addresses=[client_ip] if client_ip else [])
    db.session.add(visitor)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        current_app.logger.info(f"Day record {day} created concurrently, counting as a repeat hit")
        return None
    current_app.logger.info(f"First visitor of the day! Count = 1, IP = {client_ip}")
    return visitor


def track_visit(client_ip, mode=None, day=None):
    """
    Record one visit and return the day's VisitorDay record.

    Args:
        client_ip (str): Visitor IP, may be None when unknown
        mode (VisitorCountMode, optional): Defaults to VISITOR_COUNT_MODE
        day (str, optional): Day key, defaults to today
    """
    mode = VisitorCountMode(mode) if mode else count_mode()
    day = day or today_key()

    visitor = _find_day(day)
    if visitor is None:
        created = _create_day(day, client_ip)
        if created is not None:
            return created
        visitor = _find_day(day)

    ips = list(visitor.ip_addresses or [])
    is_new_ip = bool(client_ip) and client_ip not in ips
    if is_new_ip:
        # Reassign so the JSON column is flagged dirty
        visitor.ip_addresses = ips + [client_ip]

    if mode == VisitorCountMode.EVERY_VISIT or is_new_ip:
        visitor.count += 1
        db.session.commit()
        current_app.logger.info(f"Visitor tracked ({mode.value}): Count = {visitor.count}, IP = {client_ip}")
    else:
        current_app.logger.info(f"Returning visitor (not counted): IP = {client_ip}")
    return visitor


def total_visits():
    """Sum of all daily counts"""
    return int(db.session.query(func.coalesce(func.sum(VisitorDay.count), 0)).scalar() or 0)


def summed_unique_visits(days=None):
    """Sum of per-day IP set sizes, as shown on the public site"""
    days = days if days is not None else VisitorDay.query.all()
    return sum(len(day.ip_addresses or []) for day in days)


def visitor_totals():
    """
    Dashboard aggregate: total visits, distinct IPs across all days and
    today's count. The union is recomputed on every call.
    """
    days = VisitorDay.query.all()
    all_ips = set()
    for day in days:
        all_ips.update(day.ip_addresses or [])

    today = next((day for day in days if day.date == today_key()), None)
    return {
        'totalVisitors': sum(day.count or 0 for day in days),
        'uniqueVisitors': len(all_ips),
        'todayVisitors': today.count if today else 0
    }


__all__ = [
    'today_key',
    'count_mode',
    'track_visit',
    'total_visits',
    'summed_unique_visits',
    'visitor_totals'
]
