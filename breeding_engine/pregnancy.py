"""
pregnancy.py - breeding timeline
Due dates, cooldown arithmetic and recording a completed pairing
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from .models import Dog
from .generator import BreedingConfig


logger = logging.getLogger(__name__)

WEEK = timedelta(weeks=1)


def _comparable(a: datetime, b: datetime) -> Tuple[datetime, datetime]:
    """Mixed naive/aware pairs are compared in UTC, naive values read as local time"""
    if (a.tzinfo is None) != (b.tzinfo is None):
        return a.astimezone(timezone.utc), b.astimezone(timezone.utc)
    return a, b


def weeks_between(start: datetime, end: datetime) -> float:
    """Fractional weeks from start to end (negative if end is earlier)"""
    start, end = _comparable(start, end)
    return (end - start) / WEEK


def pregnancy_due_date(
    now: Optional[datetime] = None,
    config: Optional[BreedingConfig] = None
) -> datetime:
    cfg = config or BreedingConfig()
    return (now or datetime.now()) + timedelta(weeks=cfg.pregnancy_weeks)


def is_pregnancy_complete(due: datetime, now: Optional[datetime] = None) -> bool:
    return weeks_between(due, now or datetime.now()) >= 0


def weeks_remaining(due: datetime, now: Optional[datetime] = None) -> int:
    """Whole weeks until the due date, rounded up; 0 once it has passed"""
    return max(0, math.ceil(weeks_between(now or datetime.now(), due)))


def record_breeding(
    sire: Dog,
    dam: Dog,
    now: Optional[datetime] = None,
    config: Optional[BreedingConfig] = None
) -> datetime:
    """
    Mark a pairing on both parents: cooldowns start now, the dam is pregnant.

    Returns:
        the dam's due date
    """
    now = now or datetime.now()
    due = pregnancy_due_date(now, config)

    sire.last_bred = now
    dam.last_bred = now
    dam.is_pregnant = True
    dam.pregnancy_due = due

    logger.debug("%s bred to %s, due %s", dam.id, sire.id, due.isoformat())
    return due
