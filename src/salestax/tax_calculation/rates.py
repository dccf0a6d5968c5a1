"""Effective rate resolution, including historical rate supersession."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable, Optional

from ..exceptions import DateParseError
from ..utils.logging import get_logger
from .models import NO_TAX, RateRecord
from .repository import ReferenceDataRepository

logger = get_logger(__name__)

BOUNDARY_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
BOUNDARY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_boundary(value: str) -> datetime:
    """Parse a history key such as ``2020-12-31T23:00:00.000Z`` as UTC."""
    if not isinstance(value, str) or not BOUNDARY_PATTERN.fullmatch(value):
        raise DateParseError(value)
    try:
        parsed = datetime.strptime(value, BOUNDARY_FORMAT)
    except ValueError as e:
        raise DateParseError(value, f"Failed to parse date {value!r}: {e}") from e
    return parsed.replace(tzinfo=timezone.utc)


def select_effective_rate(record: RateRecord, at: datetime) -> RateRecord:
    """Pick the record in force at ``at``.

    Each ``before`` entry is the rate that applied until its boundary. The
    entry with the earliest boundary still strictly after ``at`` wins; when
    every boundary has passed, the top-level record is current.
    """
    if not record.before:
        return record

    at = _as_utc(at)
    active_key: Optional[str] = None
    active_date: Optional[datetime] = None
    for key in record.before:
        boundary = parse_boundary(key)
        if at < boundary and (active_date is None or boundary < active_date):
            active_key, active_date = key, boundary

    if active_key is None:
        return record
    return record.before[active_key]


class RateResolver:
    """Resolve country and state rates against the bundled rate table."""

    def __init__(self, repository: ReferenceDataRepository, clock: Optional[Clock] = None) -> None:
        self.repository = repository
        self.clock = clock or utc_now

    def resolve(self, country_code: str, at: Optional[datetime] = None) -> RateRecord:
        code = country_code.upper()
        record = self.repository.rates().get(code)
        if record is None:
            logger.debug(f"No rate recorded for {code}, treating as untaxed")
            return NO_TAX

        when = at if at is not None else self.clock()
        try:
            return select_effective_rate(record, when)
        except DateParseError as e:
            raise DateParseError(e.value, f"Failed to get tax rate for {code}: {e}") from e

    def resolve_state(
        self, country_code: str, state_code: Optional[str], at: Optional[datetime] = None
    ) -> RateRecord:
        """State-level rate; unmapped states count as untaxed."""
        if not state_code:
            return NO_TAX
        country = self.resolve(country_code, at)
        state = country.states.get(state_code.upper())
        if state is None:
            return NO_TAX

        when = at if at is not None else self.clock()
        try:
            return select_effective_rate(state, when)
        except DateParseError as e:
            raise DateParseError(
                e.value, f"Failed to get tax rate for {country_code.upper()}-{state_code.upper()}: {e}"
            ) from e
