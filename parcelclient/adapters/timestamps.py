from datetime import datetime

from dateutil.parser import isoparse
from dateutil.tz import tzutc


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 wire timestamp; naive values are taken as UTC."""
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tzutc())
    return parsed
