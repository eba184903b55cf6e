#file: aqstore/utils.py

from datetime import datetime
import pytz


def get_current_timestamp() -> int:
    """Get current UTC time as epoch seconds."""
    return int(datetime.now(pytz.utc).timestamp())


def location_matches(location: str, query: str) -> bool:
    """Case-insensitive substring match used by location search."""
    return query.casefold() in location.casefold()
