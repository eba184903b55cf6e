#file: aqstore_ui/data_fetch.py

import aiohttp
import logging
from typing import Any, Dict, List, Optional

from aqstore.config import API_URL


async def _get_json(path: str, params: Optional[Dict[str, Any]] = None, base_url: str = API_URL):
    """GET a JSON document from the store API. Raises aiohttp.ClientError on failure."""
    url = f"{base_url}{path}"
    async with aiohttp.ClientSession() as session:
        async with session.get(url, params=params) as response:
            response.raise_for_status()
            return await response.json()


async def _fetch_records(path: str, params: Optional[Dict[str, Any]] = None,
                         base_url: str = API_URL) -> List[Dict[str, Any]]:
    try:
        return await _get_json(path, params, base_url)
    except aiohttp.ClientError as e:
        logging.error(f"Error fetching {path}: {e}")
        return []


async def fetch_all_records(base_url: str = API_URL) -> List[Dict[str, Any]]:
    """Fetch every stored record."""
    return await _fetch_records("/air_quality", base_url=base_url)


async def fetch_record(record_id: int, base_url: str = API_URL) -> Optional[Dict[str, Any]]:
    """Fetch a single record, or None if it does not exist or the request failed."""
    try:
        return await _get_json(f"/air_quality/{record_id}", base_url=base_url)
    except aiohttp.ClientResponseError as e:
        if e.status == 404:
            logging.warning(f"Air quality data with id={record_id} not found")
        else:
            logging.error(f"[ERROR] HTTP {e.status} fetching record {record_id}: {e.message}")
    except aiohttp.ClientError as e:
        logging.error(f"[ERROR] Network request failed: {e}")
    return None


async def search_by_location(location: str, base_url: str = API_URL) -> List[Dict[str, Any]]:
    return await _fetch_records("/air_quality/search", {"location": location}, base_url)


async def fetch_by_pollutant_level(pollutant: str, min_level: float, max_level: Optional[float] = None,
                                   base_url: str = API_URL) -> List[Dict[str, Any]]:
    params = {"pollutant": pollutant, "min_level": min_level}
    if max_level is not None:
        params["max_level"] = max_level
    return await _fetch_records("/air_quality/pollutant", params, base_url)


async def fetch_by_timestamp_range(start: int, end: int, base_url: str = API_URL) -> List[Dict[str, Any]]:
    return await _fetch_records("/air_quality/timestamp_range", {"start": start, "end": end}, base_url)


async def fetch_by_weather(base_url: str = API_URL, **bounds: Optional[float]) -> List[Dict[str, Any]]:
    """Fetch records by weather bounds, e.g. min_temperature=10, max_wind_speed=5."""
    params = {name: value for name, value in bounds.items() if value is not None}
    return await _fetch_records("/air_quality/weather", params, base_url)
