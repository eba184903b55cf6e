# file: aqstore/store.py

import logging
import threading
from typing import Dict, List, Optional

from aqstore.errors import RecordNotFoundError
from aqstore.models import AirQualityRecord, AirQualityUpdatePayload, WeatherQuery
from aqstore.utils import get_current_timestamp, location_matches


class AirQualityStore:
    """
    In-memory store of air quality records keyed by a monotonically assigned id.

    Records are handed out as deep copies, so callers never hold a reference
    into the store. Every public method runs under one lock; FastAPI calls
    sync endpoints from a thread pool.
    """

    def __init__(self, start_id: int = 0):
        self._records: Dict[int, AirQualityRecord] = {}
        self._next_id = start_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock :
            return len(self._records)

    def add(self, payload: AirQualityUpdatePayload) -> AirQualityRecord:
        """Store a new record built from the payload and return it."""
        with self._lock :
            record_id = self._next_id
            self._next_id += 1
            timestamp = payload.timestamp if payload.timestamp is not None else get_current_timestamp()
            record = self._build_record(record_id, payload, timestamp)
            self._records[record_id] = record
            logging.info(f"Added air quality data id={record_id} for location '{record.location}'")
            return record.model_copy(deep=True)

    def get(self, record_id: int) -> AirQualityRecord:
        with self._lock :
            return self._require(record_id).model_copy(deep=True)

    def update(self, record_id: int, payload: AirQualityUpdatePayload) -> AirQualityRecord:
        """Replace every field of an existing record; the stored timestamp is kept when the payload has none."""
        with self._lock :
            current = self._require(record_id)
            timestamp = payload.timestamp if payload.timestamp is not None else current.timestamp
            record = self._build_record(record_id, payload, timestamp)
            self._records[record_id] = record
            logging.info(f"Updated air quality data id={record_id}")
            return record.model_copy(deep=True)

    def delete(self, record_id: int) -> None:
        with self._lock :
            self._require(record_id)
            del self._records[record_id]
            logging.info(f"Deleted air quality data id={record_id}")

    def list_all(self) -> List[AirQualityRecord]:
        """Return every record in ascending id order."""
        return self._filter(lambda record : True)

    def by_pollutant_level(self, pollutant: str, min_level: float,
                           max_level: Optional[float] = None) -> List[AirQualityRecord]:
        """Records whose level of `pollutant` is >= min_level (and <= max_level if given)."""

        def predicate(record: AirQualityRecord) -> bool:
            level = record.pollutant_levels.get(pollutant)
            if level is None :
                return False
            if max_level is not None and level > max_level :
                return False
            return level >= min_level

        return self._filter(predicate)

    def by_timestamp_range(self, start: int, end: int) -> List[AirQualityRecord]:
        """Records with start <= timestamp <= end. An inverted range matches nothing."""
        return self._filter(lambda record : start <= record.timestamp <= end)

    def by_weather_conditions(self, query: WeatherQuery) -> List[AirQualityRecord]:
        return self._filter(lambda record : query.matches(record.weather))

    def by_location(self, location: str) -> List[AirQualityRecord]:
        """Case-insensitive substring search over record locations."""
        return self._filter(lambda record : location_matches(record.location, location))

    def _filter(self, predicate) -> List[AirQualityRecord]:
        # ids only ever grow and updates reassign existing keys, so dict order is id order
        with self._lock :
            return [record.model_copy(deep=True) for record in self._records.values() if predicate(record)]

    def _require(self, record_id: int) -> AirQualityRecord:
        record = self._records.get(record_id)
        if record is None :
            logging.warning(f"Air quality data with id={record_id} not found")
            raise RecordNotFoundError(record_id)
        return record

    @staticmethod
    def _build_record(record_id: int, payload: AirQualityUpdatePayload, timestamp: int) -> AirQualityRecord:
        data = payload.model_dump(exclude={"timestamp"})
        return AirQualityRecord(id=record_id, timestamp=timestamp, **data)
