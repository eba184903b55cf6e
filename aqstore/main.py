# file : aqstore/main.py

import logging
import uvicorn
from fastapi import FastAPI, Query, HTTPException, Depends, Response
from typing import List, Optional

from aqstore import config
from aqstore.errors import RecordNotFoundError
from aqstore.models import AirQualityRecord, AirQualityUpdatePayload, WeatherQuery, ErrorResponse
from aqstore.store import AirQualityStore

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

store = AirQualityStore(start_id = config.START_ID)


def get_store() -> AirQualityStore :
    return store


app = FastAPI(
    title = "Air Quality Store",
    description = "In-memory store of air quality observations with CRUD and query endpoints.",
    version = "0.1"
)

NOT_FOUND = {404 : {"model" : ErrorResponse, "description" : "Air quality data not found"}}


@app.get("/health")
def health(store: AirQualityStore = Depends(get_store)):
    """Report service status and the number of stored records."""
    return {"status" : "ok", "records" : len(store)}


@app.post("/air_quality", response_model=AirQualityRecord, status_code=201)
def add_air_quality_data(payload: AirQualityUpdatePayload, store: AirQualityStore = Depends(get_store)):
    """Add a new air quality record."""
    return store.add(payload)


@app.get("/air_quality", response_model=List[AirQualityRecord])
def list_air_quality_data(store: AirQualityStore = Depends(get_store)):
    """List all records in ascending id order."""
    return store.list_all()


@app.get("/air_quality/pollutant", response_model=List[AirQualityRecord])
def air_quality_by_pollutant_level(
    pollutant: str = Query(..., description="Pollutant name, e.g. PM2.5"),
    min_level: float = Query(..., description="Inclusive lower bound of the pollutant level"),
    max_level: Optional[float] = Query(None, description="Inclusive upper bound of the pollutant level"),
    store: AirQualityStore = Depends(get_store)
):
    """Fetch records whose pollutant level meets or exceeds min_level."""
    logging.info(f"Querying pollutant {pollutant} with min_level={min_level}, max_level={max_level}")
    return store.by_pollutant_level(pollutant, min_level, max_level)


@app.get("/air_quality/timestamp_range", response_model=List[AirQualityRecord])
def air_quality_by_timestamp_range(
    start: int = Query(..., description="Inclusive start, epoch seconds"),
    end: int = Query(..., description="Inclusive end, epoch seconds"),
    store: AirQualityStore = Depends(get_store)
):
    """Fetch records observed within [start, end]."""
    logging.info(f"Querying timestamp range {start}..{end}")
    return store.by_timestamp_range(start, end)


@app.get("/air_quality/weather", response_model=List[AirQualityRecord])
def air_quality_by_weather_conditions(
    min_temperature: Optional[float] = Query(None),
    max_temperature: Optional[float] = Query(None),
    min_humidity: Optional[float] = Query(None),
    max_humidity: Optional[float] = Query(None),
    min_wind_speed: Optional[float] = Query(None),
    max_wind_speed: Optional[float] = Query(None),
    store: AirQualityStore = Depends(get_store)
):
    """Fetch records whose weather falls inside every supplied bound."""
    query = WeatherQuery(
        min_temperature = min_temperature, max_temperature = max_temperature,
        min_humidity = min_humidity, max_humidity = max_humidity,
        min_wind_speed = min_wind_speed, max_wind_speed = max_wind_speed
    )
    return store.by_weather_conditions(query)


@app.get("/air_quality/search", response_model=List[AirQualityRecord])
def search_air_quality_data_by_location(
    location: str = Query(..., description="Case-insensitive substring of the location"),
    store: AirQualityStore = Depends(get_store)
):
    """Fetch records whose location contains the given text, ignoring case."""
    logging.info(f"Searching air quality data by location '{location}'")
    return store.by_location(location)


@app.get("/air_quality/{record_id}", response_model=AirQualityRecord, responses=NOT_FOUND)
def get_air_quality_data(record_id: int, store: AirQualityStore = Depends(get_store)):
    """Fetch a single record by id."""
    try :
        return store.get(record_id)
    except RecordNotFoundError as e :
        raise HTTPException(status_code = 404, detail = e.message)


@app.put("/air_quality/{record_id}", response_model=AirQualityRecord, responses=NOT_FOUND)
def update_air_quality_data(record_id: int, payload: AirQualityUpdatePayload,
                            store: AirQualityStore = Depends(get_store)):
    """Replace an existing record with the payload, keeping its id."""
    try :
        return store.update(record_id, payload)
    except RecordNotFoundError as e :
        raise HTTPException(status_code = 404, detail = e.message)


@app.delete("/air_quality/{record_id}", status_code=204, responses=NOT_FOUND)
def delete_air_quality_data(record_id: int, store: AirQualityStore = Depends(get_store)):
    """Delete a record; its id is never reused."""
    try :
        store.delete(record_id)
    except RecordNotFoundError as e :
        raise HTTPException(status_code = 404, detail = e.message)
    return Response(status_code = 204)


if __name__ == "__main__" :
    uvicorn.run(app, host = config.HOST, port = config.PORT, log_level = config.LOG_LEVEL.lower())
