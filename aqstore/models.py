#file: aqstore/models.py

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class WeatherConditions(BaseModel):
    temperature: float = Field(0.0, description="Air temperature (°C)")
    humidity: float = Field(0.0, description="Relative humidity (%)")
    wind_speed: float = Field(0.0, description="Wind speed (m/s)")


class AirQualityUpdatePayload(BaseModel):
    """Input for creating or replacing a record. Never stored as-is."""
    location: str = Field(..., description="Place name or coordinates string")
    air_quality_index: int = Field(..., description="Air quality index")
    pollutant_levels: Dict[str, float] = Field(default_factory=dict, description="Pollutant name -> concentration, e.g. PM2.5")
    weather: WeatherConditions = Field(default_factory=WeatherConditions, description="Weather at observation time")
    health_recommendations: List[str] = Field(default_factory=list, description="Ordered health recommendations")
    timestamp: Optional[int] = Field(None, description="Observation time in epoch seconds; defaults to now on add")


class AirQualityRecord(BaseModel):
    id: int = Field(..., description="Unique record identifier, never reused")
    location: str = Field(..., description="Place name or coordinates string")
    timestamp: int = Field(..., description="Observation time in epoch seconds")
    air_quality_index: int = Field(..., description="Air quality index")
    pollutant_levels: Dict[str, float] = Field(default_factory=dict, description="Pollutant name -> concentration")
    weather: WeatherConditions = Field(default_factory=WeatherConditions, description="Weather at observation time")
    health_recommendations: List[str] = Field(default_factory=list, description="Ordered health recommendations")


class WeatherQuery(BaseModel):
    """Inclusive bounds on weather fields. Unset bounds are not checked."""
    min_temperature: Optional[float] = None
    max_temperature: Optional[float] = None
    min_humidity: Optional[float] = None
    max_humidity: Optional[float] = None
    min_wind_speed: Optional[float] = None
    max_wind_speed: Optional[float] = None

    def matches(self, weather: WeatherConditions) -> bool:
        bounds = [
            (weather.temperature, self.min_temperature, self.max_temperature),
            (weather.humidity, self.min_humidity, self.max_humidity),
            (weather.wind_speed, self.min_wind_speed, self.max_wind_speed),
        ]
        for value, low, high in bounds :
            if low is not None and value < low :
                return False
            if high is not None and value > high :
                return False
        return True


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Human-readable error message")
