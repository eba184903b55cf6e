# file: seed_sample_data.py

import argparse
import logging
import random
from datetime import datetime, timedelta

import requests

from aqstore.config import API_URL

LOCATIONS = ["Lakeview District", "Old Town", "Harbour", "Industrial Park"]


def recommendations_for(aqi: int) -> list[str]:
    if aqi <= 50 :
        return ["Air quality is good"]
    if aqi <= 100 :
        return ["Sensitive groups should limit prolonged outdoor exertion"]
    return ["Avoid outdoor exercise", "Keep windows closed"]


def build_samples(count: int, base_time: datetime) -> list[dict]:
    """Random-walk pollutant and weather readings, one per hour going back from base_time."""
    pm25 = random.uniform(5.0, 50.0)  # PM2.5: typical range 5-50 µg/m³
    pm10 = random.uniform(10.0, 100.0)
    co2 = random.uniform(380.0, 450.0)
    temperature = random.uniform(-5.0, 30.0)
    samples = []
    for i in range(count) :
        pm25 = max(0.0, pm25 + random.uniform(-1.0, 1.0))
        pm10 = max(0.0, pm10 + random.uniform(-1.0, 1.0))
        co2 = max(0.0, co2 + random.uniform(-2.0, 2.0))
        temperature += random.uniform(-0.5, 0.5)
        aqi = int(pm25 * 2)
        samples.append({
            "location" : random.choice(LOCATIONS),
            "timestamp" : int((base_time - timedelta(hours = i)).timestamp()),
            "air_quality_index" : aqi,
            "pollutant_levels" : {"PM2.5" : round(pm25, 2), "PM10" : round(pm10, 2), "CO2" : round(co2, 2)},
            "weather" : {
                "temperature" : round(temperature, 1),
                "humidity" : round(random.uniform(30.0, 95.0), 1),
                "wind_speed" : round(random.uniform(0.0, 15.0), 1),
            },
            "health_recommendations" : recommendations_for(aqi),
        })
    return samples


def seed(count: int, url: str = API_URL) -> int:
    """POST sample records to the store; returns how many were accepted."""
    saved = 0
    for sample in build_samples(count, datetime.now()) :
        try :
            response = requests.post(f"{url}/air_quality", json = sample, timeout = 10)
            response.raise_for_status()
            saved += 1
            logging.info(f"Record {response.json()['id']} saved for {sample['location']}")
        except requests.exceptions.RequestException as e :
            logging.error(f"Failed to save sample record: {e}")
    return saved


if __name__ == "__main__" :
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    parser = argparse.ArgumentParser(description = "Seed the air quality store with random sample data")
    parser.add_argument("--count", type = int, default = 24)
    parser.add_argument("--url", default = API_URL)
    args = parser.parse_args()
    logging.info(f"Seeded {seed(args.count, args.url)} of {args.count} records")
