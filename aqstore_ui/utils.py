#file: aqstore_ui/utils.py

import pandas as pd

WEATHER_FIELDS = ["temperature", "humidity", "wind_speed"]
BASE_COLUMNS = ["id", "location", "timestamp", "air_quality_index", "health_recommendations"] + WEATHER_FIELDS


def records_to_frame(records) :
    """Flatten API records into a DataFrame with one column per pollutant and weather field."""
    if not records :
        return pd.DataFrame(columns = BASE_COLUMNS)

    rows = []
    for record in records :
        row = {
            "id" : record["id"],
            "location" : record["location"],
            "timestamp" : record["timestamp"],
            "air_quality_index" : record["air_quality_index"],
            "health_recommendations" : "; ".join(record.get("health_recommendations", [])),
        }
        weather = record.get("weather", {})
        for field in WEATHER_FIELDS :
            row[field] = weather.get(field)
        row.update(record.get("pollutant_levels", {}))
        rows.append(row)

    df = pd.DataFrame(rows)
    df["timestamp"] = pd.to_datetime(df["timestamp"], unit = "s", utc = True)
    df = df.sort_values(by = ["timestamp", "id"]).reset_index(drop = True)
    return df


def pollutant_columns(data_frame) :
    """Columns of the frame that hold pollutant levels."""
    return [column for column in data_frame.columns if column not in BASE_COLUMNS]


def date_range_to_epoch(start_date, end_date) :
    """Inclusive epoch-second bounds covering whole UTC days from start_date to end_date."""
    start = int(pd.Timestamp(start_date, tz = "UTC").timestamp())
    end = int(pd.Timestamp(end_date, tz = "UTC").timestamp()) + 86400 - 1
    return start, end


def intersect_records(*record_sets) :
    """Records present in every set, in the order of the first set."""
    if not record_sets :
        return []
    first, *rest = record_sets
    common_ids = {record["id"] for record in first}
    for records in rest :
        common_ids &= {record["id"] for record in records}
    return [record for record in first if record["id"] in common_ids]
