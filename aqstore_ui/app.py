#file: aqstore_ui/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import pandas as pd
import streamlit as st

st.set_page_config(page_title="Air Quality Store", page_icon="🌍", layout="wide")
pd.options.display.float_format = "{:.2f}".format

from aqstore_ui.data_fetch import (fetch_all_records, fetch_record, search_by_location, fetch_by_pollutant_level,
                                  fetch_by_timestamp_range, fetch_by_weather)
from aqstore_ui.utils import records_to_frame, pollutant_columns, date_range_to_epoch, intersect_records
from aqstore_ui.ui_elements import display_records_table, display_charts

st.title("Air Quality Store")

all_records = asyncio.run(fetch_all_records())
if not all_records :
    st.warning("No air quality data stored yet.")
    st.stop()

all_df = records_to_frame(all_records)

col1, col2, col3 = st.columns([3, 2, 2])
with col1:
    location = st.text_input("Search by location", "")
with col2:
    pollutants = ["(any)"] + sorted(pollutant_columns(all_df))
    selected_pollutant = st.selectbox("Pollutant", pollutants)
with col3:
    min_level = st.number_input("Minimum level", value = 0.0, disabled = selected_pollutant == "(any)")

min_date, max_date = all_df["timestamp"].min().date(), all_df["timestamp"].max().date()
date_range = st.date_input("Date range", (min_date, max_date), min_value = min_date, max_value = max_date)
if isinstance(date_range, tuple) and len(date_range) == 2 :
    start_date, end_date = date_range
else :
    start_date, end_date = min_date, max_date

with st.expander("Weather conditions"):
    wcol1, wcol2, wcol3 = st.columns(3)
    with wcol1:
        temperature = st.slider("Temperature (°C)", -50.0, 60.0, (-50.0, 60.0))
    with wcol2:
        humidity = st.slider("Humidity (%)", 0.0, 100.0, (0.0, 100.0))
    with wcol3:
        wind_speed = st.slider("Wind speed (m/s)", 0.0, 60.0, (0.0, 60.0))

start, end = date_range_to_epoch(start_date, end_date)
record_sets = [asyncio.run(fetch_by_timestamp_range(start, end))]
if location :
    record_sets.append(asyncio.run(search_by_location(location)))
if selected_pollutant != "(any)" :
    record_sets.append(asyncio.run(fetch_by_pollutant_level(selected_pollutant, min_level)))
if (temperature, humidity, wind_speed) != ((-50.0, 60.0), (0.0, 100.0), (0.0, 60.0)) :
    record_sets.append(asyncio.run(fetch_by_weather(
        min_temperature = temperature[0], max_temperature = temperature[1],
        min_humidity = humidity[0], max_humidity = humidity[1],
        min_wind_speed = wind_speed[0], max_wind_speed = wind_speed[1]
    )))

df = records_to_frame(intersect_records(*record_sets))

if df.empty :
    st.warning("No records match the selected filters.")
else :
    display_records_table(df)
    display_charts(df)

st.subheader("Record details")
record_id = st.number_input("Record id", min_value = 0, step = 1, value = int(all_df["id"].min()))
record = asyncio.run(fetch_record(int(record_id)))
if record is None :
    st.info(f"No record with id {int(record_id)}.")
else :
    st.json(record)
