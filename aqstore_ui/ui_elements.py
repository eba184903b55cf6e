#file: aqstore_ui/ui_elements.py

import streamlit as st
import plotly.express as px

from aqstore_ui.utils import pollutant_columns


def display_records_table(data_frame) :
    """Display stored records as a table."""
    st.dataframe(data_frame, hide_index = True, use_container_width = True)


def _line_chart(data_frame, y, title) :
    fig = px.line(
        data_frame,
        x = "timestamp",
        y = y,
        color = "location",
        markers = True,
        title = title,
        labels = {
            "location" : "Location",
            "timestamp" : "Time",
            y : y.upper()
        }
    )
    fig.update_layout(
        legend=dict(
            orientation="h",
            yanchor="top",
            y=-0.2,
            xanchor="center",
            x=0.5
        )
    )
    st.plotly_chart(fig)


def display_charts(data_frame) :
    """Display line charts of the air quality index and each pollutant."""
    data_frame = data_frame.sort_values(by = "timestamp")
    _line_chart(data_frame, "air_quality_index", "Air quality index")

    for pollutant in pollutant_columns(data_frame) :
        if data_frame[pollutant].notna().any() :
            _line_chart(data_frame, pollutant, pollutant)
