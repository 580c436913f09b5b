"""Streamlit/plotly presentation of the holdings charts."""
