"""Streamlit single-page app for the procrastination diagnostic."""
