"""Streamlit front end for the photo studio.

Run with: streamlit run photo_studio/streamlit/main.py
"""
