"""
Streamlit dashboard and presentation helpers.
"""
