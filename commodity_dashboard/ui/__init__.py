"""Dashboard UI: Streamlit app, charts and HTML export."""
