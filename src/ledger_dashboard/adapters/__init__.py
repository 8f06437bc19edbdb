"""Adapters driving the use cases (CLI, Streamlit UI)."""
