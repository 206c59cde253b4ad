"""Gradio user interface for SnapStudio."""
