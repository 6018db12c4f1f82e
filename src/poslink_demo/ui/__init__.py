"""NiceGUI dashboard."""
