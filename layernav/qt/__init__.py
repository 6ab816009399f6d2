"""PyQt6 view adapter."""
