"""Ingestion layer.

This package turns raw form input (text typed in a field, a slider
position, a dropdown choice) into typed update commands for the store.
"""

__all__: list[str] = []
