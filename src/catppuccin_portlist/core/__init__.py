"""Run context, validation and network boundary helpers."""
