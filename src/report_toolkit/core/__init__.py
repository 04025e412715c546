"""Core models and the exporter's base exception."""
