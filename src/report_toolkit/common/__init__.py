"""Shared helpers used across the exporter."""
