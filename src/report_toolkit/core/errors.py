"""
Module: core.errors

Purpose:
    Root of the exporter's exception hierarchy. Concrete errors live next
    to the code that raises them and subclass ExportError so callers can
    catch a whole export failure with one clause.

Used By:
    - common.geometry: InvalidDimension
    - exporter.layout.paginator: EmptySnapshot
    - exporter.capture: CaptureError
    - exporter.output: EncodingError
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for report export failures."""
    pass
