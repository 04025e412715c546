"""
Module: exporter.output.encoders

Purpose:
    Encoder contracts. The layout core hands assembled descriptors to
    these interfaces and never depends on a concrete file format, so
    it can be tested without any encoding library.

Key Classes:
    - DocumentEncoder: Document -> bytes
    - DeckEncoder: Deck -> bytes
    - EncodingError: Encoder failure

Used By:
    - exporter.output.pdf_renderer
    - exporter.output.pptx_renderer
    - exporter.controller
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from report_toolkit.core.errors import ExportError
from report_toolkit.core.models import Deck, Document


class EncodingError(ExportError):
    """An encoder could not serialize an assembled document or deck."""
    pass


class DocumentEncoder(ABC):
    """Serializes a paginated Document."""

    #: File extension written by the controller, including the dot
    extension: str = ""

    @abstractmethod
    def encode(self, document: Document) -> bytes:
        """
        Encode a document.

        Raises:
            EncodingError: If the document cannot be serialized
        """


class DeckEncoder(ABC):
    """Serializes a slide Deck."""

    extension: str = ""

    @abstractmethod
    def encode(self, deck: Deck) -> bytes:
        """
        Encode a deck.

        Raises:
            EncodingError: If the deck cannot be serialized
        """
