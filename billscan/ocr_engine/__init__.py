"""
OCR Output Module for billscan.

Text recognition runs upstream (on the device camera pipeline); this
module only models its output as an ordered, immutable Document.
"""

from .document import Document, RecognizedLine

__all__ = ['Document', 'RecognizedLine']
