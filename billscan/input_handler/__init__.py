"""
Input Handler Module for billscan.

Loads OCR text dumps (.txt, .json) from disk into Documents.
"""

from .handler import InputHandler

__all__ = ['InputHandler']
