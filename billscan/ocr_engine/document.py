"""
OCR Document Data Classes.

The extraction engine works on the flattened text of one photographed
page: an ordered sequence of recognized lines, top to bottom. Text
recognition itself happens upstream; these classes only carry its
output.

Classes:
    RecognizedLine: One line of text with its recognition confidence
    Document: Ordered, immutable collection of recognized lines
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union
import json


@dataclass(frozen=True)
class RecognizedLine:
    """
    A single line of OCR text.

    Attributes:
        text: The recognized text, as produced by OCR (not trimmed)
        confidence: Recognition confidence in [0, 1], if the OCR step
            reported one

    Example:
        >>> line = RecognizedLine("TOTAL TTC 79,00", confidence=0.92)
    """
    text: str
    confidence: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {'text': self.text, 'confidence': self.confidence}

    def __repr__(self) -> str:
        if self.confidence is None:
            return f"RecognizedLine({self.text!r})"
        return f"RecognizedLine({self.text!r}, conf={self.confidence:.2f})"


LineLike = Union[str, RecognizedLine, Tuple[str, Optional[float]], Dict[str, Any]]


def _coerce_line(item: LineLike) -> RecognizedLine:
    """Build a RecognizedLine from the shapes OCR collaborators hand over."""
    if isinstance(item, RecognizedLine):
        return item
    if isinstance(item, str):
        return RecognizedLine(item)
    if isinstance(item, dict):
        return RecognizedLine(str(item.get('text') or ''), item.get('confidence'))
    if isinstance(item, tuple) and item:
        confidence = item[1] if len(item) > 1 else None
        return RecognizedLine(str(item[0]), confidence)
    return RecognizedLine('' if item is None else str(item))


@dataclass(frozen=True)
class Document:
    """
    Ordered OCR lines for one invoice image.

    Line order is the order in the source image, top to bottom, and the
    document never changes after construction.

    Attributes:
        lines: Recognized lines
        source: Optional label of where the text came from (file name)

    Example:
        >>> doc = Document.from_text("ACME Corp\\nTOTAL TTC 79,00")
        >>> doc.texts
        ('ACME Corp', 'TOTAL TTC 79,00')
    """
    lines: Tuple[RecognizedLine, ...] = field(default_factory=tuple)
    source: Optional[str] = None

    @classmethod
    def from_text(cls, text: Optional[str], source: Optional[str] = None) -> 'Document':
        """
        Split a raw OCR text blob into lines.

        ``\\r\\n``, ``\\r`` and ``\\n`` all end a line. An empty blob gives a
        document with zero lines.
        """
        if not text:
            return cls((), source)
        return cls(tuple(RecognizedLine(line) for line in text.splitlines()), source)

    @classmethod
    def from_lines(cls, lines: Optional[Iterable[LineLike]], source: Optional[str] = None) -> 'Document':
        """
        Build a document from pre-split lines.

        Accepts strings, RecognizedLine objects, ``(text, confidence)``
        tuples and ``{"text": ..., "confidence": ...}`` dicts.
        """
        if lines is None:
            return cls((), source)
        return cls(tuple(_coerce_line(item) for item in lines), source)

    @property
    def texts(self) -> Tuple[str, ...]:
        """Line texts only, in document order."""
        return tuple(line.text for line in self.lines)

    @property
    def text(self) -> str:
        """All lines joined with newlines."""
        return '\n'.join(self.texts)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def average_confidence(self) -> Optional[float]:
        """Mean confidence over lines that report one, or None."""
        scores = [line.confidence for line in self.lines if line.confidence is not None]
        if not scores:
            return None
        return sum(scores) / len(scores)

    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        return {
            'source': self.source,
            'line_count': self.line_count,
            'average_confidence': self.average_confidence,
            'lines': [line.to_dict() for line in self.lines]
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[RecognizedLine]:
        return iter(self.lines)

    def __repr__(self) -> str:
        return f"Document(lines={self.line_count}, source={self.source!r})"
