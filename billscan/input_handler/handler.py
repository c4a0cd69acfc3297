"""
Input Handler Module.

Loads OCR output saved to disk into a Document, so the extraction engine
can be run outside the app (batch checks, regression samples, debugging
a misread receipt).

Supported dumps:
    .txt    UTF-8 text, one recognized line per line
    .json   ["line", ...]
            [{"text": "line", "confidence": 0.93}, ...]
            {"lines": [...same as above...]}
            {"text": "whole\\nblob"}

Usage:
    from billscan.input_handler import InputHandler

    handler = InputHandler()
    document = handler.load("receipt.txt")
    paths = handler.list_files("./samples/")
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from config import get_config
from billscan.ocr_engine.document import Document
from billscan.utils.exceptions import (
    CorruptedFileError,
    DocumentNotFoundError,
    InputError,
    UnsupportedFileTypeError,
)
from billscan.utils.helpers import get_file_extension
from billscan.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class InputHandler:
    """
    Loads OCR text dumps into Documents.

    Attributes:
        supported_extensions: Set of accepted file extensions
        encoding: Text encoding of the dumps

    Example:
        >>> handler = InputHandler()
        >>> doc = handler.load("samples/receipt.json")
        >>> doc.line_count
        12
    """

    TEXT_EXTENSIONS = {'.txt'}
    JSON_EXTENSIONS = {'.json'}

    def __init__(
        self,
        supported_extensions: Optional[List[str]] = None,
        encoding: Optional[str] = None
    ) -> None:
        extensions = supported_extensions or get_config(
            "input.supported_extensions",
            sorted(self.TEXT_EXTENSIONS | self.JSON_EXTENSIONS)
        )
        self.supported_extensions = {ext.lower() for ext in extensions}
        self.encoding = encoding or get_config("input.encoding", "utf-8")

        logger.debug(f"InputHandler initialized with extensions: {sorted(self.supported_extensions)}")

    def validate_file(self, filepath: Union[str, Path]) -> Path:
        """
        Check that a dump exists and has a supported extension.

        Raises:
            DocumentNotFoundError: If the file doesn't exist.
            InputError: If the path is not a regular file.
            UnsupportedFileTypeError: If the extension is not supported.
        """
        path = Path(filepath)

        if not path.exists():
            raise DocumentNotFoundError(str(filepath))

        if not path.is_file():
            raise InputError(f"Path is not a file: {filepath}")

        extension = get_file_extension(path)
        if extension not in self.supported_extensions or \
                extension not in self.TEXT_EXTENSIONS | self.JSON_EXTENSIONS:
            raise UnsupportedFileTypeError(extension, sorted(self.supported_extensions))

        return path

    def load(self, filepath: Union[str, Path]) -> Document:
        """
        Load one OCR dump.

        Args:
            filepath: Path to a .txt or .json dump.

        Returns:
            Document whose source is the file name.

        Raises:
            InputError: If the file is missing, unsupported or unreadable.
        """
        path = self.validate_file(filepath)

        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptedFileError(str(filepath), str(e)) from e

        if get_file_extension(path) in self.JSON_EXTENSIONS:
            document = self._parse_json(content, path)
        else:
            document = Document.from_text(content, source=path.name)

        logger.debug(f"Loaded {path.name}: {document.line_count} lines")
        return document

    def _parse_json(self, content: str, path: Path) -> Document:
        """Turn a JSON dump into a Document."""
        try:
            data: Any = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptedFileError(str(path), f"Invalid JSON: {e}") from e

        if isinstance(data, dict):
            if isinstance(data.get('lines'), list):
                data = data['lines']
            elif isinstance(data.get('text'), str):
                return Document.from_text(data['text'], source=path.name)
            else:
                raise CorruptedFileError(str(path), "Expected a 'lines' list or a 'text' string")

        if not isinstance(data, list):
            raise CorruptedFileError(str(path), "Expected a list of lines")

        for item in data:
            if not isinstance(item, (str, dict)):
                raise CorruptedFileError(str(path), f"Unexpected line entry: {item!r}")

        return Document.from_lines(data, source=path.name)

    def list_files(self, directory: Union[str, Path], recursive: bool = False) -> List[Path]:
        """
        Collect the supported dumps of a directory, sorted by path.

        Raises:
            DocumentNotFoundError: If the directory doesn't exist.
            InputError: If the path is not a directory.
        """
        directory = Path(directory)

        if not directory.exists():
            raise DocumentNotFoundError(str(directory))

        if not directory.is_dir():
            raise InputError(f"Path is not a directory: {directory}")

        pattern = "**/*" if recursive else "*"
        files = {
            path for path in directory.glob(pattern)
            if path.is_file() and get_file_extension(path) in self.supported_extensions
        }

        logger.info(f"Found {len(files)} files to process in {directory}")
        return sorted(files)
