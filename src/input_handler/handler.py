"""
Main Input Handler Module.

Locates and loads scan inputs from disk. Two kinds of file are
accepted:
    - ``.json``: a result document from the OCR service
    - ``.txt``:  plain text, for the position-free fallback extractor

Usage:
    from src.input_handler import InputHandler

    handler = InputHandler()
    result = handler.load("invoice_ocr.json")

    results = handler.load_batch("./ocr_results/")
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from config import get_config
from src.utils.logger import get_logger
from src.utils.helpers import get_file_extension
from src.utils.exceptions import (
    InputError,
    UnsupportedFileTypeError,
    InputFileNotFoundError,
    CorruptedFileError
)

logger = get_logger(__name__)

OCR_JSON = 'ocr_json'
PLAIN_TEXT = 'text'


@dataclass
class InputResult:
    """
    Result of loading one input file.

    Attributes:
        filepath: Path as given by the caller
        filename: File name without directories
        file_type: 'ocr_json' or 'text'
        content: Decoded JSON payload or text, None on failure
        success: Whether loading was successful
        error: Error message if loading failed
    """
    filepath: str
    filename: str
    file_type: str
    content: Any = None
    success: bool = True
    error: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"InputResult(filename='{self.filename}', "
            f"type='{self.file_type}', "
            f"success={self.success})"
        )


class InputHandler:
    """
    Input handler for scan files.

    Attributes:
        supported_extensions: Set of accepted file extensions
        encoding: Text encoding used to read files

    Example:
        >>> handler = InputHandler()
        >>> result = handler.load("invoice_ocr.json")
        >>> if result.success:
        ...     payload = result.content
    """

    JSON_EXTENSIONS = {'.json'}
    TEXT_EXTENSIONS = {'.txt'}

    def __init__(self) -> None:
        self.supported_extensions = {
            ext.lower() for ext in get_config(
                "input.supported_extensions",
                sorted(self.JSON_EXTENSIONS | self.TEXT_EXTENSIONS)
            )
        }
        self.encoding = get_config("input.encoding", "utf-8")

        logger.debug(f"InputHandler initialized with extensions: {sorted(self.supported_extensions)}")

    def detect_file_type(self, filepath: Union[str, Path]) -> str:
        """
        Detect the type of input file.

        Raises:
            UnsupportedFileTypeError: If the extension is not recognised.
        """
        extension = get_file_extension(filepath)

        if extension in self.JSON_EXTENSIONS:
            return OCR_JSON
        if extension in self.TEXT_EXTENSIONS:
            return PLAIN_TEXT

        raise UnsupportedFileTypeError(extension, sorted(self.supported_extensions))

    def validate_file(self, filepath: Union[str, Path]) -> Path:
        """
        Validate that a file exists, is supported and is not empty.

        Raises:
            InputFileNotFoundError: If the file doesn't exist.
            UnsupportedFileTypeError: If the file type is not supported.
            CorruptedFileError: If the file is empty.
        """
        path = Path(filepath)

        if not path.exists():
            raise InputFileNotFoundError(str(filepath))

        if not path.is_file():
            raise InputError(f"Path is not a file: {filepath}")

        extension = get_file_extension(path)
        if extension not in self.supported_extensions:
            raise UnsupportedFileTypeError(extension, sorted(self.supported_extensions))

        if path.stat().st_size == 0:
            raise CorruptedFileError(str(filepath), "File is empty")

        return path

    def read(self, filepath: Union[str, Path]) -> InputResult:
        """
        Load an input file, raising on failure.

        Raises:
            InputError: If the file is missing, unsupported, empty or
                cannot be decoded.
        """
        path = self.validate_file(filepath)
        file_type = self.detect_file_type(path)

        try:
            text = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise CorruptedFileError(str(filepath), f"Cannot decode as {self.encoding}: {e}")

        if file_type == OCR_JSON:
            try:
                content = json.loads(text)
            except json.JSONDecodeError as e:
                raise CorruptedFileError(str(filepath), f"Invalid JSON: {e}")
        else:
            content = text

        logger.debug(f"Loaded {file_type} input: {path.name}")
        return InputResult(
            filepath=str(filepath),
            filename=path.name,
            file_type=file_type,
            content=content
        )

    def load(self, filepath: Union[str, Path]) -> InputResult:
        """
        Load an input file, reporting failures in the result.

        Example:
            >>> result = handler.load("missing.json")
            >>> result.success, result.error
            (False, 'File not found: missing.json | Details: {...}')
        """
        try:
            return self.read(filepath)
        except InputError as e:
            logger.error(f"Input error for {filepath}: {e}")
            return InputResult(
                filepath=str(filepath),
                filename=Path(filepath).name,
                file_type='unknown',
                success=False,
                error=str(e)
            )

    def find_files(self, directory: Union[str, Path], recursive: bool = False) -> List[Path]:
        """
        List supported files in a directory, sorted by path.

        Raises:
            InputFileNotFoundError: If the directory doesn't exist.
            InputError: If the path is not a directory.
        """
        directory = Path(directory)

        if not directory.exists():
            raise InputFileNotFoundError(str(directory))

        if not directory.is_dir():
            raise InputError(f"Path is not a directory: {directory}")

        pattern = "**/*" if recursive else "*"
        files = [
            path for path in directory.glob(pattern)
            if path.is_file() and path.suffix.lower() in self.supported_extensions
        ]
        return sorted(files)

    def load_batch(self, directory: Union[str, Path], recursive: bool = False) -> List[InputResult]:
        """Load every supported file in a directory."""
        files = self.find_files(directory, recursive)
        logger.info(f"Found {len(files)} files to process in {directory}")

        results = [self.load(path) for path in files]

        successful = sum(1 for r in results if r.success)
        logger.info(f"Loaded {successful} of {len(results)} files")
        return results
