"""
Main Output Handler Module.

Writes scan results to disk as a JSON array, one object per scanned
document.

Usage:
    from src.output_handler import OutputHandler

    handler = OutputHandler()
    path = handler.save(results, "outputs/scan_results.json")
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from config import get_config
from src.utils.logger import get_logger
from src.utils.helpers import ensure_directory
from src.utils.exceptions import ResultExportError
from src.pipeline.scan_result import ScanResult

logger = get_logger(__name__)


class OutputHandler:
    """
    JSON output handler for scan results.

    Attributes:
        output_dir: Directory used when no explicit path is given
        filename: Default output filename
        indent: JSON indentation
        include_raw_text: Whether the raw document text is written

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(results)
        '/project/outputs/scan_results.json'
    """

    def __init__(self, include_raw_text: Optional[bool] = None) -> None:
        """
        Initialize the output handler.

        Args:
            include_raw_text: Override config for raw text inclusion.
        """
        self.output_dir = Path(get_config("paths.output_dir", "outputs"))
        self.filename = get_config("output.filename", "scan_results.json")
        self.indent = get_config("output.json_indent", 2)
        self.include_raw_text = include_raw_text if include_raw_text is not None else \
            get_config("output.include_raw_text", True)

        logger.debug(
            f"OutputHandler initialized "
            f"(dir={self.output_dir}, raw_text={self.include_raw_text})"
        )

    def resolve_path(self, output_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Work out where results go.

        A path with a suffix is used as the file; a path without one is
        treated as a directory holding the default filename.
        """
        if output_path is None:
            return self.output_dir / self.filename

        path = Path(output_path)
        if path.suffix:
            return path
        return path / self.filename

    def serialize(self, results: Union[ScanResult, List[ScanResult]]) -> str:
        """Render results as a JSON array."""
        if isinstance(results, ScanResult):
            results = [results]

        payload = [
            result.to_dict(include_raw_text=self.include_raw_text)
            for result in results
        ]
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)

    def save(
        self,
        results: Union[ScanResult, List[ScanResult]],
        output_path: Optional[Union[str, Path]] = None
    ) -> str:
        """
        Save results to a JSON file.

        Args:
            results: Single result or list of results.
            output_path: Output file or directory. Defaults to the
                configured output directory and filename.

        Returns:
            Path to the written file.

        Raises:
            ResultExportError: If the file cannot be written.
        """
        path = self.resolve_path(output_path)

        try:
            ensure_directory(path.parent)
            path.write_text(self.serialize(results), encoding='utf-8')
        except OSError as e:
            raise ResultExportError(str(path), str(e))

        count = 1 if isinstance(results, ScanResult) else len(results)
        logger.info(f"Saved {count} results to {path}")
        return str(path)
