"""Base interface for output reporters.

Reporters turn a list of detection results into a formatted document.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from license_detector.models import DetectionResult


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(self, results: list[DetectionResult]) -> str:
        """Render detection results to formatted output.

        Args:
            results: One result per inspected path, in report order.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(self, results: list[DetectionResult], output_path: Path) -> None:
        """Render and write output to a file.

        Args:
            results: One result per inspected path, in report order.
            output_path: Path to write the output file.
        """
        content = self.render(results)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, e.g. "markdown"."""
        ...

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Return the default file extension, e.g. ".md"."""
        ...
