"""Output reporters for license detection results.

This module provides reporters for rendering detection results to
formatted documents.
"""

from license_detector.reporters.base import BaseReporter
from license_detector.reporters.markdown import MarkdownReporter

__all__ = ["BaseReporter", "MarkdownReporter"]
