"""License Detector - identify the open source license of a project.

This package classifies license text against a catalog of known licenses
and locates the license file of a project directory.
"""

__version__ = "0.1.0"
__author__ = "forkrul"

from license_detector.catalog import CATALOG, KNOWN_LICENSES, LicenseEntry
from license_detector.candidates import DEFAULT_LICENSE_FILES
from license_detector.errors import (
    LicenseError,
    MultipleLicenseFilesError,
    NoLicenseFileError,
    UnrecognizedLicenseError,
)
from license_detector.loader import (
    license_from_dir,
    license_from_file,
    license_from_path,
    license_from_text,
)
from license_detector.models import DetectionResult, License
from license_detector.normalize import normalize
from license_detector.scanner import search_dir

__all__ = [
    "__version__",
    "CATALOG",
    "DEFAULT_LICENSE_FILES",
    "KNOWN_LICENSES",
    "DetectionResult",
    "License",
    "LicenseEntry",
    "LicenseError",
    "MultipleLicenseFilesError",
    "NoLicenseFileError",
    "UnrecognizedLicenseError",
    "license_from_dir",
    "license_from_file",
    "license_from_path",
    "license_from_text",
    "normalize",
    "search_dir",
]
