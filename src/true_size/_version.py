"""Minimal version helper for the true_size package."""

from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "true_size"
DIST_NAME = "true-size"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:  # dev checkout on sys.path
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        return str(
            setuptools_scm.get_version(root=root, fallback_version=FALLBACK_VERSION)
        )


__all__ = ["get_version"]
