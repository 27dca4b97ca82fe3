"""
Utility functions for retrieving package version information.
"""
import os
from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """
    Get the package version dynamically from package metadata.

    Returns:
        Package version string, or "unknown" if version cannot be determined.
    """
    try:
        return version("har-convert")
    except PackageNotFoundError:
        # Fallback: running from a source checkout, read pyproject.toml
        pyproject_path = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
            "pyproject.toml",
        )
        try:
            with open(pyproject_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line.startswith("version") and "=" in line:
                        return line.split("=", 1)[1].strip().strip('"').strip("'")
        except OSError:
            pass
        return "unknown"
