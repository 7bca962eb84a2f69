"""
semrange version information.

This module provides a single source of truth for the package version.
It follows Semantic Versioning: https://semver.org/

Version format:
    MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]

Examples:
    0.1.0
    1.0.0-rc.1
"""

from __future__ import annotations

from semver import Version

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Structured version metadata
# ---------------------------------------------------------------------------

#: Parsed form of ``__version__``; fails at import if the string is not semver.
VERSION_INFO: Version = Version.parse(__version__)


# ---------------------------------------------------------------------------
# Human-readable version (for CLI)
# ---------------------------------------------------------------------------

VERSION_STRING = f"semrange {__version__}"
