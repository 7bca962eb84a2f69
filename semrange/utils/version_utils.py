"""
Version helpers for semrange.

Thin wrappers over :class:`semver.Version` providing the three primitives
the range compiler relies on: parsing, total-order comparison, and
bumping a single field.
"""

from __future__ import annotations

from typing import Union

from semver import Version

from semrange.exceptions import InvalidVersionLiteralError

#: Fields accepted by :func:`bump`.
BUMP_FIELDS = ("major", "minor")


def parse_version(text: str) -> Version:
    """Parse a full ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` string.

    Args:
        text: Version string.

    Returns:
        Parsed :class:`semver.Version`.

    Raises:
        InvalidVersionLiteralError: ``text`` is not a valid semantic version.

    Examples:
        >>> parse_version("1.2.3-beta.1")
        Version(major=1, minor=2, patch=3, prerelease='beta.1', build=None)
    """
    try:
        return Version.parse(text)
    except (TypeError, ValueError) as exc:
        raise InvalidVersionLiteralError(
            f"Invalid version {text!r}: {exc}",
            literal=text if isinstance(text, str) else repr(text),
        ) from exc


def coerce_version(value: Union[Version, str]) -> Version:
    """Return ``value`` as a :class:`semver.Version`, parsing strings."""
    if isinstance(value, Version):
        return value
    return parse_version(value)


def compare(left: Version, right: Version) -> int:
    """Compare two versions by semver precedence.

    Build metadata is ignored; a pre-release ranks below its release.

    Returns:
        ``-1``, ``0`` or ``1``.
    """
    return left.compare(right)


def bump(version: Version, field: str) -> Version:
    """Increment ``field`` and zero every less significant field.

    Pre-release and build metadata are cleared.

    Args:
        version: Version to bump.
        field: ``"major"`` or ``"minor"``.

    Raises:
        ValueError: ``field`` is not one of :data:`BUMP_FIELDS`.

    Examples:
        >>> str(bump(Version.parse("1.2.3-rc.1"), "minor"))
        '1.3.0'
    """
    if field == "major":
        return version.bump_major()
    if field == "minor":
        return version.bump_minor()
    raise ValueError(f"Cannot bump field {field!r}; expected one of {BUMP_FIELDS}")
