"""Semantic versions and the supported version range."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from oas_conformance.errors import VersionParseError

_SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

_REQUIREMENT_PATTERN = re.compile(r"^\s*>=\s*([^\s,]+)\s*,\s*<\s*([^\s,]+)\s*$")


def _prerelease_key(prerelease: str) -> tuple:
    # Numeric identifiers sort before alphanumeric ones.
    key = []
    for part in prerelease.split("."):
        if part.isdigit():
            key.append((0, int(part), ""))
        else:
            key.append((1, 0, part))
    return tuple(key)


class SemanticVersion(BaseModel):
    """Semantic version with SemVer 2.0 precedence."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    prerelease: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def parse(cls, version_str: str) -> "SemanticVersion":
        """Parse a version string into SemanticVersion.

        Args:
            version_str: SemVer string like '3.0.2', '3.0.0-rc1', '3.0.0+build.7'.

        Returns:
            Parsed SemanticVersion.

        Raises:
            VersionParseError: If the string is not valid semver.
        """
        match = _SEMVER_PATTERN.fullmatch(version_str)
        if not match:
            raise VersionParseError(f"Invalid semantic version: {version_str!r}")
        return cls(
            major=int(match.group(1)),
            minor=int(match.group(2)),
            patch=int(match.group(3)),
            prerelease=match.group(4),
            build=match.group(5),
        )

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def _precedence(self) -> tuple:
        # A release sorts after all of its pre-releases; build metadata is ignored.
        if self.prerelease is None:
            return (self.release, 1, ())
        return (self.release, 0, _prerelease_key(self.prerelease))

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __lt__(self, other: "SemanticVersion") -> bool:
        return self._precedence() < other._precedence()

    def __le__(self, other: "SemanticVersion") -> bool:
        return self._precedence() <= other._precedence()

    def __gt__(self, other: "SemanticVersion") -> bool:
        return self._precedence() > other._precedence()

    def __ge__(self, other: "SemanticVersion") -> bool:
        return self._precedence() >= other._precedence()


class VersionRequirement(BaseModel):
    """Inclusive-lower, exclusive-upper version range (``>=lower, <upper``)."""

    model_config = ConfigDict(frozen=True)

    lower: SemanticVersion
    upper: SemanticVersion

    @classmethod
    def parse(cls, requirement: str) -> "VersionRequirement":
        """Parse a requirement of the form ``>=3.0.0, <3.1.0``."""
        match = _REQUIREMENT_PATTERN.match(requirement)
        if not match:
            raise VersionParseError(
                f"Invalid version requirement: {requirement!r} (expected '>=X.Y.Z, <X.Y.Z')"
            )
        lower = SemanticVersion.parse(match.group(1))
        upper = SemanticVersion.parse(match.group(2))
        if not lower < upper:
            raise VersionParseError(f"Empty version requirement: {requirement!r}")
        return cls(lower=lower, upper=upper)

    def matches(self, version: SemanticVersion) -> bool:
        """Check whether ``version`` falls inside the range.

        Pre-releases only match when one of the bounds is itself a pre-release
        of the same major.minor.patch, so ``3.0.5-beta`` is rejected by
        ``>=3.0.0, <3.1.0``.
        """
        if not (self.lower <= version < self.upper):
            return False
        if version.prerelease is None:
            return True
        return any(
            bound.prerelease is not None and bound.release == version.release
            for bound in (self.lower, self.upper)
        )

    def __str__(self) -> str:
        return f">={self.lower}, <{self.upper}"


SUPPORTED_VERSIONS = VersionRequirement.parse(">=3.0.0, <3.1.0")
