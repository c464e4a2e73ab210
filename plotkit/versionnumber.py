"""Three-part version numbers and extraction of them from free text."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FULL_PATTERN = re.compile(
    r"(?:[-_vV \t]|^)(?P<major>\d+)(?:\.(?P<minor>\d+))(?:\.(?P<patch>\d+))?[-_ \t]?",
    re.ASCII,
)
# A version cut short at the end of the text, such as "v1" or "v1.".
_PARTIAL_PATTERN = re.compile(r"(?:[-_vV \t]|^)(?P<major>\d+)\.?\Z", re.ASCII)


@dataclass(frozen=True, order=True)
class VersionNumber:
    """A ``major.minor.patch`` version; compares component by component."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def extract(cls, text: str) -> VersionNumber:
        """Find the first version number in ``text``.

        Missing minor or patch parts count as zero. Raises ``ValueError``
        when the text holds no version number.
        """
        match = _FULL_PATTERN.search(text) or _PARTIAL_PATTERN.search(text)
        if match is None:
            raise ValueError(f"no version number in {text!r}")
        groups = match.groupdict()
        return cls(
            int(groups["major"]),
            int(groups.get("minor") or 0),
            int(groups.get("patch") or 0),
        )


CURRENT_VERSION = VersionNumber(0, 13, 0)