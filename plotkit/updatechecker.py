"""Checking a published release list for a newer version."""

from __future__ import annotations

import argparse
import json
import logging
import platform
import sys
import urllib.request
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Mapping

from plotkit.versionnumber import CURRENT_VERSION, VersionNumber

log = logging.getLogger(__name__)

_MACHINES_64 = {"x86_64", "amd64", "x64"}
_MACHINES_32 = {"i386", "i486", "i586", "i686", "x86"}


class UpdateCheckError(Exception):
    """Raised when the update information can't be fetched or understood."""


@dataclass(frozen=True)
class UpdateInfo:
    """Result of an update check."""

    found: bool
    version: VersionNumber | None = None
    url: str | None = None


def release_type(system: str, machine: str) -> str:
    """Name of the release files that suit the given system and processor."""
    machine = machine.lower()
    if system.lower() == "windows":
        if machine in _MACHINES_64:
            return "windows"
        if machine in _MACHINES_32:
            return "windows_32"
    else:
        if machine in _MACHINES_64:
            return "linux"
        if machine in _MACHINES_32:
            return "linux_32"
        if machine.startswith("arm") or machine.startswith("aarch"):
            return "arm"
    raise ValueError(f"unknown architecture for update file detection: {machine!r}")


def default_release_type() -> str:
    """Release type of the running machine."""
    return release_type(platform.system(), platform.machine())


def find_update(
    data: Any, release_type: str, current: VersionNumber = CURRENT_VERSION
) -> UpdateInfo:
    """Look for a release newer than ``current`` in parsed update data.

    The data holds a ``latest`` object mapping release types to version
    strings, and a ``releases`` object mapping those version strings to
    ``{"files": {release_type: url}}``.
    """
    if not isinstance(data, dict):
        raise UpdateCheckError("JSON data invalid.")

    latest = data.get("latest")
    if not isinstance(latest, dict):
        raise UpdateCheckError('JSON data "latest" field is missing.')

    latest_rel = latest.get(release_type)
    if not isinstance(latest_rel, str):
        log.debug("No update found for %s", release_type)
        return UpdateInfo(found=False)

    try:
        latest_vn = VersionNumber.extract(latest_rel)
    except ValueError as exc:
        raise UpdateCheckError(f"Failed to parse version number: {latest_rel}") from exc

    if not latest_vn > current:
        log.debug("No update.")
        return UpdateInfo(found=False)

    releases = data.get("releases")
    release = releases.get(latest_rel) if isinstance(releases, dict) else None
    files = release.get("files") if isinstance(release, dict) else None
    link = files.get(release_type) if isinstance(files, dict) else None
    if not isinstance(link, str):
        raise UpdateCheckError("Link not found!")

    log.debug("New update: %s %s", latest_vn, link)
    return UpdateInfo(found=True, version=latest_vn, url=link)


def describe_result(result: UpdateInfo, package_manager: bool = False) -> str:
    """Message shown to the user for an update check result."""
    if not result.found:
        return "There is no update yet."
    if package_manager:
        return (
            f"There is a new version: {result.version}. "
            "Use your package manager to update"
            f' or click to <a href="{result.url}">download</a>.'
        )
    return f'Found update to version {result.version}. Click to <a href="{result.url}">download</a>.'


def _fetch_url(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=30) as response:
        return response.read()


class UpdateChecker:
    """Fetches the update information and looks for a newer release."""

    def __init__(
        self,
        url: str,
        release_type: str | None = None,
        current: VersionNumber = CURRENT_VERSION,
        fetch: Callable[[str], bytes] | None = None,
    ) -> None:
        self.url = url
        self.release_type = release_type or default_release_type()
        self.current = current
        self._fetch = fetch or _fetch_url

    def check(self) -> UpdateInfo:
        """Run one check; raises ``UpdateCheckError`` on any failure."""
        try:
            payload = self._fetch(self.url)
        except OSError as exc:
            raise UpdateCheckError(f"Network error: {exc}") from exc

        try:
            data = json.loads(payload)
        except ValueError as exc:
            pos = getattr(exc, "pos", 0)
            msg = getattr(exc, "msg", str(exc))
            log.error("%r", payload)
            raise UpdateCheckError(f"JSon parsing error at {pos}: {msg}") from exc

        try:
            return find_update(data, self.release_type, self.current)
        except UpdateCheckError as exc:
            log.error("Parsing the update info file failed: %s", exc)
            raise UpdateCheckError("JSON parsing error.") from exc


@dataclass
class UpdateSettings:
    """Persisted update-check preferences."""

    periodic: bool = False
    last_check: date | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "periodic": self.periodic,
            "last_check": self.last_check.isoformat() if self.last_check else "",
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], today: date | None = None) -> UpdateSettings:
        """Read settings; a missing last check date counts as yesterday."""
        today = today or date.today()
        periodic = bool(data.get("periodic", False))
        raw = data.get("last_check")
        if raw is None:
            last_check: date | None = today - timedelta(days=1)
        else:
            try:
                last_check = date.fromisoformat(str(raw))
            except ValueError:
                last_check = None
        return cls(periodic=periodic, last_check=last_check)

    def is_due(self, today: date | None = None) -> bool:
        """True when a periodic check should run today."""
        today = today or date.today()
        if not self.periodic:
            return False
        return self.last_check is None or self.last_check < today


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check for a newer release.")
    parser.add_argument("url", help="location of the update information")
    parser.add_argument("--release-type", default=None, help="release files to look for")
    parser.add_argument(
        "--package-manager",
        action="store_true",
        help="suggest updating through the package manager",
    )
    args = parser.parse_args(argv)

    try:
        checker = UpdateChecker(args.url, release_type=args.release_type)
        result = checker.check()
    except (UpdateCheckError, ValueError) as exc:
        print(f"Update check failed.\n{exc}", file=sys.stderr)
        return 1

    print(describe_result(result, args.package_manager))
    return 0