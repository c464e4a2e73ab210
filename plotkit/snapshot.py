"""Frozen copies of plotted data, kept in memory and saved to CSV files."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import datetime, time
from pathlib import Path
from typing import Callable, Iterable, Iterator

log = logging.getLogger(__name__)


class SnapshotError(Exception):
    """Raised when a snapshot file can't be read or parsed."""


def make_snapshot_name(now: datetime | time | None = None) -> str:
    """Default name of a snapshot taken at ``now``."""
    now = now or datetime.now()
    return f"Snapshot [{now.strftime('%H:%M:%S')}]"


def _format_value(value: float) -> str:
    return f"{value:g}"


@dataclass
class Snapshot:
    """Named set of channels, each holding a list of sample values."""

    name: str
    channel_names: list[str]
    data: list[list[float]] = field(default_factory=list)
    saved: bool = False

    def __post_init__(self) -> None:
        if len(self.channel_names) != len(self.data):
            raise ValueError(
                f"{len(self.channel_names)} channel names for {len(self.data)} channels"
            )

    def display_name(self) -> str:
        """The name, with a trailing ``*`` while the snapshot is unsaved."""
        return self.name if self.saved else self.name + "*"

    def num_channels(self) -> int:
        return len(self.data)

    def num_samples(self) -> int:
        """Number of samples in every channel."""
        return len(self.data[0]) if self.data else 0

    def rename(self, name: str) -> None:
        self.name = name

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the data as CSV, replacing ``path`` atomically."""
        target = Path(path)
        lines = [",".join(self.channel_names)]
        lines.extend(",".join(_format_value(v) for v in row) for row in zip(*self.data))
        text = "\n".join(lines) + "\n"

        fd, tmp_name = tempfile.mkstemp(dir=target.parent or ".", prefix=".snapshot-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
                tmp.write(text)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self.saved = True


def _parse_value(text: str, line_num: int, column: int) -> float:
    try:
        if "_" in text:
            raise ValueError(text)
        return float(text)
    except ValueError:
        raise SnapshotError(
            f'Parsing error at line {line_num}, column {column}: '
            f'can\'t convert "{text}" to double.'
        ) from None


def load_snapshot(path: str | os.PathLike[str]) -> Snapshot:
    """Read a CSV file whose first row names the channels."""
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8") as f:
            header = f.readline().rstrip("\r\n")
            channel_names = header.split(",")
            data: list[list[float]] = [[] for _ in channel_names]
            for line_num, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                columns = line.split(",")
                if len(columns) != len(channel_names):
                    raise SnapshotError(
                        f"Parsing error at line {line_num}: "
                        f"number of columns is not consistent. Line {line_num}: {line}"
                    )
                for column, (text, channel) in enumerate(zip(columns, data)):
                    channel.append(_parse_value(text, line_num, column))
    except OSError as exc:
        raise SnapshotError(f"Couldn't open file: {file_path}: {exc}") from exc

    return Snapshot(file_path.name.split(".")[0], channel_names, data, saved=True)


class SnapshotManager:
    """Keeps the list of snapshots taken or loaded during a session."""

    def __init__(self, take: Callable[[], Snapshot] | None = None) -> None:
        self._take = take
        self._snapshots: list[Snapshot] = []

    def take_snapshot(self) -> Snapshot:
        """Take a snapshot of the current data and keep it."""
        if self._take is None:
            raise RuntimeError("no data to take a snapshot of")
        snapshot = self._take()
        self.add(snapshot)
        return snapshot

    def add(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def delete(self, snapshot: Snapshot) -> None:
        """Forget ``snapshot``; unknown snapshots are ignored."""
        self._snapshots = [s for s in self._snapshots if s is not snapshot]

    def clear(self) -> None:
        self._snapshots.clear()

    def load_files(self, paths: Iterable[str | os.PathLike[str]]) -> list[Snapshot]:
        """Load each file as a snapshot; files that fail are logged and skipped."""
        loaded = []
        for path in paths:
            try:
                snapshot = load_snapshot(path)
            except SnapshotError as exc:
                log.error("%s", exc)
                continue
            self.add(snapshot)
            loaded.append(snapshot)
        return loaded

    def is_all_saved(self) -> bool:
        return all(s.saved for s in self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(list(self._snapshots))

    def __len__(self) -> int:
        return len(self._snapshots)