# plotkit

plotkit contains the parts of a live plotting tool that do not need a GUI. A plotting
front end can use them, and so can a script on its own.

## Modules

- `plotkit.versionnumber` provides `VersionNumber`, a frozen `major.minor.patch` value.
  Comparison goes component by component. `VersionNumber.extract(text)` finds the first
  version number in free text. A missing minor or patch part counts as zero. If the
  text contains no version number, it raises `ValueError`. `CURRENT_VERSION` is the
  running version.
- `plotkit.updatechecker` reads a JSON release index and reports whether it lists a
  newer release.
  - `find_update(data, release_type, current)` returns an `UpdateInfo` with the fields
    `found`, `version` and `url`. It raises `UpdateCheckError` if the data is
    malformed.
  - `release_type(system, machine)` and `default_release_type()` choose the release
    files to look for: `windows`, `windows_32`, `linux`, `linux_32` or `arm`.
  - `UpdateChecker(url, ...)` fetches the index, and `.check()` runs one check. You can
    pass your own `fetch` callable to it.
  - `describe_result` builds the message shown to the user.
  - `UpdateSettings` holds the periodic-check flag and the date of the last check. It
    has `to_dict`, `from_dict` and `is_due(today)`.
- `plotkit.snapshot` works with snapshots of channel data.
  - `Snapshot` is a named set of channels. `display_name()` adds a trailing `*` while
    the snapshot is unsaved.
  - `save(path)` writes the snapshot as CSV and replaces the file atomically. The
    first row holds the channel names.
  - `load_snapshot(path)` reads such a file back and raises `SnapshotError` on bad
    input.
  - `SnapshotManager` keeps a session's snapshots. It can take them through a
    callable, load files (failures are logged and skipped), delete them, clear them,
    and report `is_all_saved()`.
  - `make_snapshot_name(now)` produces names such as `Snapshot [12:34:56]`.
- `plotkit.scrollbar` provides `ScrollBar`. It maps a visible sub-range of a base range
  onto 1,000,000 integer ticks and back, and supports inversion. Listeners in
  `value_changed` are called when `set_value` moves the slider.
- `plotkit.valuelayout` handles value labels. `layout_values(values, label_height)`
  shifts `ChannelValue` labels in place so that none overlap and none go above `y = 0`.
  `selection_size_text(width, height)` formats a selection size as ` [w, h]`.
- `plotkit.zoomstack` handles zooming.
  - `ZoomStack` is a zoom history over a base `Rect`. The base is limited to the X
    limits and a horizontal view size. It supports `zoom`, `zoom_level`, `move_to` and
    `move_by`, which keep the view inside the limits.
  - `need_scroll_bar(horizontal, policy)` uses a `ScrollBarPolicy`.
  - `Axis` and `opposite_axis` describe plot axes.
  - `pick_horizontal` and `pick_vertical` turn a range picked on a scale into a zoom
    rectangle.

## Installing

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Examples

```python
from plotkit.versionnumber import VersionNumber

found = VersionNumber.extract("plotkit_v0.12.1.appimage")
print(found)                                # 0.12.1
print(found > VersionNumber(0, 11, 0))      # True
```

```python
from plotkit.snapshot import load_snapshot

snapshot = load_snapshot("capture.csv")     # name "capture", marked as saved
print(snapshot.display_name(), snapshot.num_channels(), snapshot.num_samples())
snapshot.rename("capture-fixed")
snapshot.save("capture-fixed.csv")
```

```python
from plotkit.zoomstack import Rect, ZoomStack

stack = ZoomStack(Rect(0.0, 0.0, 1000.0, 10.0))
stack.zoom(Rect(100.0, 2.0, 200.0, 4.0))
stack.move_by(50.0, 0.0)
print(stack.current())                      # Rect(left=150.0, top=2.0, right=250.0, bottom=4.0)
stack.zoom_level(-1)                        # back to the zoom base
```

## Checking for updates

```
plotkit-update-check URL [--release-type TYPE] [--package-manager]
```

The command downloads the release index from `URL` and compares the newest release
listed for this platform (or for `TYPE`) with the running version. It then prints the
result. If the check fails, it prints the reason to standard error and exits with
status 1. No index location is built in, so you must always give the URL.

## What it does not do

plotkit does no data acquisition or streaming. Nothing in it reads from serial ports or
other devices, and nothing in it passes incoming samples from one component to another.
Snapshots are built from data you already have, or loaded from CSV files. There is no
plotting window or other graphical interface either. The zoom, scroll bar and label
layout classes only compute positions and ranges, and leave drawing to you.

## Running the tests

```
pytest
```