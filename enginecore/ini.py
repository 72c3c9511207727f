"""Sectioned key=value settings files backed by pluggable region handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class IniRegion(ABC):
    """Handler for one ``[section]`` of a settings file."""

    @abstractmethod
    def parse(self, name: str, value: str) -> None:
        """Take one ``name=value`` entry read from the section."""

    @abstractmethod
    def get_str_data(self) -> str:
        """Return the section body, lines terminated by newlines."""


class IniData:
    """A set of named regions, kept in name order."""

    def __init__(self) -> None:
        self.regions: dict[str, IniRegion] = {}

    def add_region(self, name: str, region: IniRegion) -> None:
        """Register ``region`` under ``name``; an existing region is kept."""
        self.regions.setdefault(name, region)

    def get_region(self, name: str) -> Optional[IniRegion]:
        """Return the region registered as ``name``, or None."""
        return self.regions.get(name)


def _parse_lines(lines, data: IniData) -> None:
    region = ""
    for raw in lines:
        line = raw.rstrip("\r\n")
        hash_pos = line.find("#")
        if hash_pos == 0:
            continue
        if hash_pos > 0:
            line = line[:hash_pos]
        if not line:
            continue
        if line[0] == "[":
            region = line[1:-1]
            continue
        handler = data.get_region(region)
        if handler is None:
            continue
        name, sep, value = line.partition("=")
        handler.parse(name, value if sep else line)


def load_ini(path: str | Path, data: IniData, is_write: bool) -> None:
    """Read ``path`` into the regions of ``data``, or write them out.

    When ``is_write`` is false and the file can be read, each entry is handed
    to its region. Otherwise every region is written to the file in name
    order. An OSError is raised if the file cannot be written.
    """
    file_path = Path(path)
    if not is_write:
        try:
            with file_path.open("r", encoding="utf-8") as handle:
                _parse_lines(handle, data)
            return
        except OSError:
            pass
    with file_path.open("w", encoding="utf-8", newline="\n") as handle:
        for name in sorted(data.regions):
            handle.write(f"[{name}]\n")
            handle.write(data.regions[name].get_str_data())