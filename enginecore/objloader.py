"""Wavefront OBJ reader producing flat, unindexed vertex streams."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from enginecore.sysfunc import start_with


@dataclass
class ObjMesh:
    """Per-corner vertex data: 3 floats position, 3 normal, 2 texture."""

    vertex_coords: list[float] = field(default_factory=list)
    normal_coords: list[float] = field(default_factory=list)
    texture_coords: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.indices)


def _floats(line: str, prefix: str, count: int) -> list[float]:
    parts = line[len(prefix):].split()
    if len(parts) < count:
        raise ValueError(f"malformed OBJ line: {line.rstrip()!r}")
    try:
        return [float(p) for p in parts[:count]]
    except ValueError as exc:
        raise ValueError(f"malformed OBJ line: {line.rstrip()!r}") from exc


def _face(line: str) -> list[tuple[int, int, int]]:
    parts = line[2:].split()
    if len(parts) < 3:
        raise ValueError(f"malformed OBJ face: {line.rstrip()!r}")
    corners = []
    for part in parts[:3]:
        pieces = part.split("/")
        if len(pieces) != 3:
            raise ValueError(f"malformed OBJ face: {line.rstrip()!r}")
        try:
            position, texture, normal = (int(p) - 1 for p in pieces)
        except ValueError as exc:
            raise ValueError(f"malformed OBJ face: {line.rstrip()!r}") from exc
        corners.append((position, texture, normal))
    return corners


def _lookup(items: list, index: int, kind: str):
    if not 0 <= index < len(items):
        raise ValueError(f"{kind} index {index + 1} out of range")
    return items[index]


def parse_obj(lines: Iterable[str]) -> ObjMesh:
    """Build a mesh from OBJ text lines with triangular ``v/vt/vn`` faces."""
    positions: list[list[float]] = []
    normals: list[list[float]] = []
    texcoords: list[list[float]] = []
    corners: list[tuple[int, int, int]] = []

    for line in lines:
        if start_with(line, "v "):
            positions.append(_floats(line, "v ", 3))
        elif start_with(line, "vn "):
            normals.append(_floats(line, "vn ", 3))
        elif start_with(line, "vt "):
            texcoords.append(_floats(line, "vt ", 2))
        elif start_with(line, "f "):
            corners.extend(_face(line))

    mesh = ObjMesh()
    for index, (position, texture, normal) in enumerate(corners):
        mesh.indices.append(index)
        mesh.vertex_coords.extend(_lookup(positions, position, "position"))
        mesh.normal_coords.extend(_lookup(normals, normal, "normal"))
        mesh.texture_coords.extend(_lookup(texcoords, texture, "texture"))
    return mesh


def load_obj(path: str | Path) -> ObjMesh:
    """Read and parse the OBJ file at ``path``."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_obj(handle)