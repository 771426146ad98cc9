"""Geometry value types, shared enumerations and text conversion helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

__all__ = [
    "IntVector2",
    "IntVector3",
    "DoubleVector3",
    "FloatAngle",
    "VsDamageInfo",
    "Dimension",
    "ArmorType",
    "stricmp",
    "to_ucs2",
    "to_utf8",
]


@dataclass(frozen=True)
class IntVector2:
    """A horizontal integer position (chunk or column coordinates)."""

    x: int
    z: int

    def distance_to(self, other: IntVector2) -> float:
        """Euclidean distance to another horizontal position."""
        return math.hypot(other.x - self.x, other.z - self.z)


@dataclass(frozen=True)
class IntVector3:
    """An integer position in the world (block coordinates)."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class DoubleVector3:
    """A precise position or direction in the world."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: DoubleVector3) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def distance_to_no_height(self, other: DoubleVector3) -> float:
        """Distance to another point, ignoring the vertical axis."""
        return math.hypot(self.x - other.x, self.z - other.z)

    def __add__(self, other: DoubleVector3) -> DoubleVector3:
        if not isinstance(other, DoubleVector3):
            return NotImplemented
        return DoubleVector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: DoubleVector3) -> DoubleVector3:
        if not isinstance(other, DoubleVector3):
            return NotImplemented
        return DoubleVector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[DoubleVector3, float, int]) -> DoubleVector3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, DoubleVector3):
            return DoubleVector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return DoubleVector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> DoubleVector3:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self * other
        return NotImplemented


def _angle_to_byte(angle: float) -> int:
    value = int(angle / 360 * 255)
    return ((value + 128) % 256) - 128


@dataclass(frozen=True)
class FloatAngle:
    """Rotation in degrees."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def yaw_to_byte(self) -> int:
        """Yaw packed into a signed byte as sent over the wire."""
        return _angle_to_byte(self.yaw)

    def pitch_to_byte(self) -> int:
        """Pitch packed into a signed byte as sent over the wire."""
        return _angle_to_byte(self.pitch)

    def roll_to_byte(self) -> int:
        """Roll packed into a signed byte as sent over the wire."""
        return _angle_to_byte(self.roll)


@dataclass(frozen=True)
class VsDamageInfo:
    """Damage dealt to an entity and the strength of the knockback."""

    damage: int = 1
    knockback: float = 0.1


class Dimension(IntEnum):
    OVERWORLD = 0
    NETHER = -1


class ArmorType(IntEnum):
    HEAD = 0
    CHEST = 1
    PANTS = 2
    BOOTS = 3


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def stricmp(a: str, b: str) -> bool:
    """Case-insensitive (ASCII) equality of two strings."""
    return len(a) == len(b) and all(_ascii_lower(x) == _ascii_lower(y) for x, y in zip(a, b))


def to_ucs2(data: bytes) -> str:
    """Decode UTF-8 bytes into UCS-2 text, replacing anything unrepresentable with '?'."""
    out: list[str] = []
    size = len(data)
    i = 0
    while i < size:
        c = data[i]
        if c <= 0x7F:
            codepoint = c
            i += 1
        elif (c & 0xE0) == 0xC0 and i + 1 < size:
            codepoint = ((c & 0x1F) << 6) | (data[i + 1] & 0x3F)
            i += 2
        elif (c & 0xF0) == 0xE0 and i + 2 < size:
            codepoint = ((c & 0x0F) << 12) | ((data[i + 1] & 0x3F) << 6) | (data[i + 2] & 0x3F)
            i += 3
        else:
            out.append("?")
            i += 1
            continue
        out.append(chr(codepoint))
    return "".join(out)


def to_utf8(text: str) -> bytes:
    """Encode UCS-2 text as UTF-8; surrogates and characters beyond U+FFFF become '?'."""
    out = bytearray()
    for ch in text:
        codepoint = ord(ch)
        if 0xD800 <= codepoint <= 0xDFFF or codepoint > 0xFFFF:
            out.append(ord("?"))
        elif codepoint <= 0x7F:
            out.append(codepoint)
        elif codepoint <= 0x7FF:
            out.append(0xC0 | ((codepoint >> 6) & 0x1F))
            out.append(0x80 | (codepoint & 0x3F))
        else:
            out.append(0xE0 | ((codepoint >> 12) & 0x0F))
            out.append(0x80 | ((codepoint >> 6) & 0x3F))
            out.append(0x80 | (codepoint & 0x3F))
    return bytes(out)