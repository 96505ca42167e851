"""SVG ``transform`` attribute parsing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_TRANSFORM_RE = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class Transform:
    """Affine matrix ``(a, b, c, d, e, f)`` in SVG order."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def is_identity(self) -> bool:
        return self == Transform()

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def multiply(self, other: Transform) -> Transform:
        """Return ``self * other`` (``other`` applied first)."""
        a1, b1, c1, d1, e1, f1 = self.as_tuple()
        a2, b2, c2, d2, e2, f2 = other.as_tuple()
        return Transform(
            a1 * a2 + c1 * b2,
            b1 * a2 + d1 * b2,
            a1 * c2 + c1 * d2,
            b1 * c2 + d1 * d2,
            a1 * e2 + c1 * f2 + e1,
            b1 * e2 + d1 * f2 + f1,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


def _rotate(angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> Transform:
    rad = math.radians(angle_deg)
    cos, sin = math.cos(rad), math.sin(rad)
    rot = Transform(cos, sin, -sin, cos, 0.0, 0.0)
    if cx == 0.0 and cy == 0.0:
        return rot
    return (
        Transform(e=cx, f=cy)
        .multiply(rot)
        .multiply(Transform(e=-cx, f=-cy))
    )


def parse_transform(transform_str: str | None) -> Transform | None:
    """Parse an SVG transform list into a single matrix.

    Returns the identity for an empty string and None when the value
    contains a malformed entry.
    """
    if not transform_str or not transform_str.strip():
        return Transform()

    m = Transform()
    consumed = 0
    for part in _TRANSFORM_RE.finditer(transform_str):
        if transform_str[consumed:part.start()].strip(" ,\t\n\r"):
            return None
        consumed = part.end()

        kind = part.group(1)
        nums = [float(x) for x in _NUMBER_RE.findall(part.group(2))]
        if kind == "matrix" and len(nums) == 6:
            step = Transform(*nums)
        elif kind == "translate" and len(nums) in (1, 2):
            step = Transform(e=nums[0], f=nums[1] if len(nums) > 1 else 0.0)
        elif kind == "scale" and len(nums) in (1, 2):
            step = Transform(a=nums[0], d=nums[1] if len(nums) > 1 else nums[0])
        elif kind == "rotate" and len(nums) in (1, 3):
            step = _rotate(*nums)
        elif kind == "skewX" and len(nums) == 1:
            step = Transform(c=math.tan(math.radians(nums[0])))
        elif kind == "skewY" and len(nums) == 1:
            step = Transform(b=math.tan(math.radians(nums[0])))
        else:
            return None
        m = m.multiply(step)

    if transform_str[consumed:].strip(" ,\t\n\r"):
        return None
    return m
