"""A tiny ray caster that renders a sphere over a sky gradient as a PPM image."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Sequence

Pixel = tuple[int, int, int]

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3:
        return Vec3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vec3:
        return Vec3(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> Vec3:
        """Return the vector scaled to length one."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return self / length


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float

    def hit_by(self, ray: Ray) -> bool:
        """Return True if the ray's line meets the sphere."""
        to_center = self.center - ray.origin
        a = ray.direction.dot(ray.direction)
        b = -2 * ray.direction.dot(to_center)
        c = to_center.dot(to_center) - self.radius * self.radius
        return b * b - 4 * a * c >= 0


def lerp(v0: float, v1: float, t: float) -> float:
    """Linearly interpolate from ``v0`` to ``v1``."""
    return v0 + t * (v1 - v0)


_SCENE_SPHERE = Sphere(Vec3(0, 0, -1), 0.3)
_SPHERE_COLOR = Vec3(0, 0, 1)


def _shade(ray: Ray, sphere: Sphere) -> Pixel:
    if sphere.hit_by(ray):
        color = _SPHERE_COLOR
    else:
        height = 0.5 * (ray.direction.unit().y + 1.0)
        color = Vec3(lerp(1, 0.5, height), lerp(1, 0.7, height), lerp(1, 1.0, height))
    return int(255 * color.x), int(255 * color.y), int(255 * color.z)


def _render_rows(width: int, height: int) -> Iterator[list[Pixel]]:
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    viewport_height = 2.0
    viewport_width = viewport_height * (width / height)
    focal_length = 1.0
    camera = Vec3(0, 0, 0)
    viewport_u = Vec3(viewport_width, 0, 0)
    viewport_v = Vec3(0, -viewport_height, 0)
    delta_u = viewport_u / width
    delta_v = viewport_v / height
    top_left = camera - Vec3(0, 0, focal_length) - 0.5 * (viewport_u + viewport_v)
    pixel00 = top_left + 0.5 * (delta_u + delta_v)

    for i in range(height):
        yield [
            _shade(Ray(camera, pixel00 + delta_v * i + delta_u * j - camera), _SCENE_SPHERE)
            for j in range(width)
        ]


def render(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> list[Pixel]:
    """Render the scene and return its pixels in row-major order."""
    return [pixel for row in _render_rows(width, height) for pixel in row]


def write_ppm(pixels: Iterable[Pixel], width: int, height: int, stream: IO[str]) -> None:
    """Write pixels as a plain-text (P3) PPM image."""
    pixels = list(pixels)
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels:
        stream.write(f"{r} {g} {b}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Render the scene to standard output, reporting progress on standard error."""
    parser = argparse.ArgumentParser(description="Render a sphere as a PPM image.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("image dimensions must be positive")

    pixels: list[Pixel] = []
    last_row = max(args.height - 1, 1)
    for i, row in enumerate(_render_rows(args.width, args.height)):
        sys.stderr.write(f"\rProgress: {100 * i / last_row:.0f}%")
        pixels.extend(row)
    sys.stderr.write("\n")
    write_ppm(pixels, args.width, args.height, sys.stdout)
    return 0