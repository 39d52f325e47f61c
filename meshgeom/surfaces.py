"""Closed-form parametric surfaces evaluated over a (u, v) domain.

Each surface scales with its ``radius``. ``u_range`` and ``v_range`` give the
parameter domain over which the surface is meant to be sampled.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

import numpy as np

_TWO_PI = 2.0 * math.pi
_SQRT2 = math.sqrt(2.0)


class ParametricSurface(ABC):
    """A surface given by a point for every (u, v) in its parameter domain."""

    name: ClassVar[str] = "Parametric Surface"
    u_range: ClassVar[tuple[float, float]] = (0.0, 1.0)
    v_range: ClassVar[tuple[float, float]] = (0.0, 1.0)

    def __init__(self, radius: float = 1.0) -> None:
        self.radius = float(radius)

    @abstractmethod
    def point_at(self, u: float, v: float) -> np.ndarray:
        """The surface point at parameters (u, v) as an (x, y, z) array."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(radius={self.radius})"


class AppleSurface(ParametricSurface):
    name = "Apple Surface"
    u_range = (0.0, _TWO_PI)
    v_range = (-math.pi, math.pi)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        ring = 4 + 3.8 * math.cos(v)
        x = r * (math.cos(u) * ring)
        y = r * (math.sin(u) * ring)
        z = r * (
            (math.cos(v) + math.sin(v) - 1)
            * (1 + math.sin(v))
            * math.log(1 - math.pi * v / 10)
            + 7.5 * math.sin(v)
        )
        return np.array([x, y, z])


class BentHorns(ParametricSurface):
    name = "Bent Horns"
    u_range = (-math.pi, math.pi)
    v_range = (-_TWO_PI, _TWO_PI)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        third = 2.0 * math.pi / 3.0
        x = r * (2.0 + math.cos(u)) * (v / 3.0 - math.sin(v))
        y = r * (2.0 + math.cos(u - third)) * (math.cos(v) - 1.0)
        z = r * (2.0 + math.cos(u + third)) * (math.cos(v) - 1.0) + r * 2.0
        return np.array([x, y, z])


class BowTie(ParametricSurface):
    name = "Bow Tie"
    u_range = (0.0, _TWO_PI)
    v_range = (0.0, _TWO_PI)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        x = r * math.sin(u) / (_SQRT2 + math.cos(v))
        y = r * math.sin(u) / (_SQRT2 + math.sin(v))
        z = r * math.cos(u) / (1 + _SQRT2)
        return np.array([x, y, z])


class BoySurface(ParametricSurface):
    name = "Boy's Surface"
    u_range = (0.0, math.pi)
    v_range = (0.0, math.pi)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        a = 2.0 / 3.0
        b = _SQRT2
        denom = b - math.sin(2 * u) * math.sin(3 * v)
        cu, su = math.cos(u), math.sin(u)
        x = r * (a * ((cu * math.sin(2 * v) - b * su * math.sin(v)) * cu) / denom)
        y = r * (a * ((cu * math.cos(2 * v) + b * su * math.cos(v)) * cu) / denom)
        z = r * (b * (cu * cu) / denom) - r
        return np.array([x, y, z])


class BreatherSurface(ParametricSurface):
    name = "Breather Surface"
    u_range = (-13.2, 13.2)
    v_range = (-37.4, 37.4)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        b = 0.4
        rr = 1 - b * b
        w = math.sqrt(rr)
        ch = math.cosh(b * u)
        denom = b * (w * ch) ** 2 + (b * math.sin(w * v)) ** 2
        x = r * (-u + (2 * rr * ch * math.sinh(b * u)) / denom)
        y = r * (
            (2 * w * ch * (-(w * math.cos(v) * math.cos(w * v)) - math.sin(v) * math.sin(w * v)))
            / denom
        )
        z = r * (
            (2 * w * ch * (-(w * math.sin(v) * math.cos(w * v)) + math.cos(v) * math.sin(w * v)))
            / denom
        )
        return np.array([x, y, z])


class ConeShell(ParametricSurface):
    name = "Cone Sea Shell"
    u_range = (0.0, _TWO_PI)
    v_range = (0.0, _TWO_PI)

    _TUBE_RADIUS = 1.0
    _TURNS = 4.6
    _HEIGHT = 0.5
    _POWER = 2.0

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        width = u / _TWO_PI * self._TUBE_RADIUS
        x = r * (width * math.cos(self._TURNS * u) * (1 + math.cos(v)))
        y = r * (width * math.sin(self._TURNS * u) * (1 + math.cos(v)))
        z = (
            r
            * (
                width * math.sin(v) * 1.25
                + self._HEIGHT * (u / _TWO_PI) ** self._POWER
                + width * math.cos(v) * 1.25
            )
            - r / 2
        )
        return np.array([x, y, z])


class Crescent(ParametricSurface):
    name = "Crescent"
    u_range = (0.0, 1.0)
    v_range = (0.0, 1.0)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        ring = 2 + math.sin(_TWO_PI * u) * math.sin(_TWO_PI * v)
        x = r * (ring * math.cos(3 * math.pi * v))
        y = r * (ring * math.sin(3 * math.pi * v))
        z = r * (math.cos(_TWO_PI * u) * math.sin(_TWO_PI * v) + 4 * v - 2)
        return np.array([x, y, z])


class DoubleCone(ParametricSurface):
    name = "Double Cone"
    u_range = (0.0, _TWO_PI)
    v_range = (-1.0, 1.0)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        third = 2 * math.pi / 3
        x = r * v * math.cos(u)
        y = r * (v - 1) * math.cos(u + third)
        z = r * (1 - v) * math.cos(u - third)
        return np.array([x, y, z])


class Figure8KleinBottle(ParametricSurface):
    name = "Figure 8 Klein Bottle"
    u_range = (0.0, _TWO_PI)
    v_range = (0.0, _TWO_PI)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        ch, sh = math.cos(v / 2), math.sin(v / 2)
        ring = 2 + ch * math.sin(u) - sh * math.sin(2 * u)
        x = r * ring * math.cos(v)
        y = r * ring * math.sin(v)
        z = r * (sh * math.sin(u) + ch * math.sin(2 * u))
        return np.array([x, y, z])


class Folium(ParametricSurface):
    name = "Folium"
    u_range = (-math.pi, math.pi)
    v_range = (-math.pi, math.pi)

    def point_at(self, u: float, v: float) -> np.ndarray:
        r = self.radius
        third = 2 * math.pi / 3
        x = r * (math.cos(u) * (2 * v / math.pi - math.tanh(v)))
        y = r * (math.cos(u + third) / math.cosh(v))
        z = r * (math.cos(u - third) / math.cosh(v))
        return np.array([x, y, z])


SURFACES: tuple[type[ParametricSurface], ...] = (
    AppleSurface,
    BentHorns,
    BowTie,
    BoySurface,
    BreatherSurface,
    ConeShell,
    Crescent,
    DoubleCone,
    Figure8KleinBottle,
    Folium,
)