"""Surface materials for both the classic ambient/diffuse/specular model and PBR."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

Color = tuple[float, float, float]

_BLACK: Color = (0.0, 0.0, 0.0)


def _clamp_color(color: Sequence[float]) -> Color:
    values = tuple(float(v) for v in color)
    if len(values) != 3:
        raise ValueError(f"expected a 3-component color, got {len(values)} components")
    return tuple(min(max(v, 0.0), 1.0) for v in values)  # type: ignore[return-value]


class PredefinedMaterial(Enum):
    """The built-in material library."""

    BRASS = 0
    BRONZE = 1
    COPPER = 2
    GOLD = 3
    SILVER = 4
    CHROME = 5
    RUBY = 6
    EMERALD = 7
    TURQUOISE = 8
    PEARL = 9
    JADE = 10
    OBSIDIAN = 11
    RED_PLASTIC = 12
    GREEN_PLASTIC = 13
    CYAN_PLASTIC = 14
    YELLOW_PLASTIC = 15
    WHITE_PLASTIC = 16
    BLACK_PLASTIC = 17
    RED_RUBBER = 18
    GREEN_RUBBER = 19
    CYAN_RUBBER = 20
    YELLOW_RUBBER = 21
    WHITE_RUBBER = 22
    BLACK_RUBBER = 23


@dataclass(frozen=True)
class _Recipe:
    ambient: Color
    diffuse: Color
    specular: Color
    shininess_factor: float
    metallic: bool
    metalness: float
    roughness: float


def _metal(ambient: Color, diffuse: Color, specular: Color, factor: float) -> _Recipe:
    return _Recipe(ambient, diffuse, specular, factor, True, 1.0, 0.65)


def _gem(ambient: Color, diffuse: Color, specular: Color, factor: float) -> _Recipe:
    return _Recipe(ambient, diffuse, specular, factor, False, 0.0, 0.25)


def _plastic(ambient: Color, diffuse: Color, specular: Color) -> _Recipe:
    return _Recipe(ambient, diffuse, specular, 0.25, False, 0.0, 0.1)


def _rubber(ambient: Color, diffuse: Color, specular: Color) -> _Recipe:
    return _Recipe(ambient, diffuse, specular, 0.078125, False, 0.0, 0.7)


_RECIPES: dict[PredefinedMaterial, _Recipe] = {
    PredefinedMaterial.BRASS: _metal(
        (0.329412, 0.223529, 0.027451),
        (0.780392, 0.568627, 0.113725),
        (0.992157, 0.941176, 0.807843),
        0.21794872,
    ),
    PredefinedMaterial.BRONZE: _metal(
        (0.2125, 0.1275, 0.054),
        (0.714, 0.4284, 0.18144),
        (0.393548, 0.271906, 0.166721),
        0.2,
    ),
    PredefinedMaterial.COPPER: _metal(
        (0.19125, 0.0735, 0.0225),
        (0.7038, 0.27048, 0.0828),
        (0.256777, 0.137622, 0.086014),
        0.1,
    ),
    PredefinedMaterial.GOLD: _metal(
        (0.24725, 0.1995, 0.0745),
        (0.75164, 0.60648, 0.22648),
        (0.628281, 0.555802, 0.366065),
        0.4,
    ),
    PredefinedMaterial.SILVER: _metal(
        (0.19225, 0.19225, 0.19225),
        (0.50754, 0.50654, 0.50754),
        (0.508273, 0.508273, 0.508273),
        0.4,
    ),
    PredefinedMaterial.CHROME: _metal(
        (0.25, 0.25, 0.25),
        (0.4, 0.4, 0.4),
        (0.774597, 0.774597, 0.774597),
        0.6,
    ),
    PredefinedMaterial.RUBY: _gem(
        (0.17450, 0.01175, 0.01175),
        (0.61424, 0.04136, 0.04136),
        (0.727811, 0.626959, 0.626959),
        0.6,
    ),
    PredefinedMaterial.EMERALD: _gem(
        (0.0215, 0.1745, 0.0215),
        (0.07568, 0.61424, 0.07568),
        (0.633000, 0.727811, 0.633000),
        0.6,
    ),
    PredefinedMaterial.TURQUOISE: _gem(
        (0.1, 0.18725, 0.1745),
        (0.396, 0.74151, 0.69102),
        (0.297254, 0.30829, 0.306678),
        0.1,
    ),
    PredefinedMaterial.PEARL: _gem(
        (0.25000, 0.20725, 0.20725),
        (1.000, 0.829, 0.829),
        (0.296648, 0.296648, 0.299948),
        0.088,
    ),
    PredefinedMaterial.JADE: _gem(
        (0.135, 0.2225, 0.1575),
        (0.54, 0.89, 0.63),
        (0.316228, 0.316228, 0.316228),
        0.1,
    ),
    PredefinedMaterial.OBSIDIAN: _gem(
        (0.05375, 0.05, 0.06625),
        (0.18275, 0.17, 0.22525),
        (0.332741, 0.328634, 0.346435),
        0.3,
    ),
    PredefinedMaterial.RED_PLASTIC: _plastic(
        (0.0, 0.0, 0.0), (0.5, 0.0, 0.0), (0.7, 0.6, 0.6)
    ),
    PredefinedMaterial.GREEN_PLASTIC: _plastic(
        (0.0, 0.0, 0.0), (0.1, 0.35, 0.1), (0.45, 0.55, 0.45)
    ),
    PredefinedMaterial.CYAN_PLASTIC: _plastic(
        (0.0, 0.1, 0.06),
        (0.0, 0.50980392, 0.50980392),
        (0.50196078, 0.50196078, 0.50196078),
    ),
    PredefinedMaterial.YELLOW_PLASTIC: _plastic(
        (0.0, 0.0, 0.0), (0.5, 0.5, 0.0), (0.6, 0.6, 0.5)
    ),
    PredefinedMaterial.WHITE_PLASTIC: _plastic(
        (0.0, 0.0, 0.0), (0.55, 0.55, 0.55), (0.7, 0.7, 0.7)
    ),
    PredefinedMaterial.BLACK_PLASTIC: _plastic(
        (0.0, 0.0, 0.0), (0.01, 0.01, 0.01), (0.5, 0.5, 0.5)
    ),
    PredefinedMaterial.RED_RUBBER: _rubber(
        (0.05, 0.0, 0.0), (0.7, 0.4, 0.4), (0.7, 0.04, 0.04)
    ),
    PredefinedMaterial.GREEN_RUBBER: _rubber(
        (0.0, 0.05, 0.0), (0.4, 0.5, 0.4), (0.04, 0.7, 0.04)
    ),
    PredefinedMaterial.CYAN_RUBBER: _rubber(
        (0.0, 0.05, 0.05), (0.4, 0.5, 0.5), (0.04, 0.7, 0.7)
    ),
    PredefinedMaterial.YELLOW_RUBBER: _rubber(
        (0.05, 0.05, 0.0), (0.5, 0.5, 0.4), (0.7, 0.7, 0.04)
    ),
    PredefinedMaterial.WHITE_RUBBER: _rubber(
        (0.05, 0.05, 0.05), (0.5, 0.5, 0.5), (0.7, 0.7, 0.7)
    ),
    PredefinedMaterial.BLACK_RUBBER: _rubber(
        (0.02, 0.02, 0.02), (0.01, 0.01, 0.01), (0.4, 0.4, 0.4)
    ),
}


class Material:
    """A surface material; every color component is kept within [0, 1]."""

    def __init__(
        self,
        ambient: Sequence[float],
        diffuse: Sequence[float],
        specular: Sequence[float],
        emissive: Sequence[float],
        shininess: float,
        metallic: bool = True,
        opacity: float = 1.0,
    ) -> None:
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.emissive = emissive
        self.albedo_color = _BLACK
        self.shininess = float(shininess)
        self.metallic = bool(metallic)
        self.opacity = float(opacity)
        self.metalness = 1.0 if metallic else 0.0
        self.roughness = 0.5

    @classmethod
    def from_pbr(
        cls,
        albedo: Sequence[float],
        metalness: float,
        roughness: float,
        opacity: float,
    ) -> Material:
        """A material described by albedo, metalness and roughness."""
        material = cls(_BLACK, _BLACK, _BLACK, _BLACK, 0.0)
        material.albedo_color = albedo
        material.metalness = float(metalness)
        material.roughness = float(roughness)
        material.opacity = float(opacity)
        material.metallic = material.metalness > 0.5
        material.shininess = 125 * material.metalness
        return material

    @classmethod
    def predefined(cls, kind: PredefinedMaterial | int) -> Material:
        """One of the library materials; raises ValueError for an unknown kind."""
        recipe = _RECIPES[PredefinedMaterial(kind)]
        return cls._from_recipe(recipe)

    @classmethod
    def default(cls) -> Material:
        """The material given to new objects."""
        recipe = _Recipe(
            (90 / 255.0, 98 / 255.0, 115 / 255.0),
            (175 / 255.0, 192 / 255.0, 224 / 255.0),
            (26 / 255.0, 26 / 255.0, 26 / 255.0),
            0.05,
            False,
            1.0,
            0.7,
        )
        return cls._from_recipe(recipe)

    @classmethod
    def _from_recipe(cls, recipe: _Recipe) -> Material:
        material = cls(
            recipe.ambient,
            recipe.diffuse,
            recipe.specular,
            _BLACK,
            abs(128.0 * recipe.shininess_factor),
            recipe.metallic,
            1.0,
        )
        material._albedo_from_ads()
        material.metalness = recipe.metalness
        material.roughness = recipe.roughness
        return material

    def _albedo_from_ads(self) -> None:
        self.albedo_color = tuple(a + d for a, d in zip(self.ambient, self.diffuse))

    @property
    def ambient(self) -> Color:
        return self._ambient

    @ambient.setter
    def ambient(self, color: Sequence[float]) -> None:
        self._ambient = _clamp_color(color)

    @property
    def diffuse(self) -> Color:
        return self._diffuse

    @diffuse.setter
    def diffuse(self, color: Sequence[float]) -> None:
        self._diffuse = _clamp_color(color)

    @property
    def specular(self) -> Color:
        return self._specular

    @specular.setter
    def specular(self, color: Sequence[float]) -> None:
        self._specular = _clamp_color(color)

    @property
    def emissive(self) -> Color:
        return self._emissive

    @emissive.setter
    def emissive(self, color: Sequence[float]) -> None:
        self._emissive = _clamp_color(color)

    @property
    def albedo_color(self) -> Color:
        return self._albedo_color

    @albedo_color.setter
    def albedo_color(self, color: Sequence[float]) -> None:
        self._albedo_color = _clamp_color(color)

    def _state(self) -> tuple:
        return (
            self.ambient,
            self.diffuse,
            self.specular,
            self.emissive,
            self.albedo_color,
            self.shininess,
            self.metallic,
            self.metalness,
            self.roughness,
            self.opacity,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return (
            f"Material(ambient={self.ambient}, diffuse={self.diffuse}, "
            f"specular={self.specular}, emissive={self.emissive}, "
            f"albedo_color={self.albedo_color}, shininess={self.shininess}, "
            f"metallic={self.metallic}, metalness={self.metalness}, "
            f"roughness={self.roughness}, opacity={self.opacity})"
        )