import math

import numpy as np
import pytest

from meshgeom.surfaces import (
    SURFACES,
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
    ParametricSurface,
)


def _grid(surface, steps=7):
    u0, u1 = type(surface).u_range
    v0, v1 = type(surface).v_range
    for i in range(steps + 1):
        for j in range(steps + 1):
            yield u0 + (u1 - u0) * i / steps, v0 + (v1 - v0) * j / steps


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        ParametricSurface(1.0)


def test_points_are_finite_over_domain():
    surfaces = (
        AppleSurface(1.5),
        BentHorns(1.5),
        BowTie(1.5),
        BoySurface(1.5),
        BreatherSurface(1.5),
        ConeShell(1.5),
        Crescent(1.5),
        DoubleCone(1.5),
        Figure8KleinBottle(1.5),
        Folium(1.5),
    )
    assert {type(s) for s in surfaces} == set(SURFACES)
    for surface in surfaces:
        for u, v in _grid(surface):
            point = surface.point_at(u, v)
            assert point.shape == (3,)
            assert np.all(np.isfinite(point))


def test_points_scale_with_radius():
    pairs = (
        (AppleSurface(1.0), AppleSurface(3.0)),
        (BentHorns(1.0), BentHorns(3.0)),
        (BowTie(1.0), BowTie(3.0)),
        (BoySurface(1.0), BoySurface(3.0)),
        (BreatherSurface(1.0), BreatherSurface(3.0)),
        (ConeShell(1.0), ConeShell(3.0)),
        (Crescent(1.0), Crescent(3.0)),
        (DoubleCone(1.0), DoubleCone(3.0)),
        (Figure8KleinBottle(1.0), Figure8KleinBottle(3.0)),
        (Folium(1.0), Folium(3.0)),
    )
    for unit, scaled in pairs:
        for u, v in _grid(unit, steps=4):
            assert scaled.point_at(u, v) == pytest.approx(3.0 * unit.point_at(u, v))


def test_zero_radius_collapses_to_origin():
    surfaces = (
        AppleSurface(0.0),
        BentHorns(0.0),
        BowTie(0.0),
        BoySurface(0.0),
        BreatherSurface(0.0),
        ConeShell(0.0),
        Crescent(0.0),
        DoubleCone(0.0),
        Figure8KleinBottle(0.0),
        Folium(0.0),
    )
    for surface in surfaces:
        u = sum(type(surface).u_range) / 2
        v = sum(type(surface).v_range) / 2
        assert surface.point_at(u, v) == pytest.approx(np.zeros(3))


def test_parameter_ranges():
    assert type(AppleSurface(1.0)).u_range == (0.0, 2 * math.pi)
    assert type(AppleSurface(1.0)).v_range == (-math.pi, math.pi)
    assert type(BentHorns(1.0)).v_range == (-2 * math.pi, 2 * math.pi)
    assert type(BoySurface(1.0)).u_range == (0.0, math.pi)
    assert type(BreatherSurface(1.0)).u_range == (-13.2, 13.2)
    assert type(BreatherSurface(1.0)).v_range == (-37.4, 37.4)
    assert type(Crescent(1.0)).u_range == (0.0, 1.0)
    assert type(DoubleCone(1.0)).v_range == (-1.0, 1.0)
    assert type(Folium(1.0)).u_range == (-math.pi, math.pi)


def test_names():
    assert type(AppleSurface(1.0)).name == "Apple Surface"
    assert type(BoySurface(1.0)).name == "Boy's Surface"
    assert type(ConeShell(1.0)).name == "Cone Sea Shell"
    assert type(Figure8KleinBottle(1.0)).name == "Figure 8 Klein Bottle"


def test_apple_is_rotationally_symmetric_in_u():
    surface = AppleSurface(2.0)
    a = surface.point_at(0.3, 1.1)
    b = surface.point_at(1.9, 1.1)
    assert math.hypot(a[0], a[1]) == pytest.approx(math.hypot(b[0], b[1]))
    assert a[2] == pytest.approx(b[2])


def test_bent_horns_at_zero_v():
    radius = 1.7
    point = BentHorns(radius).point_at(0.8, 0.0)
    assert point == pytest.approx(np.array([0.0, 0.0, 2.0 * radius]), abs=1e-12)


def test_boy_surface_at_quarter_u():
    radius = 2.5
    point = BoySurface(radius).point_at(math.pi / 2, 0.7)
    assert point == pytest.approx(np.array([0.0, 0.0, -radius]), abs=1e-12)


def test_cone_shell_starts_at_tip():
    radius = 4.0
    point = ConeShell(radius).point_at(0.0, 1.3)
    assert point == pytest.approx(np.array([0.0, 0.0, -radius / 2]), abs=1e-12)


def test_breather_symmetry_in_u():
    surface = BreatherSurface(1.0)
    a = surface.point_at(2.1, 5.3)
    b = surface.point_at(-2.1, 5.3)
    assert b[0] == pytest.approx(-a[0])
    assert b[1] == pytest.approx(a[1])
    assert b[2] == pytest.approx(a[2])


def test_folium_symmetry_in_v():
    surface = Folium(1.0)
    a = surface.point_at(0.4, 1.2)
    b = surface.point_at(0.4, -1.2)
    assert b[0] == pytest.approx(-a[0])
    assert b[1] == pytest.approx(a[1])
    assert b[2] == pytest.approx(a[2])


def test_double_cone_apex_line():
    point = DoubleCone(3.0).point_at(1.0, 0.0)
    assert point[0] == pytest.approx(0.0, abs=1e-12)


def test_crescent_periodic_in_u():
    surface = Crescent(1.0)
    assert surface.point_at(0.0, 0.3) == pytest.approx(surface.point_at(1.0, 0.3))


def test_figure8_and_bowtie_periodic_in_u():
    for surface in (Figure8KleinBottle(1.0), BowTie(1.0)):
        assert surface.point_at(0.0, 0.9) == pytest.approx(
            surface.point_at(2 * math.pi, 0.9), abs=1e-12
        )


def test_repr_holds_radius():
    assert repr(Folium(2.0)) == "Folium(radius=2.0)"