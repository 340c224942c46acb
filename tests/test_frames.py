"""Tests for perifocal-inertial frame transformations."""

import math

import jax
import jax.numpy as jnp
import pytest

from solarplanets.frames import (
    rotation_inertial_to_perifocal,
    rotation_perifocal_to_inertial,
    state_perifocal_to_inertial,
)
from solarplanets.rotations import Rx, Rz


class TestRotationInertialToPerifocal:
    def test_curtis_example(self):
        Q = rotation_inertial_to_perifocal(40.0, 30.0, 60.0, use_degrees=True)
        expected = jnp.array(
            [
                [-0.099068, 0.89593, 0.43301],
                [-0.94175, -0.22496, 0.25],
                [0.32139, -0.38302, 0.86603],
            ]
        )
        assert jnp.allclose(Q, expected, atol=1e-5)

    def test_composition_order(self):
        raan, inc, aop = 0.3, 0.9, 2.1
        expected = Rz(aop) @ Rx(inc) @ Rz(raan)
        assert jnp.allclose(rotation_inertial_to_perifocal(raan, inc, aop), expected)

    def test_zero_angles_identity(self):
        assert jnp.allclose(rotation_inertial_to_perifocal(0.0, 0.0, 0.0), jnp.eye(3))

    def test_third_row_is_orbit_normal(self):
        raan, inc = 0.7, 0.4
        Q = rotation_inertial_to_perifocal(raan, inc, 1.3)
        normal = jnp.array([math.sin(raan) * math.sin(inc), -math.cos(raan) * math.sin(inc), math.cos(inc)])
        assert jnp.allclose(Q[2], normal, atol=1e-12)


class TestRotationPerifocalToInertial:
    @pytest.mark.parametrize(
        "raan, inc, aop",
        [(0.3, 0.9, 2.1), (5.9, 0.01, 4.0), (1.0, 3.0, 0.5)],
    )
    def test_mutual_transposes(self, raan, inc, aop):
        Q = rotation_inertial_to_perifocal(raan, inc, aop)
        Q_inv = rotation_perifocal_to_inertial(raan, inc, aop)
        assert jnp.allclose(Q_inv, Q.T)
        assert jnp.allclose(Q @ Q_inv, jnp.eye(3), atol=1e-12)
        assert jnp.allclose(Q_inv @ Q, jnp.eye(3), atol=1e-12)

    def test_degrees(self):
        Q_deg = rotation_perifocal_to_inertial(40.0, 30.0, 60.0, use_degrees=True)
        Q_rad = rotation_perifocal_to_inertial(math.radians(40.0), math.radians(30.0), math.radians(60.0))
        assert jnp.allclose(Q_deg, Q_rad)


class TestStatePerifocalToInertial:
    def test_periapsis_direction(self):
        # With zero angles the perifocal and inertial axes coincide
        state = state_perifocal_to_inertial(
            jnp.array([1.0, 0.0, 0.0]), jnp.array([0.0, 1.0, 0.0]), 0.0, 0.0, 0.0
        )
        assert jnp.allclose(state.position, jnp.array([1.0, 0.0, 0.0]))
        assert jnp.allclose(state.velocity, jnp.array([0.0, 1.0, 0.0]))

    def test_norms_preserved(self):
        r = jnp.array([1.2e8, 4.0e7, 0.0])
        v = jnp.array([-10.0, 25.0, 0.0])
        state = state_perifocal_to_inertial(r, v, 0.8, 0.03, 5.0)
        assert jnp.linalg.norm(state.position) == pytest.approx(float(jnp.linalg.norm(r)), rel=1e-12)
        assert jnp.linalg.norm(state.velocity) == pytest.approx(float(jnp.linalg.norm(v)), rel=1e-12)

    def test_in_orbit_plane(self):
        raan, inc, aop = 0.8, 0.3, 5.0
        state = state_perifocal_to_inertial(
            jnp.array([1.0e8, 2.0e7, 0.0]), jnp.array([-5.0, 30.0, 0.0]), raan, inc, aop
        )
        normal = rotation_inertial_to_perifocal(raan, inc, aop)[2]
        assert float(jnp.dot(state.position, normal)) == pytest.approx(0.0, abs=1e-4)
        assert float(jnp.dot(state.velocity, normal)) == pytest.approx(0.0, abs=1e-12)

    def test_jit(self):
        fn = jax.jit(state_perifocal_to_inertial)
        state = fn(jnp.array([1.0, 0.0, 0.0]), jnp.array([0.0, 1.0, 0.0]), 0.1, 0.2, 0.3)
        assert state.position.shape == (3,)
