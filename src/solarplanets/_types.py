"""Shared record types.

- :class:`StateVector`: a position/velocity pair expressed in one frame.

``StateVector`` is a :class:`~typing.NamedTuple`, which JAX treats as a
pytree, so it can be returned from ``jax.jit`` and ``jax.vmap`` functions
and unpacked like a plain ``(position, velocity)`` tuple.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class StateVector(NamedTuple):
    """Position and velocity of a body in a single frame.

    Attributes:
        position: Position vector, shape ``(3,)``. Units: *km*
        velocity: Velocity vector, shape ``(3,)``. Units: *km/s*
    """

    position: Array
    velocity: Array
