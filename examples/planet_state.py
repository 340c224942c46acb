# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "solarplanets"]
#
# [tool.uv.sources]
# solarplanets = { path = ".." }
# ///
"""Print heliocentric planetary state vectors at a UTC instant.

Loads the bundled element table (or a user-supplied one), evaluates the
requested bodies at the given instant and prints position and velocity in
the J2000 ecliptic frame, or in the J2000 mean equatorial frame with
``--equatorial``.

Requires solarplanets to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/planet_state.py [BODIES]... [OPTIONS]

Examples:
    # Mars at the 2003 opposition
    uv run examples/planet_state.py mars --epoch 2003-08-27T12:00:00Z

    # Every planet in the bundled table, equatorial axes
    uv run examples/planet_state.py --epoch 2024-01-01 --equatorial

    # A custom element table
    uv run examples/planet_state.py earth --table ./my_elements.json --verbose
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import jax
import jax.numpy as jnp
import typer

from solarplanets import Epoch, compute_state_vector, set_dtype
from solarplanets.catalog import load_element_table, load_planets, stack_elements
from solarplanets.frames import state_ecliptic_to_equatorial
from solarplanets.orbits import KeplerConvergenceError

set_dtype(jnp.float64)  # Must be before any JIT compilation

_state_batch = jax.jit(jax.vmap(compute_state_vector, in_axes=(0, None)))


def main(
    bodies: Annotated[
        Optional[list[str]], typer.Argument(help="Body names (default: every body in the table)")
    ] = None,
    epoch: Annotated[
        str, typer.Option(help="UTC instant, YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS[.fff]Z")
    ] = "2003-08-27T12:00:00Z",
    table: Annotated[
        Optional[Path], typer.Option(help="JSON element table (default: bundled planets)")
    ] = None,
    equatorial: Annotated[
        bool, typer.Option(help="Rotate states to J2000 mean equatorial axes")
    ] = False,
    verbose: Annotated[bool, typer.Option(help="Enable info logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        epc = Epoch.from_string(epoch)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    elements = load_element_table(table) if table is not None else load_planets()

    names = [name.lower() for name in bodies] if bodies else list(elements)
    unknown = [name for name in names if name not in elements]
    if unknown:
        print(f"ERROR: Unknown bodies: {', '.join(unknown)}")
        print(f"  Available: {', '.join(elements)}")
        sys.exit(1)

    # Validate convergence eagerly for each body, then batch the evaluation
    for name in names:
        try:
            compute_state_vector(elements[name], epc, strict=True)
        except KeplerConvergenceError as exc:
            print(f"ERROR: {name}: {exc}")
            sys.exit(1)

    batch = stack_elements([elements[name] for name in names])
    states = _state_batch(batch, epc)
    frame = "ecliptic J2000"
    if equatorial:
        states = jax.vmap(state_ecliptic_to_equatorial)(states)
        frame = "equatorial J2000"

    print(f"Heliocentric states at {epc.isoformat()} ({frame})")
    print(f"  {'body':<10}{'x [km]':>18}{'y [km]':>18}{'z [km]':>18}"
          f"{'vx [km/s]':>12}{'vy [km/s]':>12}{'vz [km/s]':>12}")
    for i, name in enumerate(names):
        r = states.position[i]
        v = states.velocity[i]
        print(
            f"  {name:<10}{float(r[0]):>18.1f}{float(r[1]):>18.1f}{float(r[2]):>18.1f}"
            f"{float(v[0]):>12.5f}{float(v[1]):>12.5f}{float(v[2]):>12.5f}"
        )


if __name__ == "__main__":
    typer.run(main)
