"""Loading of planetary element tables.

Element tables are JSON objects mapping a body name to a record in the
external layout read by
:meth:`~solarplanets.elements.OrbitalElementSet.from_mapping`.  A default
table of the eight major planets is bundled with the package:

- :func:`load_planets`: Load the bundled table.
- :func:`load_element_table`: Load a table from an arbitrary file path.
- :func:`stack_elements`: Stack records into one batched element set for
  ``jax.vmap``.

The bundled values are the JPL approximate Keplerian elements (Table 1,
valid 1800-2050 AD) with angular rates converted from degrees to
arcseconds per Julian century.  The "earth" entry is the Earth-Moon
barycenter.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from __future__ import annotations

import importlib.resources
import json
import logging
from collections.abc import Sequence
from pathlib import Path

import jax
import jax.numpy as jnp

from solarplanets.config import get_dtype
from solarplanets.elements import ElementRecordError, OrbitalElementSet, validate_elements

logger = logging.getLogger(__name__)

_DEFAULT_TABLE = "planets.json"


def load_element_table(filepath: str | Path) -> dict[str, OrbitalElementSet]:
    """Load and validate an element table from a JSON file.

    Body names are lower-cased.

    Args:
        filepath: Path to the JSON table.

    Returns:
        Mapping of body name to its validated element set, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ElementRecordError: If the file is not a JSON object of records, or
            a record is incomplete or outside the elliptical-orbit domain.

    Examples:
        ```python
        from solarplanets.catalog import load_element_table
        table = load_element_table("/path/to/planets.json")
        table["mars"].e
        ```
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Element table not found: {filepath}")

    logger.info("Loading element table from %s", filepath)
    with open(filepath, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ElementRecordError(f"Element table {filepath} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ElementRecordError(
            f"Element table {filepath} must be a JSON object keyed by body name"
        )

    table: dict[str, OrbitalElementSet] = {}
    for name, record in raw.items():
        if not isinstance(record, dict):
            raise ElementRecordError(f"{name}: element record must be a JSON object")
        try:
            elements = OrbitalElementSet.from_mapping(record)
        except ElementRecordError as exc:
            raise ElementRecordError(f"{name}: {exc}") from exc
        table[name.lower()] = validate_elements(elements, name)

    logger.info("Loaded %d element records", len(table))
    return table


def load_planets() -> dict[str, OrbitalElementSet]:
    """Load the bundled element table of the eight major planets.

    Returns:
        Mapping of planet name (``"mercury"`` ... ``"neptune"``) to its
        element set.

    Examples:
        ```python
        from solarplanets.catalog import load_planets
        planets = load_planets()
        sorted(planets)
        ```
    """
    resource = importlib.resources.files("solarplanets").joinpath("data", _DEFAULT_TABLE)
    with importlib.resources.as_file(resource) as path:
        return load_element_table(path)


def stack_elements(records: Sequence[OrbitalElementSet]) -> OrbitalElementSet:
    """Stack scalar element sets into one batched element set.

    Each field of the result is an array of shape ``(len(records),)``, so
    the result can be mapped over with ``jax.vmap``.

    Args:
        records: Non-empty sequence of scalar element sets.

    Returns:
        OrbitalElementSet: Batched element set.

    Raises:
        ValueError: If ``records`` is empty.

    Examples:
        ```python
        import jax
        from solarplanets import Epoch, compute_state_vector
        from solarplanets.catalog import load_planets, stack_elements
        planets = load_planets()
        batch = stack_elements(list(planets.values()))
        epc = Epoch(2003, 8, 27, 12, 0, 0.0)
        r, v = jax.vmap(compute_state_vector, in_axes=(0, None))(batch, epc)
        ```
    """
    if not records:
        raise ValueError("Cannot stack an empty sequence of element sets")
    return jax.tree.map(
        lambda *values: jnp.asarray(values, dtype=get_dtype()),
        *records,
    )
