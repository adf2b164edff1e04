# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "orrery"]
#
# [tool.uv.sources]
# orrery = { path = ".." }
# ///
"""Print heliocentric positions of the Sun, planets and Pluto at an instant.

Evaluates every body of the default element table at the requested UTC
instant with a single vmap'd call and prints the positions, the distance
from the Sun and the ecliptic longitude/latitude.  Optionally writes the
sampled orbital paths of all bodies to a CSV file for plotting.

Requires orrery to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/planet_positions.py [OPTIONS]

Examples:
    # Positions right now
    uv run examples/planet_positions.py

    # Positions at a given instant, in J2000 equatorial coordinates
    uv run examples/planet_positions.py --date 2024-06-15T00:00:00Z --frame equatorial

    # Also dump 256-segment orbital paths for plotting
    uv run examples/planet_positions.py --paths-csv orbits.csv --segments 256
"""

import csv
import enum
import sys
import time
from typing import Annotated

import jax.numpy as jnp
import typer

from orrery import Epoch, SolarSystem, position_ecliptic_to_equatorial, set_dtype

set_dtype(jnp.float64)


class Frame(enum.StrEnum):
    ecliptic = "ecliptic"
    equatorial = "equatorial"


def main(
    date: Annotated[
        str | None, typer.Option(help="UTC instant, ISO 8601 (default: now)")
    ] = None,
    frame: Annotated[Frame, typer.Option(help="Output reference frame")] = Frame.ecliptic,
    paths_csv: Annotated[
        str | None, typer.Option(help="Write sampled orbital paths to this CSV file")
    ] = None,
    segments: Annotated[int, typer.Option(help="Segments per orbital path")] = 128,
) -> None:
    try:
        epc = Epoch(date) if date is not None else Epoch.now()
    except ValueError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    system = SolarSystem()

    print(f"Epoch: {epc}  ({frame} frame, AU)")
    t0 = time.perf_counter()
    positions = system.positions(epc)
    print(f"  Evaluated {len(positions)} bodies in {time.perf_counter() - t0:.3f}s\n")

    print(f"  {'body':<8} {'x':>12} {'y':>12} {'z':>12} {'r':>10} {'lon':>8} {'lat':>7}")
    for body_id, r in positions.items():
        # Longitude and latitude are always ecliptic
        distance = float(jnp.linalg.norm(r))
        lon = float(jnp.rad2deg(jnp.arctan2(r[1], r[0])) % 360.0)
        lat = float(jnp.rad2deg(jnp.arcsin(r[2] / distance))) if distance > 0.0 else 0.0

        if frame is Frame.equatorial:
            r = position_ecliptic_to_equatorial(r)
        x, y, z = (float(v) for v in r)
        print(
            f"  {body_id:<8} {x:>12.6f} {y:>12.6f} {z:>12.6f} "
            f"{distance:>10.6f} {lon:>8.3f} {lat:>7.3f}"
        )

    if paths_csv is None:
        return

    print(f"\nWriting {segments}-segment orbital paths to {paths_csv}")
    with open(paths_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["body", "index", "x", "y", "z"])
        for body_id in system.body_ids[1:]:
            points = system.orbital_path(body_id, segments)
            if frame is Frame.equatorial:
                points = position_ecliptic_to_equatorial(points)
            for i, (x, y, z) in enumerate(points.tolist()):
                writer.writerow([body_id, i, f"{x:.9f}", f"{y:.9f}", f"{z:.9f}"])

    print("Done.")


if __name__ == "__main__":
    typer.run(main)
