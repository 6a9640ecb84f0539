"""Compute the minimum bounding sphere of a 3D mesh."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import numpy as np
import trimesh
import tyro
from loguru import logger

from enclosing import EncloserConfig, enclose, export_ball_to_json


def main(
    mesh_path: Path | None = None,
    primitive: Literal["cube", "sphere", "capsule"] = "cube",
    epsilon: float = 1e-10,
    hull_prefilter: bool = True,
    output_path: Path | None = None,
) -> None:
    """Compute the minimum enclosing sphere of a mesh's vertices.

    Args:
        mesh_path: Path to mesh file (STL, OBJ, PLY, etc.). If not provided, uses primitive.
        primitive: Built-in primitive to use when mesh_path is not provided.
        epsilon: Containment tolerance.
        hull_prefilter: Only enclose convex hull vertices.
        output_path: Output JSON file path. Defaults to <mesh_name>_ball.json.

    Examples:
        python scripts/enclose_mesh.py
        python scripts/enclose_mesh.py --primitive capsule
        python scripts/enclose_mesh.py --mesh-path mesh.stl
    """
    if mesh_path is not None:
        logger.info(f"Loading mesh from {mesh_path}...")
        mesh = trimesh.load(mesh_path, force="mesh")

        if isinstance(mesh, trimesh.Scene):
            mesh = mesh.dump(concatenate=True)

        if not isinstance(mesh, trimesh.Trimesh):
            raise ValueError(f"Failed to load mesh from {mesh_path}")

        mesh_name = mesh_path.stem
    else:
        logger.info(f"Creating {primitive} primitive...")
        if primitive == "cube":
            mesh = trimesh.creation.box(extents=[1.0, 1.0, 1.0])
        elif primitive == "sphere":
            mesh = trimesh.creation.icosphere(radius=0.5)
        else:
            mesh = trimesh.creation.capsule(height=1.0, radius=0.25)
        mesh_name = primitive

    vertices = np.asarray(mesh.vertices)
    logger.info(f"Mesh: {len(vertices)} vertices, {len(mesh.faces)} faces")

    config = EncloserConfig(
        epsilon=epsilon, hull_prefilter=hull_prefilter, hull_prefilter_min_points=0
    )
    ball = enclose(vertices, config=config)
    logger.info(f"Center: {ball.center}, radius: {ball.radius:.6f}")
    logger.info(f"Support: {ball.support_size} vertices")

    # trimesh's own estimate, for comparison
    reference = mesh.bounding_sphere.primitive
    logger.info(
        f"trimesh bounding_sphere radius: {reference.radius:.6f} "
        f"(difference {reference.radius - ball.radius:+.3e})"
    )

    if output_path is None:
        output_path = Path(f"{mesh_name}_ball.json")
    export_ball_to_json(ball, output_path)
    logger.info(f"Exported ball to {output_path}")


if __name__ == "__main__":
    tyro.cli(main)
