"""Export gasket circles as numpy arrays or JSON point clouds.

The JSON layout is a point cloud with per-point attributes, suitable for
driving instanced geometry in other tools:

    {
      "points": [[x, y, 0.0], ...],
      "attributes": {"radius": [...], "curvature": [...],
                     "depth": [...], "outer_circle": [...]},
      "metadata": {"count": N, "format": "apollonian_gasket_v1", ...}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import numpy as np

from .circle import Circle

log = logging.getLogger("apollonian.export")

POINTS_FORMAT = "apollonian_gasket_v1"

# Column order of to_array
COLUMNS = ("x", "y", "radius", "bend", "depth")

PathLike = Union[str, Path]


def to_array(circles: Sequence[Circle]) -> np.ndarray:
    """Return an ``(N, 5)`` float64 array of ``x, y, radius, bend, depth``."""
    out = np.empty((len(circles), len(COLUMNS)), dtype=np.float64)
    for i, c in enumerate(circles):
        out[i] = (c.center.a, c.center.b, c.radius, c.bend, c.depth)
    return out


def to_points_dict(circles: Sequence[Circle]) -> Dict[str, Any]:
    points_data: Dict[str, Any] = {
        "points": [],
        "attributes": {
            "radius": [],
            "curvature": [],
            "depth": [],
            "outer_circle": [],
        },
        "metadata": {
            "count": len(circles),
            "format": POINTS_FORMAT,
            "description": "Point cloud data for Apollonian gasket",
        },
    }

    attributes = points_data["attributes"]
    for circle in circles:
        points_data["points"].append([circle.center.a, circle.center.b, 0.0])
        attributes["radius"].append(circle.radius)
        attributes["curvature"].append(abs(circle.bend))
        attributes["depth"].append(circle.depth)
        attributes["outer_circle"].append(circle.is_bounding)
    return points_data


def export_points_json(circles: Sequence[Circle], output_path: PathLike) -> Path:
    """Write the point cloud JSON and return the path written."""
    path = Path(output_path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(to_points_dict(circles), f, indent=2)
    log.info("exported %d circles to %s", len(circles), path)
    return path


def export_array(circles: Sequence[Circle], output_path: PathLike) -> Path:
    """Save :func:`to_array` as a ``.npy`` file and return the path written."""
    path = Path(output_path)
    np.save(path, to_array(circles))
    # np.save appends .npy when the name lacks it
    if path.suffix != ".npy":
        path = path.with_name(path.name + ".npy")
    log.info("exported %d circles to %s", len(circles), path)
    return path


__all__ = [
    "COLUMNS",
    "POINTS_FORMAT",
    "to_array",
    "to_points_dict",
    "export_points_json",
    "export_array",
]
