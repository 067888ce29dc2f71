# geometry/mesh.py
import logging
import os
from typing import Iterable, List, Optional, Tuple
from core.vector import Vector3
from geometry.triangle import Triangle

logger = logging.getLogger(__name__)

def _face_vertex(token: str, n_vertices: int, n_normals: int) -> Tuple[int, Optional[int]]:
    """Parse a ``v``, ``v/vt``, ``v//vn`` or ``v/vt/vn`` face token into 0-based indices."""
    parts = token.split('/')
    v_idx = _resolve_index(int(parts[0]), n_vertices)
    n_idx = None
    if len(parts) > 2 and parts[2]:
        n_idx = _resolve_index(int(parts[2]), n_normals)
    return v_idx, n_idx

def _resolve_index(idx: int, count: int) -> int:
    # OBJ indices are 1-based; negative ones count back from the end.
    resolved = idx - 1 if idx > 0 else count + idx
    if resolved < 0 or resolved >= count:
        raise IndexError(f"index {idx} out of range for {count} elements")
    return resolved

def parse_obj(lines: Iterable[str], material, scale: float = 1.0,
              offset: Optional[Vector3] = None) -> List[Triangle]:
    """
    Build triangles from Wavefront OBJ text.

    Polygons are fan-triangulated. Faces that reference normals get smooth
    per-vertex normals; the rest fall back to their face normal.
    """
    if offset is None:
        offset = Vector3(0.0, 0.0, 0.0)

    vertices: List[Vector3] = []
    normals: List[Vector3] = []
    triangles: List[Triangle] = []

    for line_num, line in enumerate(lines, 1):
        values = line.split()
        if not values or values[0].startswith('#'):
            continue

        try:
            if values[0] == 'v':  # Vertex
                v = Vector3(float(values[1]), float(values[2]), float(values[3]))
                vertices.append(v * scale + offset)
            elif values[0] == 'vn':  # Normal
                n = Vector3(float(values[1]), float(values[2]), float(values[3]))
                normals.append(n.normalize())
            elif values[0] == 'f':  # Face
                corners = [_face_vertex(tok, len(vertices), len(normals)) for tok in values[1:]]
                if len(corners) < 3:
                    raise ValueError("face needs at least three vertices")
                for i in range(1, len(corners) - 1):
                    (i0, m0), (i1, m1), (i2, m2) = corners[0], corners[i], corners[i + 1]
                    if m0 is not None and m1 is not None and m2 is not None:
                        triangles.append(Triangle(vertices[i0], vertices[i1], vertices[i2], material,
                                                  normals[m0], normals[m1], normals[m2]))
                    else:
                        triangles.append(Triangle(vertices[i0], vertices[i1], vertices[i2], material))
            # Texture coordinates, groups, objects and material libraries are not used.
        except (IndexError, ValueError) as e:
            raise ValueError(f"Malformed OBJ record on line {line_num}: {line.strip()!r} ({e})") from e

    logger.info("Parsed %d vertices, %d normals, %d triangles",
                len(vertices), len(normals), len(triangles))
    return triangles

def load_obj(filename: str, material, scale: float = 1.0,
             offset: Optional[Vector3] = None) -> List[Triangle]:
    """Load the triangles of an OBJ file, all sharing one material."""
    if not os.path.exists(filename):
        raise FileNotFoundError(f"OBJ file not found: {filename}")

    logger.info("Opening file: %s", filename)
    with open(filename, 'r') as f:
        return parse_obj(f, material, scale=scale, offset=offset)
