"""Reading and writing Gaussian splat scenes as PLY files."""

from typing import Dict, Mapping, Tuple

import numpy as np
from plyfile import PlyData, PlyElement, PlyListProperty, PlyParseError

from .errors import SchemaError
from .schema import PLY_ATTRIBUTES, VERTEX_ELEMENT


def read_scene(ply_path: str) -> Tuple[Dict[str, np.ndarray], str]:
    """
    Read the splat attributes of a .ply file.

    Only attributes named in `schema.PLY_ATTRIBUTES` are returned; anything
    else in the vertex element is ignored. Missing attributes are left for
    `assemble` to report.

    Args:
        ply_path (str): Path to the input .ply file.

    Returns:
        tuple: (columns, byte_order)
            - columns: dict of attribute name -> float32 array, one value per vertex.
            - byte_order: '<' or '>' for binary input, '<' for ASCII input.

    Raises:
        OSError: If the file cannot be opened or is not a valid PLY file.
        SchemaError: If the file has no vertex element or a splat attribute
                     is a list property.
    """
    try:
        ply_data = PlyData.read(ply_path, mmap=False)
    except (PlyParseError, UnicodeDecodeError) as e:
        raise OSError(f"Cannot parse PLY file {ply_path}: {e}") from e

    if VERTEX_ELEMENT not in ply_data:
        raise SchemaError(f"No '{VERTEX_ELEMENT}' element in {ply_path}")
    vertex = ply_data[VERTEX_ELEMENT]

    present = set()
    for prop in vertex.properties:
        if prop.name in PLY_ATTRIBUTES and isinstance(prop, PlyListProperty):
            raise SchemaError(f"Attribute '{prop.name}' in {ply_path} must be a scalar, not a list")
        present.add(prop.name)
    columns = {name: np.array(vertex[name], dtype=np.float32)
               for name in PLY_ATTRIBUTES if name in present}

    byte_order = "<" if ply_data.text or ply_data.byte_order == "=" else ply_data.byte_order
    return columns, byte_order


def write_scene(output_path: str, columns: Mapping[str, np.ndarray], byte_order: str = "<"):
    """
    Save splat attributes to a binary .ply file.

    Args:
        output_path (str): Path of the .ply file to write.
        columns: Attribute name -> array for every name in `schema.PLY_ATTRIBUTES`.
        byte_order (str): '<' for little-endian, '>' for big-endian.

    Raises:
        OSError: If the file cannot be written.
    """
    count = len(columns[PLY_ATTRIBUTES[0]])
    vertex_data = np.empty(count, dtype=[(name, "f4") for name in PLY_ATTRIBUTES])
    for name in PLY_ATTRIBUTES:
        vertex_data[name] = columns[name]

    vertex_element = PlyElement.describe(vertex_data, VERTEX_ELEMENT)
    PlyData([vertex_element], text=False, byte_order=byte_order).write(output_path)
