"""
Conversion between per-attribute columns and splat records.

PLY files store one array per attribute; ranking needs one record per
splat. `assemble` and `disassemble` are the only places that map between
the two layouts, driven by `schema.FIELD_ATTRIBUTES`.
"""

from typing import Dict, Mapping, Optional, Sequence

import numpy as np

from .errors import SchemaError
from .schema import F_REST_ATTRIBUTES, F_REST_COUNT, FIELD_ATTRIBUTES, PLY_ATTRIBUTES
from .types import empty_records, visibility


def _collect_columns(columns: Mapping[str, np.ndarray],
                     f_rest: Optional[Sequence[np.ndarray]]) -> Dict[str, np.ndarray]:
    if f_rest is not None:
        if len(f_rest) != F_REST_COUNT:
            raise SchemaError(
                f"Expected {F_REST_COUNT} f_rest arrays, got {len(f_rest)}")
        columns = dict(columns)
        columns.update(zip(F_REST_ATTRIBUTES, f_rest))

    missing = [name for name in PLY_ATTRIBUTES if name not in columns]
    if missing:
        raise SchemaError(f"Missing vertex attributes: {', '.join(missing)}")

    arrays = {}
    for name in PLY_ATTRIBUTES:
        array = np.asarray(columns[name])
        if array.ndim != 1:
            raise SchemaError(
                f"Attribute '{name}' must be one-dimensional, got shape {array.shape}")
        arrays[name] = array
    return arrays


def assemble(columns: Mapping[str, np.ndarray],
             f_rest: Optional[Sequence[np.ndarray]] = None) -> np.ndarray:
    """
    Zip per-attribute arrays into a read-only array of splat records.

    Args:
        columns: Attribute name -> 1-D array, one entry per splat. Must hold
                 every name in `schema.PLY_ATTRIBUTES` unless `f_rest` is given,
                 in which case the f_rest_* entries may be omitted.
        f_rest: Optional sequence of exactly 45 arrays for f_rest_0..f_rest_44.

    Returns:
        np.ndarray of SPLAT_DTYPE in input order, with `visibility` filled in.

    Raises:
        SchemaError: If an attribute is missing, not 1-D, or lengths differ.
    """
    arrays = _collect_columns(columns, f_rest)

    count = len(arrays[PLY_ATTRIBUTES[0]])
    for name, array in arrays.items():
        if len(array) != count:
            raise SchemaError(
                f"Attribute '{name}' has {len(array)} values, expected {count} "
                f"(length of '{PLY_ATTRIBUTES[0]}')")

    records = empty_records(count)
    for field, names in FIELD_ATTRIBUTES:
        if len(names) == 1:
            records[field] = arrays[names[0]]
        else:
            records[field] = np.column_stack([arrays[name] for name in names])
    records["visibility"] = visibility(records["opacity"])

    records.flags.writeable = False
    return records


def disassemble(records: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Expand splat records back into one float32 array per PLY attribute.

    The inverse of `assemble`; `visibility` is derived and is not emitted,
    and `opacity` stays the stored logit.

    Args:
        records: Array (or slice) of SPLAT_DTYPE records.

    Returns:
        Dict of attribute name -> contiguous array, in `PLY_ATTRIBUTES` order.
    """
    columns = {}
    for field, names in FIELD_ATTRIBUTES:
        values = records[field]
        if len(names) == 1:
            columns[names[0]] = np.ascontiguousarray(values, dtype=np.float32)
        else:
            for i, name in enumerate(names):
                columns[name] = np.ascontiguousarray(values[:, i], dtype=np.float32)
    return columns
