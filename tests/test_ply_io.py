"""Tests for reading and writing splat scenes as PLY files."""

import numpy as np
import pytest
from plyfile import PlyData, PlyElement

from splatprune import PLY_ATTRIBUTES, SchemaError, assemble, read_scene, write_scene


def _write_raw(path, fields, count, text=False, byte_order="<", element="vertex"):
    data = np.zeros(count, dtype=[(name, "f4") for name in fields])
    for i, name in enumerate(fields):
        data[name] = np.arange(count, dtype=np.float32) + i
    PlyData([PlyElement.describe(data, element)], text=text, byte_order=byte_order).write(str(path))
    return data


def test_write_then_read_is_bit_exact(tmp_path, columns_factory):
    """Test written attributes read back bit-for-bit with the same count."""
    columns = columns_factory([-7.5, 0.0, 1e-8, 3.25], seed=5)
    columns["f_rest_12"][0] = np.float32(np.nextafter(np.float32(1), np.float32(2)))
    path = tmp_path / "scene.ply"

    write_scene(str(path), columns)
    result, byte_order = read_scene(str(path))

    assert byte_order == "<"
    assert list(result) == list(PLY_ATTRIBUTES)
    for name in PLY_ATTRIBUTES:
        assert len(result[name]) == 4
        assert result[name].tobytes() == columns[name].tobytes()


def test_written_file_uses_schema_property_order(tmp_path, columns_factory):
    path = tmp_path / "scene.ply"

    write_scene(str(path), columns_factory([0.1, 0.2]))
    ply = PlyData.read(str(path))

    assert [p.name for p in ply["vertex"].properties] == list(PLY_ATTRIBUTES)
    assert not ply.text
    assert ply["vertex"].count == 2


def test_write_empty_scene_is_valid(tmp_path, columns_factory):
    """Test a zero-point scene is still a readable PLY file."""
    path = tmp_path / "empty.ply"

    write_scene(str(path), columns_factory([]))
    result, _ = read_scene(str(path))

    assert all(len(result[name]) == 0 for name in PLY_ATTRIBUTES)
    assert len(assemble(result)) == 0


def test_read_keeps_big_endian_byte_order(tmp_path):
    path = tmp_path / "big.ply"
    _write_raw(path, PLY_ATTRIBUTES, 3, byte_order=">")

    result, byte_order = read_scene(str(path))

    assert byte_order == ">"
    np.testing.assert_array_equal(result["x"], [0, 1, 2])


def test_read_ascii_reports_little_endian(tmp_path):
    path = tmp_path / "ascii.ply"
    _write_raw(path, PLY_ATTRIBUTES, 2, text=True)

    _, byte_order = read_scene(str(path))

    assert byte_order == "<"


def test_read_ignores_extra_attributes(tmp_path):
    """Test attributes outside the schema are dropped on read."""
    path = tmp_path / "extra.ply"
    _write_raw(path, PLY_ATTRIBUTES + ("red", "f_rest_45"), 2)

    result, _ = read_scene(str(path))

    assert set(result) == set(PLY_ATTRIBUTES)


def test_read_missing_attribute_fails_on_assemble(tmp_path):
    """Test a file without an expected attribute is a schema error."""
    path = tmp_path / "partial.ply"
    _write_raw(path, [name for name in PLY_ATTRIBUTES if name != "nxx"], 2)

    columns, _ = read_scene(str(path))

    with pytest.raises(SchemaError, match="nxx"):
        assemble(columns)


def test_read_without_vertex_element_raises_error(tmp_path):
    path = tmp_path / "points.ply"
    _write_raw(path, ["x", "y", "z"], 2, element="point")

    with pytest.raises(SchemaError, match="vertex"):
        read_scene(str(path))


def test_read_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        read_scene(str(tmp_path / "missing.ply"))


def test_read_garbage_file_raises_os_error(tmp_path):
    """Test a file that is not PLY is reported as an I/O error."""
    path = tmp_path / "garbage.ply"
    path.write_bytes(b"not a ply file\n\x00\x01\x02")

    with pytest.raises(OSError, match="Cannot parse PLY file"):
        read_scene(str(path))


def test_write_to_missing_directory_raises_os_error(tmp_path, columns_factory):
    with pytest.raises(OSError):
        write_scene(str(tmp_path / "nowhere" / "scene.ply"), columns_factory([0.1]))


def test_read_non_ascii_header_raises_os_error(tmp_path):
    """Test a header with undecodable bytes is reported as an I/O error."""
    path = tmp_path / "binary_header.ply"
    path.write_bytes(b"ply\nformat binary_little_endian 1.0\ncomment \xff\xfe\n"
                     b"element vertex 0\nproperty float x\nend_header\n")

    with pytest.raises(OSError, match="Cannot parse PLY file"):
        read_scene(str(path))


def _write_list_x_scene(path):
    header = ["ply", "format ascii 1.0", "element vertex 1", "property list uchar float x"]
    header += [f"property float {name}" for name in PLY_ATTRIBUTES if name != "x"]
    header.append("end_header")
    row = "2 1.0 2.0 " + " ".join("0" for _ in PLY_ATTRIBUTES[1:])
    path.write_text("\n".join(header + [row]) + "\n")


def test_read_list_attribute_raises_schema_error(tmp_path):
    """Test a splat attribute stored as a list property is rejected by name."""
    path = tmp_path / "list_x.ply"
    _write_list_x_scene(path)

    with pytest.raises(SchemaError, match="'x'.*must be a scalar"):
        read_scene(str(path))
