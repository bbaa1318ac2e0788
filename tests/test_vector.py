import math

import numpy as np
import pytest
from magtexture.core import Vector3, MeshGeometry


def test_vector_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, -1.0, 2.0)
    assert a.add(b) == Vector3(1.5, 1.0, 5.0)
    assert a.scale(2) == Vector3(2.0, 4.0, 6.0)
    assert a.madd(0.5, b) == Vector3(1.25, 1.5, 4.0)
    assert a.dot(b) == pytest.approx(4.5)


def test_vector_norm_and_normalize():
    v = Vector3(3.0, 0.0, 4.0)
    assert v.norm() == 5.0
    assert v.normalized().norm() == pytest.approx(1.0)
    assert Vector3().normalized() == Vector3(0.0, 0.0, 0.0)


def test_vector_nan_check():
    assert Vector3(math.nan, 0, 0).has_nan()
    assert not Vector3(1, 0, 0).has_nan()


def test_vector_unpacking_and_array():
    x, y, z = Vector3(1, 2, 3)
    assert (x, y, z) == (1, 2, 3)
    assert np.array_equal(Vector3(1, 2, 3).to_array(), np.array([1.0, 2.0, 3.0]))
    assert Vector3.of([1, 2, 3])[2] == 3.0


def test_mesh_geometry_world_size():
    mesh = MeshGeometry(cell_size=(2e-9, 4e-9, 1e-9), grid_size=(10, 5, 3))
    assert mesh.world_size == pytest.approx((20e-9, 20e-9, 3e-9))
    assert mesh.ncell == 150


def test_mesh_geometry_cell_centers_are_symmetric():
    mesh = MeshGeometry(cell_size=(1.0, 1.0, 1.0), grid_size=(4, 3, 1))
    xs, ys, zs = mesh.coordinates()
    assert np.allclose(xs, [-1.5, -0.5, 0.5, 1.5])
    assert np.allclose(ys, [-1.0, 0.0, 1.0])
    assert np.allclose(zs, [0.0])
    assert mesh.cell_center(0, 1, 0) == Vector3(-1.5, 0.0, 0.0)


@pytest.mark.parametrize(
    "cell_size, grid_size",
    [
        ((0.0, 1.0, 1.0), (1, 1, 1)),
        ((1.0, 1.0, 1.0), (0, 1, 1)),
        ((1.0, 1.0), (1, 1, 1)),
        ((float("nan"), 1.0, 1.0), (1, 1, 1)),
        ((1.0, float("inf"), 1.0), (1, 1, 1)),
        ((1.0, 1.0, "nan"), (1, 1, 1)),
    ],
)
def test_mesh_geometry_rejects_invalid(cell_size, grid_size):
    with pytest.raises(ValueError):
        MeshGeometry(cell_size=cell_size, grid_size=grid_size)
