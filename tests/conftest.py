import numpy as np
import pytest
from magtexture.core import MeshGeometry


class FieldValidator:
    def __init__(self, cell_size=(5e-9, 5e-9, 5e-9), grid_size=(32, 16, 2), rtol=1e-9, atol=1e-12):
        self.mesh = MeshGeometry(cell_size=cell_size, grid_size=grid_size)
        self.rtol = rtol
        self.atol = atol

    def assert_close(self, v, expected):
        assert np.allclose(tuple(v), tuple(expected), rtol=self.rtol, atol=self.atol)

    def assert_unit(self, v):
        assert abs(v.norm() - 1.0) < 1e-9

    def sample_points(self, n=200, extent=200e-9, seed=1):
        rng = np.random.default_rng(seed)
        return rng.uniform(-extent, extent, size=(n, 3))


@pytest.fixture
def field_validator():
    return FieldValidator()


@pytest.fixture
def mesh(field_validator):
    return field_validator.mesh
