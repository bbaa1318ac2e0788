import pytest
from magtexture.core import Vector3
from magtexture.core.field import TEXTURES, coerce_parameters, create_texture, describe, vortex


def test_all_textures_are_registered():
    expected = {
        "Uniform",
        "Vortex",
        "Antivortex",
        "NeelSkyrmion",
        "BlochSkyrmion",
        "TwoDomain",
        "VortexWall",
        "RandomMag",
        "RandomMagSeed",
        "HashedRandomMag",
        "Helical",
    }
    assert expected == set(TEXTURES)
    assert all(describe().values())


def test_create_texture_matches_constructor(mesh):
    m = create_texture("Vortex", {"circ": -1, "pol": 1}, mesh)
    assert m(20e-9, 5e-9, 0.0) == vortex(-1, 1, mesh)(20e-9, 5e-9, 0.0)


def test_create_texture_with_vector_parameters(mesh):
    m = create_texture(
        "TwoDomain", {"left": [1, 0, 0], "wall": [0, 1, 0], "right": [-1, 0, 0]}, mesh
    )
    assert m(0.0, 0.0, 0.0) == Vector3(0.0, 1.0, 0.0)


def test_create_texture_without_mesh():
    assert create_texture("Uniform", {"mx": 0, "my": 0, "mz": 1})(1, 2, 3) == Vector3(0, 0, 1)
    assert not create_texture("RandomMag").pure


@pytest.mark.parametrize(
    "name, params, error",
    [
        ("Spiral", {}, "未対応の配置"),
        ("Vortex", {"circ": 1}, "不足"),
        ("Uniform", {"mx": 1, "my": 0, "mz": 0, "w": 1}, "不明"),
        ("Vortex", {"circ": 1, "pol": 1}, "メッシュ"),
    ],
)
def test_create_texture_errors(name, params, error):
    with pytest.raises(ValueError, match=error):
        create_texture(name, params)


def test_create_texture_coerces_parameters(mesh):
    m = create_texture("VortexWall", {"m_left": "1", "m_right": "-1e0", "circ": 1.0, "pol": "1"}, mesh)
    assert m(-1e-6, 0.0, 0.0) == Vector3(1.0, 0.0, 0.0)
    assert m(1e-6, 0.0, 0.0) == Vector3(-1.0, 0.0, 0.0)
    assert m(0.0, 0.0, 0.0) == Vector3(0.0, 0.0, 1.0)
    assert coerce_parameters("TwoDomain", {"left": ("1", 0, 0)}) == {"left": [1.0, 0.0, 0.0]}
    assert coerce_parameters("RandomMagSeed", {"seed": "12"}) == {"seed": 12}


@pytest.mark.parametrize(
    "name, params",
    [
        ("Vortex", {"circ": 0.5, "pol": 1}),
        ("TwoDomain", {"left": [1, 0], "wall": [0, 1, 0], "right": [-1, 0, 0]}),
        ("TwoDomain", {"left": "x", "wall": [0, 1, 0], "right": [-1, 0, 0]}),
        ("Uniform", {"mx": "up", "my": 0, "mz": 0}),
    ],
)
def test_create_texture_rejects_bad_values(mesh, name, params):
    with pytest.raises(ValueError, match="不正"):
        create_texture(name, params, mesh)
