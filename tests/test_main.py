import numpy as np
import pytest
import yaml
from magtexture.core import MeshGeometry
from magtexture.core.field import two_domain
from magtexture.main import main
from magtexture.sampling import sample
from magtexture.visualization import render_slice, save_slice


@pytest.fixture
def config_file(tmp_path):
    config = {
        "mesh": {"cell_size": [2e-9, 2e-9, 2e-9], "grid_size": [16, 8, 1]},
        "texture": {
            "type": "TwoDomain",
            "parameters": {"left": [1, 0, 0], "wall": [0, 1, 0], "right": [-1, 0, 0]},
        },
        "transforms": [{"type": "normalize"}],
        "output": {"root": str(tmp_path / "out"), "path": "m0.npy"},
        "logging": {
            "log_dir": str(tmp_path / "logs"),
            "console_logging": {"enabled": False},
        },
    }
    path = tmp_path / "run.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f)
    return path


def test_main_writes_samples(tmp_path, config_file):
    assert main(["--config", str(config_file)]) == 0
    data = np.load(tmp_path / "out" / "m0.npy")
    assert data.shape == (16, 8, 1, 3)
    assert np.allclose(np.linalg.norm(data, axis=-1), 1.0)
    # 左端は +x、右端は -x
    assert data[0, 0, 0, 0] > 0.99
    assert data[-1, 0, 0, 0] < -0.99
    assert (tmp_path / "logs" / "magtexture.log").exists()


def test_main_logs_sampling_time_once(tmp_path, config_file):
    assert main(["--config", str(config_file)]) == 0
    text = (tmp_path / "logs" / "magtexture.log").read_text(encoding="utf-8")
    assert sum("Performance - sample" in line for line in text.splitlines()) == 1


def test_main_output_override_and_plot(tmp_path, config_file):
    assert main(["--config", str(config_file), "--output", "other.npy", "--plot"]) == 0
    assert (tmp_path / "out" / "other.npy").exists()
    assert (tmp_path / "out" / "m0.png").stat().st_size > 0


def test_main_reports_bad_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("mesh: {cell_size: [1, 1, 1]}\ntexture: {type: Spiral}\n", encoding="utf-8")
    assert main(["--config", str(path)]) == 1
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


@pytest.mark.parametrize(
    "logging_section",
    [
        "{level: 10}",
        "{console_logging: {level: [info]}}",
    ],
)
def test_main_reports_bad_log_level(tmp_path, config_file, logging_section):
    text = config_file.read_text(encoding="utf-8")
    config = yaml.safe_load(text)
    del config["logging"]
    path = tmp_path / "bad_logging.yaml"
    path.write_text(yaml.safe_dump(config) + f"logging: {logging_section}\n", encoding="utf-8")
    assert main(["--config", str(path)]) == 1
    assert not (tmp_path / "out" / "m0.npy").exists()


def test_render_slice_metadata():
    mesh = MeshGeometry(cell_size=(1e-9, 1e-9, 1e-9), grid_size=(20, 10, 2))
    data = sample(two_domain((0, 0, 1), (1, 0, 0), (0, 0, -1), mesh), mesh)
    fig, metadata = render_slice(data, mesh, iz=1, density=5, title="TwoDomain")
    assert metadata["slice"] == 1
    assert metadata["data_range"]["max_mz"] == pytest.approx(1.0)
    assert metadata["data_range"]["min_mz"] == pytest.approx(-1.0)
    assert metadata["skip"] == 2
    with pytest.raises(ValueError):
        render_slice(data, mesh, iz=5)


def test_save_slice(tmp_path):
    mesh = MeshGeometry(cell_size=(1e-9, 1e-9, 1e-9), grid_size=(8, 8, 1))
    data = sample(two_domain((1, 0, 0), (0, 0, 1), (-1, 0, 0), mesh), mesh)
    metadata = save_slice(data, mesh, tmp_path / "plots" / "slice.png")
    assert (tmp_path / "plots" / "slice.png").exists()
    assert metadata["path"].endswith("slice.png")
