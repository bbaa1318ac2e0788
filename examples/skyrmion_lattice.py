"""ネール型スキルミオンを4つ並べた初期配置を生成して保存する例"""

from magtexture import MeshGeometry, uniform, neel_skyrmion, sample_normalized
from magtexture.logger import FieldLogger, LogConfig
from magtexture.storage import LocalBackend, save_samples
from magtexture.visualization import save_slice


def create_texture(mesh: MeshGeometry):
    """-z 方向の一様磁化に +z コアのスキルミオンを重ね合わせる"""
    spacing = 80e-9
    m = uniform(0, 0, -1)
    for sx in (-1, 1):
        for sy in (-1, 1):
            # スキルミオンの外側は -z なので、背景との差分だけを足す
            bump = neel_skyrmion(1, 1, mesh).add(1.0, uniform(0, 0, 1))
            m = m.add(1.0, bump.transl(sx * spacing / 2, sy * spacing / 2, 0))
    return m


def main():
    logger = FieldLogger("skyrmion_lattice", LogConfig(log_dir="logs"))
    mesh = MeshGeometry(cell_size=(2e-9, 2e-9, 2e-9), grid_size=(128, 128, 1))

    m = create_texture(mesh)
    data = sample_normalized(m, mesh, logger)
    logger.log_field_summary(m.name, data)

    backend = LocalBackend("results")
    save_samples(data, "skyrmions.npy", backend, logger)
    save_slice(data, mesh, "results/skyrmions.png", title="Néel skyrmions")


if __name__ == "__main__":
    main()
