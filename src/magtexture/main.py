import sys
import argparse
from pathlib import Path
from typing import Optional, Sequence

from magtexture.config import RunConfig, build_field
from magtexture.logger import FieldLogger
from magtexture.sampling import sample, sample_normalized
from magtexture.storage import LocalBackend, save_samples
from magtexture.visualization import save_slice


def parse_args(argv: Optional[Sequence[str]] = None):
    """コマンドライン引数をパース"""
    parser = argparse.ArgumentParser(description="磁化初期配置の生成")
    parser.add_argument("--config", type=str, required=True, help="設定ファイルのパス")
    parser.add_argument("--output", type=str, help="出力パス（設定ファイルの値を上書き）")
    parser.add_argument("--plot", action="store_true", help="z断面の画像を出力")
    parser.add_argument("--debug", action="store_true", help="デバッグモードを有効化")
    return parser.parse_args(argv)


def setup_logging(config: RunConfig, debug: bool) -> FieldLogger:
    """ロギングを設定"""
    if debug:
        config.logging.level = "debug"
        config.logging.console_logging["level"] = "debug"
    return FieldLogger("magtexture", config.logging)


def run(config: RunConfig, logger: FieldLogger) -> Path:
    """配置を構築してサンプリングし、結果を保存"""
    with logger.start_section("build") as section:
        field = build_field(config, section)

    with logger.start_section("sample") as section:
        if config.output.normalize:
            samples = sample_normalized(field, config.mesh, section)
        else:
            samples = sample(field, config.mesh, section)
        section.log_field_summary(field.name, samples)

    backend = LocalBackend(config.output.root)
    with logger.start_section("output") as section:
        save_samples(samples, config.output.path, backend, section)
        if config.output.plot:
            plot_path = config.output.root / config.output.plot_path
            save_slice(
                samples,
                config.mesh,
                plot_path,
                iz=config.output.slice_index,
                title=field.name,
            )
            section.info(f"z断面を出力: {plot_path}")

    return config.output.root / config.output.path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """メイン関数"""
    args = parse_args(argv)

    try:
        config = RunConfig.from_yaml(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"設定ファイルを読み込めません: {e}", file=sys.stderr)
        return 1

    if args.output:
        config.output.path = args.output
    if args.plot:
        config.output.plot = True

    logger = setup_logging(config, args.debug)

    try:
        config.validate()
        path = run(config, logger)
        logger.info(f"正常終了: {path}")
        return 0

    except Exception as e:
        logger.log_error_with_context("生成中にエラーが発生", e, {"config": args.config})
        return 1


if __name__ == "__main__":
    sys.exit(main())
