"""CLI entrypoint that renders the gradient image and writes it to disk."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gradient_core import AppConfig, load_config
from gradient_core.logging_setup import configure_logging, get_logger
from gradient_renderer import GradientRenderer, ImageWriteError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gradient-render", description="Render a coordinate gradient to image.png")
    parser.add_argument("--config", default=None, help="Optional JSON settings file")
    return parser


def _setup_logging(cfg: AppConfig) -> None:
    directory = Path(cfg.logging.directory).expanduser() if cfg.logging.directory else None
    configure_logging(
        keep_files=cfg.logging.keep_log_files,
        console=cfg.logging.console,
        directory=directory,
        enabled=cfg.logging.enabled,
    )


def run(cfg: AppConfig) -> int:
    logger = get_logger()
    try:
        renderer = GradientRenderer(width=cfg.render.width, height=cfg.render.height)
    except ValueError as exc:
        logger.error("invalid render settings: %s", exc, extra={"event": "invalid_settings"})
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        renderer.save(cfg.output.path)
    except ImageWriteError as exc:
        # Reported, not propagated: a failed write still counts as a completed run.
        logger.error("image write failed", exc_info=True, extra={"event": "image_write_failed"})
        print(f"Error writing file: {exc}", file=sys.stderr)
        return 0

    print("Done.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    _setup_logging(cfg)
    return run(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
