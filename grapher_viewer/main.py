"""Entry point for the standalone grapher viewer."""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys
from typing import Sequence

from PyQt5 import QtWidgets

from grapher_core.strategies import registered_graph_types
from grapher_viewer.app import GraphWindow
from grapher_viewer.config import config_path, load_viewer_config


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    base_dir = os.path.dirname(sys.argv[0])
    log_path = os.path.join(base_dir, "grapher_log.txt")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive graph viewer")
    parser.add_argument(
        "graph_type",
        nargs="?",
        choices=[graph_type.value for graph_type in registered_graph_types()],
        help="graph to show (defaults to [graph] type in the config, then linear)",
    )
    parser.add_argument("--config", type=Path, help="path to a grapher.ini file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log drag events")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    path = args.config or config_path(Path(__file__))
    config = load_viewer_config(path, args.graph_type)
    logger.info("Starting grapher viewer (%s, config %s)", config.graph_type.value, path)

    app = QtWidgets.QApplication(sys.argv)
    window = GraphWindow(config)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
