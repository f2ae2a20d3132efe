"""
Command line entry point.

    python -m form_telemetry [-p PORT] [--host HOST] [--log-level LEVEL]

Flags override the values read from the environment.
"""
import argparse
from typing import List, Optional

import uvicorn

from .core.config import get_config
from .main import create_app
from .utils.logging_config import setup_application_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="form_telemetry",
        description="Serve the tracked form and collect interaction telemetry.",
    )
    parser.add_argument("-p", "--port", type=int, default=None, help="port to listen on (default 80)")
    parser.add_argument("--host", default=None, help="interface to bind (default 0.0.0.0)")
    parser.add_argument("--log-level", default=None, help="logging level (default INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in (("port", args.port), ("host", args.host), ("log_level", args.log_level))
        if value is not None
    }
    config = get_config().model_copy(update=overrides)

    logger = setup_application_logging(level=config.log_level, force_flush=True)
    logger.info(f"Listening on {config.host}:{config.port}")

    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
