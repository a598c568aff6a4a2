"""Entry point for python -m jsonresponder."""
from __future__ import annotations

import logging

from starlette.applications import Starlette

from jsonresponder.cli import build_parser, run
from jsonresponder.utils.logging import configure_root
from jsonresponder.web import build_app
from jsonresponder.web.demo import demo_routes


def _demo_app(debug: bool) -> Starlette:
    return build_app(demo_routes(), debug=debug)


def main() -> None:
    configure_root()
    logger = logging.getLogger("jsonresponder.cli")

    parser = build_parser()
    args = parser.parse_args()
    run(args, logger=logger, app_factory=_demo_app)


if __name__ == "__main__":
    main()
