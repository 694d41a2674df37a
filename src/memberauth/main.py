"""Application entry point for the MemberAuth server."""

from memberauth.app import App
from memberauth.config import Config
from memberauth.core.core import Core
from memberauth.logging import setup_logging
from memberauth.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(Core.from_config(config))
    run_server(app, config)


if __name__ == "__main__":
    main()
