"""Application entry point for the postkeeper backend server."""

from postkeeper.app import App
from postkeeper.config import Config
from postkeeper.logging import setup_logging
from postkeeper.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
