"""
CLI entrypoint for pulse.
"""
import signal
import threading
from contextlib import contextmanager

import typer
import uvicorn
from dotenv import load_dotenv
from loguru import logger

from pulse.core.config import Config, ConfigError, load_config
from pulse.core.env import parse_int
from pulse.core.log import configure_logging
from pulse.core.settings import RuntimeSettings
from pulse.server.main import create_app

app = typer.Typer(help="pulse API server", add_completion=False)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class PulseServer(uvicorn.Server):
    """
    uvicorn re-raises the captured signal once it has shut down, which turns a
    clean Ctrl-C into a KeyboardInterrupt and a SIGTERM into a signal exit.
    Here a shutdown signal only starts the graceful stop; the process then
    exits normally.
    """

    @contextmanager
    def capture_signals(self):
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        previous = {sig: signal.signal(sig, self.handle_exit) for sig in SHUTDOWN_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)


def build_server(config: Config, settings: RuntimeSettings) -> PulseServer:
    """Wires the app into a uvicorn server bound to SERVER_PORT."""
    port = parse_int(config.server.port, -1)
    if not 0 <= port <= 65535:
        raise ValueError(f"invalid SERVER_PORT {config.server.port!r}")

    server_config = uvicorn.Config(
        create_app(config),
        host=settings.HOST,
        port=port,
        log_config=None,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_S,
    )
    return PulseServer(server_config)


@app.command()
def serve():
    """Load the configuration and serve until SIGINT/SIGTERM."""
    # Variables already in the environment win over the file
    load_dotenv(".env")
    settings = RuntimeSettings()
    configure_logging(settings.LOG_LEVEL, serialize=settings.LOG_JSON)

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Config load error: {e}")
        raise typer.Exit(1)

    try:
        server = build_server(config, settings)
    except ValueError as e:
        logger.error(f"Server start error: {e}")
        raise typer.Exit(1)

    try:
        server.run()
    except SystemExit:
        # uvicorn exits on its own when the socket cannot be bound
        if server.started:
            raise

    if not server.started:
        logger.error("Server start error: listener never came up")
        raise typer.Exit(1)

    logger.info("Server stopped")


if __name__ == "__main__":
    app()
