"""uvicorn runner with signal-driven, time-bounded graceful shutdown."""

import asyncio
import contextlib
import logging
import signal

import uvicorn
from fastapi import FastAPI

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ManagedServer(uvicorn.Server):
    """uvicorn server that leaves signal handling to its caller.

    Shutdown is requested by setting ``should_exit``; run_until_shutdown
    does that when the root stop event fires.
    """

    @contextlib.contextmanager
    def capture_signals(self):
        yield

    def install_signal_handlers(self) -> None:
        pass


async def run_until_shutdown(
    server,
    stop_event: asyncio.Event,
    grace_seconds: float,
    logger: logging.Logger,
) -> int:
    """Serve until stop_event is set, then drain for at most grace_seconds.

    Args:
        server: Object with an async serve(), and should_exit/started attributes
        stop_event: Root shutdown event, set from the signal handler
        grace_seconds: Drain period for in-flight requests
        logger: Process logger

    Returns:
        Process exit status: 0 after a clean drain, 1 on startup failure,
        drain timeout or shutdown error
    """
    serve_task = asyncio.create_task(server.serve())
    stop_task = asyncio.create_task(stop_event.wait())

    done, _ = await asyncio.wait(
        {serve_task, stop_task},
        return_when=asyncio.FIRST_COMPLETED,
    )

    if serve_task in done:
        # Server returned without being asked to: startup failed or it crashed
        stop_task.cancel()
        error = serve_task.exception()
        if error is not None:
            logger.error(f"failed to start the server: {error}")
            return 1
        if not server.started:
            logger.error("failed to start the server")
            return 1
        return 0

    logger.info(f"Shutting down, allowing {grace_seconds}s for in-flight requests")
    server.should_exit = True

    try:
        await asyncio.wait_for(serve_task, timeout=grace_seconds)
    except asyncio.TimeoutError:
        logger.error(
            f"failed to gracefully shutdown the server: "
            f"requests still in flight after {grace_seconds}s"
        )
        return 1
    except Exception as e:
        logger.error(f"failed to gracefully shutdown the server: {e}")
        return 1

    logger.info("Server stopped")
    return 0


async def serve(app: FastAPI, service, config, logger: logging.Logger) -> int:
    """Run app on config.app_host:config.app_port until SIGINT/SIGTERM.

    The store behind service is closed on the way out even when the drain
    period was exceeded.
    """
    uvicorn_config = uvicorn.Config(
        app,
        host=config.app_host,
        port=config.app_port,
        log_level=config.log_level.lower(),
        access_log=False,
        lifespan="on",
    )
    server = ManagedServer(uvicorn_config)

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def handle_signal(signum: int) -> None:
        logger.info(f"Received signal {signal.Signals(signum).name}, initiating graceful shutdown...")
        stop_event.set()

    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, handle_signal, sig)

    try:
        logger.info(f"Starting server on {config.app_host}:{config.app_port}")
        return await run_until_shutdown(
            server,
            stop_event,
            config.shutdown_grace_seconds,
            logger,
        )
    finally:
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)
        await service.close()


def run_service(app: FastAPI, service, config, logger: logging.Logger) -> int:
    """Blocking entry point used by the service scripts."""
    return asyncio.run(serve(app, service, config, logger))
