import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ghstore import __version__
from ghstore.config import get_config
from ghstore.logger import get_logger
from ghstore.routers import developers_api as developers_router
from ghstore.routers import repositories_api as repositories_router
from ghstore.services import container

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan events."""
    config = get_config()
    config.paths.data_dir.mkdir(parents=True, exist_ok=True)
    yield
    await container.close_services()


app = FastAPI(title="ghstore", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/hello")
async def hello_get() -> dict[str, str]:
    """Return a simple hello message with version info."""
    return {"message": "Hello from ghstore!", "version": __version__}


app.include_router(developers_router.router)
app.include_router(repositories_router.router)


def run_server(port: int | None = None) -> None:
    """Run the ghstore API server.

    Args:
        port: Optional port number to override config
    """
    config = get_config()
    if port is not None:
        config.server.port = port

    logger.info("Starting server", host=config.server.host, port=config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level="info")


def main() -> None:
    """Main entry point with CLI argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="ghstore - developer repository catalog API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ghstore                    # Start with the configured port
  ghstore --port 9000        # Start on port 9000
        """,
    )

    parser.add_argument(
        "--port",
        type=int,
        metavar="PORT",
        help="Port number to run the server on",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ghstore {__version__}",
    )

    args = parser.parse_args()

    run_server(port=args.port)


if __name__ == "__main__":
    main()
