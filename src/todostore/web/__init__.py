"""todostore HTTP API - FastAPI served by uvicorn."""

import os
import uvicorn

from ..logging_setup import resolve_level, setup_logging


def main():
    """Entry point for todostore-web command."""
    port = int(os.environ.get("TODOSTORE_WEB_PORT", "8000"))
    host = os.environ.get("TODOSTORE_WEB_HOST", "127.0.0.1")

    setup_logging(resolve_level())
    uvicorn.run(
        "todostore.web.app:app",
        host=host,
        port=port,
        reload=os.environ.get("TODOSTORE_WEB_RELOAD", "").lower() == "true",
    )


if __name__ == "__main__":
    main()
