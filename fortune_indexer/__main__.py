"""Run the indexer with uvicorn: ``python -m fortune_indexer``."""

import uvicorn

from fortune_indexer.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "fortune_indexer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
