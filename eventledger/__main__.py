"""
Server entry point

Usage:
    python -m eventledger
"""

import uvicorn

from eventledger.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "eventledger.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
