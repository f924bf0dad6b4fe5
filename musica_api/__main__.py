"""
Serve the API with uvicorn. Run from project root:

  python -m musica_api

HOST and PORT come from the environment (default 0.0.0.0:3003).
"""

import sys

import uvicorn

from musica_api.core.config import get_settings


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        "musica_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
