"""
Run the API server.

    python -m ledgerx
"""

import uvicorn

from ledgerx.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ledgerx.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
