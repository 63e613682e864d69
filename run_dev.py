# run_dev.py
"""
Local development server for the directory API.
Host and port come from settings (HOST / PORT, .env.dev); reload follows DEBUG.
"""

import uvicorn

from yellowpages.settings import settings


def main() -> None:
    uvicorn.run(
        "yellowpages.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
