from __future__ import annotations

import argparse

import uvicorn

from user_api.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="In-memory user management HTTP service")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    # log_config=None keeps the structlog handler installed by create_app().
    uvicorn.run(
        "user_api.main:app",
        host=args.host,
        port=args.port,
        reload=bool(args.reload),
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
