"""Serve the roster API: ``python -m roster``."""
import argparse

import uvicorn

from roster import config


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Run the roster user management API.",
    )
    parser.add_argument("--host", default=config.HOST, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on.")
    parser.add_argument("--reload", action="store_true", default=False, help="Reload on code changes.")
    args = parser.parse_args(argv)

    uvicorn.run(
        "roster.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
