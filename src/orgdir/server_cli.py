"""CLI entry point for the orgdir API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="orgdir-server",
        description="orgdir API server: organizations, users and the event queue consumer",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: SQLite database, no Redis required",
    )
    parser.add_argument(
        "--no-consumer",
        action="store_true",
        help="Serve HTTP only; do not drain the event queue",
    )
    args = parser.parse_args(argv)

    # Settings are read at import time, so set the environment before uvicorn imports the app
    if args.local:
        os.environ["ORGDIR_LOCAL_MODE"] = "1"
    if args.no_consumer:
        os.environ["ORGDIR_CONSUMER_ENABLED"] = "0"

    import uvicorn

    uvicorn.run("orgdir.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
