#!/usr/bin/env python3
"""
Run the Battlesnake HTTP server.

Usage:
    python backend/main.py [--host 0.0.0.0] [--port 8000] [--variant flood_fill] [--debug]
"""

import argparse
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Battlesnake agent over HTTP.")
    parser.add_argument("--host", type=str, default=os.getenv("HOST", "0.0.0.0"),
                        help="Address to listen on")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")),
                        help="Port to listen on (defaults to $PORT)")
    parser.add_argument("--variant", type=str, default=None,
                        help="Player variant to serve (defaults to $SNAKE_VARIANT)")
    parser.add_argument("--debug", action="store_true", default=bool(os.getenv("FLASK_DEBUG")),
                        help="Enable Flask debug mode")
    return parser.parse_args(argv)


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)

    # Imported after load_dotenv so the app sees the .env settings
    from app import app
    from players.variant_registry import get_player_class

    if args.variant:
        app.config["SNAKE_PLAYER"] = get_player_class(args.variant)()

    logger.info(f"Starting Battlesnake server on {args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)


if __name__ == "__main__":
    main()
