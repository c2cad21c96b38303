#!/usr/bin/env python3
"""Development server runner for the browser command console."""

import argparse

import uvicorn

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the browser command console server")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=9000, help="Port (default: 9000)")
    parser.add_argument(
        "--reload", action="store_true", help="Auto-reload on code changes (development)"
    )
    args = parser.parse_args()

    uvicorn.run(
        "src.server.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
