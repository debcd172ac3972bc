"""
Backend startup script.

Usage:
    python run.py
    python run.py --reload
    python run.py --port 8080
"""

import argparse

import uvicorn

from math_engine.config import settings


def main() -> None:
    """Start the FastAPI application."""
    parser = argparse.ArgumentParser(description="Run the Jarvis math engine API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.backend_port, help="Port to bind to")
    parser.add_argument(
        "--reload",
        action=argparse.BooleanOptionalAction,
        default=settings.debug,
        help="Enable auto-reload (defaults to MATH_ENGINE_DEBUG)",
    )

    args = parser.parse_args()

    print(f"[STARTUP] Starting server on {args.host}:{args.port} (reload={args.reload})")

    uvicorn.run(
        "math_engine.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
