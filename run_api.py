"""
Start the summarizer HTTP API with uvicorn.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from ytsummary.config import config


def main():
    """Parse server options and run the API."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Serve POST /api/summarize")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"), help="Interface to listen on")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")), help="Port to listen on")
    parser.add_argument("--reload", action="store_true", default=config.DEBUG,
                        help="Restart on code changes (on by default in development)")
    args = parser.parse_args()

    config.initialize()

    print(f"{config.APP_NAME} v{config.APP_VERSION} "
          f"({os.getenv('ENVIRONMENT', 'development')}, {config.SUMMARIZER_BACKEND} backend)")
    print(f"Listening on {args.host}:{args.port}")

    uvicorn.run(
        "ytsummary.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
