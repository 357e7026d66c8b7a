"""Drive Gallery entry point.

Starts the web server that serves the gallery page.
"""

import argparse
import logging

from drivegallery import __version__
from drivegallery.config import get_settings
from drivegallery.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Drive Gallery - view the images of a public Google Drive folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  drivegallery                       Serve the gallery on http://localhost:8000
  drivegallery --port 9000           Use another port
  drivegallery --dev                 Auto-reload on code changes

The Google API key is read from DRIVEGALLERY_GOOGLE_API_KEY.
""",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the web server (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", "-p", type=int, default=8000, help="Port for the web server (default: 8000)"
    )
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(level="DEBUG" if args.dev else settings.log_level)

    if not settings.api_key_configured:
        logger.warning(
            "No Google API key configured. Set DRIVEGALLERY_GOOGLE_API_KEY; "
            "every folder fetch will fail until then."
        )

    from drivegallery.dashboard import run_dashboard

    try:
        run_dashboard(host=args.host, port=args.port, dev=args.dev)
    except KeyboardInterrupt:
        logger.info("Drive Gallery stopped.")


if __name__ == "__main__":
    main()
