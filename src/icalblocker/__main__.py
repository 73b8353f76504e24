"""Entry point for running icalblocker as a module.

Usage: python -m icalblocker
"""

import logging


def main():
    """Main entry point for the feed server."""
    import uvicorn

    from icalblocker.api.app import create_app
    from icalblocker.config.settings import load_settings

    settings = load_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
