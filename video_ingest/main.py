"""
Main Application Coordinator for the Video Ingest Service.

This module loads configuration, sets up logging and starts the API server.
"""

import logging
import sys
from typing import Optional

from .core.config import Config
from .core.logging_config import setup_logging
from .video.integration import VideoModule
from .api.server import APIServer


class VideoIngestSystem:
    """Main application coordinator for the Video Ingest Service"""

    def __init__(self, config_file: Optional[str] = None, log_level: Optional[str] = None):
        # Load configuration first (basic logging will be used initially)
        self.config = Config(config_file)
        if log_level:
            self.config.system.log_level = log_level

        self.logger_setup = setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)

        self.video_module = VideoModule(self.config)
        self.api_server = APIServer(self.config, self.video_module)

        self.logger.info("Video Ingest Service initialized")

    def run(self) -> None:
        """Run the system (blocking call)"""
        try:
            self.api_server.run()
        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")


def main():
    """Main entry point for the application"""
    import argparse

    parser = argparse.ArgumentParser(description="Video Ingest Service")
    parser.add_argument("--config", type=str, help="Path to configuration file", default="config.json")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)

    args = parser.parse_args()

    try:
        system = VideoIngestSystem(args.config, log_level=args.log_level)
        system.run()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
