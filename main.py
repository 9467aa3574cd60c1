#!/usr/bin/env python3
"""
Main entry point for the Video Ingest Service.

This script starts the API that accepts MP4 uploads, remuxes them for
fast-start playback and stores them in S3.
"""

import sys
import os

# Add the current directory to Python path to import our modules
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from video_ingest.main import main

if __name__ == "__main__":
    main()
