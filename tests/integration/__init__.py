"""
Integration Tests Package for the Storey Parking System

These tests drive the StoreyService end to end:
1. Service + Level + strategy working together
2. Rendered responses for every command
3. Concurrent requests against one service
4. The demo entry point and logging setup
"""

import sys
from pathlib import Path

# Add the src directory to the Python path for uninstalled runs
src_dir = Path(__file__).parent.parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
