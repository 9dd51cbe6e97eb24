#!/usr/bin/env python3
"""
Script wrapper for the morphology tool.
Usage:
	python scripts/morph.py lena.jpg [erode|dilate]
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from morphcli.cli import main


if __name__ == '__main__':
	sys.exit(main())
