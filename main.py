"""
Entry point for the adaptive learning platform demo.

Run with:
    python main.py
    python main.py --no-wait
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from adaptlearn.cli.main import main

if __name__ == "__main__":
    main()
