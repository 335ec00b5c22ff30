import sys

from src.jpeg_markers.cli import main

if __name__ == "__main__":
    sys.exit(main())
