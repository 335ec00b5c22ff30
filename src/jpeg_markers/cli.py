import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .errors import JPEGStructureError
from .marker import describe, describe_total
from .walker import walk_file


class _ArgumentParser(argparse.ArgumentParser):
    # usage errors exit with status 1 and a single line on stdout
    def error(self, message):
        print("Expected filename as argument")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(description="List the marker segments of a JPEG file")
    parser.add_argument("path", help="Path to the JPEG file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    jpeg_path = Path(args.path)

    try:
        total = walk_file(jpeg_path, lambda segment: print(describe(segment)))
    except JPEGStructureError as e:
        print(e)
        return 1
    except OSError:
        print(f"Couldn't open the file {jpeg_path}")
        return 1

    print(describe_total(total))
    return 0


if __name__ == "__main__":
    sys.exit(main())
