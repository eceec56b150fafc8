"""
Preprocess a single shader file.

    python -m aniline shaders/lighting.frag -D SHADOWS -I shaders -o out.frag

Asset-path imports resolve relative to the include root (-I), which
defaults to the input file's directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from aniline.assets.server import ShaderServer
from aniline.shaders.types import ProcessedSpirV


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aniline", description="Resolve shader defs and imports."
    )
    parser.add_argument("input", type=Path)
    parser.add_argument(
        "-D", dest="defs", action="append", default=[], metavar="NAME"
    )
    parser.add_argument("-I", dest="root", type=Path, default=None)
    parser.add_argument("-o", dest="output", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = args.root if args.root is not None else args.input.parent
    try:
        rel_path = args.input.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        print(f"{args.input} is not inside {root}", file=sys.stderr)
        return 1

    server = ShaderServer(root)
    try:
        processed = server.process(rel_path, args.defs)
    except (OSError, ValueError) as e:
        print(f"{args.input}: {e}", file=sys.stderr)
        return 1

    if isinstance(processed, ProcessedSpirV):
        if args.output is None:
            sys.stdout.buffer.write(processed.data)
        else:
            args.output.write_bytes(processed.data)
        return 0

    if args.output is None:
        sys.stdout.write(processed.source)
    else:
        args.output.write_text(processed.source, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
