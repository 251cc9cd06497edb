#!/usr/bin/env python3
"""Render a raycaster snapshot to PNG without opening the window.

This script renders the default obstacle map from the export viewpoint and
writes it as <epoch-seconds>.png, the same file the R key produces in the
interactive window.

Usage:
    python -m examples.render_snapshot [options]

Options:
    --output-dir DIR    Directory for the PNG file (default: .)
    --samples SAMPLES   Number of rays cast (default: 800)
    --no-fog            Use flat shading instead of fog
    --show              Display the snapshot with Matplotlib after saving

Example:
    python -m examples.render_snapshot --samples 200 --no-fog
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Ensure the src directory is in the Python path for direct execution
_src_root = Path(__file__).parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

from raycaster.preview.display import show_preview  # noqa: E402
from raycaster.preview.export import (  # noqa: E402
    ExportError,
    ExportSettings,
    export_snapshot,
    render_snapshot,
)
from raycaster.scene.world import generate_map  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a raycaster snapshot to PNG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for the PNG file (default: current directory)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=800,
        help="Number of rays cast (default: 800)",
    )
    parser.add_argument(
        "--no-fog",
        action="store_true",
        help="Use flat shading instead of fog",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the snapshot with Matplotlib after saving",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        settings = ExportSettings(samples=args.samples, fog=not args.no_fog)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    obstacles = generate_map()

    start_time = time.time()
    try:
        output_file = export_snapshot(obstacles, settings, args.output_dir)
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved to: {output_file.absolute()}")
    print(f"Total time: {time.time() - start_time:.2f}s")

    if args.show:
        show_preview(render_snapshot(obstacles, settings))

    return 0


if __name__ == "__main__":
    sys.exit(main())
