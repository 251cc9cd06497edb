#!/usr/bin/env python3
"""Interactive raycaster window.

This script opens the live preview window over the default obstacle map and
runs until the window is closed or a quit key is pressed.

Usage:
    python -m examples.interactive_raycaster [--arch {auto,gpu,cpu}] [--output-dir DIR]

Controls:
    - W / S: move forward / backward
    - A / D: rotate left / right
    - 1 / 2: narrow / widen the field of view
    - 3 / 4: halve / double the number of rays
    - F: toggle fog shading
    - R: export a PNG snapshot (<epoch-seconds>.png)
    - Q / Escape: quit
"""

from __future__ import annotations

import argparse
import platform
import sys
from pathlib import Path

# Ensure the src directory is in the Python path for direct execution
_src_root = Path(__file__).parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

import taichi as ti  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactive 2D raycaster.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--arch",
        choices=("auto", "gpu", "cpu"),
        default="auto",
        help="Taichi backend (default: auto)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for exported snapshots (default: current directory)",
    )
    return parser.parse_args()


def initialize_taichi(arch: str = "auto") -> str:
    """Initialize Taichi with the best available backend.

    On macOS, prefers Metal. Falls back to CPU if GPU is unavailable.

    Args:
        arch: "auto", "gpu" or "cpu".

    Returns:
        Name of the backend being used.
    """
    if arch == "cpu":
        ti.init(arch=ti.cpu)
        return "CPU"

    if platform.system() == "Darwin":
        try:
            ti.init(arch=ti.metal)
            return "Metal (GPU)"
        except Exception:
            pass

    try:
        ti.init(arch=ti.gpu)
        return "GPU"
    except Exception:
        if arch == "gpu":
            raise

    ti.init(arch=ti.cpu)
    return "CPU"


def main() -> int:
    """Main entry point for the interactive raycaster.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args()

    try:
        backend = initialize_taichi(args.arch)
    except Exception as e:
        print(f"Error: could not initialize Taichi: {e}", file=sys.stderr)
        return 1
    print(f"Taichi backend: {backend}")

    from raycaster.preview.interactive import InteractivePreview
    from raycaster.scene.world import generate_map

    if not InteractivePreview.is_display_available():
        print("Error: No display available. Cannot run interactive preview.", file=sys.stderr)
        print("This script requires a graphical display environment.", file=sys.stderr)
        return 1

    preview = InteractivePreview(generate_map(), output_dir=args.output_dir)

    try:
        # Create the window up front so display failures abort before the loop
        preview.open_window()
    except Exception as e:
        print(f"Error: could not open window: {e}", file=sys.stderr)
        return 1

    print(f"Opened {preview.viewport.width}x{preview.viewport.height} window")
    print("  - W/S move, A/D rotate, 1/2 field of view, 3/4 resolution")
    print("  - F toggles fog, R exports a PNG snapshot")
    print("  - Q, Escape or closing the window quits")
    print()

    try:
        preview.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        preview.close()
        print("Preview window closed.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
