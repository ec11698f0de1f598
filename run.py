"""
Entry point for the slicing engine demo.

Running this script with ``python run.py`` slices a few catalog shapes
(a posed cube and icosahedron with the z = 0 plane, the 5-cell with a
sweep of w hyperplanes) and prints the resulting sections as JSON.  The
package defined in ``backend/hyperslice`` is imported after adjusting
the Python path to include the backend directory.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import logging

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """Print the demo sections."""
    # Make ``hyperslice`` importable without installing the project.
    backend_dir = Path(__file__).resolve().parent / "backend"
    if str(backend_dir) not in sys.path:
        sys.path.append(str(backend_dir))

    from hyperslice.main import build_demo  # type: ignore

    json.dump(build_demo(), sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
