#!/usr/bin/env python3
"""Render the "ear-reddening move" sample diagram in every output format.

Examples:
    # Write ear_reddening.{png,svg,sgf,html} to the current directory
    python scripts/demo/ear_reddening.py

    # Write to another directory and show the result on screen
    python scripts/demo/ear_reddening.py --output-dir /tmp/demo --show
"""

import sys
from pathlib import Path

# Add project root to Python path to support running from any directory
def find_project_root(start_path: Path) -> Path:
    """Find project root by searching for pyproject.toml."""
    current = start_path.resolve()
    while current != current.parent:
        if (current / 'pyproject.toml').exists():
            return current
        current = current.parent
    raise RuntimeError("Could not find project root (pyproject.toml not found)")

project_root = find_project_root(Path(__file__).parent)
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse
import logging

from diagram import parse_diagram_string
from factory import DiagramFactory

EAR_REDDENING_MOVE = """$$B The ear-reddening move
$$  ---------------------------------------
$$ | . . . . . . . . . X O O . . . . . . . |
$$ | . . . X . . . . . X O . O . O O X . . |
$$ | . . O O . X . . O X X O O . O X . . . |
$$ | . . . , . . . . . , . X X X . , X . . |
$$ | . . . . . X . . . . X . . . . X X . . |
$$ | . . O . . . . . . . . . . . . X O O . |
$$ | . . . . . . . . . . . . . O O O X X X |
$$ | . . . . . . . . . . . . . . X O O O X |
$$ | . . . . . . . . . 1 . . X O O X X X . |
$$ | . . . , . . . . . , . . O O X , X O . |
$$ | . . O . . . . . . . . . . . O X X O . |
$$ | . . . . . . . . . . . . . . O X O X . |
$$ | . . . . . . . . . . . . O . O X O O . |
$$ | . . O . . . . . . X . X O . O X . . . |
$$ | . . . . . . X . W . . X O X O X O . . |
$$ | . . X , X . . X . , . X O O X O O . . |
$$ | . . . . . X O X O . O O X X X X O O . |
$$ | . . . . . . X O . O O . O X X . X O . |
$$ | . . . . . . . . O . . O . X . X . X . |
$$  ---------------------------------------
$$ [1|http://senseis.xmp.net/?EarReddeningMove]"""


def main():
    parser = argparse.ArgumentParser(
        description="Render the ear-reddening move sample diagram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the generated files (default: current directory)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the image on screen after writing the files",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    diagram = parse_diagram_string(EAR_REDDENING_MOVE)
    factory = DiagramFactory()
    description = factory.render(diagram)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    stem = args.output_dir / "ear_reddening"

    for fmt in ("png", "svg"):
        factory.create_encoder(fmt).save(description, stem.with_suffix(f".{fmt}"))

    sgf_path = stem.with_suffix(".sgf")
    sgf_path.write_text(factory.to_sgf(diagram), encoding="utf-8")
    print(f"Saved SGF to {sgf_path}")

    html_path = stem.with_suffix(".html")
    image_map = factory.to_image_map(diagram, "linkmap1")
    html_path.write_text(
        f'<img src="{stem.name}.png" usemap="#linkmap1" alt="{diagram.html_title}">\n{image_map}',
        encoding="utf-8",
    )
    print(f"Saved image map to {html_path}")

    if args.show:
        from renderer.preview import DiagramPreview

        DiagramPreview().show(description)


if __name__ == "__main__":
    main()
