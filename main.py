"""Main entry point for the Sensei's Library diagram converter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from diagram import DiagramError, DiagramLoader, ExportUnsupported, parse_diagram_string
from factory import DiagramFactory
from shared.render_config import SUPPORTED_FORMATS, RenderConfig, parse_glyph_spec

logger = logging.getLogger("sltxt2img")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sltxt2img",
        description="Convert Sensei's Library diagram notation to PNG or SVG images",
        epilog="""
Diagram notation:
  $$Bc19 Title        header: first colour, coordinates, board size, title
  $$ +-------+        frame (any of - | +)
  $$ | . X O |        X/B/# black, O/W/@ white, 1-9/0 numbered moves,
  $$ +-------+        , hoshi, C/S circle/square, a-z letters
  $$ [a|target]       link cells showing "a" to a target

Examples:
  sltxt2img diagram.txt -o diagram.png
  sltxt2img diagram.txt -o diagram.svg --sgf diagram.sgf
  cat diagram.txt | sltxt2img - -o out.png --linkmap board1
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Path to a diagram file, or '-' to read from stdin")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Image file to write (.png or .svg). Nothing is written if omitted.",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        help="Image format, overrides the output file suffix",
    )
    parser.add_argument("--sgf", type=Path, metavar="FILE", help="Also export the position as SGF")
    parser.add_argument(
        "--linkmap",
        metavar="NAME",
        help="Print an HTML <map name=NAME> for linked cells to stdout",
    )
    parser.add_argument("--show", action="store_true", help="Display the diagram on screen")
    parser.add_argument(
        "--glyph",
        type=str,
        default="16x8",
        metavar="HxW",
        help="Glyph box in pixels that sizes the board (default: 16x8)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RenderConfig(
            glyph=parse_glyph_spec(args.glyph),
            output_path=args.output,
            output_format=args.format,
            sgf_path=args.sgf,
            link_map_name=args.linkmap,
            show=args.show,
        )
        if args.input == "-":
            diagram = parse_diagram_string(sys.stdin.read(), config.glyph)
        else:
            diagram = DiagramLoader(args.input, config.glyph).load()

        factory = DiagramFactory(config)
        description = factory.render(diagram)

        if config.output_path is not None:
            encoder = factory.create_encoder()
            data = encoder.encode(description)
            config.output_path.write_bytes(data)
            logger.info(f"Wrote {encoder.format_name.upper()} image to {config.output_path}")

        if config.link_map_name is not None:
            image_map = factory.to_image_map(diagram, config.link_map_name)
            if image_map is None:
                logger.info("Diagram defines no links; no image map written")
            else:
                sys.stdout.write(image_map)
    except (DiagramError, ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    if config.sgf_path is not None:
        try:
            sgf = factory.to_sgf(diagram)
        except ExportUnsupported as e:
            logger.warning(f"SGF export skipped: {e}")
        else:
            try:
                config.sgf_path.write_text(sgf, encoding="utf-8")
            except OSError as e:
                logger.error(str(e))
                return 1
            logger.info(f"Wrote SGF to {config.sgf_path}")

    if config.show:
        from renderer.preview import DiagramPreview

        DiagramPreview().show(description)

    return 0


if __name__ == "__main__":
    sys.exit(main())
