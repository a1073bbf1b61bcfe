from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx, renderer_html
from .config import OUTPUT_FORMATS, RenderConfig, load_config
from .utils import configure_logging, read_markdown, resolve_output_path, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="RenderMark",
        description="Convert Markdown into HTML or DOCX.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output file or directory")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--config", type=str, help="Path to a YAML config file")
    parser.add_argument(
        "--standalone",
        action="store_const",
        const=True,
        help="Wrap HTML output in a complete document",
    )
    parser.add_argument("--title", type=str, help="Document title")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    config = load_config(args.config) if args.config else RenderConfig()
    config = config.with_overrides(
        output_format=args.output_format,
        standalone=args.standalone,
        title=args.title,
    )
    output_path = resolve_output_path(input_path, args.output, suffix=config.suffix)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path, encoding=config.encoding)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text)

    logging.info("Rendering %s to %s", config.output_format.upper(), output_path)
    if config.output_format == "docx":
        renderer_docx.render_document(
            document,
            output_path=output_path,
            asset_root=input_path.parent,
            config=config,
        )
    else:
        html = renderer_html.render_html(document, standalone=config.standalone, title=config.title)
        write_text(output_path, html, encoding=config.encoding)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
