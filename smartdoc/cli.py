import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .editor import Selection, insert_doc, parse_line_range, read_selection
from .generator import CannedDocGenerator, LLMDocGenerator, generate_smart_doc
from .llm import LLMClient
from .llm.ollama_utils import is_ollama_model_name

logger = logging.getLogger("smartdoc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartdoc",
        description="Generate Swagger jsDoc for a route and insert it above the selection",
    )
    parser.add_argument("file", type=Path, help="Route file holding the selection")
    parser.add_argument("--lines", type=str, default=None, help="Selected lines, e.g. 12:30 (default: whole file)")
    parser.add_argument("--workspace", type=Path, default=None, help="Workspace root (default: current directory)")
    parser.add_argument("--services-dir", type=Path, default=None, help="Service files folder (default: <workspace>/services)")
    parser.add_argument("--model", type=str, default=None, help="Model name, overrides SMARTDOC_MODEL")
    parser.add_argument("--dry-run", action="store_true", help="Use the offline sample doc instead of calling the model")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the doc instead of editing the file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        start, end = parse_line_range(args.lines)
    except ValueError as e:
        parser.error(str(e))

    workspace = args.workspace or Path(os.getcwd())
    try:
        config = load_config(workspace)
    except ValueError as e:
        logger.error(str(e))
        return 2
    if args.model:
        config.model_name = args.model

    if args.dry_run:
        generator = CannedDocGenerator()
    elif not config.api_key and not is_ollama_model_name(config.model_name):
        logger.error("No API KEY was provided!")
        return 1
    else:
        generator = LLMDocGenerator(
            LLMClient(
                config.model_name,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                api_key=config.api_key,
                verbose=args.verbose,
            )
        )

    services_dir = args.services_dir or workspace / config.services_folder
    selection = Selection(args.file, start, end)
    try:
        snippet = read_selection(selection)
        resolution, doc = generate_smart_doc(snippet, str(services_dir), generator, config.extension)
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 2

    logger.info(resolution.message)
    logger.info("Swagger documentation generated!")
    if args.print_only:
        print(doc)
    else:
        insert_doc(selection, doc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
