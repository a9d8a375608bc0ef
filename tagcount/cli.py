from __future__ import annotations
import sys, argparse, traceback
from pprint import pprint
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from .config import DEFAULT_CONFIG, Extreme, RankerConfig, load_config_from_env
from .ranker import TagRanker
from .utils import positive_int, regex_list

def build_parser(defaults: RankerConfig = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    shown = defaults.describe()
    parser = argparse.ArgumentParser(
        prog="count-tags",
        description="Counts tags in directory.",
    )
    parser.add_argument("directory", nargs="?", metavar="DIRECTORY", help="Directory of notes to scan")
    parser.add_argument("-f", "--exclude-files", type=regex_list, metavar="r1,r2,...",
                        help=f"Comma separated list of regex for files to exclude. Defaults to {shown['file_exclusions']}")
    parser.add_argument("-t", "--exclude-tags", type=regex_list, metavar="r1,r2,...",
                        help=f"Comma separated list of regex for tags to exclude. Defaults to {shown['tag_exclusions']}")
    parser.add_argument("-r", "--reverse", action="store_true",
                        help="By default, prints the most used tags. Switch this flag on to print the least used instead.")
    parser.add_argument("-l", "--limit", type=positive_int, metavar="N",
                        help=f"Print only N tags, defaults to {shown['limit']}.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Run verbosely, prints the resolved options and arguments")
    return parser

def resolve_config(args: argparse.Namespace, base: RankerConfig) -> RankerConfig:
    return base.with_overrides(
        file_exclusions=args.exclude_files,
        tag_exclusions=args.exclude_tags,
        extreme=Extreme.LEAST if args.reverse else None,
        limit=args.limit,
        verbose=args.verbose or None,
    )

def report_error(directory: Optional[str], exc: BaseException, stream: Optional[TextIO] = None):
    stream = stream or sys.stderr
    frames = traceback.extract_tb(exc.__traceback__)
    # innermost call first
    at = [f"{f.filename}:{f.lineno}:in `{f.name}'" for f in reversed(frames)]
    print(f"-- ERROR: Could not process {directory}", file=stream)
    print(str(exc), file=stream)
    print(file=stream)
    if at:
        print("\tat " + "\n\tat ".join(at), file=stream)

def main(argv: Optional[List[str]] = None):
    load_dotenv()

    base = load_config_from_env()
    parser = build_parser(base)
    args = parser.parse_args(argv)
    config = resolve_config(args, base)

    if config.verbose:
        print("Running with options:")
        pprint(config.describe())
        print()
        print("Remaining arguments:")
        pprint([args.directory] if args.directory else [])

    if not args.directory:
        parser.print_help()
        sys.exit(1)

    ranker = TagRanker(args.directory, config)
    try:
        entries = ranker.run()
    except Exception as e:
        report_error(args.directory, e)
        sys.exit(1)
    print(ranker.to_markdown(entries), end="")

if __name__ == "__main__":
    main()
