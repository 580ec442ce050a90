"""Command line entry point.

.. code-block:: console

   $ echo "curl https://example.com -d 'a=1'" | python -m curlbridge --target python
"""
import argparse
import sys
from typing import Optional, Sequence

from .conf import settings
from .curl import parse_curl_with_report
from .exceptions import UnsupportedTargetError
from .logging import logger
from .snippets import available_targets, render_snippet
from .tracing import initialize_tracer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curlbridge",
        description="Convert a curl command into a code snippet.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File containing the curl command. Reads stdin when omitted.",
    )
    parser.add_argument(
        "-t",
        "--target",
        default=settings.DEFAULT_TARGET,
        help="Snippet target. (default: %(default)s)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.STRICT_TARGETS,
        help="Fail on unknown targets instead of rendering curl.",
    )
    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="Print the supported targets and exit.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_targets:
        print("\n".join(available_targets()))
        return 0

    initialize_tracer()

    if args.file is None:
        command = sys.stdin.read()
    else:
        try:
            with open(args.file) as f:
                command = f.read()
        except OSError as e:
            parser.error(f"can't open '{args.file}': {e.strerror}")

    result = parse_curl_with_report(command)
    if result.undetected:
        logger.info("Not found in the command: %s", ", ".join(result.undetected))

    try:
        print(render_snippet(args.target, result.request, strict=args.strict))
    except UnsupportedTargetError as e:
        logger.error(str(e))
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
