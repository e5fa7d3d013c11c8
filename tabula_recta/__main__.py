"""
Command-line front-end
======================
    python -m tabula_recta encode "Attack at dawn" -k "KEY"
    python -m tabula_recta decode --html < message.txt

TEXT is read from stdin when omitted, so multi-line messages work. Output
for stdin input gets no trailing newline, so it can be piped straight
into the opposite command.
The key comes from --key, else $TABULA_RECTA_KEY, else DEFAULT_KEY.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .cipher  import DEFAULT_KEY, decode, encode
from .display import for_display

logger = logging.getLogger(__name__)

KEY_ENV_VAR = "TABULA_RECTA_KEY"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabula-recta",
        description="Vigenère cipher over a 192-symbol alphabet.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("encode", "encipher TEXT"),
                            ("decode", "decipher TEXT")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("text", nargs="?",
                         help="text to process (default: read stdin)")
        cmd.add_argument("-k", "--key",
                         help=f"passphrase (default: ${KEY_ENV_VAR} or the built-in key)")
        if name == "decode":
            cmd.add_argument("--html", action="store_true",
                             help="render spaces and line breaks as HTML")
    return parser


def _resolve_key(cli_key: Optional[str]) -> str:
    if cli_key is not None:
        return cli_key
    env_key = os.environ.get(KEY_ENV_VAR)
    if env_key:
        logger.debug(f"Key taken from ${KEY_ENV_VAR}")
        return env_key
    return DEFAULT_KEY


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = args.text if args.text is not None else sys.stdin.read()
    key  = _resolve_key(args.key)

    try:
        if args.command == "encode":
            result = encode(text, key)
        else:
            result = decode(text, key)
            if args.html:
                result = for_display(result)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.text is not None:
        print(result)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
