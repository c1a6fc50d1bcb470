"""typedarray CLI — load a JSON array, check it, print it."""

from __future__ import annotations

import json
import logging
import sys

from .array import Array
from .errors import ArrayError
from .settings import Settings
from .tags import parse_tag


USAGE: str = """\
typedarray [OPTIONS] FILE

Load a JSON array from FILE (or - for stdin), check every element against
the element type and print the result.

Options:
  --type TAG         Element type (default: any)
  --sort             Sort ascending
  --reverse          Sort descending
  --truncate N       Keep the elements before index N
  --strict           Enable --strict-truncate
  --strict-truncate  Make --truncate N keep N elements
  --verbose          Log debug output to stderr
  --help             Show this help message
"""


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    filepath: str = ""
    tag_name = "any"
    sort = False
    reverse = False
    truncate: int | None = None
    strict_truncate = False
    verbose = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--type" or arg == "--truncate":
            if i + 1 >= len(args):
                print("typedarray: " + arg + " needs a value", file=sys.stderr)
                return 2
            if arg == "--type":
                tag_name = args[i + 1]
            else:
                try:
                    truncate = int(args[i + 1])
                except ValueError:
                    print("typedarray: --truncate expects an integer", file=sys.stderr)
                    return 2
            i += 2
        elif arg == "--sort":
            sort = True
            i += 1
        elif arg == "--reverse":
            reverse = True
            i += 1
        elif arg == "--strict" or arg == "--strict-truncate":
            strict_truncate = True
            i += 1
        elif arg == "--verbose":
            verbose = True
            i += 1
        elif arg.startswith("-") and arg != "-":
            print("typedarray: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif filepath == "":
            filepath = arg
            i += 1
        else:
            print("typedarray: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2
    if filepath == "":
        print("typedarray: missing file argument", file=sys.stderr)
        return 2

    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        if filepath == "-":
            raw = sys.stdin.read()
        else:
            with open(filepath, encoding="utf-8") as f:
                raw = f.read()
    except FileNotFoundError:
        print("typedarray: " + filepath + ": No such file or directory", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print("typedarray: " + filepath + ": " + str(e), file=sys.stderr)
        return 1

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print("typedarray: invalid json: " + str(e), file=sys.stderr)
        return 1

    settings = Settings(strict_truncate=strict_truncate, deferred_writes=False)
    try:
        arr = Array(parse_tag(tag_name), data, settings=settings)
        if sort or reverse:
            arr = arr.sort((lambda a, b: a > b) if reverse else None)
        if truncate is not None:
            arr = arr.truncate(truncate)
    except ArrayError as e:
        print("typedarray: " + str(e), file=sys.stderr)
        return 1
    except TypeError as e:
        print("typedarray: cannot sort: " + str(e), file=sys.stderr)
        return 1

    print(arr.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
