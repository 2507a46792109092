# cli.py
import sys
import importlib
from typing import Sequence, List, Optional

COMMANDS = {
    "fonts": "ascii_banner.fonts_cli",
    "render": "ascii_banner.render_cli",
}

PROG = "ascii-banner"


def usage() -> None:
    cmds = ", ".join(sorted(COMMANDS))
    print(f"Usage: {PROG} <command> [args...]")
    print(f"Commands: {cmds}")


def _call_entry(entry, argv: List[str]) -> int:
    try:
        return entry(argv)
    except SystemExit as se:
        # argparse exits on bad arguments; report its status instead
        code = se.code
        return code if isinstance(code, int) else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if not argv or argv[0] in ("-h", "--help"):
        usage()
        return 0

    cmd, *args = argv
    module_path = COMMANDS.get(cmd)
    if not module_path:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        usage()
        return 2

    module = importlib.import_module(module_path)
    entry = getattr(module, "main", None)
    if not callable(entry):
        print(f"Command module '{module_path}' has no callable 'main'", file=sys.stderr)
        return 4

    return _call_entry(entry, args)


if __name__ == "__main__":
    raise SystemExit(main())
