from __future__ import annotations
import argparse, os, sys, json
from typing import List
from . import config as CFG
from .engine import Picker, SelectionError
from .loader import load_paths
from .models import PickItem
from .normalize import find_match

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _highlight(text: str, query: str) -> str:
    span = find_match(text, query) if query else None
    if not span or span[0] == span[1]:
        return text
    s, e = span
    return text[:s] + _c(text[s:e], "1;36") + text[e:]

def _print_items(rows: List[PickItem], query: str = ""):
    if not rows:
        print(_c("(no matches)", "2;37")); return
    for r in rows:
        print(_highlight(r.text, query))

def _fail(err: SelectionError) -> int:
    print(err.message, file=sys.stderr)
    return 1

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Pick an open file by index or label")
    p.add_argument("paths", nargs="*", help="Open file paths, in tab order")
    p.add_argument("--from", dest="sources", action="append", default=[],
                   help="Read paths from a file, one per line ('-' for stdin). Repeatable.")
    p.add_argument("--list", action="store_true", help="Print the numbered labels and exit")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--pick", default=None, help="Run one keystroke/label and print the chosen path")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    paths = load_paths(args.sources, extra=args.paths, verbose=args.verbose)
    if not paths:
        p.error("no open paths given (positional or --from)")

    picker = Picker()
    try:
        picker.open(paths, verbose=args.verbose)
    except ValueError as exc:
        p.error(str(exc))

    try:
        if args.pick is not None:
            try:
                print(picker.accept(args.pick))
            except SelectionError as err:
                return _fail(err)
            return 0

        if args.json:
            print(json.dumps([r.to_dict() for r in picker.items()], ensure_ascii=False, indent=2))
            return 0

        if args.list:
            _print_items(picker.items())
            return 0

        return _repl(picker)
    finally:
        picker.close()

def _repl(picker: Picker) -> int:
    print(_c(CFG.PLACEHOLDER, "1;37") + "  (empty line to quit, ':list' shows all items)")
    _print_items(picker.items())
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print(); break
        query = raw.strip()
        if query == "":
            break
        if query == ":list":
            _print_items(picker.items()); continue

        if picker.is_jump_key(query):
            jumped = picker.jump(query)
            if jumped is not None:
                print(jumped.path); return 0
            print(_c("(no matches)", "2;37")); continue

        rows = picker.filter(query)
        if len(rows) == 1:
            print(rows[0].path); return 0
        _print_items(rows, query)
    return 0

if __name__ == "__main__":
    sys.exit(main())
