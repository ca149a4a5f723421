from __future__ import annotations
import argparse, json, os, sys
import frontend as api
from ghosttext import GhostTextField, RenderDirective
from ghosttext import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def render(d: RenderDirective, typed: str) -> str:
    """Typed text as-is, then the visible part of the suggestion dimmed."""
    if d.is_empty:
        return typed
    return d.hidden_text + _c(d.visible_text, "2;37")

def _row(field: GhostTextField, d: RenderDirective) -> dict:
    row = d.to_dict()
    row["candidate"] = field.current_suggestion()
    row["source"] = field.match.source.value
    return row

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Ghost-text autocomplete CLI")
    p.add_argument("--candidates", nargs="+", default=[], help="Files/folders with suggestions (one per line)")
    p.add_argument("--priority", nargs="+", default=[], help="Files/folders with preferred suggestions")
    p.add_argument("--mode", choices=["word", "sentence"], default=CFG.DEFAULT_MODE)
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if not args.candidates and not args.priority:
        p.error("give at least one of --candidates / --priority")
    if args.q is None and not args.repl:
        p.error("nothing to do: pass --q and/or --repl")

    try:
        field = api.initialize(args.candidates, args.priority, mode=args.mode, verbose=args.verbose)
    except FileNotFoundError as exc:
        print(f"error: no such file or folder: {exc}", file=sys.stderr)
        return 2

    def run_query(q: str) -> None:
        d = field.text_changed(q)
        if args.json:
            print(json.dumps(_row(field, d), ensure_ascii=False))
        elif d.is_empty:
            print(_c("(no suggestion)", "2;37"))
        else:
            print(render(d, q))

    if args.q is not None:
        run_query(args.q)

    if args.repl:
        print("Type text to complete (empty line to exit).  Commands: :mode word|sentence, :accept")
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            cmd = raw.strip().lower()
            if raw == "":
                break
            if cmd in (":mode word", ":mode sentence"):
                field.mode = cmd.split()[1]
                print(_c(f"(mode {field.mode.value})", "2;36")); continue
            if cmd == ":accept":
                print(_c(repr(field.accept()), "2;36")); continue
            run_query(raw)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
