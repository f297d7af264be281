from __future__ import annotations
import argparse, logging, os, sys
from . import Engine, is_valid_word
from . import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _clear_screen():
    # ANSI clear; fallback to newlines if not a TTY
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)
    else:
        print("\n" * 100)

def _fmt(word: str | None) -> str:
    return word if word is not None else _c("(none)", "2;37")

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Word matching REPL (value + lexical neighbours)")
    parser.add_argument("--seed", type=int, default=CFG.RANDOM_SEED, help="Seed for random value picks")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    eng = Engine(seed=args.seed)
    print("Type a word and press Enter (empty to quit).")
    print(_c("Commands: :stats, :clear", "2;37"))

    try:
        while True:
            try:
                raw = input("> ")
            except EOFError:
                print(); break
            word = raw.strip()
            if word == "":
                print("Goodbye!"); break
            if word == ":stats":
                st = eng.stats()
                print(_c(f"words={st['words']} buckets={st['buckets']}", "2;36")); continue
            if word in (":clear", ":cls"):
                _clear_screen(); continue
            if not is_valid_word(word):
                print(_c("letters only, please (no digits, spaces or punctuation)", "1;31")); continue

            res = eng.analyze(word)
            print(f"value:   {_fmt(res.value)}")
            print(f"lexical: {_fmt(res.lexical)}")
    finally:
        eng.shutdown()
    return 0

if __name__ == "__main__":
    sys.exit(main())
