"""
Shrink a dictionary to the words that could ever be a Spelling Bee answer.

Keeps a word only if it:
- is alphabetic (no apostrophes, digits, spaces)
- is at least --min-length letters
- uses at most --letters distinct letters

Output is lowercased and deduped, preserving original order by default.
Optional --skip-proper drops capitalized entries (proper nouns in
/usr/share/dict/words) before lowercasing.

Usage:
    python -m script.clean_wordlist --in /usr/share/dict/words --out data/bee_words.txt
"""

import argparse

from spellingbee.datasets import read_lines
from spellingbee.datasets.io import write_lines
from spellingbee.engine import DEFAULT_RULES


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def could_be_answer(w: str, min_length: int, letters: int) -> bool:
    return w.isalpha() and len(w) >= min_length and len(set(w.lower())) <= letters


def main():
    ap = argparse.ArgumentParser(description="Filter a dictionary to possible Spelling Bee answers.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", required=True, help="output file")
    ap.add_argument("--min-length", type=int, default=DEFAULT_RULES.min_length)
    ap.add_argument("--letters", type=int, default=DEFAULT_RULES.letter_count,
                    help="max distinct letters per word")
    ap.add_argument("--skip-proper", action="store_true", help="drop capitalized words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    lines = [s.strip() for s in read_lines(args.inp) if s.strip()]
    if args.skip_proper:
        lines = [s for s in lines if not s[0].isupper()]

    kept = [s.lower() for s in lines if could_be_answer(s, args.min_length, args.letters)]
    out = unique_preserve_order(kept)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
