#!/usr/bin/env python3
import argparse
import logging
import sys

from tritcipher import (
    NO_KEY_SENTINEL,
    KeyMode,
    build_ordering,
    cipher_alphabet,
    decode_static,
    encode,
    glyph_run_frequencies,
    keyed_cipher_alphabet,
    random_key,
    render_mapping_table,
    validate_key,
)

logger = logging.getLogger("tritcipher")

# ===============================
# Helpers
# ===============================

def read_text_from_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def write_text_to_file(path: str, data: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)

def parse_inline_or_file(inline: str | None, file_path: str | None) -> str:
    if inline is not None and file_path is not None:
        raise ValueError("Provide either --text OR --in-file, not both.")
    if inline is None and file_path is None:
        raise ValueError("Provide --text or --in-file.")
    if inline is not None:
        return inline
    return read_text_from_file(file_path)

def emit(text: str, out_file: str | None) -> None:
    if out_file:
        write_text_to_file(out_file, text)
        logger.info("Wrote %d characters to %s", len(text), out_file)
    else:
        print(text)

def setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

# ===============================
# Commands
# ===============================

def cmd_encrypt(args) -> int:
    mode = KeyMode(args.mode)
    if args.key is not None and args.random_key is not None:
        raise ValueError("Provide either --key or --random-key, not both.")
    text = parse_inline_or_file(args.text, args.in_file)
    key = args.key
    if args.random_key is not None:
        key = random_key(args.random_key, mode)
        print(f"Generated {mode.value} key: {key}")
    emit(encode(text, key, mode), args.out_file)
    return 0

def cmd_decrypt(args) -> int:
    text = parse_inline_or_file(args.text, args.in_file)
    emit(decode_static(text, strict=args.strict), args.out_file)
    return 0

def cmd_table(args) -> int:
    if args.key is None or args.key == NO_KEY_SENTINEL:
        table = cipher_alphabet()
    else:
        if not validate_key(args.key, KeyMode.PERMUTATION):
            raise ValueError("Mapping tables need a permutation key (unique letters only).")
        ordering = build_ordering(args.key)
        print(f"Keyed alphabet: {ordering}")
        table = keyed_cipher_alphabet(ordering)
    print(render_mapping_table(table))
    return 0

def cmd_freq(args) -> int:
    text = parse_inline_or_file(args.text, args.in_file)
    freqs = glyph_run_frequencies(text)
    print("Glyph-run frequencies (sorted by most common):")
    for run, count in freqs.most_common():
        print(f"{run}: {count}")
    return 0

def cmd_validate(args) -> int:
    mode = KeyMode(args.mode)
    ok = validate_key(args.key, mode)
    print(f"{args.key!r} is {'a valid' if ok else 'an invalid'} {mode.value} key")
    return 0 if ok else 1

def read_line(prompt: str) -> str:
    print(prompt)
    try:
        return input()
    except EOFError:
        raise ValueError("Input ended before a key was accepted.")

def cmd_interactive(args) -> int:
    mode = KeyMode(args.mode)
    plaintext = read_line("Please enter plaintext to encode:")
    while True:
        key = read_line(f"Enter key ({NO_KEY_SENTINEL} for normal cipher):").strip()
        if key == NO_KEY_SENTINEL or validate_key(key, mode):
            break
        print("Key invalid. Try again.")
    print("Encoded ciphertext:")
    print(encode(plaintext, key, mode))
    return 0

# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Ternary substitution cipher: letters become runs of three glyphs (▲ ▼ ◆)"
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="-v for progress messages, -vv for per-letter key tracing")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_input(sp):
        sp.add_argument("--text", help="Input text (inline)")
        sp.add_argument("--in-file", help="Read input text from file (UTF-8). Mutually exclusive with --text.")

    def add_mode(sp):
        sp.add_argument("--mode", choices=[m.value for m in KeyMode], default=KeyMode.ADDITIVE.value,
                        help="Keyed variant (default: additive)")

    # Encrypt
    enc = sub.add_parser("encrypt", help="Encode plaintext into glyphs")
    add_input(enc)
    add_mode(enc)
    enc.add_argument("--key", help=f"Keyword (letters only). Omit or use '{NO_KEY_SENTINEL}' for the static table.")
    enc.add_argument("--random-key", type=int, metavar="N",
                     help="Generate a random N-letter key for --mode and print it")
    enc.add_argument("--out-file", help="Write ciphertext to file instead of stdout")
    enc.set_defaults(func=cmd_encrypt)

    # Decrypt
    dec = sub.add_parser("decrypt", help="Decode static (unkeyed) ciphertext")
    add_input(dec)
    dec.add_argument("--strict", action="store_true",
                     help="Fail on glyph runs that are not letter codes instead of copying them")
    dec.add_argument("--out-file", help="Write plaintext to file instead of stdout")
    dec.set_defaults(func=cmd_decrypt)

    # Table
    tab = sub.add_parser("table", help="Print the letter -> glyph-run mapping")
    tab.add_argument("--key", help="Permutation keyword; omit for the static table")
    tab.set_defaults(func=cmd_table)

    # Frequencies
    fr = sub.add_parser("freq", help="Count glyph runs in a ciphertext")
    add_input(fr)
    fr.set_defaults(func=cmd_freq)

    # Validate
    val = sub.add_parser("validate", help="Check a key for the given mode")
    val.add_argument("key")
    add_mode(val)
    val.set_defaults(func=cmd_validate)

    # Interactive
    inter = sub.add_parser("interactive", help="Prompt for plaintext and key, then encode")
    add_mode(inter)
    inter.set_defaults(func=cmd_interactive)

    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print("Error:", e)
        return 1

if __name__ == "__main__":
    sys.exit(main())
