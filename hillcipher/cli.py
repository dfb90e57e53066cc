#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Hill cipher (2x2) — command line, with optional step-by-step prints
# -----------------------------------------------------------------------------
# Verbosity:
#   0 = quiet (just the result)
#   1 = key/determinant, normalized message, block count
#   2 = like 1 + matrices and every block product
#
# Handy flags:
#   --key "a b c d"        : key matrix, row-wise (spaces or commas)
#   --pause                : pause after phases (press Enter)
#   --no-overview          : skip the algorithm overview banner
#
# SECURITY NOTE: the Hill cipher falls to a known-plaintext attack.
# This code is for teaching/demonstration ONLY.

import argparse
import sys
from typing import List, Optional

from .analysis import count_frequencies, plot_frequencies, print_frequencies
from .cipher import HillCipher
from .codec import normalize, pad
from .errors import HillCipherError
from .matrix import Matrix, determinant2x2, format_matrix

# ==============================
# Overview banner
# ==============================

def print_overview():
    print(r"""
================================================================================
Hill Cipher (2x2) — Algorithm Overview
================================================================================

Alphabet (fixed order, 26 symbols):
  z=0 a=1 b=2 c=3 ... x=24 y=25

Key:
  K = [[a, b], [c, d]],  det = a*d - b*c
  Rejected when det == 0 or |det - 26| == 1.

Encryption:
  strip non-letters, lowercase, repeat the last letter if the length is odd
  split into pairs (p1, p2) and compute  K . [p1, p2]^T  (mod 26)

Decryption:
  K^-1 = det^-1 * [[d, -b], [-c, a]]  (mod 26)
  needs gcd(det, 26) == 1, then the same steps with K^-1
================================================================================
""")

# ==============================
# Utilities
# ==============================

def maybe_pause(do_pause: bool, msg="(press Enter)"):
    if do_pause:
        try:
            input(msg)
        except EOFError:
            pass

def parse_key(s: str) -> Matrix:
    """'3 3 2 5' or '3,3,2,5' -> [[3, 3], [2, 5]]"""
    parts = s.replace(",", " ").split()
    if len(parts) != 4:
        raise ValueError("key must be exactly 4 integers (a b c d, row-wise)")
    try:
        a, b, c, d = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"key must be integers (got {s!r})")
    return [[a, b], [c, d]]

# ==============================
# Self-test
# ==============================

def selftest(verbose: int = 1, pause: bool = False) -> bool:
    """Encrypt then decrypt a fixed message and compare with the padded input."""
    key = [[3, 3], [2, 5]]
    pt = "Hill cipher"
    if verbose >= 1:
        print(f"[Selftest] key={key}, pt={pt!r}")
    ct = HillCipher(verbose=verbose).set_key(key).set_message(pt).encrypt().get_result()
    maybe_pause(pause, "Encrypted. Press Enter to decrypt...")
    rt = HillCipher().set_key(key).set_message(ct).decrypt().get_result()
    expected = pad(normalize(pt))
    ok = (rt == expected)
    print("ciphertext :", ct)
    print("recover ok:", ok)
    if not ok:
        print(f"recovered = {rt!r}, expected = {expected!r}")
    return ok

# ==============================
# CLI
# ==============================

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hill-cipher",
                                 description="Hill cipher (2x2 key, 26-letter alphabet)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def add_common(p):
        p.add_argument("--verbose", type=int, default=0, help="0..2 (2 = most detail)")
        p.add_argument("--pause", action="store_true", help="Pause after phases (press Enter)")
        p.add_argument("--no-overview", action="store_true", help="Skip algorithm overview banner")

    pe = sub.add_parser("encrypt", help="Encrypt a message")
    pe.add_argument("--key", required=True, help='Key matrix row-wise, e.g. "3 3 2 5"')
    pe.add_argument("--msg", required=True, help="Plaintext")
    add_common(pe)

    pd = sub.add_parser("decrypt", help="Decrypt a message")
    pd.add_argument("--key", required=True, help='Key matrix row-wise, e.g. "3 3 2 5"')
    pd.add_argument("--ct", required=True, help="Ciphertext")
    add_common(pd)

    pi = sub.add_parser("inverse", help="Show a key, its determinant and its inverse mod 26")
    pi.add_argument("--key", required=True, help='Key matrix row-wise, e.g. "3 3 2 5"')
    add_common(pi)

    pf = sub.add_parser("freq", help="Letter frequencies of a text (most common first)")
    pf.add_argument("--text", required=True)
    pf.add_argument("--plot", action="store_true", help="Draw a bar chart (matplotlib)")
    pf.add_argument("--out", help="Save the chart to this file instead of showing it")

    ps = sub.add_parser("selftest", help="Encrypt-then-decrypt identity check")
    add_common(ps)
    ps.set_defaults(verbose=1)

    return ap

def run(args) -> int:
    if args.cmd == "freq":
        freqs = count_frequencies(args.text)
        print_frequencies(freqs)
        if args.plot or args.out:
            plot_frequencies(freqs, out=args.out)
        return 0

    if not args.no_overview:
        print_overview()
        maybe_pause(args.pause)

    if args.cmd == "selftest":
        return 0 if selftest(verbose=args.verbose, pause=args.pause) else 1

    key = parse_key(args.key)
    hill = HillCipher(verbose=args.verbose).set_key(key)

    if args.cmd == "encrypt":
        print("ciphertext:", hill.set_message(args.msg).encrypt().get_result())

    elif args.cmd == "decrypt":
        print("plaintext :", hill.set_message(args.ct).decrypt().get_result())

    elif args.cmd == "inverse":
        print("Key Matrix:")
        print(format_matrix(key))
        print(f"det = {determinant2x2(key)}")
        print("\nInverse Key Matrix:")
        print(format_matrix(hill.inverse_key()))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (HillCipherError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
