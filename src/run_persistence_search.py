#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/run_persistence_search.py
# Recherche des records de persistance multiplicative, par poids croissant.
#
# Exemples :
#   python run_persistence_search.py            # jusqu'à Ctrl-C
#   python run_persistence_search.py 40         # poids n = 1..39
#   python run_persistence_search.py 30 --radix 12 --show-radix
#
# Ctrl-C : la boucle termine le candidat en cours puis imprime le résumé.

import argparse
import logging
import signal
import sys
from typing import List, Optional

from persistence import persistence_chain, to_radix_string
from radix_basis import DEFAULT_RADIX, MAX_RADIX, RadixContext, build_context
from search_driver import NEW_MAX, CancelFlag, Record, SearchResult, run_search

logger = logging.getLogger(__name__)

# lever toute limite de conversion d'entiers géants en str
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

# ---------- arguments ----------
def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"entier attendu, reçu {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"la borne doit être >= 0 (reçu {value})")
    return value

def radix_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"entier attendu, reçu {text!r}")
    if not 3 <= value <= MAX_RADIX:
        raise argparse.ArgumentTypeError(f"radix dans [3, {MAX_RADIX}] (reçu {value})")
    return value

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="persistence-search",
        description="Records de persistance multiplicative (résistance) par énumération des vecteurs d'exposants.")
    ap.add_argument("bound", nargs="?", type=non_negative_int, default=None,
                    help="borne exclusive sur le poids n (défaut : jusqu'à Ctrl-C)")
    ap.add_argument("--radix", type=radix_arg, default=DEFAULT_RADIX,
                    help=f"base de numération (défaut {DEFAULT_RADIX})")
    ap.add_argument("--show-radix", action="store_true",
                    help="affiche aussi les records écrits dans la base")
    ap.add_argument("-v", "--verbose", action="store_true", help="journal DEBUG et trajectoire de chaque record")
    return ap

# ---------- interruption ----------
def install_sigint_handler(flag: CancelFlag):
    """Installe le gestionnaire ; renvoie l'ancien pour restauration.
    Premier Ctrl-C : drapeau levé. Le second lève KeyboardInterrupt.
    """
    def _handler(signum, frame):
        flag.set()
        signal.signal(signal.SIGINT, signal.default_int_handler)
    return signal.signal(signal.SIGINT, _handler)

# ---------- affichage ----------
def format_record(kind: str, record: Record, ctx: RadixContext, show_radix: bool,
                  verbose: bool = False) -> str:
    if kind == NEW_MAX:
        line = f"Found new max!          {record.resistance}\t{record.value}"
    else:
        line = f"Found better assembly:  {record.resistance}\t{record.value}"
    if show_radix:
        line += f"\t[radix {ctx.radix}: {to_radix_string(record.value, ctx.radix)}]"
    if verbose:
        chain = persistence_chain(record.value, ctx.radix)
        line += "\t(" + " -> ".join(to_radix_string(v, ctx.radix) for v in chain) + ")"
    return line

def format_summary(result: SearchResult) -> List[str]:
    st = result.stats
    lines = []
    lines.append("=" * 60)
    lines.append("Interrupted." if st.cancelled else "Done.")
    lines.append(f"Weights completed       : {st.weights_completed}")
    lines.append(f"Tested candidates       : {st.tested}")
    lines.append(f"Discriminated           : {st.discriminated} ({st.discriminated_pct:.2f}%)")
    lines.append(f"Elapsed                 : {st.elapsed:.3f} s")
    if st.tested:
        lines.append(f"Per candidate           : {1e6 * st.elapsed / st.tested:.3f} us")
    if st.evaluated:
        lines.append(f"Per non-discriminated   : {1e6 * st.elapsed / st.evaluated:.3f} us")
    rec = result.record
    if rec.value is None:
        lines.append("Record                  : (none)")
    else:
        lines.append(f"Record                  : resistance {rec.resistance}, value {rec.value}")
    return lines

# ---------- main ----------
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    logger.debug("arguments : %s", vars(args))

    ctx = build_context(args.radix)
    print(f"=== persistence search (radix {ctx.radix}) ===")
    print(f"primes = {list(ctx.primes)}  |  base factors = {list(ctx.base_factors)}  |  "
          f"bound = {args.bound if args.bound is not None else 'none (Ctrl-C to stop)'}")

    flag = CancelFlag()
    previous = install_sigint_handler(flag)
    try:
        result = run_search(
            ctx,
            bound=args.bound,
            cancel=flag,
            on_record=lambda kind, rec: print(format_record(kind, rec, ctx, args.show_radix, args.verbose), flush=True),
            on_weight=lambda n: print(f"Starting weight {n}", flush=True),
        )
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)

    print()
    for line in format_summary(result):
        print(line)
    return 0

if __name__ == "__main__":
    sys.exit(main())
