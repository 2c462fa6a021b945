#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/radix_basis.py
# Base de numération et base de premiers (constantes figées au démarrage).
# Sémantique figée :
#   - PrimeBasis = tous les premiers p ≤ radix (radix INCLUS : si radix est premier,
#     il occupe la dernière case, et BaseFactors = (0,…,0,1)).
#   - Un vecteur d'exposants = tuple d'entiers ≥ 0, une case par premier de la base.
#   - factor(d) n'est défini que pour des valeurs dont tous les facteurs sont dans la base.

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

DEFAULT_RADIX = 10
MAX_RADIX = 36  # rendu des chiffres via 0-9a-z

Vector = Tuple[int, ...]

# ---------- crible ----------
def primes_up_to(limit: int) -> List[int]:
    if limit < 2:
        return []
    bs = bytearray(b"\x01") * (limit + 1)
    bs[:2] = b"\x00\x00"
    r = int(limit**0.5)
    for p in range(2, r + 1):
        if bs[p]:
            start = p * p
            bs[start:limit + 1:p] = b"\x00" * (((limit - start) // p) + 1)
    return [i for i in range(2, limit + 1) if bs[i]]

# ---------- factorisation sur la base ----------
def factor(basis: Tuple[int, ...], value: int) -> Vector:
    """
    Exposants de `value` sur `basis` (premiers croissants).
    Lève ValueError si un cofacteur hors base subsiste.
    """
    if value < 1:
        raise ValueError(f"factor attend un entier >= 1 (reçu {value})")
    remaining = value
    bins = [0] * len(basis)
    for i, p in enumerate(basis):
        while remaining % p == 0:
            remaining //= p
            bins[i] += 1
    if remaining != 1:
        raise ValueError(f"{value} a un facteur hors base {basis} (cofacteur {remaining})")
    return tuple(bins)

# ---------- contexte immuable ----------
@dataclass(frozen=True)
class RadixContext:
    radix: int
    primes: Tuple[int, ...]
    base_factors: Vector
    digit_factors: Dict[int, Vector] = field(default_factory=dict, compare=False)

    @property
    def width(self) -> int:
        return len(self.primes)


def build_context(radix: int = DEFAULT_RADIX) -> RadixContext:
    if not isinstance(radix, int) or radix < 3:
        raise ValueError(f"radix doit être un entier >= 3 (reçu {radix!r})")
    if radix > MAX_RADIX:
        raise ValueError(f"radix doit être <= {MAX_RADIX} (reçu {radix})")
    primes = tuple(primes_up_to(radix))
    base_factors = factor(primes, radix)
    # chiffres 2..radix-1 : tous leurs facteurs sont < radix, donc dans la base
    digit_factors = {d: factor(primes, d) for d in range(2, radix)}
    logger.debug("radix=%d primes=%s base_factors=%s", radix, primes, base_factors)
    return RadixContext(radix=radix, primes=primes, base_factors=base_factors,
                        digit_factors=digit_factors)
