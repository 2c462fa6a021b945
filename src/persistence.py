#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/persistence.py
# Résistance (persistance multiplicative) en base `radix`, sur entiers Python
# (précision illimitée : les valeurs intermédiaires peuvent avoir des milliers de chiffres).
#   resistance(v) = 0                              si v < radix
#   resistance(v) = 1 + resistance(digit_product(v)) sinon
# Exemple (base 10) : 39 -> 27 -> 14 -> 4, résistance 3.

from typing import List

_DIGIT_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check(value: int, radix: int):
    if value < 0:
        raise ValueError(f"valeur négative : {value}")
    if radix < 2:
        raise ValueError(f"radix invalide : {radix}")

# ---------- chiffres ----------
def radix_digits(value: int, radix: int) -> List[int]:
    """Chiffres de poids fort en tête ; 0 -> [0]."""
    _check(value, radix)
    if value == 0:
        return [0]
    out = []
    while value > 0:
        value, d = divmod(value, radix)
        out.append(d)
    out.reverse()
    return out

def to_radix_string(value: int, radix: int) -> str:
    return "".join(_DIGIT_CHARS[d] for d in radix_digits(value, radix))

def digit_product(value: int, radix: int) -> int:
    _check(value, radix)
    if value == 0:
        return 0
    result = 1
    while value > 0:
        value, d = divmod(value, radix)
        if d == 0:
            return 0  # un zéro écrase le produit
        result *= d
    return result

# ---------- résistance ----------
def resistance(value: int, radix: int) -> int:
    _check(value, radix)
    res = 0
    while value >= radix:
        value = digit_product(value, radix)
        res += 1
    return res

def persistence_chain(value: int, radix: int) -> List[int]:
    """Trajectoire complète, ex. 39 -> [39, 27, 14, 4]."""
    _check(value, radix)
    chain = [value]
    while value >= radix:
        value = digit_product(value, radix)
        chain.append(value)
    return chain
