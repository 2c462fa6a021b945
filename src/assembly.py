#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/assembly.py
# Divisibilité entre vecteurs d'exposants et assemblage de l'entier minimal.
#
# divides(A, B) : A[i] >= B[i] pour tout i (le contenu de B tient dans A).
#   - sert de coupe bon marché : divides(v, BaseFactors) => v est un multiple
#     de radix, son dernier chiffre est 0, le produit s'effondre ; on écarte v ;
#   - sert de test "le chiffre d tient encore dans le budget" à l'assemblage.
#
# assemble(v) : glouton du plus grand chiffre (radix-1) au plus petit (2) ;
# chaque chiffre consommé prend la position libre de plus faible poids, donc les
# petits chiffres finissent en tête : pour un multiset sans 0, c'est le minimum.

import logging

from radix_basis import RadixContext, Vector

logger = logging.getLogger(__name__)


class AssemblyError(ValueError):
    """Contenu résiduel impossible à exprimer avec les chiffres 2..radix-1."""


def divides(a: Vector, b: Vector) -> bool:
    return all(x >= y for x, y in zip(a, b))

def subtract(a: Vector, b: Vector) -> Vector:
    out = tuple(x - y for x, y in zip(a, b))
    if any(x < 0 for x in out):
        raise ValueError(f"soustraction négative : {a} - {b}")
    return out

def assemble(ctx: RadixContext, vector: Vector) -> int:
    if len(vector) != ctx.width:
        raise ValueError(f"vecteur de longueur {len(vector)} ; attendu {ctx.width}")
    remaining = tuple(vector)
    result = 0
    place = 1
    for d in range(ctx.radix - 1, 1, -1):
        digit_factors = ctx.digit_factors[d]
        while divides(remaining, digit_factors):
            result += d * place
            place *= ctx.radix
            remaining = subtract(remaining, digit_factors)
    if any(remaining):
        # seul cas : radix premier et v contient radix lui-même
        logger.debug("assemblage incomplet : %s -> reste %s", vector, remaining)
        raise AssemblyError(f"vecteur {vector} non assemblable en base {ctx.radix} (reste {remaining})")
    return result
