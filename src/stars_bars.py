#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/stars_bars.py
# Énumérateur "étoiles et barres" : toutes les compositions de n en k parts ≥ 0,
# chacune exactement une fois, sans jamais matérialiser la liste.
#
# Règle de succession (après avoir rendu l'état courant) :
#   - i = première case non nulle parmi 0..k-2 ;
#   - déplacer une unité de la case i vers la case i+1 ;
#   - replier : somme des cases 0..i dans la case 0, cases 1..i remises à 0.
#   - si aucune case non nulle parmi 0..k-2 (tout le poids en k-1) : épuisé.
# Le poids (somme) est invariant à chaque pas ; C(n+k-1, k-1) vecteurs au total.

from math import comb
from typing import List, Optional, Tuple


def composition_count(n: int, k: int) -> int:
    if n < 0 or k < 1:
        raise ValueError(f"paramètres invalides : n={n}, k={k}")
    return comb(n + k - 1, k - 1)


class StarsBars:
    """Curseur à état explicite ; non redémarrable (une instance par poids)."""

    def __init__(self, n: int, k: int):
        if n < 0 or k < 1:
            raise ValueError(f"paramètres invalides : n={n}, k={k}")
        self.n = n
        self.k = k
        self.bins: List[int] = [0] * k
        self.bins[0] = n
        self.finished = False

    def advance(self) -> Optional[Tuple[int, ...]]:
        """Vecteur courant puis pas de succession ; None une fois épuisé."""
        if self.finished:
            return None
        current = tuple(self.bins)
        bins = self.bins
        for i in range(self.k - 1):
            if bins[i] != 0:
                bins[i + 1] += 1
                bins[i] -= 1
                total = sum(bins[:i + 1])
                for j in range(1, i + 1):
                    bins[j] = 0
                bins[0] = total
                break
        else:
            self.finished = True
        return current

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, ...]:
        v = self.advance()
        if v is None:
            raise StopIteration
        return v
