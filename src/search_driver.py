#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Fichier : src/search_driver.py
# Boucle de recherche des records de résistance, poids n = 1, 2, 3, ...
# Pour chaque poids :
#   - énumération de tous les vecteurs d'exposants (stars_bars) ;
#   - coupe : divides(v, BaseFactors) -> écarté (compté "discriminé") ;
#   - sinon résistance du produit ∏ p^e, + ASSEMBLY_OFFSET ;
#   - si >= record : assemblage minimal, mise à jour si strictement meilleur.
# Arrêt : borne exclusive sur n atteinte, ou drapeau d'annulation (relevé une
# fois après chaque candidat, jamais au milieu d'un calcul).

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from assembly import assemble, divides
from persistence import resistance
from radix_basis import RadixContext, Vector
from stars_bars import StarsBars, composition_count

logger = logging.getLogger(__name__)

# Le produit ∏ p^e est déjà le produit des chiffres de l'entier assemblé :
# une étape de réduction est implicite.
ASSEMBLY_OFFSET = 1

NEW_MAX = "new max"
BETTER_ASSEMBLY = "better assembly"


class CancelFlag:
    """Un seul écrivain (gestionnaire SIGINT), un seul lecteur (la boucle)."""

    def __init__(self):
        self._event = threading.Event()

    def set(self):
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


@dataclass
class Record:
    resistance: int = 0
    value: Optional[int] = None

    def offer(self, res: int, value: int) -> Optional[str]:
        """Met à jour si strictement meilleur ; renvoie le type d'amélioration."""
        if res > self.resistance:
            self.resistance, self.value = res, value
            return NEW_MAX
        if res == self.resistance and self.value is not None and value < self.value:
            self.value = value
            return BETTER_ASSEMBLY
        return None


@dataclass
class SearchStats:
    tested: int = 0
    discriminated: int = 0
    weights_completed: int = 0
    elapsed: float = 0.0
    cancelled: bool = False

    @property
    def evaluated(self) -> int:
        return self.tested - self.discriminated

    @property
    def discriminated_pct(self) -> float:
        return 100.0 * self.discriminated / self.tested if self.tested else 0.0


@dataclass
class SearchResult:
    record: Record
    stats: SearchStats = field(default_factory=SearchStats)


def candidate_value(ctx: RadixContext, vector: Vector) -> int:
    a = 1
    for p, e in zip(ctx.primes, vector):
        if e:
            a *= pow(p, e)
    return a


def run_search(ctx: RadixContext,
               bound: Optional[int] = None,
               cancel: Optional[CancelFlag] = None,
               on_record: Optional[Callable[[str, Record], None]] = None,
               on_weight: Optional[Callable[[int], None]] = None) -> SearchResult:
    if bound is not None and bound < 0:
        raise ValueError(f"borne négative : {bound}")
    record = Record()
    stats = SearchStats()
    t0 = time.perf_counter()
    n = 1
    while bound is None or n < bound:
        if on_weight is not None:
            on_weight(n)
        logger.debug("poids n=%d (%d vecteurs)", n, composition_count(n, ctx.width))
        for bins in StarsBars(n, ctx.width):
            stats.tested += 1
            if divides(bins, ctx.base_factors):
                stats.discriminated += 1
            else:
                res = resistance(candidate_value(ctx, bins), ctx.radix) + ASSEMBLY_OFFSET
                if res >= record.resistance:
                    kind = record.offer(res, assemble(ctx, bins))
                    if kind is not None:
                        logger.debug("%s: %d %d (vecteur %s)", kind, record.resistance, record.value, bins)
                        if on_record is not None:
                            on_record(kind, record)
            if cancel is not None and cancel.is_set():
                stats.cancelled = True
                break
        if stats.cancelled:
            break
        stats.weights_completed = n
        n += 1
    stats.elapsed = time.perf_counter() - t0
    return SearchResult(record=record, stats=stats)
