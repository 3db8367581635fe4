# Copyright [2024] [Dashiell Stander]
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The deterministic Schreier-Sims algorithm, see Holt, "Handbook of Computational Group Theory", 4.4.2.
"""

from dataclasses import dataclass
import logging
import math
from typing import Optional, Sequence

from .orbits import orbit_and_representative
from .permutations import Permutation


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StabilizerChain:
    """
    A base and strong generating set together with the orbit tables of the stabilizer chain.

    Level i describes the pointwise stabilizer of base[:i]: `strong_generators[i]` generates it and
    `transversals[i]` maps every point q of the orbit of base[i] under it to an element sending base[i] to q.
    """
    base: tuple[int, ...]
    strong_generators: tuple[tuple[Permutation, ...], ...]
    transversals: tuple[dict[int, Permutation], ...]

    def __len__(self) -> int:
        return len(self.base)

    @property
    def order(self) -> int:
        return math.prod(len(t) for t in self.transversals)

    def tail(self, level: int) -> 'StabilizerChain':
        """The chain of the pointwise stabilizer of base[:level]."""
        return StabilizerChain(self.base[level:], self.strong_generators[level:], self.transversals[level:])


def strip(
    g: Permutation,
    base: Sequence[int],
    transversals: Sequence[dict[int, Permutation]]
) -> tuple[Permutation, int]:
    """
    Sifts g through a stabilizer chain.

    Args:
        g (Permutation): the element to sift
        base (Sequence[int]): a base, or partial base, of the group
        transversals (Sequence[dict]): transversals[i] is the orbit of the stabilizer of base[:i] on base[i]
    Returns:
        tuple[Permutation, int] the residue of g and the level at which sifting stopped. The level equals
        len(base) when g went through every level, in which case g belongs to the group iff the residue is the identity.
    """
    h = g
    for i, point in enumerate(base):
        beta = h(point)
        if beta not in transversals[i]:
            return h, i
        h = h * transversals[i][beta].inverse
    return h, len(base)


def _first_schreier_residue(
    level: int,
    base: list[int],
    strong_generators: list[list[Permutation]],
    transversals: list[dict[int, Permutation]]
) -> Optional[tuple[Permutation, int]]:
    transversal = transversals[level]
    for beta, u in transversal.items():
        for x in strong_generators[level]:
            h = u * x * transversal[x(beta)].inverse
            if h.is_identity():
                continue
            h, j = strip(h, base, transversals)
            if j < len(base) or not h.is_identity():
                return h, j
    return None


def _seed_base(gens: Sequence[Permutation]) -> tuple[list[int], list[list[Permutation]]]:
    base = []
    strong_generators = []
    for x in gens:
        if x.is_identity():
            continue
        j = 0
        while j < len(base):
            strong_generators[j].append(x)
            if x(base[j]) != base[j]:
                break
            j += 1
        if j == len(base):
            base.append(x.smallest_moved_point())
            strong_generators.append([x])
    return base, strong_generators


def schreier_sims(gens: Sequence[Permutation]) -> StabilizerChain:
    """
    Computes a base, a strong generating set and the stabilizer chain orbit tables of the group generated by `gens`.

    The base is seeded from the generators. Levels are then checked from the deepest one up: every Schreier
    generator of a level is sifted through the chain, and a non-trivial residue is added as a strong generator to
    the levels it failed to pass (extending the base if it passed them all), after which checking resumes at the
    deepest level it was added to.
    """
    base, strong_generators = _seed_base(gens)
    transversals = [orbit_and_representative(s, b) for s, b in zip(strong_generators, base)]

    i = len(base) - 1
    while i >= 0:
        residue = _first_schreier_residue(i, base, strong_generators, transversals)
        if residue is None:
            i -= 1
            continue
        h, j = residue
        if j == len(base):
            base.append(h.smallest_moved_point())
            strong_generators.append([])
            transversals.append({})
            logger.debug('Extending base with point %d at level %d', base[-1], j)
        for level in range(i + 1, j + 1):
            strong_generators[level].append(h)
            transversals[level] = orbit_and_representative(strong_generators[level], base[level])
        i = j

    assert len(base) == len(strong_generators) == len(transversals)
    assert all(len(t) > 1 for t in transversals), 'every base point must be moved by its stabilizer'
    logger.debug('Stabilizer chain with base %s and orbit lengths %s', base, [len(t) for t in transversals])
    return StabilizerChain(
        tuple(base),
        tuple(tuple(s) for s in strong_generators),
        tuple(transversals)
    )
