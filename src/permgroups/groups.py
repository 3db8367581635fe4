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
Permutation groups given by generators, in the manner of GAP.

Only the generators are fixed at construction. Everything else (the degree, a base with its stabilizer chain, the
order, the list of elements with words in the generators) is computed the first time it is asked for and kept for the
lifetime of the group. The stabilizer chain is built by `schreier_sims` and drives membership testing, the order and
iteration; the element and word lists come from the independent `elements_and_words`.

Lazily computed fields are not guarded by a lock. Sharing one group between threads before its fields are computed
requires external synchronization.

>>> G = PermutationGroup([Permutation.from_cycles((1, 2)), Permutation.from_cycles((2, 3))])
>>> G.order
6
>>> Permutation.from_cycles((1, 2, 4)) in G
False
"""

from functools import cached_property
from typing import Iterable, Iterator, Optional, Self
import numpy as np
import torch

from .orbits import orbit, orbit_and_representative, schreier_vector
from .permutations import Permutation
from .schreier_sims import StabilizerChain, schreier_sims, strip
from .words import elements_and_words


class PermutationGroup:

    def __init__(self, generators: Iterable[Permutation] = (), verbose: bool = False):
        self.gens = tuple(generators)
        for g in self.gens:
            if not isinstance(g, Permutation):
                raise TypeError(f'Generators must be Permutations, got {type(g).__name__}')
        self.verbose = verbose
        self._chain: Optional[StabilizerChain] = None
        self._elements: Optional[list[Permutation]] = None
        self._words: Optional[list[tuple[int, ...]]] = None

    @classmethod
    def _from_chain(cls, chain: StabilizerChain, verbose: bool = False) -> Self:
        group = cls(chain.strong_generators[0] if len(chain) > 0 else (), verbose)
        group._chain = chain
        return group

    def __repr__(self) -> str:
        return f'PermutationGroup({",".join(repr(g) for g in self.gens)})'

    def identity(self) -> Permutation:
        return Permutation()

    @cached_property
    def degree(self) -> int:
        """The largest point moved by a generator, 0 for the trivial group."""
        return max((g.largest_moved_point() for g in self.gens), default=0)

    def orbit(self, point: int) -> set[int]:
        return orbit(self.gens, point)

    def orbit_and_representative(self, point: int) -> dict[int, Permutation]:
        return orbit_and_representative(self.gens, point)

    def schreier_vector(self, point: int) -> np.ndarray:
        return schreier_vector(self.gens, point, self.degree)

    @property
    def chain(self) -> StabilizerChain:
        if self._chain is None:
            self._chain = schreier_sims(self.gens)
        return self._chain

    @property
    def base(self) -> list[int]:
        """A list of points fixed by no non-identity element of the group."""
        return list(self.chain.base)

    @property
    def strong_generators(self) -> list[list[Permutation]]:
        return [list(s) for s in self.chain.strong_generators]

    @property
    def centralizers(self) -> list['PermutationGroup']:
        """The i-th element is the pointwise stabilizer of base[:i]."""
        return [PermutationGroup._from_chain(self.chain.tail(i), self.verbose) for i in range(len(self.chain))]

    @property
    def centralizer_orbits(self) -> list[dict[int, Permutation]]:
        """
        The i-th element describes the orbit of centralizers[i] on base[i] as a dict mapping each point q of the orbit
        to an element p of centralizers[i] with p(base[i]) == q.
        """
        return [dict(t) for t in self.chain.transversals]

    transversals = centralizer_orbits

    @cached_property
    def order(self) -> int:
        return self.chain.order

    def __len__(self) -> int:
        return self.order

    def __contains__(self, g: Permutation) -> bool:
        if not isinstance(g, Permutation):
            return False
        residue, _ = strip(g, self.chain.base, self.chain.transversals)
        return residue.is_identity()

    def __iter__(self) -> Iterator[Permutation]:
        """
        Runs once through the group. Every element factors uniquely as u[k-1] * ... * u[1] * u[0] with u[i] taken from
        transversals[i]; the deepest level varies fastest and the partial products are carried along.
        """
        transversals = [list(t.values()) for t in self.chain.transversals]

        def walk(level: int, partial: Permutation) -> Iterator[Permutation]:
            if level == len(transversals):
                yield partial
                return
            for u in transversals[level]:
                yield from walk(level + 1, u * partial)

        return walk(0, Permutation())

    def _elements_and_words(self):
        if self._elements is None:
            self._elements, self._words = elements_and_words(self.gens, self.verbose)

    @property
    def elements(self) -> list[Permutation]:
        """The sorted list of the elements of the group."""
        self._elements_and_words()
        return list(self._elements)

    @property
    def words(self) -> list[tuple[int, ...]]:
        """Short words in the generators (as 0-based indices into gens), in the same order as elements."""
        self._elements_and_words()
        return list(self._words)

    def element_tensor(self, dtype=torch.int64, device=torch.device('cpu')) -> torch.Tensor:
        """The sorted elements as an (order, degree) tensor whose rows are the images of 1...degree."""
        rows = sorted(g.images(self.degree) for g in self)
        return torch.tensor(rows, dtype=dtype, device=device).reshape(self.order, self.degree)


def symmetric_group(n: int) -> PermutationGroup:
    """ The symmetric group of degree n, generated by the adjacent transpositions """
    return PermutationGroup([Permutation.transposition(i, i + 1) for i in range(1, n)])


def alternating_group(n: int) -> PermutationGroup:
    """ The alternating group of degree n, generated by the 3-cycles (1,2,k) """
    return PermutationGroup([Permutation.from_cycles((1, 2, k)) for k in range(3, n + 1)])


def cyclic_group(n: int) -> PermutationGroup:
    """ The cyclic group of order n acting regularly on 1...n """
    if n < 2:
        return PermutationGroup()
    return PermutationGroup([Permutation.from_cycles(tuple(range(1, n + 1)))])
