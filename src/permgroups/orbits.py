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

from typing import Sequence
import numpy as np

from .permutations import Permutation


def orbit(gens: Sequence[Permutation], point: int) -> set[int]:
    """
    The orbit of `point` under the group generated by `gens`, computed as a breadth-first closure.
    """
    result = set()
    new = {point}
    while new:
        result |= new
        new = {s(p) for p in new for s in gens} - result
    return result


def orbit_and_representative(gens: Sequence[Permutation], point: int) -> dict[int, Permutation]:
    """
    Maps every point q in the orbit of `point` to an element g of the group generated by `gens` with g(point) == q.

    Points are inserted in the order they are discovered and `point` itself maps to the identity.
    """
    new = [point]
    reps = {point: Permutation()}
    while new:
        old, new = new, []
        for s in gens:
            for i in old:
                e = s(i)
                if e not in reps:
                    reps[e] = reps[i] * s
                    new.append(e)
    return reps


def schreier_vector(gens: Sequence[Permutation], point: int, degree: int) -> np.ndarray:
    """
    Describes the orbit of `point` as a Schreier vector.

    Args:
        gens (Sequence[Permutation]): generators of the acting group
        point (int): the root of the orbit
        degree (int): number of points to describe, grown to cover `point` and every moved point
    Returns:
        np.ndarray v, where v[q - 1] is -1 at the root, 0 when q is outside of the orbit
        and otherwise the 1-based number of the generator that first reached q
    """
    if point < 1:
        raise ValueError(f'Permutations act on positive integers, got {point}')
    vector = np.zeros(max(degree, point, *(s.largest_moved_point() for s in gens)), dtype=np.int64)
    vector[point - 1] = -1
    new = [point]
    while new:
        old, new = new, []
        for p in old:
            for i, s in enumerate(gens, start=1):
                q = s(p)
                if vector[q - 1] == 0:
                    vector[q - 1] = i
                    new.append(q)
    return vector


def trace_schreier_vector(vector: np.ndarray, gens: Sequence[Permutation], point: int) -> Permutation:
    """
    Walks a Schreier vector back from `point` to the root and returns the element carrying the root to `point`.
    """
    if point > len(vector) or vector[point - 1] == 0:
        raise ValueError(f'Point {point} does not lie in the orbit described by the Schreier vector')
    rep = Permutation()
    while vector[point - 1] != -1:
        s = gens[vector[point - 1] - 1]
        rep = s * rep
        point = s.inverse(point)
    return rep
