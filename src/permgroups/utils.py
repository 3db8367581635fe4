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

from functools import lru_cache
from itertools import pairwise, permutations
from typing import Iterable
import torch


def cycles_to_one_line(cycles: Iterable[tuple[int, ...]]) -> tuple[int, ...]:
    """
    Given a permutation in cycle representation where (i, j, k) means that i -> j, j -> k, and k -> i, this returns the permutation in one-line notation.
    Args:
        cycles (Iterable[tuple[int]]): disjoint cycles of positive integers, fixed points may be omitted
    Returns:
        tuple[int] the images of 1...n where n is the largest point appearing in any cycle
    """
    cycles = [tuple(c) for c in cycles]
    n = max((max(c) for c in cycles if c), default=0)
    sigma = list(range(1, n + 1))
    seen = set()
    for cycle in cycles:
        if min(cycle, default=1) < 1:
            raise ValueError(f'Cycle {cycle} contains a point that is not a positive integer')
        if seen.intersection(cycle) or len(set(cycle)) != len(cycle):
            raise ValueError(f'Cycles {cycles} are not disjoint')
        seen.update(cycle)
        for val1, val2 in pairwise(cycle):
            sigma[val1 - 1] = val2
        if cycle:
            sigma[cycle[-1] - 1] = cycle[0]
    return tuple(sigma)


@lru_cache(maxsize=20)
def generate_all_permutations(n: int) -> torch.Tensor:
    """
    All permutations of 1...n in lexicographic order, one per row, as an (n!, n) integer tensor.
    """
    return torch.tensor(list(permutations(range(1, n + 1))), dtype=torch.int64)
