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

from functools import total_ordering
import math
from itertools import permutations
from typing import Iterable, Optional

from .utils import cycles_to_one_line


@total_ordering
class Permutation:
    """
    A bijection of the positive integers that moves only finitely many points.

    The permutation is stored in one-line notation: `sigma[i - 1]` is the image of the point i. Trailing fixed
    points are dropped, so `n` is always the largest moved point and two permutations compare equal exactly
    when they induce the same map.

    Products are read left to right: `(a * b)(i) == b(a(i))`.
    """

    def __init__(self, sigma: Iterable[int] = ()):
        sigma = tuple(sigma)
        if sorted(sigma) != list(range(1, len(sigma) + 1)):
            raise ValueError(f'{sigma} is not a permutation of 1...{len(sigma)}')
        n = len(sigma)
        while n > 0 and sigma[n - 1] == n:
            n -= 1
        self.sigma = sigma[:n]
        self.n = n
        self._cycle_rep = None
        self._inverse = None

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_cycles(cls, *cycles: tuple[int, ...]):
        return cls(cycles_to_one_line(cycles))

    @classmethod
    def transposition(cls, i: int, j: int):
        if i == j or min(i, j) < 1:
            raise ValueError(f'({i},{j}) is not a transposition of positive integers')
        return cls.from_cycles((i, j))

    @classmethod
    def full_group(cls, n: int):
        return sorted([
            cls(seq) for seq in permutations(range(1, n + 1))
        ])

    def is_identity(self) -> bool:
        return self.n == 0

    def smallest_moved_point(self) -> Optional[int]:
        for i, val in enumerate(self.sigma, start=1):
            if val != i:
                return i
        return None

    def largest_moved_point(self) -> int:
        return self.n

    def images(self, degree: int) -> tuple[int, ...]:
        """The images of the points 1...degree, padded with fixed points."""
        if degree < self.n:
            raise ValueError(f'Permutation moves {self.n}, which lies beyond degree {degree}')
        return self.sigma + tuple(range(self.n + 1, degree + 1))

    def __call__(self, point: int) -> int:
        if point < 1:
            raise ValueError(f'Permutations act on positive integers, got {point}')
        if point > self.n:
            return point
        return self.sigma[point - 1]

    def __repr__(self):
        if self.is_identity():
            return '()'
        return ''.join('(' + ','.join(str(i) for i in cycle) + ')' for cycle in self.cycle_rep)

    def __hash__(self):
        return hash(self.sigma)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.sigma == other.sigma

    def __lt__(self, other) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        degree = max(self.n, other.n)
        return self.images(degree) < other.images(degree)

    def __mul__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        degree = max(self.n, other.n)
        sequence = other.images(degree)
        return Permutation([sequence[i - 1] for i in self.images(degree)])

    def __pow__(self, exponent: int):
        if not isinstance(exponent, int):
            raise ValueError('Can only raise permutations to an integer power')
        perm = self if exponent >= 0 else self.inverse
        result = Permutation()
        for _ in range(abs(exponent) % self.order):
            result = result * perm
        return result

    def _calc_cycle_rep(self):
        seen = set()
        cycles = []
        for start in range(1, self.n + 1):
            if start in seen or self(start) == start:
                continue
            this_cycle = [start]
            curr = self(start)
            while curr != start:
                this_cycle.append(curr)
                curr = self(curr)
            seen.update(this_cycle)
            cycles.append(tuple(this_cycle))
        return cycles

    @property
    def cycle_rep(self) -> list[tuple[int, ...]]:
        if self._cycle_rep is None:
            self._cycle_rep = self._calc_cycle_rep()
        return self._cycle_rep

    @property
    def parity(self):
        even_cycles = [c for c in self.cycle_rep if (len(c) % 2 == 0)]
        return len(even_cycles) % 2

    @property
    def inverse(self):
        if self._inverse is None:
            inv = [-1] * self.n
            for i, val in enumerate(self.sigma, start=1):
                inv[val - 1] = i
            self._inverse = Permutation(inv)
        return self._inverse

    @property
    def order(self):
        return math.lcm(*[len(c) for c in self.cycle_rep])
