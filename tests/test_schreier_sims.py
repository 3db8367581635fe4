from hypothesis import given, settings, strategies as st
import math
import pytest

from permgroups.orbits import orbit_and_representative
from permgroups.permutations import Permutation
from permgroups.schreier_sims import schreier_sims, strip


@st.composite
def generators_strategy(draw, max_n=6, max_gens=3):
    n = draw(st.integers(min_value=1, max_value=max_n))
    num_gens = draw(st.integers(min_value=0, max_value=max_gens))
    return [Permutation(draw(st.permutations(range(1, n + 1)))) for _ in range(num_gens)]


def closure(gens):
    """Brute-force enumeration of the group generated by gens."""
    elements = {Permutation()}
    new = set(elements)
    while new:
        new = {g * s for g in new for s in gens} - elements
        elements |= new
    return elements


S3 = [Permutation.from_cycles((1, 2)), Permutation.from_cycles((2, 3))]


def test_schreier_sims_s3():
    chain = schreier_sims(S3)
    assert chain.base == (1, 2)
    assert len(chain) == 2
    assert chain.order == 6
    assert set(chain.transversals[0]) == {1, 2, 3}
    assert set(chain.transversals[1]) == {2, 3}


def test_schreier_sims_trivial():
    chain = schreier_sims([])
    assert chain.base == ()
    assert chain.order == 1
    chain = schreier_sims([Permutation()])
    assert chain.base == ()


def test_schreier_sims_extends_base():
    # the generators are absorbed by the first level, the stabilizer only appears through Schreier generators
    gens = [Permutation.from_cycles((1, 2, 3, 4)), Permutation.from_cycles((1, 2))]
    chain = schreier_sims(gens)
    assert len(chain.base) == 3
    assert chain.order == 24


@pytest.mark.parametrize("gens, expected_order", [
    ([Permutation.from_cycles((1, 2, 3, 4, 5))], 5),
    ([Permutation.from_cycles((1, 2, 3, 4, 5)), Permutation.from_cycles((2, 5), (3, 4))], 10),
    ([Permutation.from_cycles((1, 2, 3)), Permutation.from_cycles((2, 3, 4))], 12),
    ([Permutation.from_cycles((1, 2)), Permutation.from_cycles((3, 4))], 4),
    ([Permutation.from_cycles(tuple(range(1, 9))), Permutation.from_cycles((1, 2))], 40320),
])
def test_schreier_sims_order(gens, expected_order):
    assert schreier_sims(gens).order == expected_order


def test_strip_s3():
    chain = schreier_sims(S3)
    residue, level = strip(Permutation.from_cycles((1, 3)), chain.base, chain.transversals)
    assert residue.is_identity()
    assert level == 2
    residue, level = strip(Permutation.from_cycles((1, 2, 4)), chain.base, chain.transversals)
    assert not residue.is_identity()
    assert level == 1


def test_tail_is_stabilizer_chain():
    chain = schreier_sims([Permutation.from_cycles((1, 2)), Permutation.from_cycles((1, 2, 3, 4))])
    tail = chain.tail(1)
    assert tail.base == chain.base[1:]
    assert tail.order * len(chain.transversals[0]) == chain.order


# Property: the order agrees with brute-force closure
@settings(max_examples=50)
@given(generators_strategy())
def test_order_matches_closure(gens):
    chain = schreier_sims(gens)
    assert chain.order == len(closure(gens))


# Property: only the identity fixes every base point
@settings(max_examples=50)
@given(generators_strategy())
def test_base_is_a_base(gens):
    chain = schreier_sims(gens)
    for g in closure(gens):
        if all(g(b) == b for b in chain.base):
            assert g.is_identity()


# Property: each level is the orbit of its base point under its strong generators, which fix the earlier base points
@settings(max_examples=50)
@given(generators_strategy())
def test_levels_are_consistent(gens):
    chain = schreier_sims(gens)
    for i, (point, strong, transversal) in enumerate(zip(chain.base, chain.strong_generators, chain.transversals)):
        assert orbit_and_representative(strong, point) == transversal
        for s in strong:
            assert all(s(b) == b for b in chain.base[:i])
        for q, u in transversal.items():
            assert u(point) == q


# Property: the order is the product of the transversal sizes and divides n!
@settings(max_examples=50)
@given(generators_strategy())
def test_order_is_product_of_transversals(gens):
    chain = schreier_sims(gens)
    assert chain.order == math.prod(len(t) for t in chain.transversals)
    degree = max((g.largest_moved_point() for g in gens), default=0)
    assert math.factorial(degree) % chain.order == 0
