from hypothesis import given, strategies as st
import numpy as np
import pytest

from permgroups.orbits import orbit, orbit_and_representative, schreier_vector, trace_schreier_vector
from permgroups.permutations import Permutation


@st.composite
def generators_strategy(draw, max_n=7, max_gens=3):
    n = draw(st.integers(min_value=1, max_value=max_n))
    num_gens = draw(st.integers(min_value=0, max_value=max_gens))
    gens = [Permutation(draw(st.permutations(range(1, n + 1)))) for _ in range(num_gens)]
    point = draw(st.integers(min_value=1, max_value=n + 1))
    return gens, point


S3 = [Permutation.from_cycles((1, 2)), Permutation.from_cycles((2, 3))]


def test_orbit_s3():
    assert orbit(S3, 1) == {1, 2, 3}
    assert orbit(S3, 4) == {4}


def test_orbit_two_blocks():
    gens = [Permutation.from_cycles((1, 2)), Permutation.from_cycles((3, 4, 5))]
    assert orbit(gens, 2) == {1, 2}
    assert orbit(gens, 5) == {3, 4, 5}


def test_orbit_and_representative_s3():
    reps = orbit_and_representative(S3, 1)
    assert list(reps) == [1, 2, 3]
    assert reps[1].is_identity()
    assert reps[2] == Permutation.from_cycles((1, 2))
    assert reps[3] == Permutation.from_cycles((1, 3, 2))


def test_orbit_and_representative_outside_domain():
    reps = orbit_and_representative(S3, 7)
    assert reps == {7: Permutation()}


def test_schreier_vector_s3():
    vector = schreier_vector(S3, 1, 3)
    assert vector.tolist() == [-1, 1, 2]
    assert trace_schreier_vector(vector, S3, 3) == Permutation.from_cycles((1, 3, 2))


def test_schreier_vector_marks_points_outside_orbit():
    gens = [Permutation.from_cycles((1, 2)), Permutation.from_cycles((3, 4))]
    vector = schreier_vector(gens, 3, 2)
    assert vector.tolist() == [0, 0, -1, 2]
    with pytest.raises(ValueError):
        trace_schreier_vector(vector, gens, 1)


# Property: the orbit contains the point and is closed under the generators
@given(generators_strategy())
def test_orbit_closure(gens_and_point):
    gens, point = gens_and_point
    points = orbit(gens, point)
    assert point in points
    for q in points:
        for s in gens:
            assert s(q) in points


# Property: representatives carry the point to their key
@given(generators_strategy())
def test_representatives_map_point(gens_and_point):
    gens, point = gens_and_point
    reps = orbit_and_representative(gens, point)
    assert set(reps) == orbit(gens, point)
    assert reps[point].is_identity()
    for q, rep in reps.items():
        assert rep(point) == q


# Property: tracing a Schreier vector gives a representative for every orbit point
@given(generators_strategy())
def test_schreier_vector_traces(gens_and_point):
    gens, point = gens_and_point
    vector = schreier_vector(gens, point, 0)
    points = orbit(gens, point)
    assert set((np.nonzero(vector)[0] + 1).tolist()) == points
    for q in points:
        assert trace_schreier_vector(vector, gens, q)(point) == q
