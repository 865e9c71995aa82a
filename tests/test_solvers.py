"""Tests for the distance solvers and their registry."""

import pytest

from wordmover.matrix import Matrix
from wordmover.solvers import (RelaxedTransportSolver, SinkhornSolver,
                               WeightedCostSolver, available_solvers,
                               describe_solvers, get_solver)


def make_matrix(size, cells):
    matrix = Matrix(size)
    for (i, j), value in cells.items():
        matrix[i, j] = value
    return matrix


@pytest.fixture(name="swap_problem")
def fixture_swap_problem():
    """Two words in each document with a free diagonal pairing."""
    bow1 = [0.5, 0.5, 0.0, 0.0]
    bow2 = [0.0, 0.0, 0.5, 0.5]
    matrix = make_matrix(4, {(0, 2): 0.0, (0, 3): 1.0, (1, 2): 1.0, (1, 3): 0.0})
    return bow1, bow2, matrix


class TestWeightedCostSolver:
    def test_expected_cost(self, swap_problem):
        assert WeightedCostSolver().solve(*swap_problem) == pytest.approx(0.5)

    def test_empty_mass(self):
        assert WeightedCostSolver().solve([0.0, 0.0], [0.0, 1.0], Matrix(2)) == 0.0


class TestRelaxedTransportSolver:
    def test_free_pairing(self, swap_problem):
        assert RelaxedTransportSolver().solve(*swap_problem) == pytest.approx(0.0)

    def test_takes_larger_direction(self):
        bow1 = [1.0, 0.0, 0.0]
        bow2 = [0.0, 0.5, 0.5]
        matrix = make_matrix(3, {(0, 1): 1.0, (0, 2): 3.0})

        assert RelaxedTransportSolver().solve(bow1, bow2, matrix) == pytest.approx(2.0)

    def test_empty_mass(self):
        assert RelaxedTransportSolver().solve([0.0], [1.0], Matrix(1)) == 0.0


class TestSinkhornSolver:
    def test_single_word_each_side_costs_the_cell(self):
        matrix = make_matrix(2, {(0, 1): 2.5})
        result = SinkhornSolver().solve([1.0, 0.0], [0.0, 1.0], matrix)
        assert result == pytest.approx(2.5)

    def test_close_to_exact_with_small_epsilon(self, swap_problem):
        result = SinkhornSolver(epsilon=0.01).solve(*swap_problem)
        assert result == pytest.approx(0.0, abs=1e-6)

    def test_partial_mass_is_renormalised(self):
        matrix = make_matrix(2, {(0, 1): 2.5})
        result = SinkhornSolver().solve([0.4, 0.0], [0.0, 0.2], matrix)
        assert result == pytest.approx(2.5)

    def test_between_relaxed_and_weighted(self):
        bow1 = [0.5, 0.5, 0.0, 0.0]
        bow2 = [0.0, 0.0, 0.5, 0.5]
        matrix = make_matrix(4, {(0, 2): 1.0, (0, 3): 2.0, (1, 2): 3.0, (1, 3): 1.0})

        sinkhorn = SinkhornSolver().solve(bow1, bow2, matrix)

        assert RelaxedTransportSolver().solve(bow1, bow2, matrix) <= sinkhorn + 1e-9
        assert sinkhorn <= WeightedCostSolver().solve(bow1, bow2, matrix) + 1e-9

    def test_zero_cost(self):
        result = SinkhornSolver().solve([0.5, 0.5], [0.5, 0.5], Matrix(2))
        assert result == 0.0

    def test_deterministic(self, swap_problem):
        solver = SinkhornSolver()
        assert solver.solve(*swap_problem) == solver.solve(*swap_problem)

    def test_empty_mass(self):
        assert SinkhornSolver().solve([0.0], [0.0], Matrix(1)) == 0.0


class TestSolverRegistry:
    def test_available(self):
        assert set(available_solvers()) == {"weighted", "relaxed", "sinkhorn"}

    def test_get_solver(self):
        assert isinstance(get_solver("sinkhorn"), SinkhornSolver)
        assert get_solver("relaxed").name == "relaxed"

    def test_unknown_solver(self):
        with pytest.raises(ValueError, match="Unknown distance solver"):
            get_solver("exact")

    def test_describe(self):
        descriptions = {item["key"]: item for item in describe_solvers()}
        assert descriptions["weighted"]["name"] == "weighted"
        assert descriptions["sinkhorn"]["description"]


class TestSinkhornEpsilon:
    def test_underflowing_epsilon_rejected(self):
        with pytest.raises(ValueError, match="Epsilon"):
            SinkhornSolver(epsilon=0.001)

    def test_non_positive_epsilon_rejected(self):
        with pytest.raises(ValueError, match="Epsilon"):
            SinkhornSolver(epsilon=0.0)
        with pytest.raises(ValueError, match="Epsilon"):
            SinkhornSolver(epsilon=-0.5)

    def test_small_valid_epsilon_keeps_cost(self):
        bow1 = [0.5, 0.5, 0.0, 0.0]
        bow2 = [0.0, 0.0, 0.5, 0.5]
        matrix = make_matrix(4, {(0, 2): 1.0, (0, 3): 1.0, (1, 2): 1.0, (1, 3): 1.0})

        assert SinkhornSolver(epsilon=0.002).solve(bow1, bow2, matrix) == pytest.approx(1.0)
