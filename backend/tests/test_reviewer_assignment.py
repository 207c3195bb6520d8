"""Test cases for random reviewer assignment."""

import random
from collections import Counter

import pytest

from classdesk.errors import ValidationBlockedError
from classdesk.toolkit import assign_reviewers


class TestAssignReviewers:
    """Test cases for assign_reviewers."""

    def test_two_students_review_each_other(self):
        pairs = assign_reviewers(["ana", "ben"], 1)
        assert sorted(pairs) == [("ana", "ben"), ("ben", "ana")]

    @pytest.mark.parametrize("seed", [0, 1, 7, 42])
    def test_assignment_is_balanced(self, seed):
        students = [f"s{i}" for i in range(6)]
        pairs = assign_reviewers(students, 3, rng=random.Random(seed))

        assert len(pairs) == 18
        assert len(set(pairs)) == 18
        assert all(reviewer != owner for reviewer, owner in pairs)
        assert set(Counter(owner for _, owner in pairs).values()) == {3}
        assert set(Counter(reviewer for reviewer, _ in pairs).values()) == {3}

    def test_reviews_per_submission_is_clamped(self):
        pairs = assign_reviewers(["a", "b", "c"], 5)
        assert len(pairs) == 6
        assert Counter(owner for _, owner in pairs) == {"a": 2, "b": 2, "c": 2}

    def test_fewer_than_two_students(self):
        assert assign_reviewers([], 2) == []
        assert assign_reviewers(["only"], 2) == []

    def test_duplicate_ids_are_collapsed(self):
        pairs = assign_reviewers(["a", "a", "b"], 1)
        assert sorted(pairs) == [("a", "b"), ("b", "a")]

    def test_zero_reviewers_is_rejected(self):
        with pytest.raises(ValidationBlockedError) as exc_info:
            assign_reviewers(["a", "b"], 0)
        assert exc_info.value.field == "reviews_per_submission"

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            assign_reviewers(["a", "b"], -1)

    def test_same_seed_same_pairing(self):
        students = [f"s{i}" for i in range(8)]
        first = assign_reviewers(students, 2, rng=random.Random(99))
        second = assign_reviewers(students, 2, rng=random.Random(99))
        assert first == second
