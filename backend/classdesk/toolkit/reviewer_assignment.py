"""Random, balanced reviewer assignment for peer review."""
import logging
import random
from typing import Iterable, Optional

from ..errors import ValidationBlockedError

logger = logging.getLogger(__name__)

MAX_REVIEWS_PER_SUBMISSION = 5


def assign_reviewers(
    student_ids: Iterable[str],
    reviews_per_submission: int,
    rng: Optional[random.Random] = None,
) -> list[tuple[str, str]]:
    """
    Pair students as (reviewer, submission owner).

    The roster is shuffled once, then every student reviews the next
    ``reviews_per_submission`` students after them in the shuffled circle.
    Each submission receives exactly that many reviewers and each student
    reviews exactly that many submissions. Nobody reviews their own work and
    no pair repeats.

    Args:
        student_ids: Students who submitted. Duplicates are collapsed.
        reviews_per_submission: Reviewers per submission. Values above
            N - 1 are clamped to N - 1.
        rng: Source of randomness; pass a seeded ``random.Random`` for
            reproducible pairings.

    Returns:
        A list of (reviewer_id, owner_id) pairs, empty when fewer than two
        distinct students submitted.

    Raises:
        ValidationBlockedError: If ``reviews_per_submission`` is below 1.
    """
    if reviews_per_submission < 1:
        raise ValidationBlockedError(
            "reviews_per_submission",
            "Each submission needs at least one reviewer",
        )

    roster = list(dict.fromkeys(student_ids))
    if len(roster) < 2:
        return []

    per_submission = min(reviews_per_submission, len(roster) - 1)
    (rng or random.Random()).shuffle(roster)

    pairs = []
    for offset in range(1, per_submission + 1):
        for position, owner_id in enumerate(roster):
            reviewer_id = roster[(position + offset) % len(roster)]
            pairs.append((reviewer_id, owner_id))

    logger.debug(f"Assigned {len(pairs)} reviews across {len(roster)} students")
    return pairs
