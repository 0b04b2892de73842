"""
Statistical audit of the shuffle algorithms.

For a uniform shuffle every card is equally likely to end up in every
position. The audit shuffles an ordered deck many times, counts where the card
that started at position i finished, and tests those counts against the
uniform expectation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import random

import numpy as np
import scipy.stats as stats

from twentyone.common.deck import ShuffleMethod, new_deck, shuffle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShuffleAudit:
    """
    Result of auditing a shuffle method.

    Attributes:
        method: The shuffle method audited
        trials: Number of shuffles performed
        deck_size: Number of cards shuffled in each trial
        chi_square: Chi-square statistic over the position matrix
        p_value: Probability of a statistic at least this large under uniformity
        max_deviation: Largest relative deviation of a cell from its expected count
    """

    method: ShuffleMethod
    trials: int
    deck_size: int
    chi_square: float
    p_value: float
    max_deviation: float

    def is_uniform(self, significance: float = 0.01) -> bool:
        """Whether uniformity is not rejected at the given significance level."""
        return self.p_value >= significance

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        return {
            "method": self.method.value,
            "trials": self.trials,
            "deck_size": self.deck_size,
            "chi_square": self.chi_square,
            "p_value": self.p_value,
            "max_deviation": self.max_deviation,
        }


def position_frequencies(
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
    trials: int = 1000,
    rng: Optional[random.Random] = None,
    deck_size: int = 52,
) -> np.ndarray:
    """
    Count where each starting position lands after shuffling.

    Args:
        method: Shuffle method to audit
        trials: Number of shuffles to perform
        rng: Random source
        deck_size: Number of cards from the top of a new deck to shuffle

    Returns:
        A deck_size x deck_size matrix; cell (i, j) counts how often the card
        starting at position i finished at position j
    """
    if trials <= 0:
        raise ValueError("At least one trial is required")
    if not 1 <= deck_size <= 52:
        raise ValueError(f"Deck size must be between 1 and 52, got {deck_size}")

    cards = new_deck()[:deck_size]
    start_positions = {card: i for i, card in enumerate(cards)}
    counts = np.zeros((deck_size, deck_size), dtype=np.int64)

    for _ in range(trials):
        shuffled = shuffle(cards, rng=rng, method=method)
        for end, card in enumerate(shuffled):
            counts[start_positions[card], end] += 1

    return counts


def audit_shuffle(
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
    trials: int = 1000,
    rng: Optional[random.Random] = None,
    deck_size: int = 52,
) -> ShuffleAudit:
    """
    Test a shuffle method's position matrix against a uniform distribution.

    Args:
        method: Shuffle method to audit
        trials: Number of shuffles to perform
        rng: Random source
        deck_size: Number of cards to shuffle per trial

    Returns:
        ShuffleAudit with the test statistics
    """
    method = ShuffleMethod(method)
    counts = position_frequencies(method, trials, rng, deck_size)

    expected = trials / deck_size
    chi_square = float(((counts - expected) ** 2 / expected).sum())

    # Each row and column sums to the trial count, leaving (n-1)^2 free cells
    dof = max((deck_size - 1) ** 2, 1)
    p_value = float(stats.chi2.sf(chi_square, dof))
    max_deviation = float(np.max(np.abs(counts - expected)) / expected)

    audit = ShuffleAudit(
        method=method,
        trials=trials,
        deck_size=deck_size,
        chi_square=chi_square,
        p_value=p_value,
        max_deviation=max_deviation,
    )
    logger.info(
        "Shuffle audit %s: chi2=%.2f p=%.4f over %d trials",
        method.value,
        audit.chi_square,
        audit.p_value,
        trials,
    )
    return audit
