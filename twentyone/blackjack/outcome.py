"""
Outcome resolution: compares the player's hand with the dealer's.
"""

from typing import Sequence

from twentyone.blackjack.constants import BLACKJACK
from twentyone.blackjack.scoring import has_blackjack, score
from twentyone.blackjack.state import GameResult, GameState
from twentyone.common.card import Card


def resolve_hands(
    player_hand: Sequence[Card], dealer_hand: Sequence[Card]
) -> GameResult:
    """
    Decide the result of a player hand against a dealer hand.

    Rules are checked in order and the first that applies wins: a player bust
    loses, a dealer bust loses, two blackjacks draw, a lone blackjack or the
    higher score wins, and equal scores draw.
    """
    player_score = score(player_hand)
    dealer_score = score(dealer_hand)
    player_blackjack = has_blackjack(player_hand)
    dealer_blackjack = has_blackjack(dealer_hand)

    if player_score > BLACKJACK:
        return GameResult.DEALER_WIN
    if dealer_score > BLACKJACK:
        return GameResult.PLAYER_WIN
    if player_blackjack and dealer_blackjack:
        return GameResult.DRAW
    if (player_blackjack and not dealer_blackjack) or player_score > dealer_score:
        return GameResult.PLAYER_WIN
    if (dealer_blackjack and not player_blackjack) or dealer_score > player_score:
        return GameResult.DEALER_WIN
    if player_score == dealer_score:
        return GameResult.DRAW
    return GameResult.NO_RESULT


def resolve(state: GameState) -> GameResult:
    """Resolve the result of a game state. Has no side effects."""
    return resolve_hands(state.player_hand, state.dealer_hand)
