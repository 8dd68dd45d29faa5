"""Pot odds and implied odds."""

IMPLIED_ODDS_FACTOR = 0.1


def pot_odds(pot: float, call_amount: float) -> float:
    """
    Ratio of the pot to the amount to call.

    Returns 0 when there is nothing to call or nothing in the pot.
    """
    if call_amount == 0 or pot == 0:
        return 0.0
    return round(pot / call_amount, 4)


def implied_odds(
    pot: float,
    call_amount: float,
    outs: int,
    player_count: int,
    factor: float = IMPLIED_ODDS_FACTOR,
) -> float:
    """
    Pot odds including an estimate of future bets.

    Future contributions are estimated as outs * player_count * factor,
    a fixed heuristic rather than anything derived from the betting.

    Args:
        pot: Current pot size
        call_amount: Amount hero must call
        outs: Hero's outs
        player_count: Players in the hand
        factor: Scaling for the future-bet estimate

    Returns:
        (pot + estimated future bets) / call, or 0 with no call or no outs
    """
    if call_amount == 0 or outs == 0:
        return 0.0
    future_bets = outs * player_count * factor
    return round((pot + future_bets) / call_amount, 4)


def format_ratio(value: float) -> str:
    """Render an odds ratio as 'x:1' ('-' when there is nothing to call)."""
    if value == 0:
        return "-"
    return f"{value:g}:1"
