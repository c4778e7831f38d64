"""
Period naming helpers shared by the play-by-play text and scoring summary
headers.
"""


def ordinal(n: int) -> str:
    """
    Format an integer as an English ordinal.

    Example:
        >>> ordinal(1), ordinal(2), ordinal(11), ordinal(23)
        ('1st', '2nd', '11th', '23rd')
    """
    if 10 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def get_period_name(num_periods: int) -> str:
    """Name of a single period for a game split into num_periods"""
    if num_periods == 2:
        return "half"
    if num_periods == 4:
        return "quarter"
    return "period"
