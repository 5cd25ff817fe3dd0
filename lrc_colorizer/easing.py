"""
Easing curves for line-level transitions
"""


def ease_in_out_cubic(t: float) -> float:
    """
    Cubic ease-in-out over [0, 1].

    Args:
        t: Linear progress

    Returns:
        Eased progress, f(0) = 0, f(0.5) = 0.5, f(1) = 1
    """
    if t < 0.5:
        return 4 * t * t * t
    return 1 - pow(-2 * t + 2, 3) / 2
