"""Predictive values from sensitivity, specificity and prevalence.

Bayes' theorem with a guard: every input must lie strictly inside (0, 1),
otherwise the value is reported as NaN instead of being computed.
"""

from __future__ import annotations


def _in_open_unit(x: float) -> bool:
    # False for NaN
    return 0 < x < 1


def ppv(alpha: float, beta: float, theta: float) -> float:
    """Positive predictive value.

    Parameters
    ----------
    alpha : float
        Sensitivity.
    beta : float
        Specificity.
    theta : float
        Disease prevalence.

    Returns
    -------
    float
        ``alpha*theta / (alpha*theta + (1-beta)*(1-theta))``, or NaN if
        any of *alpha*, *beta*, *theta* is outside (0, 1).
    """
    if not (_in_open_unit(theta) and _in_open_unit(alpha) and _in_open_unit(beta)):
        return float("nan")
    return float(alpha * theta / (alpha * theta + (1 - beta) * (1 - theta)))


def npv(alpha: float, beta: float, theta: float) -> float:
    """Negative predictive value.

    Same arguments and guard as :func:`ppv`; returns
    ``beta*(1-theta) / ((1-alpha)*theta + beta*(1-theta))``.
    """
    if not (_in_open_unit(theta) and _in_open_unit(alpha) and _in_open_unit(beta)):
        return float("nan")
    return float(beta * (1 - theta) / ((1 - alpha) * theta + beta * (1 - theta)))
