"""Bounds on true sensitivity, specificity, PPV and NPV of a test.

When a new test T is validated against an imperfect reference R of known
sensitivity ``alpha_r`` and specificity ``beta_r``, the T-vs-R concordance
table does not identify the true accuracy of T.  It does identify the
disease prevalence, and Fréchet bounds on the joint T/R outcome
probabilities then bound the true sensitivity and specificity of T.  PPV
and NPV bounds follow by substituting the (min, min) and (max, max)
sensitivity/specificity pairs into Bayes' theorem.

Reference: Emerson S.C., Waikar S.S., Fuentes C., Bonventre J.V.,
Betensky R.A. (2017). Biomarker validation with an imperfect reference:
Issues and bounds. Statistical Methods in Medical Research 27(10),
2933-2945.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from emersonbounds.diagnostic._common import BoundsResult, InfeasiblePrevalenceWarning
from emersonbounds.diagnostic._predictive import npv, ppv


# ---------------------------------------------------------------------------
# Tabulation
# ---------------------------------------------------------------------------

def concordance_table(
    test: ArrayLike,
    reference: ArrayLike,
) -> NDArray[np.floating]:
    """Cross-tabulate paired binary outcomes of T and R.

    Parameters
    ----------
    test : array of int
        Outcomes of the tested method T (0/1).
    reference : array of int
        Outcomes of the reference method R (0/1).

    Returns
    -------
    array, shape (2, 2)
        ``[[n11, n10], [n01, n00]]``: rows are T = 1, 0 and columns are
        R = 1, 0.  Both levels are always present, so a sample lacking
        one outcome gives a zero row or column.
    """
    test = np.asarray(test).astype(np.intp)
    reference = np.asarray(reference).astype(np.intp)

    if test.ndim != 1 or reference.ndim != 1:
        raise ValueError("test and reference must be 1-D")
    if len(test) != len(reference):
        raise ValueError("test and reference must have equal length")

    t_pos = test == 1
    r_pos = reference == 1

    n11 = np.sum(t_pos & r_pos)
    n10 = np.sum(t_pos & ~r_pos)
    n01 = np.sum(~t_pos & r_pos)
    n00 = np.sum(~t_pos & ~r_pos)

    return np.array([[n11, n10], [n01, n00]], dtype=np.float64)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def emerson_bounds(
    table: ArrayLike,
    alpha_r: float,
    beta_r: float,
) -> BoundsResult:
    """Bound the true accuracy of T given its concordance with R.

    Parameters
    ----------
    table : array, shape (2, 2)
        Concordance table of T (rows) versus R (columns), both ordered
        ``(1, 0)``::

            T \\ R    1     0
              1     n11   n10
              0     n01   n00

        A table written column-major, as in R's ``c(7, 1, 2, 29)``, is
        ``np.array([7, 1, 2, 29]).reshape(2, 2, order="F")``.
    alpha_r : float
        Sensitivity of R with respect to the gold standard.
    beta_r : float
        Specificity of R with respect to the gold standard.

    Returns
    -------
    BoundsResult
        If the implied prevalence is not in (0, 1) an
        :class:`InfeasiblePrevalenceWarning` is issued and all eight bounds
        are NaN.

    Notes
    -----
    Degenerate tables (an empty column, ``alpha_r + beta_r == 1``) are not
    rejected; the resulting inf/NaN intermediates end in the infeasible
    branch or in NaN bounds.
    """
    n = np.asarray(table, dtype=np.float64)
    if n.shape != (2, 2):
        raise ValueError(f"table must have shape (2, 2), got {n.shape}")

    n11, n10 = n[0, 0], n[0, 1]
    n01, n00 = n[1, 0], n[1, 1]

    r_pos = n11 + n01
    r_neg = n10 + n00
    total = r_pos + r_neg

    with np.errstate(divide="ignore", invalid="ignore"):
        # Apparent accuracy of T against R
        a_t = n11 / r_pos
        b_t = n00 / r_neg
        pi_r = r_pos / total

        # Prevalence implied by R's accuracy
        theta = (pi_r + beta_r - 1) / (alpha_r + beta_r - 1)

        # P(D = 1 | R = 1) and P(D = 0 | R = 0)
        psi_r = alpha_r * theta / pi_r
        eta_r = beta_r * (1 - theta) / (1 - pi_r)

        # Fréchet bounds on the joint positive / negative agreement
        min_tau_p = np.maximum(0.0, psi_r + a_t - 1)
        max_tau_p = np.minimum(psi_r, a_t)
        min_tau_n = np.maximum(0.0, eta_r + b_t - 1)
        max_tau_n = np.minimum(eta_r, b_t)

        if not 0 < theta < 1:
            warnings.warn(
                f"Prevalence is not in (0,1): theta = {float(theta):.6g}; "
                "bounds are not available",
                InfeasiblePrevalenceWarning,
                stacklevel=2,
            )
            nan = float("nan")
            return BoundsResult(
                min_sensitivity=nan,
                max_sensitivity=nan,
                min_specificity=nan,
                max_specificity=nan,
                min_ppv=nan,
                max_ppv=nan,
                min_npv=nan,
                max_npv=nan,
                prevalence=float(theta),
                alpha_r=float(alpha_r),
                beta_r=float(beta_r),
            )

        min_sens = (min_tau_p * pi_r + (1 - eta_r - b_t + min_tau_n) * (1 - pi_r)) / theta
        max_sens = (max_tau_p * pi_r + (1 - eta_r - b_t + max_tau_n) * (1 - pi_r)) / theta
        min_spec = ((1 - psi_r - a_t + min_tau_p) * pi_r + min_tau_n * (1 - pi_r)) / (1 - theta)
        max_spec = ((1 - psi_r - a_t + max_tau_p) * pi_r + max_tau_n * (1 - pi_r)) / (1 - theta)

    min_sens = float(min_sens)
    max_sens = float(max_sens)
    min_spec = float(min_spec)
    max_spec = float(max_spec)
    theta = float(theta)

    return BoundsResult(
        min_sensitivity=min_sens,
        max_sensitivity=max_sens,
        min_specificity=min_spec,
        max_specificity=max_spec,
        min_ppv=ppv(min_sens, min_spec, theta),
        max_ppv=ppv(max_sens, max_spec, theta),
        min_npv=npv(min_sens, min_spec, theta),
        max_npv=npv(max_sens, max_spec, theta),
        prevalence=theta,
        alpha_r=float(alpha_r),
        beta_r=float(beta_r),
    )
