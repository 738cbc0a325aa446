"""Shared result types for bounds under an imperfect reference."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


class InfeasiblePrevalenceWarning(RuntimeWarning):
    """Implied disease prevalence falls outside (0, 1).

    Issued when the reference accuracy and the observed concordance table
    are incompatible.  The bounds are then reported as NaN.  Bootstrap
    drivers may silence it with ``warnings.simplefilter("ignore",
    InfeasiblePrevalenceWarning)``.
    """


@dataclass(frozen=True)
class BoundsResult:
    """Bounds on the true accuracy of a test T judged against a reference R.

    The eight bounds are either all finite-or-NaN (feasible prevalence) or
    all NaN (infeasible prevalence).  Within a feasible result a single
    PPV/NPV bound may still be NaN when its sensitivity/specificity pair
    touches 0 or 1.

    Attributes
    ----------
    min_sensitivity, max_sensitivity : float
        Bounds on the true sensitivity of T.
    min_specificity, max_specificity : float
        Bounds on the true specificity of T.
    min_ppv, max_ppv : float
        PPV implied by the (min, min) and (max, max) sensitivity/specificity
        pairs.
    min_npv, max_npv : float
        NPV implied by the same pairs.
    prevalence : float
        Disease prevalence theta implied by the table and the reference
        accuracy.  May lie outside (0, 1), or be non-finite.
    alpha_r, beta_r : float
        Sensitivity and specificity of the reference method.
    """

    min_sensitivity: float
    max_sensitivity: float
    min_specificity: float
    max_specificity: float
    min_ppv: float
    max_ppv: float
    min_npv: float
    max_npv: float
    prevalence: float  # theta
    alpha_r: float
    beta_r: float

    @property
    def feasible(self) -> bool:
        """Whether the implied prevalence lies in the open interval (0, 1)."""
        return bool(0 < self.prevalence < 1)

    def as_array(self) -> NDArray[np.floating]:
        """The eight bounds as a float array, in field order."""
        return np.array([
            self.min_sensitivity,
            self.max_sensitivity,
            self.min_specificity,
            self.max_specificity,
            self.min_ppv,
            self.max_ppv,
            self.min_npv,
            self.max_npv,
        ], dtype=np.float64)

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            "Bounds under an Imperfect Reference",
            "=" * 40,
            f"Reference sens : {self.alpha_r:.4f}",
            f"Reference spec : {self.beta_r:.4f}",
            f"Prevalence     : {self.prevalence:.4f}",
        ]
        if not self.feasible:
            lines.append("")
            lines.append("NOTE: prevalence is not in (0,1); bounds unavailable")
            return "\n".join(lines)
        lines += [
            f"Sensitivity    : [{_fmt(self.min_sensitivity)}, {_fmt(self.max_sensitivity)}]",
            f"Specificity    : [{_fmt(self.min_specificity)}, {_fmt(self.max_specificity)}]",
            f"PPV            : [{_fmt(self.min_ppv)}, {_fmt(self.max_ppv)}]",
            f"NPV            : [{_fmt(self.min_npv)}, {_fmt(self.max_npv)}]",
        ]
        return "\n".join(lines)


def _fmt(x: float) -> str:
    return "NA" if math.isnan(x) else f"{x:.4f}"
