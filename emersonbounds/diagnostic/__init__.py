"""
Diagnostic accuracy against an imperfect reference.

Bounds on the true sensitivity, specificity, PPV and NPV of a test that
was validated against a reference method of known, imperfect accuracy
(Emerson et al., 2017), and a statistic for index-based bootstrap drivers
to obtain confidence intervals for those bounds.

Validates against: R package EmersonBounds (bounds, boundsboot).
"""

from emersonbounds.diagnostic._common import BoundsResult, InfeasiblePrevalenceWarning
from emersonbounds.diagnostic._predictive import ppv, npv
from emersonbounds.diagnostic._bounds import concordance_table, emerson_bounds
from emersonbounds.diagnostic._boot import bounds_boot

__all__ = [
    "BoundsResult",
    "InfeasiblePrevalenceWarning",
    "ppv",
    "npv",
    "concordance_table",
    "emerson_bounds",
    "bounds_boot",
]
