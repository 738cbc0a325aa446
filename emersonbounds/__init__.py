"""
EmersonBounds: accuracy bounds for diagnostic tests validated against an
imperfect reference.

Closed-form bounds on the true sensitivity, specificity, PPV and NPV of a
test T when only its concordance with an imperfect reference R of known
accuracy is observed, plus a bootstrap statistic for interval estimates.

Usage:
    from emersonbounds import diagnostic, datasets
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from emersonbounds import diagnostic
from emersonbounds import datasets

__all__ = [
    "__version__",
    "diagnostic",
    "datasets",
]
