"""Bootstrap statistic for the imperfect-reference bounds.

:func:`bounds_boot` has the ``statistic(data, indices, ...)`` signature
expected by index-based bootstrap drivers (R's ``boot::boot`` and its
Python ports): the driver owns the resampling scheme and the replicate
loop, this function only tabulates one resample and computes its bounds.

Some resamples may imply a prevalence outside (0, 1); they return an
all-NaN result and issue :class:`InfeasiblePrevalenceWarning`.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from emersonbounds.diagnostic._bounds import concordance_table, emerson_bounds
from emersonbounds.diagnostic._common import BoundsResult


def bounds_boot(
    data: ArrayLike,
    indices: ArrayLike,
    abR: Sequence[float],
) -> BoundsResult:
    """Bounds for one bootstrap resample.

    Parameters
    ----------
    data : array, shape (n, 2)
        Paired outcomes; column 0 is the tested method T, column 1 the
        reference R.  Values must be 0/1 (ints, bools or ``"0"``/``"1"``).
    indices : array of int
        0-based row positions forming the resample; repeats allowed.
    abR : pair of float
        ``(alpha_r, beta_r)``, sensitivity and specificity of R.

    Returns
    -------
    BoundsResult
        Exactly what :func:`emerson_bounds` returns for the resample's
        concordance table.  Use ``.as_array()`` to stack replicates.
    """
    data = np.asarray(data).astype(np.intp)
    resample = data[np.asarray(indices, dtype=np.intp)]

    # Levels are fixed at {0, 1}, so the table stays 2x2 even if the
    # resample lacks one outcome.
    table = concordance_table(resample[:, 0], resample[:, 1])

    return emerson_bounds(table, alpha_r=abR[0], beta_r=abR[1])
