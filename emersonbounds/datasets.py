"""
Example dataset for the imperfect-reference bounds.

bbb: toy data of 86 subjects, each judged by a test method T and by an
imperfect reference method R.  0 means the disease was not detected,
1 that it was.

    column 0 : T, finding by the method being tested
    column 1 : R, finding by the imperfect reference method

Concordance (T rows, R columns, both ordered 1, 0):

    T \\ R    1    0
      1     20    4
      0      3   59
"""

import numpy as np

bbb = np.array([
    [0, 0], [0, 0], [0, 1], [0, 1], [1, 1], [0, 0],
    [0, 0], [0, 0], [0, 0], [1, 1], [0, 0], [0, 0],
    [0, 0], [0, 0], [0, 0], [1, 0], [0, 0], [0, 0],
    [1, 1], [0, 0], [1, 1], [0, 0], [1, 1], [0, 0],
    [0, 0], [1, 1], [1, 1], [0, 0], [0, 0], [0, 0],
    [0, 0], [0, 0], [0, 0], [0, 0], [1, 1], [1, 1],
    [0, 0], [0, 0], [0, 1], [0, 0], [1, 1], [1, 1],
    [1, 1], [0, 0], [0, 0], [0, 0], [0, 0], [0, 0],
    [0, 0], [0, 0], [1, 1], [0, 0], [0, 0], [0, 0],
    [0, 0], [0, 0], [0, 0], [1, 1], [1, 1], [0, 0],
    [0, 0], [1, 1], [1, 1], [0, 0], [0, 0], [1, 1],
    [0, 0], [0, 0], [1, 0], [0, 0], [0, 0], [1, 0],
    [0, 0], [1, 0], [0, 0], [1, 1], [0, 0], [0, 0],
    [0, 0], [0, 0], [0, 0], [0, 0], [1, 1], [0, 0],
    [0, 0], [0, 0],
], dtype=np.intp)

bbb_columns = ("T", "R")
