"""
Runtime configuration for sphcollection.

The only tunable is the floating width used when a caller passes plain
Python numbers. It is read from the ``SPHCOLLECTION_DEFAULT_DTYPE``
environment variable every time it is needed, so it can be changed
between calls (for example from a test via ``monkeypatch.setenv``).
"""

import os
import warnings

import numpy as np

ENV_DEFAULT_DTYPE = "SPHCOLLECTION_DEFAULT_DTYPE"

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

_DTYPE_ALIASES = {
    "float32": np.dtype(np.float32),
    "single": np.dtype(np.float32),
    "f4": np.dtype(np.float32),
    "float64": np.dtype(np.float64),
    "double": np.dtype(np.float64),
    "f8": np.dtype(np.float64),
}


def default_dtype() -> np.dtype:
    """
    Return the floating width used for width-neutral input.

    Returns
    -------
    numpy.dtype
        ``float64`` unless ``SPHCOLLECTION_DEFAULT_DTYPE`` selects
        ``float32``.

    Notes
    -----
    Unrecognised values fall back to ``float64`` with a RuntimeWarning.
    """
    raw = os.environ.get(ENV_DEFAULT_DTYPE, "float64").strip().lower()
    if not raw:
        return np.dtype(np.float64)

    dtype = _DTYPE_ALIASES.get(raw)
    if dtype is None:
        warnings.warn(
            f"Unrecognised {ENV_DEFAULT_DTYPE}={raw!r}; "
            f"expected one of {sorted(_DTYPE_ALIASES)}. Using float64.",
            RuntimeWarning,
        )
        return np.dtype(np.float64)
    return dtype
