import numpy as np
from numpy.typing import ArrayLike, DTypeLike
from typing import Optional, Union
from shortlist.shortlist import Shortlist


def randomizer(specifier: Optional[Union[bool, int, np.random.Generator]]):
    """
    Outputs a numpy.random.Generator based on the input.
    :param specifier: An integer used as the seed, or a passed-through :class:`numpy.random.Generator` object or :attr:`False` to return :attr:`None`.
    """
    if isinstance(specifier, bool):
        return np.random.default_rng() if specifier else None
    elif isinstance(specifier, (int, np.integer)):
        return np.random.default_rng(specifier)
    elif isinstance(specifier, np.random.Generator):
        return specifier
    else:
        raise TypeError(
            f"Type {bool}, {int} (seed) or {np.random.Generator} required, but got {type(specifier)}."
        )


def largest(values: ArrayLike, k: int, dtype: DTypeLike = None) -> np.ndarray:
    """
    Returns the ``k`` largest entries of a one-dimensional array in ascending order. Fewer than ``k`` entries are returned if ``values`` is shorter than ``k``.

    .. testcode::

        from shortlist import largest

        print(largest([0, 3, 6, 5, 2, 1, 4, 6, 7], 4))

    .. testoutput::

        [5 6 6 7]

    :param values: A one-dimensional array-like object.
    :param k: The number of entries to keep.
    :param dtype: The dtype of the output. Defaults to the dtype of ``values``.
    """
    values = np.asarray(values)
    if values.ndim != 1:
        raise ValueError(f"Expected a one-dimensional array, but got shape {values.shape}.")
    sl = Shortlist(k)
    # Compare Python scalars, not numpy scalars.
    sl.extend(values.tolist())
    return np.array(sl.into_sorted_ascending(), dtype=values.dtype if dtype is None else dtype)
