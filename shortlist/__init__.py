"""
Keep the largest items of a stream in fixed memory.

.. testcode::

    from shortlist import Shortlist

    sl = Shortlist.from_batch(4, [0, 3, 6, 5, 2, 1, 4, 6, 7])
    print(len(sl), sl.capacity)
    print(sl.into_sorted_ascending())

.. testoutput::

    4 4
    [5, 6, 6, 7]

"""

from .shortlist import Shortlist, ConsumedShortlistError
from .numpy import largest

#
__all__ = ["Shortlist", "ConsumedShortlistError", "largest"]
