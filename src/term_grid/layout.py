"""
Size negotiation along a single axis.

A container hands its own extent to :func:`distribute` together with the
(minimum, maximum) requirement of every child and gets back one allocation per
child. Minimums are honoured first; whatever is left is dealt out one cell at a
time, round-robin, to the children that can still grow.
"""

import sys
from typing import Iterable, List, NamedTuple


UNBOUNDED = sys.maxsize


class Requirement(NamedTuple):
    """A (minimum, maximum) size requirement along one axis.

    ``minimum <= maximum`` is assumed but not enforced; contradictory
    requirements get a best-effort allocation rather than an error.
    """
    minimum: int = 0
    maximum: int = 0


def distribute(total: int, requirements: Iterable[Requirement]) -> List[int]:
    """Split ``total`` cells among participants with (min, max) requirements.

    Args:
        total: Budget along the axis; negative values count as zero.
        requirements: One (minimum, maximum) pair per participant, in order.

    Returns:
        One allocation per participant. Every allocation is at least the
        participant's minimum, even when the minimums exceed ``total``.
        Budget left once every participant is at its maximum stays unused.
    """
    requirements = [Requirement(*req) for req in requirements]
    sizes = [req.minimum for req in requirements]
    remaining = max(0, total) - sum(sizes)

    growing = [i for i, req in enumerate(requirements) if sizes[i] < req.maximum]
    while remaining > 0 and growing:
        still_growing = []
        for i in growing:
            if remaining == 0:
                break
            sizes[i] += 1
            remaining -= 1
            if sizes[i] < requirements[i].maximum:
                still_growing.append(i)
        growing = still_growing

    return sizes
