from collections.abc import Iterable

from byteranges.interval import Interval


def merge(intervals: Iterable[Interval]) -> list[Interval]:
    """Coalesce intervals into a sorted list of disjoint spans.

    Intervals that overlap or share an endpoint are merged into one span
    covering both. The input is never modified; the result is a new list
    sorted by (start, stop), and merging it again returns it unchanged.

    Algorithm: sort by start (stop breaks ties), then sweep left to right
    with an accumulator. Because every later interval starts at or after the
    accumulator, a merge only ever has to extend the accumulator's stop.

    Example:
        >>> merge([Interval(start=50, stop=99), Interval(start=0, stop=60)])
        [Interval(start=0, stop=99)]
    """
    ordered = sorted(intervals, key=lambda ivl: (ivl.start, ivl.stop))
    if len(ordered) < 2:
        return ordered

    result: list[Interval] = []
    current = ordered[0]
    for interval in ordered[1:]:
        if current.overlaps(interval):
            current = current.merge(interval)
        else:
            result.append(current)
            current = interval
    result.append(current)
    return result
