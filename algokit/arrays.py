"""Array problems: jumps, knapsack, platforms, stock spans, floods, buildings, rain water."""

from __future__ import annotations

import heapq
from collections import defaultdict
from functools import lru_cache
from itertools import accumulate
from typing import Dict, Iterable, List

__all__ = [
    "min_jumps",
    "knapsack",
    "min_platforms",
    "stock_spans",
    "avoid_flood",
    "furthest_building",
    "trapped_water",
]

_LAST_MINUTE = 2359


def min_jumps(nums: Iterable[int]) -> int:
    """Fewest jumps from the first position to the last, each at most the value jumped from.

    Raises ValueError for an empty sequence.
    """
    steps = list(nums)
    if not steps:
        raise ValueError("at least one position is needed")
    last = len(steps) - 1
    reach = previous = count = 0
    for index, step in enumerate(steps[:-1]):
        reach = max(reach, index + step)
        if reach >= last:
            return count + 1
        if index == previous:
            previous = reach
            count += 1
    return count


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Best total value of items whose weights fit in ``capacity`` (0/1 knapsack).

    Raises ValueError when weights and values differ in length.
    """
    item_weights = list(weights)
    item_values = list(values)
    if len(item_weights) != len(item_values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight = item_weights[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(item_values[count - 1] + best(count - 1, room - weight), without)

    return best(len(item_weights), capacity)


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Platforms needed so no train waits, with times given as 24-hour HHMM integers.

    A train occupies its platform through its departure minute. At least one
    platform is always reported. Raises ValueError for unequal lengths or
    times outside 0..2359.
    """
    arriving = list(arrivals)
    departing = list(departures)
    if len(arriving) != len(departing):
        raise ValueError("arrivals and departures must have the same length")
    changes = [0] * (_LAST_MINUTE + 2)
    for arrival, departure in zip(arriving, departing):
        for time in (arrival, departure):
            if not 0 <= time <= _LAST_MINUTE:
                raise ValueError(f"time out of range: {time}")
        changes[arrival] += 1
        changes[departure + 1] -= 1
    occupancy = list(accumulate(changes))
    return max(1, *occupancy[1:])


def stock_spans(prices: Iterable[int]) -> List[int]:
    """For each day, the run of consecutive days up to it whose price is not higher."""
    history = list(prices)
    spans: List[int] = []
    for index, price in enumerate(history):
        counter = 1
        while index - counter >= 0 and price >= history[index - counter]:
            counter += spans[index - counter]
        spans.append(counter)
    return spans


def avoid_flood(rains: Iterable[int]) -> List[int]:
    """Plan which lake to dry on each dry day so that no full lake gets rain again.

    ``rains[i]`` is the lake that fills on day ``i``, or 0 for a dry day. The
    plan holds -1 on rainy days and the lake to dry otherwise; an empty list
    means a flood cannot be avoided.
    """
    days = list(rains)
    upcoming: Dict[int, List[int]] = defaultdict(list)
    for day in reversed(range(len(days))):
        if days[day]:
            upcoming[days[day]].append(day)
    deadlines: List[int] = []
    plan: List[int] = []
    for day, lake in enumerate(days):
        if lake:
            pending = upcoming[lake]
            if len(pending) >= 2:
                pending.pop()
                heapq.heappush(deadlines, pending[-1])
            plan.append(-1)
        elif deadlines:
            next_rain = heapq.heappop(deadlines)
            if next_rain < day:
                return []
            plan.append(days[next_rain])
        else:
            plan.append(1)
    return [] if deadlines else plan


def furthest_building(heights: Iterable[int], bricks: int, ladders: int) -> int:
    """Furthest building index reachable, climbing with bricks or ladders.

    Ladders go to the tallest climbs seen so far. Raises ValueError for no buildings.
    """
    levels = list(heights)
    if not levels:
        raise ValueError("at least one building is needed")
    last = len(levels) - 1
    climbs: List[int] = []
    index = 0
    while len(climbs) < ladders and index < last:
        rise = levels[index + 1] - levels[index]
        if rise > 0:
            heapq.heappush(climbs, rise)
        index += 1
    for index in range(index, last):
        rise = levels[index + 1] - levels[index]
        if rise > 0:
            if climbs and climbs[0] < rise:
                bricks -= heapq.heapreplace(climbs, rise)
            else:
                bricks -= rise
        if bricks < 0:
            return index
    return last


def trapped_water(heights: Iterable[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    bars = list(heights)
    left, right = 0, len(bars) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if bars[left] <= bars[right]:
            if bars[left] >= left_max:
                left_max = bars[left]
            else:
                water += left_max - bars[left]
            left += 1
        else:
            if bars[right] >= right_max:
                right_max = bars[right]
            else:
                water += right_max - bars[right]
            right -= 1
    return water