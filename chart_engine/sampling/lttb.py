"""LTTB (Largest Triangle Three Buckets) downsampling algorithm."""

from typing import Any, List, Mapping, Sequence

from ..coercion import extract_xy


def lttb_indices(xs: Sequence[float], ys: Sequence[float], target: int) -> List[int]:
    """
    Select point indices using the LTTB algorithm.

    Preserves visual characteristics by selecting points that form
    the largest triangles, maintaining peaks, troughs, and trends.

    Args:
        xs: Numeric x values
        ys: Numeric y values, same length as xs
        target: Target number of points

    Returns:
        Increasing list of selected indices; every index when the series
        already fits or the target is below 3
    """
    n = len(xs)
    if n <= target or target < 3:
        return list(range(n))

    # Always include first and last points
    selected = [0]

    # Bucket size (excluding first and last points)
    bucket_size = (n - 2) / (target - 2)

    a = 0  # Index of the previously selected point

    for i in range(target - 2):
        # Calculate point average for next bucket
        avg_range_start = int((i + 1) * bucket_size) + 1
        avg_range_end = min(int((i + 2) * bucket_size) + 1, n)
        avg_range_length = avg_range_end - avg_range_start

        if avg_range_length > 0:
            avg_x = sum(xs[avg_range_start:avg_range_end]) / avg_range_length
            avg_y = sum(ys[avg_range_start:avg_range_end]) / avg_range_length
        else:
            last = min(avg_range_start, n - 1)
            avg_x, avg_y = xs[last], ys[last]

        # Get the range for current bucket
        range_start = int(i * bucket_size) + 1
        range_end = min(int((i + 1) * bucket_size) + 1, n - 1)

        point_x, point_y = xs[a], ys[a]

        # Find point in current bucket that forms largest triangle
        max_area = -1.0
        max_area_index = range_start

        for j in range(range_start, range_end):
            area = abs(
                (point_x - avg_x) * (ys[j] - point_y)
                - (point_x - xs[j]) * (avg_y - point_y)
            )
            if area > max_area:
                max_area = area
                max_area_index = j

        selected.append(max_area_index)
        a = max_area_index

    # Always include last point
    selected.append(n - 1)

    return selected


def lttb_sample(data: Sequence[Mapping[str, Any]], target: int) -> List[Mapping[str, Any]]:
    """
    Downsample a series of {x, y} points using LTTB.

    Args:
        data: Series of points; x may be a number, date or ISO string
        target: Target number of points (below 3 returns the input)

    Returns:
        Downsampled list of the original point objects
    """
    if len(data) <= target or target < 3:
        return list(data)

    xs, ys = extract_xy(data)
    return [data[i] for i in lttb_indices(xs, ys, target)]
