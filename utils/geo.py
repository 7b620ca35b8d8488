"""
utils/geo.py
------------
Distance between coordinates, mirroring the ``calculate_distance`` SQL function.
"""

import math


def calculate_distance(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Euclidean distance between two latitude/longitude pairs, in coordinate units."""
    return math.sqrt((lat1 - lat2) ** 2 + (long1 - long2) ** 2)
