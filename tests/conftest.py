import random
import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def rng():
    return random.Random(20240519)


def brute_min_distance2(points):
    best = float("inf")
    for i in range(len(points)):
        for k in range(i + 1, len(points)):
            dx = points[i][0] - points[k][0]
            dy = points[i][1] - points[k][1]
            best = min(best, dx * dx + dy * dy)
    return best
