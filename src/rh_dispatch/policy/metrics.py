import numpy as np

from rh_dispatch.domain.entities.geography import Location


def euclidean(xs: np.ndarray, ys: np.ndarray, origin: Location) -> np.ndarray:
    return np.hypot(xs - origin.x, ys - origin.y)


def manhattan(xs: np.ndarray, ys: np.ndarray, origin: Location) -> np.ndarray:
    return np.abs(xs - origin.x) + np.abs(ys - origin.y)
