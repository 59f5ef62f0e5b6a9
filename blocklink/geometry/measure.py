'''For locating connectors on the canvas and measuring the separation between them'''

__author__ = 'BlockLink Developers'

from typing import Iterable

import numpy as np
from scipy.spatial.distance import cdist

from .arraytypes import Shape, N, Vector2, ArrayNx2, PointLike, as_point


def absolute_position(origin : PointLike, relative : PointLike) -> Vector2:
    '''
    Translate a point given relative to some origin (e.g. a connector's offset
    within its block) into the absolute frame that origin is expressed in
    '''
    return as_point(origin) + as_point(relative)

def distance(position_1 : PointLike, position_2 : PointLike) -> float:
    '''Euclidean distance between two canvas points, as a Python float'''
    return float(np.linalg.norm(as_point(position_1) - as_point(position_2), ord=2))

def distances_from(
    position : PointLike,
    others : Iterable[PointLike],
) -> np.ndarray[Shape[N], float]:
    '''
    Euclidean distances from one canvas point to each of a collection of others
    Order of the returned distances matches the order in which "others" were given
    '''
    others_arr : ArrayNx2 = np.array([as_point(other) for other in others], dtype=float).reshape(-1, 2)
    if others_arr.shape[0] == 0:
        return np.zeros(0, dtype=float)
    
    return cdist(as_point(position).reshape(1, 2), others_arr, metric='euclidean')[0]
