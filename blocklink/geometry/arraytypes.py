'''Typehints and shape enforcement for numpy arrays representing canvas points'''

__author__ = 'BlockLink Developers'

from typing import (
    Literal,
    TypeVar,
    Union,
)

import numpy as np
from numbers import Number, Real


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type
RealValued = TypeVar('RealValued', bound=Real)

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

M = TypeVar('M', bound=int) # typehint the size of a given dimension
N = TypeVar('N', bound=int) # typehint the size of a given dimension

# Fixed-size vector and array type annotations
## DEV: canvas coordinates are planar; 3-vectors are deliberately not offered here
Vector2  = np.ndarray[Shape[Literal[2]], Numeric]
VectorN  = np.ndarray[Shape[N], Numeric]
ArrayNx2 = np.ndarray[Shape[N, Literal[2]], Numeric]

PointLike = Union[Vector2, tuple[float, float], list[float]] # anything which can be read as a canvas point


# vector coercion and comparison
def as_n_vector(vectorlike : np.ndarray[Shape[N], DType], n : N=2) -> np.ndarray[Shape[N], DType]:
    '''Interpret array as a 1D n-element vector'''
    if not isinstance(vectorlike, np.ndarray):
        raise TypeError(f'Vectorlike must be a numpy array, not {type(vectorlike)}')
    if vectorlike.size != n:
        raise ValueError(f'Expected {n}-element vectorlike, received {vectorlike.size}-element array instead')
    
    return vectorlike.reshape(n)

def as_point(pointlike : PointLike) -> Vector2:
    '''
    Read a canvas point from either a numpy array or a plain pair of coordinates
    Always returns a new float array, so callers may freely mutate the result
    '''
    if isinstance(pointlike, (tuple, list)): # DEV: deliberately excluding str, set, etc. which are also iterable
        pointlike = np.array(pointlike, dtype=float)
    
    return np.array(as_n_vector(pointlike, 2), dtype=float, copy=True)
