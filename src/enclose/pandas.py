"""
Module wrapping pandas Series and DataFrames.

Each row holds one point set: a list of (x, y) pairs, a (n, 2) array or a
shapely geometry (MultiPoint, LineString, Polygon). Rows are processed
independently, possibly over several processes.
"""
import numpy
import pandas

from . import api
from . import utils


def _is_missing(points):
    return pandas.api.types.is_scalar(points) and pandas.isna(points)


def _disc_record(points):
    if _is_missing(points):
        return (numpy.nan, numpy.nan, numpy.nan)
    disc = api.compute_minimum_enclosing_disc(points)
    if disc is None:
        return (numpy.nan, numpy.nan, numpy.nan)
    return (disc.center.x, disc.center.y, disc.radius)


def _hull_geometry(points):
    if _is_missing(points):
        return None
    hull = api.compute_convex_hull(points)
    if hull is None:
        return None
    return hull.to_shapely()


def _point_sets(data, column):
    if isinstance(data, pandas.DataFrame):
        return data[column]
    elif isinstance(data, pandas.Series):
        return data
    raise ValueError("Unrecognized type for point sets: {}."
                     .format(type(data).__name__))


def enclosing_discs(data, column='geometry', n_jobs=1, chunk_size=1000):
    """
    Minimum enclosing disc of every row.

    Parameters
    ----------
    data: pandas Series or DataFrame
        Point sets, one per row. For a DataFrame they are read from `column`.
    column: str (default 'geometry')
    n_jobs: int (default 1)
        Number of worker processes, -1 for all CPUs.
    chunk_size: int (default 1000)
        Rows sent to a worker at once.

    Returns
    -------
    pandas DataFrame
        Columns 'x', 'y' (center) and 'radius', aligned on `data`'s index.
        Missing rows (None, NaN) and rows with fewer than 2 points are NaN.
    """
    sets = _point_sets(data, column)
    records = utils.pmap(_disc_record)(
        list(sets), n_jobs=n_jobs, chunk_size=chunk_size)
    return pandas.DataFrame(records, index=sets.index,
                            columns=['x', 'y', 'radius'], dtype=float)


def convex_hulls(data, column='geometry', n_jobs=1, chunk_size=1000):
    """
    Convex hull of every row, as shapely geometries.

    Parameters are the same as for :func:`enclosing_discs`.

    Returns
    -------
    pandas Series
        Polygons (LineStrings for collinear point sets), aligned on `data`'s
        index. Missing rows and rows with fewer than 3 distinct points hold
        None.
    """
    sets = _point_sets(data, column)
    geoms = utils.pmap(_hull_geometry)(
        list(sets), n_jobs=n_jobs, chunk_size=chunk_size)
    return pandas.Series(geoms, index=sets.index, dtype=object,
                         name='convex_hull')
