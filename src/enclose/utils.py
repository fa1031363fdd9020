import functools
import inspect
import multiprocessing

import toolz


def _workers(n_jobs):
    if n_jobs == 0:
        raise ValueError("n_jobs cannot be set to zero.")
    if n_jobs < 0:
        return multiprocessing.cpu_count()
    return n_jobs


def _chunk_task(fnc, args, kwargs):
    # Extra arguments are bound by name after the first one: the task is a
    # composition of picklable parts and can be sent to worker processes.
    names = list(inspect.signature(fnc).parameters)[1:]
    bound = toolz.merge(dict(zip(names, args)), kwargs)
    return toolz.compose(list, toolz.curry(map)(toolz.partial(fnc, **bound)))


def pmap(fnc, n_jobs=1, chunk_size=1000):
    """
    Vectorize `fnc` over its first argument, optionally in parallel.

    Args:
        fnc (callable): module-level function (it is pickled to the workers).
        n_jobs (int, optional): number of worker processes. 1 runs in the
            calling process, -1 uses every available CPU. Defaults to 1.
        chunk_size (int, optional): number of items sent to a worker at once.

    Returns:
        callable: ``wrapper(iterable, *args, n_jobs=..., chunk_size=...,
        **kwargs)`` returning the list of results in input order.
    """
    @functools.wraps(fnc)
    def wrapper(iterable, *args,
                n_jobs=n_jobs, chunk_size=chunk_size, **kwargs):
        workers = _workers(n_jobs)
        task = _chunk_task(fnc, args, kwargs)
        if workers == 1:
            return task(iterable)
        with multiprocessing.Pool(workers) as pool:
            chunks = pool.imap(task, toolz.partition_all(chunk_size, iterable))
            return list(toolz.concat(chunks))
    return wrapper
