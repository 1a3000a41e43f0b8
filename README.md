# pipeutils

Small, dependency-free building blocks for threaded processing pipelines.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `pipeutils.containers`
  - `ThreadsafeQueue(max_size=0, items=None)`: a FIFO queue guarded by a
    lock. With a positive `max_size`, `push` on a full queue drops the oldest
    item. `try_pop()` and `try_front()` return `None` when the queue is empty;
    `wait_and_pop(timeout=None)` blocks (timeout in milliseconds) and raises
    `TimeoutError` on timeout or `QueueClosed` once `exit()` has been called
    and the queue is empty. Also `wait_front()`, `remove_front()`, `empty()`,
    `size()` and `len()`.
  - `List`: a `list` with `take_all(other)`, which moves every item of
    `other` to its end and empties `other`, and `for_each(func)`.
- `pipeutils.ticker`
  - `Ticker(min_ms=0, print_log=False, logger=None, clock=None)`: measures
    milliseconds with `elapsed_time()` (since the last `reset_time()`) and
    `created_time()`. Used as a context manager, or by calling `close()`, it
    logs a warning with the total time when `print_log` is set and the time
    exceeds `min_ms`.
  - `SmoothTicker(reset_ms=10000, clock=None)`: `elapsed_time()` returns
    smoothed timestamps that resynchronise with the clock every `reset_ms`;
    `reset_time()` starts again from zero.
- `pipeutils.codes`: the `UvErrno` enumeration of negative error codes (the
  negated system `errno` value where the platform has one), each with a
  `message`, and `ERRNO_MAX`.
- `pipeutils.errors`: `err_name(err)`, `strerror(err)`,
  `translate_posix_error(err)` (positive errno to negative code;
  `ENOBUFS`, `EINPROGRESS` and `EWOULDBLOCK` become `EAGAIN`),
  `get_uv_error(err)` and `get_uv_errmsg(err)`, which accept an errno number
  or an `OSError`. Unknown codes give `"Unknown system error <n>"`.
- `pipeutils.strings`: `split` (drops empty pieces), `trim`, `replace`
  (searching from an index, never re-scanning replaced text), `start_with`,
  `end_with`, `hexdump`, `hexmem`, `make_rand_str`, `str_format`
  (printf-style), `str_to_lower` and `str_to_upper` (ASCII letters only).
- `pipeutils.objects`
  - `Any`: holds one value and its exact type; `get(kind, safe=True)` raises
    `ValueError` when empty or when the type does not match. Also `set`,
    `holds`, `reset`, `empty` and `type_name`.
  - `AnyStorage`: a `dict` of names to `Any`; a missing name yields a new,
    empty `Any`.
  - `Creator.create(cls, *args, **kwargs)` and `Creator.create2(...)`: build
    an object and call its `on_create` hook; the returned owner is a context
    manager yielding the object, and its `close()` calls `on_destroy` once,
    logging any exception it raises.
  - `ObjectStatistic`: a mixin whose `count()` gives the number of live
    instances of a class and its subclasses.
- `pipeutils.system`: `exe_path`, `exe_dir`, `exe_name`, `get_gmt_off`,
  `current_millisecond`, `current_microsecond` (monotonic since start by
  default, wall clock with `system_time=True`), `get_time_str`,
  `get_local_time`, `set_thread_name`, `get_thread_name`,
  `set_thread_affinity`, `demangle` and `get_env` (a leading `$` is ignored).

## Example

    from pipeutils.containers import ThreadsafeQueue, QueueClosed

    frames = ThreadsafeQueue(max_size=2)
    frames.push(1)
    frames.push(2)
    frames.push(3)                 # 1 is dropped
    print(frames.try_pop())        # 2

    from pipeutils.strings import split, hexmem

    print(split("a,,b,c", ","))    # ['a', 'b', 'c']
    print(hexmem(b"\x01\xff"))     # '01 ff '

    from pipeutils.ticker import Ticker

    with Ticker() as ticker:
        ...
    print(ticker.created_time())

## What it does not do

This is a library only. It has no command-line tool, does not decode, run
inference on, or stream video, and offers no semaphore or one-shot
callback helper; use `threading.Semaphore` and `contextlib` for those.