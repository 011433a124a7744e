# basekit

A small toolbox of building blocks for Python programs. It needs Python 3.10
or later and has no third-party dependencies.

| Module | What it holds |
| --- | --- |
| `basekit.deque` | `Deque`, a double-ended queue on a power-of-two ring buffer |
| `basekit.workerpool` | `WorkerPool`, runs callables on at most N worker threads |
| `basekit.pacer` | `Pacer`, limits how often tasks may start |
| `basekit.logger` | `Logger`, `Worker`, `Info`, `LogLevel`: a levelled, optionally coloured logger |
| `basekit.logfile` | `write_log`, appends time-stamped lines to a daily log file |
| `basekit.timeutil` | timestamps, date strings and `LocalTime` |
| `basekit.slices` | helpers for lists of strings and integers |
| `basekit.convert` | conversions between strings, numbers, bytes and JSON objects |
| `basekit.waitgroup` | `BoundedWaitGroup`, a wait group with a cap on active members |
| `basekit.web` | request-parameter helpers and JSON responses for WSGI applications |
| `basekit.writefile` | write text, lines or concurrently produced random numbers to files |
| `basekit.study` | two small example types, `Study` (made with `new_study`) and `Spec` |

## Installation

```
pip install basekit
```

## Deque

```python
from basekit.deque import Deque

q = Deque()
q.push_back("foo")
q.push_back("bar")
q.push_front("baz")

q.front()      # "baz"
q.back()       # "bar"
q[1]           # "foo"
q.rotate(1)    # the front item moves to the back: foo, bar, baz
q.pop_front()  # "foo"
len(q)         # 2
```

`Deque(capacity, minimum)` may pre-size the buffer and set a minimum size;
both are rounded up to a power of two of at least 16. The buffer doubles when
full and halves when a quarter full, never below the minimum
(`set_min_capacity(exponent)` sets it to `2 ** exponent`). `capacity` is the
current buffer size.

Further operations: `pop_back`, `clear` (keeps the capacity), `index(predicate)`
and `rindex(predicate)` (return -1 when nothing matches), `insert(at, item)`,
`remove(at)`, item assignment and iteration from front to back. Reading or
popping an empty deque, or an index outside `0 <= i < len(q)`, raises
`IndexError`.

## Worker pool

```python
from basekit.workerpool import WorkerPool

results = []
with WorkerPool(2) as pool:          # leaving the block calls stop_wait()
    for word in ["alpha", "beta", "gamma"]:
        pool.submit(lambda w=word: results.append(w))
```

- `submit(task)` never blocks. The task goes to an idle worker, to a new worker
  while fewer than `size()` exist, or to a FIFO waiting queue
  (`waiting_queue_size()`). `None` is ignored. Submitting to a stopped pool
  raises `RuntimeError`.
- `submit_wait(task)` blocks until the task has run.
- `stop_wait()` runs every queued task, then stops; `stop()` drops queued tasks
  and waits only for running ones. Both may be called more than once.
  `stopped()` tells whether the pool has been stopped.
- `pause(release)` occupies every worker until `release` (for example a
  `threading.Event`) is set or the pool stops, and returns once all workers are
  held. A second pause waits until the first is released.
- When no task arrives for `idle_timeout` seconds (default 2), one idle worker
  is retired per period. An exception raised by a task is logged and the
  worker carries on.

## Pacer

```python
from basekit.pacer import Pacer
from basekit.workerpool import WorkerPool

pacer = Pacer(0.1)                    # at most one start per 0.1 seconds
task = pacer.pace(lambda: print("tick"))
with WorkerPool(5) as pool:
    for _ in range(3):
        pool.submit(task)
pacer.stop()
```

`next()` blocks until it is the caller's turn. `pause()` holds back further
starts until `resume()`; `is_paused()` reports the state. After `stop()`,
waiting and later calls to `next()` raise `RuntimeError`, so stop the pacer
only when its tasks are done.

## Logger

```python
import sys
from basekit.logger import Logger, LogLevel

log = Logger("orders", LogLevel.DEBUG, 0, sys.stdout)
log.set_format("%{time} [%{module}] %{lvl} %{message}")
log.info("order %s stored", 42)
log.debug("cache warmed")
```

`Logger(*args)` takes its arguments in any order: a `str` is the module name
(default `"DEFAULT"`), a `LogLevel` the level (default `INFO`), an `int`
turns colour on or off (default on), and an object with a `write` method is
the output stream (default `sys.stderr`). Anything else raises `TypeError`.

Levels, from most to least severe: `CRITICAL`, `ERROR`, `WARNING`, `NOTICE`,
`INFO`, `DEBUG`. Messages less severe than the logger's level are dropped.
The methods `critical`, `error`, `warning`, `notice`, `info` and `debug` take
`%`-style arguments. `fatal` logs and raises `SystemExit(1)`; `panic` logs and
raises `RuntimeError`. `stack_as_error` and `stack_as_critical` log the current
call stack.

Format placeholders: `%{id}`, `%{time}` or `%{time:<strftime format>}`,
`%{module}`, `%{file}` / `%{filename}`, `%{line}`, `%{level}`, `%{lvl}` (first
three letters of the level) and `%{message}`. Unknown placeholders print
nothing; a template shorter than ten characters keeps the default.
`set_default_format` changes the format for loggers created afterwards.

## Log files

```python
from basekit.logfile import write_log

write_log("service started", "logs")  # appends "[YYYY-MM-DD HH:MM:SS]service started"
```

The line goes to `app-<YYYY-MM-DD>.log` in the given directory (default
`./logs/`), which must already exist. The number of bytes written is returned;
`OSError` is raised when the file cannot be written.

## Time

```python
from basekit import timeutil

timeutil.parse_date_to_time("2021-03-20 01:21:27")  # 1616203287, read as UTC
timeutil.parse_date_to_time("not a date")           # 0
timeutil.format_time_to_date(1616203287)            # local time, "YYYY-MM-DD HH:MM:SS"
timeutil.current_date()                             # "YYYY-MM-DD"
```

Also `current_timestamp`, `current_milli_timestamp`,
`current_micro_timestamp` and `current_datetime`. `LocalTime` wraps a
`datetime`: `to_json()` / `LocalTime.from_json(data)` use a quoted
`"YYYY-MM-DD HH:MM:SS"` string, `value()` gives the bytes for a database
column (`None` for the zero time), and `LocalTime.scan(dt)` builds one from a
database `datetime`.

## Lists and conversions

```python
from basekit import slices, convert

slices.unique(["a", "b", "a"])              # ["a", "b"]
slices.intersect(["a", "b"], ["b"])         # ["b"]
slices.cut(["a", "b", "c"], 1, 5)           # ["b", "c"]
slices.strings_to_ints(["1", "x"])          # [1, 0]

convert.to_string(3.5)                      # "3.5"
convert.to_string({"a": 1})                 # '{"a":1}'
convert.to_int("12")                        # 12
convert.to_int("2.9")                       # 2
convert.bytes_to_map(b'{"k": "v"}')         # {"k": "v"}
```

The list helpers (`in_slice`, `cut`, `merge`, `unset`, `insert`,
`sort_ascending`, `sort_descending`, `intersect`, `unique`,
`strings_to_ints`, `ints_to_strings`) return new lists and leave their
arguments alone; bad indexes raise `IndexError`. `convert` also has
`string_to_int` (raises `ValueError`), `int_to_string`, `string_to_bytes`,
`bytes_to_string` and `map_to_bytes`.

## Bounded wait group

```python
from basekit.waitgroup import BoundedWaitGroup

with BoundedWaitGroup(3) as group:    # at most 3 run at once; waits on exit
    for n in range(10):
        group.add(lambda n=n: print(n))
```

`add(*callables)` runs each on its own thread. `block_add()` and `done()`
manage members by hand, `wait()` blocks until all are done, and
`pending_count()` is the number of slots in use. A size of zero or less means
no cap.

## WSGI helpers

```python
from basekit import web

def app(environ, start_response):
    if web.http_method(environ) == "POST":
        return web.success_response(start_response, web.form_params(environ))
    return web.success_response(start_response, web.query_params(environ))
```

Responses carry a JSON body `{"status": ..., "message": ..., "data": ...}`
(`data` left out when `None`), with status 1 for success and 9999 for
failure, and the headers `Content-Type`, `Access-Token` and `Content-Length`.
Helpers: `json_response`, `success_response`, `fail_response`,
`message_response` and `redirect` (a 302 with `Location`). Request helpers:
`query_params`, `form_params`, `json_params` (a JSON object of strings, else
`None`), `request_headers` and `http_method`.

## Writing files

```python
from basekit.writefile import write_text, write_lines, write_random_numbers

write_text("hello.txt", "Hello World")        # 11
write_lines("lines.txt", ["one", "two"])
write_random_numbers("numbers.txt", 100)      # list of the numbers written
```

`write_random_numbers` starts one producer thread per number (each 0–998) and
a single writer thread that puts them in the file, one per line.

### Command line

```
basekit-writefile                      # writes "Hello World" to test.txt
basekit-writefile lines -o lines.txt   # writes three sample lines
basekit-writefile random -n 100        # writes 100 random numbers to "concurrent"
```

`-o/--output` chooses the file. The command exits with status 1 when the file
cannot be written.

## What basekit does not do

There is no HTTP server or router: `basekit.web` only builds responses for,
and reads requests from, a WSGI application you run elsewhere. There is no
database access either; `LocalTime.value` and `LocalTime.scan` only convert
values for a driver to use.

## Running the tests

```
pip install "basekit[test]"
pytest
```