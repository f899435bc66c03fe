# levelwriters

Building blocks for structured logging. The package has log levels, samplers
that decide which events to keep, and writers that receive each encoded log
line together with its level.

## What it does not do

The package does not create, encode or format log events. There is no logger
object and no JSON encoder. It handles the steps around the encoder: it parses
levels, samples events, and routes already-encoded lines to their outputs.

## Install

```
pip install levelwriters
```

## Levels (`levelwriters.level`)

`Level` is an `int` subclass. Its value must fit in a signed 8-bit integer;
any other value raises `ValueError`. The named levels are class attributes:

| Attribute          | Value | Text         |
| ------------------ | ----- | ------------ |
| `Level.TRACE`      | -1    | `"trace"`    |
| `Level.DEBUG`      | 0     | `"debug"`    |
| `Level.INFO`       | 1     | `"info"`     |
| `Level.WARN`       | 2     | `"warn"`     |
| `Level.ERROR`      | 3     | `"error"`    |
| `Level.FATAL`      | 4     | `"fatal"`    |
| `Level.PANIC`      | 5     | `"panic"`    |
| `Level.NO_LEVEL`   | 6     | `""`         |
| `Level.DISABLED`   | 7     | `"disabled"` |

Levels below trace are allowed. They are rendered as their number.

```python
from levelwriters.level import Level, parse_level

parse_level("warn")          # Level.WARN
parse_level("-2")            # Level(-2)
str(Level(-2))               # "-2"
Level.INFO.marshal_text()    # "info"
Level.from_text(b"error")    # Level.ERROR; accepts str or bytes
```

`parse_level` accepts the level names shown above or any integer. It raises
`ValueError` in two cases:

- the text is neither a level name nor an integer;
- the integer is outside the range -128 to 127.

## Samplers (`levelwriters.sampler`)

Each sampler has a `sample(lvl)` method. It returns `True` to keep the event.

- `RandomSampler(n)` keeps about one event in `n`, chosen at random. If `n` is
  0 or less, it keeps nothing.
- `BasicSampler(n)` keeps every `n`-th event, starting with the first.
- `BurstSampler(burst, period, next_sampler=None)` lets `burst` events through
  in each `period` seconds. After that it passes the decision to
  `next_sampler`. If there is no next sampler, it drops the event. If `burst`
  or `period` is zero, every event goes to `next_sampler`.
- `LevelSampler` takes the sampler arguments `trace_sampler`,
  `debug_sampler`, `info_sampler`, `warn_sampler` and `error_sampler`. Each
  event goes to the sampler for its level. An event is kept if that sampler
  is not set, and also if its level is not one of these five.

Three ready-made random samplers are provided:

- `OFTEN` keeps about 1 event in 10.
- `SOMETIMES` keeps about 1 event in 100.
- `RARELY` keeps about 1 event in 1000.

```python
from levelwriters.sampler import BasicSampler

sampler = BasicSampler(n=2)
[sampler.sample(None) for _ in range(4)]   # [True, False, True, False]
```

## Writers (`levelwriters.writer`)

`LevelWriter` is the abstract interface. It has two methods:

- `write(p)` writes the bytes `p`.
- `write_level(level, p)` writes the bytes `p` and also receives the level.

Both return the number of bytes written.

- `as_level_writer(w)` returns `w` unchanged if it already has a
  `write_level` method. Otherwise it wraps `w` in a `LevelWriterAdapter`,
  which ignores the level. Passing `None` gives a writer that discards its
  output. A text stream receives the bytes decoded as UTF-8.
- `SyncWriter(w)` guards each write to `w` with a lock.
- `MultiLevelWriter(*writers)` copies each write to every writer, like `tee`.
  It calls every writer even after one of them fails. Once all have been
  called, it raises the first failure. If a writer accepts fewer bytes than it
  was given, that counts as a failure and raises `ShortWriteError`, a subclass
  of `OSError`.
- `TestingLogWriter(t, frame=0)` sends each line to a test log object `t`.
  The object needs a `log(*args)` method and a `logf(fmt, *args)` method;
  `logf` takes %-style format strings. A `helper()` method is optional.
  Trailing newlines are stripped before the line is sent. If `frame` is
  positive, the line reports the file and line number that many frames above
  the caller of `write`.

```python
import io
from levelwriters.level import Level
from levelwriters.writer import MultiLevelWriter

a, b = io.BytesIO(), io.BytesIO()
MultiLevelWriter(a, b).write_level(Level.INFO, b'{"level":"info"}\n')
```

## Syslog (`levelwriters.syslog`)

`SyslogWriter` is the abstract interface for the target writer. It has
`write`, plus one method per severity: `debug`, `info`, `warning`, `err`,
`emerg` and `crit`.

`syslog_level_writer(w)` returns a `SyslogLevelWriter`. Its `write_level`
sends each line to the method of `w` that matches the line's level:

| Level    | Method    |
| -------- | --------- |
| debug    | `debug`   |
| info     | `info`    |
| no level | `info`    |
| warn     | `warning` |
| error    | `err`     |
| fatal    | `emerg`   |
| panic    | `crit`    |

Trace lines are dropped. Any other level raises `ValueError`.

`syslog_cee_writer(w)` does the same, but puts the prefix `CEE_PREFIX`
(`"@cee:"`) in front of every message. rsyslog and syslog-ng expect this
prefix on JSON messages. The prefix is not counted in the returned length.