# crawltools

Parts for building a concurrent web crawler, and two small command-line
helpers.

## What is inside

- **Logging** (`crawltools.logbase`, `crawltools.fields`,
  `crawltools.stdlogger`, `crawltools.logger`)
  - `LogLevel` sets the level, from `DEBUG` to `PANIC`.
  - `LogFormat` chooses between `TEXT` output (`key=value` pairs) and `JSON`
    output (one object per line).
  - Typed extra fields are made with `bool_field`, `int64_field`,
    `float64_field`, `string_field` and `object_field`.
  - `OptWithLocation(True)` adds the caller's function, file and line to each
    record.
  - `new_logger_by(level, format, writer, options)` builds a `StdLogger` that
    writes to any text stream. An unknown level falls back to info.
  - `StdLogger` has `debug`, `info`, `warn`, `error`, `fatal` and `panic`.
    Messages are `%`-formatted with any extra arguments. `fatal` logs and then
    raises `SystemExit(1)`. `panic` logs and then raises `LoggerPanic`.
    `with_fields(...)` returns a logger that also records the given fields.
  - `register_logger(logger_type, creator, cover)` adds a creator for a new
    logger type. It raises `ValueError` unless `cover` is true and the type is
    not yet registered. `create_logger(...)` uses the registered creator, or
    falls back to `StdLogger`. `default_logger()` returns an info-level text
    logger on standard output.
- **Buffers** (`crawltools.buffer`, `crawltools.pool`)
  - `Buffer(size)` is a bounded, thread-safe FIFO whose `put` and `get` never
    block. `put` returns `False` when the buffer is full, and `get` returns
    `None` when it is empty. Once the buffer is closed, `put` raises
    `ClosedBufferError`, and so does `get` after the remaining data has been
    drained.
  - `Pool(buffer_cap, max_buffer_number)` is a set of buffers whose `put` and
    `get` block. It adds a buffer when all of them are full, up to the
    maximum, and drops the extra buffers when all of them are empty. After
    `close()`, both calls raise `ClosedBufferPoolError`.
- **Multiple reader** (`crawltools.multireader`)
  - `MultipleReader(stream)` reads a stream once. Its `reader()` method
    returns a fresh `io.BytesIO` over the same bytes each time it is called.
- **Scheduler helpers** (`crawltools.args`, `crawltools.status`,
  `crawltools.domain`, `crawltools.crawlerrors`)
  - Argument containers: `RequestArgs`, `DataArgs` and `ModuleArgs`, each
    with a `check()` method. `ModuleArgs.summary()` returns the list sizes.
  - `Status`, together with `check_status` and `get_status_description`,
    describes the allowed lifecycle transitions.
  - `get_primary_domain(host)` extracts the primary domain of a host.
  - All of these raise `SchedulerError`.
- **Go package inspection** (`crawltools.pkgtool`)
  - Finds the Go source directories from `GOROOT` and `GOPATH`.
  - Reads the import declarations of `.go` files.
  - Builds an import graph of `PkgNode` objects with `new_pkg_node(...)`
    followed by `grow()`.

## Example

```python
import io

from crawltools.domain import get_primary_domain
from crawltools.fields import string_field
from crawltools.logbase import LogFormat, LogLevel
from crawltools.pool import Pool
from crawltools.stdlogger import new_logger_by

pool = Pool(10, 2)
pool.put("job")
assert pool.get() == "job"
pool.close()

assert get_primary_domain("www.example.com") == "example.com"

out = io.StringIO()
log = new_logger_by(LogLevel.DEBUG, LogFormat.JSON, out, None)
log.with_fields(string_field("site", "example.com")).info("fetched %d pages", 3)
```

## Commands

```
showds [-p DIR]
```

Prints the directory tree under `DIR`, or under the current directory when
`-p` is not given. Entries whose names start with a dot are left out.

```
showpds [-p IMPORT_PATH]
```

Prints the dependency structure of a Go package, numbering each import chain
from the package down to a leaf. Without `-p`, the import path is taken from
the current directory's position under the configured source directories.

## What it does not do

This package does not contain a running crawler. There is no scheduler that
downloads pages, no downloader, analyzer or item-pipeline implementations, no
cookie jar, and no profiling support. The argument containers, status rules,
buffers and domain parsing are the pieces such a scheduler would be built
from.

## Tests

```
pip install -e .[test]
pytest
```