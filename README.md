# chnative

Client-side pieces for talking to a columnar database over its native
protocol. The package uses only the standard library.

## Installation

```
pip install chnative
```

For the test suite:

```
pip install "chnative[test]"
pytest
```

## What is inside

### `chnative.query_settings`

- `QuerySettings.from_query(query)` takes a DSN query string (or an already
  parsed mapping of names to a value or a list of values) and keeps only the
  settings listed in `SETTINGS`. Empty values are skipped. Integer and time
  settings must be unsigned 64-bit decimal numbers; boolean settings accept
  `1`, `t`, `T`, `true`, `True`, `TRUE` and their false counterparts and are
  stored as 1 or 0. A malformed value raises `ValueError`.
- The result holds `settings` (name to unsigned value) and `text`, the
  accepted settings joined as `name=value` pairs with `&`.
- `is_empty()` tells whether any setting was taken.
- `serialize()` returns the settings as consecutive name/value pairs in wire
  form, built with `encode_string` (length varint plus UTF-8 bytes) and
  `encode_uvarint` (LEB128; values outside uint64 raise `ValueError`).
- `SettingType` names the kinds of setting: `UINT`, `INT`, `BOOL`, `TIME`.

### `chnative.binding`

- `bind(query, args, quote)` puts argument values, formatted by your `quote`
  callable, into a query. A `?` is replaced by the next unnamed argument only
  after an operator, an opening bracket, a comma, or the words `LIKE`,
  `LIMIT`, `BETWEEN ... AND`; elsewhere it is left as is. `@name` is replaced
  by every argument carrying that name. With no arguments the query is
  returned unchanged.
- `Parameter(value, name="", ordinal=0)` is one argument;
  `positional(values)` wraps plain values as unnamed parameters numbered
  from 1.

### `chnative.rows`

`Rows(columns, blocks, totals=None, extremes=None)` iterates over the rows of
data blocks, each block being a sequence of columns. Rows come out as tuples
and empty blocks are skipped. Non-empty totals and extremes blocks are further
result sets: `has_next_result_set()` tells whether one is left and
`next_result_set()` switches to it, returning `False` when none remains.
`close()` drains the remaining blocks and ends iteration; `Rows` is also a
context manager.

### `chnative.word_matcher`

`WordMatcher(needle)` matches one word case-insensitively, fed one character
at a time through `match(char)`, which returns `True` when the whole word has
just been seen. An empty needle raises `ValueError`.

### `chnative.tls_config`

A thread-safe registry of TLS configurations under names:
`register_tls_config(key, config)`, `deregister_tls_config(key)` and
`get_tls_config(key)`. The latter returns a shallow copy of the stored object,
the object itself when it cannot be copied (such as an `ssl.SSLContext`), or
`None` when nothing is registered under the key.

### `chnative.result`

`Result` stands for the outcome of a statement that reports neither an insert
id nor a row count: `last_insert_id()` and `rows_affected()` raise
`NotSupportedError`.

## Example

```python
from chnative.binding import bind, positional
from chnative.query_settings import QuerySettings

settings = QuerySettings.from_query("max_threads=4&extremes=true")
payload = settings.serialize()

sql = bind("SELECT * FROM t WHERE id = ? LIMIT ?", positional([7, 10]), repr)
# "SELECT * FROM t WHERE id = 7 LIMIT 10"
```

## What this package does not do

It opens no connections and speaks no protocol on its own: there is no
client, no reading of server packets, no block encoding or decoding, no
compression and no value quoting. These pieces are meant to be used by code
that supplies the connection, the received blocks and the `quote` function.