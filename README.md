# bencodec

Decode bencoded text into Python values and encode Python values back into
bencode text. The package uses only the standard library.

## Installing

```
pip install .
```

## Decoding

`bencodec.decoder.decode` takes a `str` and returns the value it holds:

| bencode    | Python |
|------------|--------|
| `i42e`     | `int`  |
| `2:hi`     | `str`  |
| `l ... e`  | `list` |
| `d ... e`  | `dict` with `str` keys |

```python
from bencodec.decoder import decode, DecodeError

decode("i42e")                 # 42
decode("2:hi")                 # "hi"
decode("li42e2:hie")           # [42, "hi"]
decode("d6:answeri42e5:hello5:worlde")
# {"answer": 42, "hello": "world"}

decode("")                     # None: blank input holds no value
```

String lengths count UTF-8 bytes, so `"12:ゴゴゴゴ"` decodes to `"ゴゴゴゴ"`.
Integers must be signed decimal numbers that fit in 64 bits.

Malformed input raises `DecodeError` (a subclass of `ValueError`): an integer
with no closing `e`, an integer with non-digit content, a string length longer
than what remains, a container left open, or several values at the top level
with no list or dictionary around them.

```python
try:
    decode("i42")
except DecodeError as exc:
    print(exc)
```

The same module offers two lower-level helpers:

- `find_next(start, char, text)` returns the index of the first `char` at or
  after `start`, or `None`.
- `parse_int(text)` parses a signed 64-bit decimal integer, raising
  `DecodeError` otherwise.

## Encoding

`bencodec.encoder` turns Python values into bencode text:

```python
from bencodec.encoder import encode_integer, encode_string, encode_list, encode_dict

encode_integer(-2)             # "i-2e"
encode_string("hi!")           # "3:hi!"
encode_list([1, "hi!"])        # "li1e3:hi!e"
encode_dict({"hello": "world", "hi": "mark"})
# "d5:hello5:world2:hi4:marke"
```

Lists and tuples, integers, strings and mappings with string keys may be
nested to any depth. Dictionary keys are written in sorted order. Keep in
mind these behaviours of the encoder:

- An empty string encodes to an empty result, not `0:`.
- A list with exactly one element encodes as `le`.
- Elements of any other type (including `bool` and `None`) are skipped, and a
  warning is logged on the `bencodec.encoder` logger.

## The decoding stack

`bencodec.stack` holds the machinery the decoder builds values with: a
`DataStack` of values and `Marker` entries (`Marker.DICT`, `Marker.LIST`),
the predicates `is_dict_symbol` and `is_list_symbol`, `shrink_dictionary`,
which pairs up values collected in pop order into a `dict`, and
`shrink_stack`, which folds everything above the nearest marker into a
`list` or `dict`. Popping an empty stack, an odd number of dictionary items,
or a non-string key raises `StackError` (a subclass of `ValueError`).

## What it does not do

The package works on `str` text only; it does not read `bytes` or files, and
it has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```