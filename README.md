# shimkit

A collection of small helpers for everyday application code. It uses only
the standard library.

## Installation

    pip install shimkit

## What is inside

| Module | Helpers |
| --- | --- |
| `shimkit.crypto` | `compute_md5_hash`: lower-case hex MD5 of a UTF-8 string |
| `shimkit.data_copy` | `deep_copy_by_json` (JSON round trip: tuples come back as lists, keys as strings), `deep_copy_by_pickle` |
| `shimkit.files` | `get_extension_by_mime_type`: `"text/markdown"` gives `".md"`, unknown types give `""`, malformed types raise `ValueError` |
| `shimkit.llm` | `extract_potential_json`: pulls a JSON fragment out of a model's free-text reply, or returns `""` |
| `shimkit.money` | `to_yuan` (fen → yuan float, two places), `to_fen` (yuan → fen, half away from zero), `to_int_yuan` (whole yuan, truncated) |
| `shimkit.number` | `negative`, `positive`, `in_elems`, `uniq_elems`, `remove_elems`, `paging_elems`, `sharding_elems`, `join_elems`, `force_string_to_uint64` |
| `shimkit.order` | `SNPrefixHead` (`ORDER`, `PAYMENT`, `DELIVERY_NOTE`, `LOGISTICS_ORDER`, `ACCEPTANCE`, `REFUND`), `generate_sn` |
| `shimkit.path` | `must_get_file_path`, `find_file_paths`, `get_root_path` |
| `shimkit.rand` | `rand_elem`: a random element, or `None` for an empty sequence |
| `shimkit.text` | `boom` / `BoomError`, `to_json_string`, `process_strings`, `parse_str_id_to_uint`, `must_parse_str_to_time_duration`, `get_map_key_value`, `gen_random_length_str`, `gen_stream_str`, `gen_stream_from_read_file`, `hash_string_to_uint64`, `truncate_string` |
| `shimkit.timeutil` | `StdDateStr`, `StdDateTimeStr` (their `get_time()` returns a local `datetime` or `None`), `get_time_version`, `timestamp_to_layout` |

## Examples

```python
from shimkit.llm import extract_potential_json
from shimkit.money import to_fen, to_yuan
from shimkit.number import paging_elems, sharding_elems, uniq_elems
from shimkit.order import SNPrefixHead, generate_sn
from shimkit.text import must_parse_str_to_time_duration, to_json_string, truncate_string

extract_potential_json('Sure!\n```json\n{"a": "100"}\n```')   # '{"a": "100"}'
extract_potential_json('{"a": 1,}')                            # '{"a": 1}'

to_yuan(105)       # 1.05
to_fen(1.05)       # 105

uniq_elems([1, 3, 2, 1])              # [1, 3, 2]
paging_elems([1, 2, 3, 4], 2, 3)      # [4]
sharding_elems([1, 2, 3], 2)          # [[1, 2], [3]]

generate_sn(SNPrefixHead.ORDER, 8)    # e.g. 'OD1700000000K3Z9QF2A'

truncate_string("hello world", 5)                  # 'hello...'
to_json_string({"id": 1}, False)                   # '{"id":1}'
to_json_string(None, False)                        # '<nil>'
must_parse_str_to_time_duration("1h30m")           # timedelta(seconds=5400)
```

### Notes on behaviour

- `to_json_string` renders dataclasses as JSON objects and returns an
  `[error] can not marshal: ...` message instead of raising.
- `must_parse_str_to_time_duration` accepts the units `ns`, `us` (or `µs`),
  `ms`, `s`, `m` and `h`, drops precision below a microsecond and raises
  `ValueError` on malformed input.
- `gen_stream_str` and `gen_stream_from_read_file` are generators that yield
  one character at a time, pausing `interval` seconds (or a `timedelta`)
  after each.
- `hash_string_to_uint64` is FNV-1a 64-bit kept to its low `n` bits;
  `n` outside 1..64 raises `ValueError`.
- `find_file_paths` returns a regular file on its own, otherwise every path
  under the directory (the root included) whose base name matches the glob.
- `must_get_file_path` creates the directory when it is missing.

## What it does not do

shimkit is a library only: it installs no command-line program and runs no
server. Everything is reached by importing its modules.

## Running the tests

    pip install -e ".[test]"
    pytest