# ordinals

Building blocks for working with ordinal theory on Bitcoin: sat and block-height
arithmetic, the degree and decimal notations, inscription envelopes in taproot
witnesses, and the fixed-width formats used to store outpoints, inscription ids and
sat ranges. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- `ordinals.constants`: `COIN_VALUE`, `DIFFCHANGE_INTERVAL`, `SUBSIDY_HALVING_INTERVAL`,
  `CYCLE_EPOCHS`, and `timestamp(seconds)`, which turns a block header time into a UTC
  `datetime`.
- `ordinals.epoch.Epoch`: the subsidy of an epoch, its first sat and first height, and
  `Epoch.from_sat` / `Epoch.from_height`. `Epoch.STARTING_SATS` lists the first sat of
  each of the 34 epochs.
- `ordinals.height.Height`: `subsidy()`, `starting_sat()`, `period_offset()`, addition and
  subtraction of integers, and `Height.parse`.
- `ordinals.degree.Degree`: degree notation, built with `Degree.from_height(height, third)`
  and printed as `hour°minute′second″third‴`.
- `ordinals.decimal.Decimal`: a height and offset, printed as `height.offset`.
- `ordinals.chain.Chain`: mainnet, testnet, signet and regtest (`Chain.parse` also takes
  `main` and `test`), with `network()`, `default_rpc_port()`,
  `inscription_content_size_limit()`, `first_inscription_height()` and
  `join_with_data_dir(data_dir)`.
- `ordinals.fee_rate.FeeRate`: a non-negative, finite rate in sats per vbyte, from
  `FeeRate.parse` or `FeeRate.from_float`; `fee(vsize)` gives the rounded fee in sats.
- `ordinals.blocktime.Blocktime`: a confirmed (`Blocktime.confirmed(seconds)`) or expected
  (`Blocktime.expected(when)`) block time; `suffix()` is `" (expected)"` for the latter.
- `ordinals.script`: `ScriptBuilder` (`push_opcode`, `push_slice`, `into_script`),
  `instructions(script)` yielding `Op` and `PushBytes`, and `ScriptError` for malformed
  scripts.
- `ordinals.media`: the `Media` kinds, `Media.parse(content_type)`,
  `content_type_for_path(path)` chosen by file extension, and `check_mp4_codec(path)`,
  which rejects MP4 files whose video tracks are not H.264.
- `ordinals.inscription`: `Inscription` with `from_witness`, `from_transaction` (given the
  witnesses of a transaction's inputs; only the first is read), `from_file`,
  `append_reveal_script`, `to_witness`, `media()`, `content_length()` and
  `content_type_text()`; `parse_witness` raises `InscriptionError`, whose `kind` is an
  `InscriptionErrorKind`.
- `ordinals.inscription_id`: `InscriptionId` (`parse`, `from_txid`, printed as
  `<txid>i<index>`) and `InscriptionIdParseError` with a `ParseErrorKind`.
- `ordinals.config.Config`: the set of hidden inscriptions, `is_hidden(id)`, and
  `Config.from_mapping({"hidden": [...]})`.
- `ordinals.index.entry`: `OutPoint` (`null`, `is_null`, `parse`, `store`, `load`),
  `InscriptionEntry` (`store`, `load`), and `store_inscription_id` /
  `load_inscription_id`, `store_sat_range` / `load_sat_range` for the 11-byte range
  encoding (51-bit start, 33-bit length).
- `ordinals.index.sat_ranges`: `encode_ranges`, `decode_ranges`, `coinbase_range(height)`
  and `assign_output_ranges(input_ranges, output_values)`, which hands input ranges to
  outputs first in, first out and returns what is left as fees, raising
  `InsufficientInputsError` when the inputs run short.

## Example

```python
from ordinals.degree import Degree
from ordinals.fee_rate import FeeRate
from ordinals.height import Height
from ordinals.index.sat_ranges import assign_output_ranges
from ordinals.inscription import Inscription

Height(210_000).subsidy()                  # 2500000000
str(Degree.from_height(Height(0), 1))      # '0°0′0″1‴'
FeeRate.parse("2.5").fee(100)              # 250

assign_output_ranges([(0, 100)], [60, 30])
# ([[(0, 60)], [(60, 90)]], [(90, 100)])

witness = Inscription(content_type=b"text/plain;charset=utf-8", body=b"hello").to_witness()
Inscription.from_witness(witness).body     # b'hello'
```

## What it does not do

There is no index database, no connection to a node, no block or transaction
fetching, no wallet, no web server and no command-line tool. The storage formats and
range bookkeeping in `ordinals.index` are plain functions over bytes and tuples; keeping
them in a database is left to the caller.

## Running the tests

```
pytest
```