# fastpasta

A library for working with raw readout data from the ALICE Inner Tracking
System. It decodes the 64-byte RDH CRU headers (versions 6 and 7), the 10-byte
ITS status words (IHW, TDH, TDT, DDW0, CDW) and the IDs of outer-barrel data
words, and it writes RDHs with their payloads back out to a file or to
standard output.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Reading RDHs

`fastpasta.rdh_cru.RdhCRU.load` reads one header from any binary reader, such
as an open file. The offset to the next header tells you how far to skip to
reach it:

```python
from fastpasta.rdh_cru import RdhCRU

with open("run.raw", "rb") as raw:
    print(RdhCRU.header_text(4), end="")
    rdh = RdhCRU.load(raw)
    print("    ", rdh)
    print("version:", rdh.version())
    print("data format:", rdh.data_format())
    print("payload bytes:", rdh.payload_size())
    raw.seek(rdh.offset_to_next() - 64, 1)
```

A reader that ends before a whole header was read raises `EOFError`.
`payload_size()` raises `ValueError` if the memory size is smaller than the
64-byte header. `to_bytes()` returns exactly the 64 bytes that were read, so
headers can be written out again unchanged.

Other accessors on `RdhCRU` are `cru_id()`, `dw()`, `reserved0()`,
`stop_bit()`, `pages_counter()`, `trigger_type()` and `fee_id()`.
`RdhCRU.load_from_rdh0(reader, rdh0)` finishes reading a header whose first
word has already been consumed.

The sub-words `Rdh0`, `Rdh1`, `Rdh2` and `Rdh3` live in `fastpasta.rdh`; each
has `load(reader)` and `to_bytes()`. `Rdh1.from_fields(bc, orbit, reserved0)`
builds an RDH1 from its separate fields, and `Rdh2.is_pht_trigger()` tells
whether the physics trigger bit is set.

`fastpasta.rdh_cru` also provides ready-made headers for experiments and
tests: `CORRECT_RDH_CRU_V7`, `CORRECT_RDH_CRU_V6`, `CORRECT_RDH_CRU_V7_NEXT`
and `CORRECT_RDH_CRU_V7_NEXT_NEXT_STOP`.

## Front-end IDs

```python
from fastpasta.words_lib import layer_from_feeid, stave_number_from_feeid

fee_id = 0x502A
layer_from_feeid(fee_id)         # 5
stave_number_from_feeid(fee_id)  # 42
```

`fastpasta.words_lib.read_exact(reader, size)` reads exactly `size` bytes or
raises `EOFError`.

## Status words

Each status word is 10 bytes and loads from a binary reader. `Ihw` and `Tdh`
are in `fastpasta.status_words`; `Tdt`, `Ddw0` and `Cdw` are in
`fastpasta.lane_words`. All of them share `id()`, `is_reserved_0()`,
`load(reader)` and `to_bytes()`.

```python
import io
from fastpasta.status_words import Tdh, is_lane_active
from fastpasta.lane_words import Tdt

raw_tdh = bytes([0x03, 0x1A, 0x00, 0x00, 0x75, 0xD5, 0x7D, 0x0B, 0x00, 0xE8])
tdh = Tdh.load(io.BytesIO(raw_tdh))
tdh.id()                # 0xE8
tdh.trigger_type()      # 0xA03
tdh.internal_trigger()  # 1
tdh.is_reserved_0()     # True

raw_tdt = bytes([0, 0, 0, 0, 0, 0, 0, 0, 0x01, 0xF0])
Tdt.load(io.BytesIO(raw_tdt)).packet_done()  # True

is_lane_active(3, 0x3FFF)  # True
```

Printing a status word shows its ten bytes in hex. For quick descriptions of
raw 10-byte words, `fastpasta.status_util` has `tdh_trigger_as_string`,
`tdh_continuation_as_string`, `tdh_no_data_as_string`,
`tdt_packet_done_as_string` and `ddw0_tdt_lane_status_as_string`, along with
`tdh_no_data`, `tdh_continuation` and `tdt_packet_done`. They raise
`ValueError` for input that is not 10 bytes long.

## Data words

```python
from fastpasta.data_words import (
    ob_data_word_id_to_connector,
    ob_data_word_id_to_input_number_connector,
    ob_data_word_id_to_lane,
)

ob_data_word_id_to_lane(0x48)                    # 7
ob_data_word_id_to_connector(0x48)               # 1
ob_data_word_id_to_input_number_connector(0x4A)  # 2
```

The valid ID ranges for inner, middle and outer layer data words are
available as constants such as `VALID_IL_ID_MIN_MAX` and
`VALID_OL_CONNECT0_ID_MIN_MAX`.

## Writing data

`fastpasta.writer.BufferedWriter(output, max_buffer_size)` collects RDHs and
payloads and writes them, each RDH followed by its payload. An `output` of
`"stdout"` or `None` sends the bytes to standard output; a path is created
(or truncated) at once. Before a push that would bring the buffer to
`max_buffer_size` entries (default `BUFFER_SIZE`, 1 Mi entries), the buffer is
flushed.

```python
from fastpasta.rdh_cru import CORRECT_RDH_CRU_V7
from fastpasta.writer import BufferedWriter

with BufferedWriter("filtered.raw") as writer:
    writer.push_cdp_chunk([(CORRECT_RDH_CRU_V7, b"\x00" * 16, 0)])
```

`push_rdhs` and `push_payload` buffer RDHs and payloads separately;
`push_cdp_chunk` takes `(rdh, payload, memory_position)` entries. `flush()`
writes what is buffered and raises `ValueError` if the numbers of buffered
RDHs and payloads differ. `close()`, or leaving the `with` block, flushes and
closes the file; writing afterwards raises `ValueError`.

`fastpasta.writer_thread.spawn_writer(output, stop_event, data_queue)` starts
a thread named `Writer` that takes CDP chunks from a `queue.Queue` and passes
them to a buffered writer. Putting `None` on the queue ends the thread; if the
`threading.Event` is set when a chunk arrives, the thread ends without writing
that chunk. Buffered data is flushed when the thread ends.

## What it does not do

This is a library only. There is no command-line program, and it does not
scan whole raw files, validate or check the data, or filter it by link; those
steps are left to the code that uses these building blocks.