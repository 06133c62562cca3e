"""Shared helpers for decoding readout words."""

from typing import BinaryIO

_STAVE_NUMBER_MASK = 0b11_1111
_LAYER_MASK = 0b0111
_LAYER_LSB_IDX = 12


def read_exact(reader: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``reader``.

    Raises EOFError if the stream ends before ``size`` bytes were read.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    chunks = []
    remaining = size
    while remaining:
        chunk = reader.read(remaining)
        if not chunk:
            raise EOFError(
                f"unexpected end of stream: wanted {size} bytes, got {size - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def stave_number_from_feeid(fee_id: int) -> int:
    """Extract the stave number from the 6 LSB [5:0] of a FEE ID."""
    return fee_id & _STAVE_NUMBER_MASK


def layer_from_feeid(fee_id: int) -> int:
    """Extract the layer number from bits [14:12] of a FEE ID."""
    return (fee_id >> _LAYER_LSB_IDX) & _LAYER_MASK