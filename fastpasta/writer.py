"""Buffered writing of RDHs and their payloads to a file or stdout.

Data is collected in memory and written out once the buffer fills up,
when ``flush`` is called, or when the writer is closed.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from typing import BinaryIO, Protocol, Union

BUFFER_SIZE = 1024 * 1024
"""Default maximum number of buffered entries before a flush."""

STDOUT = "stdout"
"""Output name that selects standard output."""


class _Serializable(Protocol):
    def to_bytes(self) -> bytes: ...


CdpEntry = tuple[_Serializable, Union[bytes, bytearray, Sequence[int]], int]
OutputTarget = Union[str, "os.PathLike[str]", None]


class BufferedWriter:
    """Collect RDHs and payloads and write them out in large blocks.

    ``output`` is a file path, ``"stdout"`` or ``None``; the last two write
    to standard output. A path is created (or truncated) immediately.
    """

    def __init__(self, output: OutputTarget = None, max_buffer_size: int = BUFFER_SIZE) -> None:
        if max_buffer_size <= 0:
            raise ValueError(f"max_buffer_size must be positive, got {max_buffer_size}")
        self.max_buffer_size = max_buffer_size
        self._rdhs: list[_Serializable] = []
        self._payloads: list[bytes] = []
        self._file: BinaryIO | None = None
        self._closed = False
        if output is not None and os.fspath(output) != STDOUT:
            self._file = open(output, "wb")

    @property
    def writes_to_stdout(self) -> bool:
        """True if data goes to standard output rather than a file."""
        return self._file is None

    def __len__(self) -> int:
        """Return the number of buffered RDHs."""
        return len(self._rdhs)

    @property
    def buffered_payloads(self) -> int:
        """Return the number of buffered payloads."""
        return len(self._payloads)

    def write(self, data: bytes) -> None:
        """Write ``data`` straight to the file or stdout."""
        self._ensure_open()
        if self._file is not None:
            self._file.write(data)
        else:
            sys.stdout.buffer.write(data)

    def push_rdhs(self, rdhs: Iterable[_Serializable]) -> None:
        """Buffer a batch of RDHs, flushing first if the buffer would overflow."""
        rdhs = list(rdhs)
        if len(self._rdhs) + len(rdhs) >= self.max_buffer_size:
            self.flush()
        self._rdhs.extend(rdhs)

    def push_payload(self, payload: bytes | bytearray | Sequence[int]) -> None:
        """Buffer one payload, flushing first if the buffer would overflow."""
        if len(self._payloads) + 1 >= self.max_buffer_size:
            self.flush()
        self._payloads.append(bytes(payload))

    def push_cdp_chunk(self, cdp_chunk: Iterable[CdpEntry]) -> None:
        """Buffer ``(rdh, payload, memory_position)`` entries of a CDP chunk."""
        entries = list(cdp_chunk)
        if (
            len(self._rdhs) + len(entries) >= self.max_buffer_size
            or len(self._payloads) + len(entries) >= self.max_buffer_size
        ):
            self.flush()
        for rdh, payload, _ in entries:
            self._rdhs.append(rdh)
            self._payloads.append(bytes(payload))

    def flush(self) -> None:
        """Write every buffered RDH followed by its payload, then clear the buffer.

        Raises ValueError if the numbers of buffered RDHs and payloads differ.
        """
        if len(self._rdhs) != len(self._payloads):
            raise ValueError(
                f"buffered {len(self._rdhs)} RDHs but {len(self._payloads)} payloads"
            )
        data = b"".join(
            rdh.to_bytes() + payload for rdh, payload in zip(self._rdhs, self._payloads)
        )
        self.write(data)
        if self._file is not None:
            self._file.flush()
        else:
            sys.stdout.buffer.flush()
        self._rdhs.clear()
        self._payloads.clear()

    def close(self) -> None:
        """Flush what is buffered and close the output file."""
        if self._closed:
            return
        try:
            self.flush()
        finally:
            self._closed = True
            if self._file is not None:
                self._file.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("write to a closed BufferedWriter")

    def __enter__(self) -> BufferedWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()