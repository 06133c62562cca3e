"""The RDH subwords RDH0, RDH1, RDH2 and RDH3, each 64 bits."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from .words_lib import read_exact


@dataclass(frozen=True, repr=False)
class Rdh0:
    """RDH0: header id/size, FEE ID, priority bit, system id."""

    header_id: int
    header_size: int
    fee_id: int
    priority_bit: int
    system_id: int
    reserved0: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<BBHBBH")
    SIZE: ClassVar[int] = 8

    @classmethod
    def load(cls, reader: BinaryIO) -> Rdh0:
        """Decode an RDH0 from the next 8 bytes of ``reader``."""
        return cls(*cls._FORMAT.unpack(read_exact(reader, cls.SIZE)))

    def to_bytes(self) -> bytes:
        """Encode as 8 little-endian bytes."""
        return self._FORMAT.pack(
            self.header_id,
            self.header_size,
            self.fee_id,
            self.priority_bit,
            self.system_id,
            self.reserved0,
        )

    def __str__(self) -> str:
        return f"{self.header_id:<6}{self.header_size:<7}{self.fee_id:<7}{self.system_id:<6}"

    def __repr__(self) -> str:
        return (
            f"Rdh0: header_id: {self.header_id:x}, header_size: {self.header_size:x}, "
            f"fee_id: {self.fee_id:x}, priority_bit: {self.priority_bit:x}, "
            f"system_id: {self.system_id:x}, reserved0: {self.reserved0:x}"
        )


@dataclass(frozen=True, repr=False)
class Rdh1:
    """RDH1: 12-bit bunch counter, 20 reserved bits and a 32-bit orbit."""

    bc_reserved0: int
    orbit: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<II")
    SIZE: ClassVar[int] = 8

    @classmethod
    def from_fields(cls, bc: int, orbit: int, reserved0: int) -> Rdh1:
        """Build an RDH1 from its separate bunch counter and reserved fields."""
        return cls((bc | (reserved0 << 12)) & 0xFFFF_FFFF, orbit)

    def bc(self) -> int:
        """Return the bunch counter."""
        return self.bc_reserved0 & 0x0FFF

    def reserved0(self) -> int:
        """Return the reserved bits."""
        return self.bc_reserved0 >> 12

    @classmethod
    def load(cls, reader: BinaryIO) -> Rdh1:
        """Decode an RDH1 from the next 8 bytes of ``reader``."""
        return cls(*cls._FORMAT.unpack(read_exact(reader, cls.SIZE)))

    def to_bytes(self) -> bytes:
        """Encode as 8 little-endian bytes."""
        return self._FORMAT.pack(self.bc_reserved0, self.orbit)

    def __str__(self) -> str:
        orbit_as_hex = f"{self.orbit:#x}"
        return f"{self.bc():<5}{orbit_as_hex:<12}"

    def __repr__(self) -> str:
        return f"Rdh1: bc: {self.bc():x}, reserved0: {self.reserved0():x}, orbit: {self.orbit:x}"


@dataclass(frozen=True, repr=False)
class Rdh2:
    """RDH2: trigger type, pages counter and stop bit."""

    trigger_type: int
    pages_counter: int
    stop_bit: int
    reserved0: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<IHBB")
    SIZE: ClassVar[int] = 8

    def is_pht_trigger(self) -> bool:
        """True if bit 4 of the trigger type (physics trigger) is set."""
        return (self.trigger_type >> 4) & 0x1 == 1

    @classmethod
    def load(cls, reader: BinaryIO) -> Rdh2:
        """Decode an RDH2 from the next 8 bytes of ``reader``."""
        return cls(*cls._FORMAT.unpack(read_exact(reader, cls.SIZE)))

    def to_bytes(self) -> bytes:
        """Encode as 8 little-endian bytes."""
        return self._FORMAT.pack(
            self.trigger_type, self.pages_counter, self.stop_bit, self.reserved0
        )

    def __str__(self) -> str:
        trigger_type_as_hex = f"{self.trigger_type:#x}"
        return f"{trigger_type_as_hex:<10}{self.pages_counter:<9}{self.stop_bit:<5}"

    def __repr__(self) -> str:
        return (
            f"Rdh2: trigger_type: {self.trigger_type:X}, "
            f"pages_counter: {self.pages_counter:X}, stop_bit: {self.stop_bit:X}"
        )


@dataclass(frozen=True, repr=False)
class Rdh3:
    """RDH3: detector field, parity bits and reserved bits."""

    detector_field: int
    par_bit: int
    reserved0: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<IHH")
    SIZE: ClassVar[int] = 8

    @classmethod
    def load(cls, reader: BinaryIO) -> Rdh3:
        """Decode an RDH3 from the next 8 bytes of ``reader``."""
        return cls(*cls._FORMAT.unpack(read_exact(reader, cls.SIZE)))

    def to_bytes(self) -> bytes:
        """Encode as 8 little-endian bytes."""
        return self._FORMAT.pack(self.detector_field, self.par_bit, self.reserved0)

    def __str__(self) -> str:
        return (
            f"Rdh3: detector_field: {self.detector_field:x}, "
            f"par_bit: {self.par_bit:x}, reserved0: {self.reserved0:x}"
        )

    __repr__ = __str__