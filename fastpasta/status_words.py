"""Status words of 80 bits: the common base and the IHW and TDH words."""

from __future__ import annotations

import logging
import struct
from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass
from typing import BinaryIO, ClassVar, TypeVar

from .words_lib import read_exact

_log = logging.getLogger(__name__)

_W = TypeVar("_W", bound="StatusWord")


def is_lane_active(lane: int, active_lanes: int) -> bool:
    """True if the bit for ``lane`` is set in an IHW active lanes field."""
    _log.debug("Lane: %d, Active lanes: %#X", lane, active_lanes)
    return active_lanes & (1 << lane) != 0


class StatusWord(ABC):
    """A 10-byte little-endian status word.

    Subclasses are dataclasses whose fields, in order, match ``_FORMAT``.
    """

    SIZE: ClassVar[int] = 10
    _FORMAT: ClassVar[struct.Struct]

    @abstractmethod
    def id(self) -> int:
        """Return the ID byte of the word."""

    @abstractmethod
    def is_reserved_0(self) -> bool:
        """True if all reserved bits are 0."""

    @classmethod
    def load(cls: type[_W], reader: BinaryIO) -> _W:
        """Decode a word from the next 10 bytes of ``reader``."""
        return cls(*cls._FORMAT.unpack(read_exact(reader, cls.SIZE)))

    def to_bytes(self) -> bytes:
        """Encode as the 10-byte wire format."""
        return self._FORMAT.pack(*astuple(self))

    def __str__(self) -> str:
        return " ".join(f"{byte:02X}" for byte in self.to_bytes())


@dataclass(frozen=True, repr=False)
class Ihw(StatusWord):
    """The IHW status word (ID 0xE0)."""

    active_lanes_reserved: int  # 27:0 active lanes, 31:28 reserved
    reserved_mid: int  # 63:32 reserved
    id_reserved: int  # 71:64 reserved, 79:72 id

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<IIH")

    def id(self) -> int:
        return self.id_reserved >> 8

    def reserved(self) -> int:
        """Return the integer value of the reserved bits [71:28]."""
        four_lsb = (self.active_lanes_reserved >> 28) & 0xF
        eight_msb = self.id_reserved & 0xFF
        return (eight_msb << 36) | (self.reserved_mid << 4) | four_lsb

    def active_lanes(self) -> int:
        """Return the active lanes field [27:0]."""
        return self.active_lanes_reserved & 0xFFF_FFFF

    def is_reserved_0(self) -> bool:
        return self.reserved() == 0

    def __repr__(self) -> str:
        return f"{self.id():x} {self.reserved():x} {self.active_lanes():x}"


@dataclass(frozen=True, repr=False)
class Tdh(StatusWord):
    """The TDH status word (ID 0xE8)."""

    # 11:0 trigger_type, 12 internal_trigger, 13 no_data, 14 continuation, 15 reserved
    trigger_flags: int
    trigger_bc_reserved1: int  # 27:16 trigger_bc, 31:28 reserved
    trigger_orbit: int  # 63:32
    reserved0_id: int  # 71:64 reserved, 79:72 id

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<HHIH")

    def id(self) -> int:
        return self.reserved0_id >> 8

    def reserved0(self) -> int:
        """Return the reserved bits [71:64]."""
        return self.reserved0_id & 0xFF

    def reserved1(self) -> int:
        """Return the reserved bits [31:28], unshifted."""
        return self.trigger_bc_reserved1 & 0xF000

    def trigger_bc(self) -> int:
        """Return the trigger bunch counter."""
        return self.trigger_bc_reserved1 & 0x0FFF

    def reserved2(self) -> int:
        """Return the reserved bit 15, unshifted."""
        return self.trigger_flags & 0x8000

    def continuation(self) -> int:
        """Return the continuation bit."""
        return (self.trigger_flags & 0x4000) >> 14

    def no_data(self) -> int:
        """Return the no_data bit."""
        return (self.trigger_flags & 0x2000) >> 13

    def internal_trigger(self) -> int:
        """Return the internal_trigger bit."""
        return (self.trigger_flags & 0x1000) >> 12

    def trigger_type(self) -> int:
        """Return the 12-bit trigger type."""
        return self.trigger_flags & 0x0FFF

    def is_reserved_0(self) -> bool:
        return self.reserved0() == 0 and self.reserved1() == 0 and self.reserved2() == 0

    def __repr__(self) -> str:
        return (
            f"TDH: {self.id():X} {self.reserved0():x} {self.trigger_orbit:x} "
            f"{self.reserved1():x} {self.trigger_bc():x} {self.reserved2():x} "
            f"{self.continuation():x} {self.no_data():x} "
            f"{self.internal_trigger():x} {self.trigger_type():x}"
        )