"""Status words of 80 bits that report lane status or calibration: TDT, DDW0 and CDW."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .status_words import StatusWord


@dataclass(frozen=True, repr=False)
class Tdt(StatusWord):
    """The TDT status word (ID 0xF0)."""

    raw_lane_status_15_0: int  # 31:0
    raw_lane_status_23_16: int  # 47:32
    raw_lane_status_27_24: int  # 55:48
    # 63 timeout_to_start, 62 timeout_start_stop, 61 timeout_in_idle, 60:56 reserved
    timeouts_reserved2: int
    # 71:68 reserved, 67 lane_starts_violation, 66 reserved,
    # 65 transmission_timeout, 64 packet_done
    flags_reserved: int
    word_id: int  # 79:72

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<IHBBBB")

    def id(self) -> int:
        return self.word_id

    def reserved0(self) -> int:
        """Return the reserved bits [71:68]."""
        return self.flags_reserved >> 4

    def lane_starts_violation(self) -> bool:
        """True if the lane_starts_violation bit is set."""
        return self.flags_reserved & 0b1000 != 0

    def reserved1(self) -> int:
        """Return the reserved bit 66, unshifted."""
        return self.flags_reserved & 0b0100

    def transmission_timeout(self) -> bool:
        """True if the transmission_timeout bit is set."""
        return self.flags_reserved & 0b0010 != 0

    def packet_done(self) -> bool:
        """True if the packet_done bit is set."""
        return self.flags_reserved & 0b0001 == 1

    def timeout_to_start(self) -> bool:
        """True if the timeout_to_start bit is set."""
        return self.timeouts_reserved2 & 0b1000_0000 != 0

    def timeout_start_stop(self) -> bool:
        """True if the timeout_start_stop bit is set."""
        return self.timeouts_reserved2 & 0b0100_0000 != 0

    def timeout_in_idle(self) -> bool:
        """True if the timeout_in_idle bit is set."""
        return self.timeouts_reserved2 & 0b0010_0000 != 0

    def reserved2(self) -> int:
        """Return the reserved bits [60:56]."""
        return self.timeouts_reserved2 & 0b0001_1111

    def lane_status_27_24(self) -> int:
        """Return lane status bits [55:48], the status of lanes 27-24."""
        return self.raw_lane_status_27_24

    def lane_status_23_16(self) -> int:
        """Return lane status bits [47:32], the status of lanes 23-16."""
        return self.raw_lane_status_23_16

    def lane_status_15_0(self) -> int:
        """Return lane status bits [31:0], the status of lanes 15-0."""
        return self.raw_lane_status_15_0

    def is_reserved_0(self) -> bool:
        return self.reserved0() == 0 and self.reserved1() == 0 and self.reserved2() == 0

    def __repr__(self) -> str:
        fields = (
            self.id(),
            int(self.lane_starts_violation()),
            int(self.transmission_timeout()),
            int(self.packet_done()),
            int(self.timeout_to_start()),
            int(self.timeout_start_stop()),
            int(self.timeout_in_idle()),
            self.lane_status_27_24(),
            self.lane_status_23_16(),
            self.lane_status_15_0(),
        )
        return " ".join(f"{value:x}" for value in fields)


@dataclass(frozen=True, repr=False)
class Ddw0(StatusWord):
    """The DDW0 status word (ID 0xE4)."""

    reserved_lane_status: int  # 63:56 reserved, 55:0 lane_status
    # 71:68 index, 67 lane_starts_violation, 66 reserved, 65 transmission_timeout, 64 reserved
    index_flags: int
    word_id: int  # 79:72

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<QBB")

    def id(self) -> int:
        return self.word_id

    def index(self) -> int:
        """Return the index field [71:68]."""
        return (self.index_flags & 0xF0) >> 4

    def lane_starts_violation(self) -> bool:
        """True if the lane_starts_violation bit is set."""
        return self.index_flags & 0b1000 != 0

    def transmission_timeout(self) -> bool:
        """True if the transmission_timeout bit is set."""
        return self.index_flags & 0b10 != 0

    def lane_status(self) -> int:
        """Return the 56-bit lane status field."""
        return self.reserved_lane_status & 0x00FF_FFFF_FFFF_FFFF

    def reserved0_1(self) -> int:
        """Return the reserved bits 66 and 64 in positions 2 and 0."""
        return self.index_flags & 0b0000_0101

    def reserved2(self) -> int:
        """Return the reserved bits [63:56] in positions 7:0."""
        return (self.reserved_lane_status & 0xFF00_0000_0000_0000) >> 56

    def is_reserved_0(self) -> bool:
        return self.reserved0_1() == 0 and self.reserved2() == 0

    def __repr__(self) -> str:
        return (
            f"DDW0: {self.id():x} {self.index():x} "
            f"{int(self.lane_starts_violation()):x} "
            f"{int(self.transmission_timeout()):x} {self.lane_status():x}"
        )


@dataclass(frozen=True, repr=False)
class Cdw(StatusWord):
    """The CDW status word (ID 0xF8)."""

    index_lsb_user_fields: int  # 63:48 calibration_word_index LSB, 47:0 user fields
    index_msb: int  # 71:64 calibration_word_index MSB
    word_id: int  # 79:72

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<QBB")

    def id(self) -> int:
        return self.word_id

    def calibration_word_index(self) -> int:
        """Return the 24-bit calibration word index."""
        return (self.index_msb << 16) | (self.index_lsb_user_fields >> 48)

    def calibration_user_fields(self) -> int:
        """Return the 48-bit calibration user fields."""
        return self.index_lsb_user_fields & 0xFFFF_FFFF_FFFF

    def is_reserved_0(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"CDW: {self.id():x} {self.calibration_word_index():x} "
            f"{self.calibration_user_fields():x}"
        )