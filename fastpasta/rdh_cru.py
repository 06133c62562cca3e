"""The RDH CRU: a 64-byte header made of the RDH subwords and CRU fields."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from .rdh import Rdh0, Rdh1, Rdh2, Rdh3
from .words_lib import read_exact

_HEADER_TEXT_TOP = (
    "RDH   Header  FEE   Sys   Offset  Link  Packet    BC   Orbit       "
    "Data       Trigger   Pages    Stop"
)
_HEADER_TEXT_BOTTOM = (
    "ver   size    ID    ID    next    ID    counter        counter     "
    "format     type      counter  bit"
)

_CRU_FIELDS = struct.Struct("<HHBBH")
_U64 = struct.Struct("<Q")


@dataclass(frozen=True, repr=False)
class RdhCRU:
    """A full RDH as written by the CRU (versions 6 and 7 share the layout)."""

    rdh0: Rdh0
    offset_new_packet: int
    memory_size: int
    link_id: int
    packet_counter: int
    cruid_dw: int  # 12 bit cru_id, 4 bit dw
    rdh1: Rdh1
    dataformat_reserved0: int  # 8 bit data_format, 56 bit reserved0
    rdh2: Rdh2
    reserved1: int
    rdh3: Rdh3
    reserved2: int

    SIZE: ClassVar[int] = 64

    @staticmethod
    def header_text(indent: int) -> str:
        """Return two header lines describing the columns of an RDH table."""
        pad = " " * indent
        return f"{pad}{_HEADER_TEXT_TOP}\n{pad}{_HEADER_TEXT_BOTTOM}\n"

    @classmethod
    def load(cls, reader: BinaryIO) -> RdhCRU:
        """Decode an RDH CRU from the next 64 bytes of ``reader``."""
        return cls.load_from_rdh0(reader, Rdh0.load(reader))

    @classmethod
    def load_from_rdh0(cls, reader: BinaryIO, rdh0: Rdh0) -> RdhCRU:
        """Decode the rest of an RDH CRU whose RDH0 has already been read."""
        offset_new_packet, memory_size, link_id, packet_counter, cruid_dw = (
            _CRU_FIELDS.unpack(read_exact(reader, _CRU_FIELDS.size))
        )
        rdh1 = Rdh1.load(reader)
        (dataformat_reserved0,) = _U64.unpack(read_exact(reader, 8))
        rdh2 = Rdh2.load(reader)
        (reserved1,) = _U64.unpack(read_exact(reader, 8))
        rdh3 = Rdh3.load(reader)
        (reserved2,) = _U64.unpack(read_exact(reader, 8))
        return cls(
            rdh0=rdh0,
            offset_new_packet=offset_new_packet,
            memory_size=memory_size,
            link_id=link_id,
            packet_counter=packet_counter,
            cruid_dw=cruid_dw,
            rdh1=rdh1,
            dataformat_reserved0=dataformat_reserved0,
            rdh2=rdh2,
            reserved1=reserved1,
            rdh3=rdh3,
            reserved2=reserved2,
        )

    def to_bytes(self) -> bytes:
        """Encode as the 64-byte little-endian wire format."""
        return b"".join(
            (
                self.rdh0.to_bytes(),
                _CRU_FIELDS.pack(
                    self.offset_new_packet,
                    self.memory_size,
                    self.link_id,
                    self.packet_counter,
                    self.cruid_dw,
                ),
                self.rdh1.to_bytes(),
                _U64.pack(self.dataformat_reserved0),
                self.rdh2.to_bytes(),
                _U64.pack(self.reserved1),
                self.rdh3.to_bytes(),
                _U64.pack(self.reserved2),
            )
        )

    def version(self) -> int:
        """Return the RDH version (the header ID)."""
        return self.rdh0.header_id

    def cru_id(self) -> int:
        """Return the CRU ID from the 12 LSB of the CRU ID/DW field."""
        return self.cruid_dw & 0x0FFF

    def dw(self) -> int:
        """Return the DW from the 4 MSB of the CRU ID/DW field."""
        return (self.cruid_dw & 0xF000) >> 12

    def data_format(self) -> int:
        """Return the data format from the 8 LSB."""
        return self.dataformat_reserved0 & 0xFF

    def reserved0(self) -> int:
        """Return the 56 reserved bits following the data format."""
        return (self.dataformat_reserved0 & 0xFFFF_FFFF_FFFF_FF00) >> 8

    def payload_size(self) -> int:
        """Return the payload size in bytes, excluding the 64-byte RDH."""
        if self.memory_size < self.SIZE:
            raise ValueError(
                f"memory size {self.memory_size} is smaller than the RDH size {self.SIZE}"
            )
        return self.memory_size - self.SIZE

    def offset_to_next(self) -> int:
        """Return the offset to the next RDH in bytes."""
        return self.offset_new_packet

    def stop_bit(self) -> int:
        """Return the stop bit."""
        return self.rdh2.stop_bit

    def pages_counter(self) -> int:
        """Return the pages counter."""
        return self.rdh2.pages_counter

    def trigger_type(self) -> int:
        """Return the trigger type."""
        return self.rdh2.trigger_type

    def fee_id(self) -> int:
        """Return the FEE ID."""
        return self.rdh0.fee_id

    def __str__(self) -> str:
        cru_fields = (
            f"{self.offset_new_packet:<8}{self.link_id:<6}{self.packet_counter:<10}"
        )
        return f"{self.rdh0}{cru_fields}{self.rdh1}{self.data_format():<11}{self.rdh2}"

    def __repr__(self) -> str:
        return (
            f"RdhCRU\n\t{self.rdh0!r}\n\toffset_new_packet: {self.offset_new_packet}"
            f"\n\tmemory_size: {self.memory_size}\n\tlink_id: {self.link_id}"
            f"\n\tpacket_counter: {self.packet_counter}\n\tcruid_dw: {self.cruid_dw}"
            f"\n\t{self.rdh1!r}\n\tdataformat_reserved0: {self.dataformat_reserved0}"
            f"\n\t{self.rdh2!r}\n\treserved1: {self.reserved1}\n\t{self.rdh3!r}"
            f"\n\treserved2: {self.reserved2}\n\tversion: {self.version()}"
        )


def _sample(
    header_id: int,
    link_id: int,
    packet_counter: int,
    data_format: int,
    pages_counter: int,
    stop_bit: int,
) -> RdhCRU:
    return RdhCRU(
        rdh0=Rdh0(
            header_id=header_id,
            header_size=0x40,
            fee_id=0x502A,
            priority_bit=0,
            system_id=0x20,
            reserved0=0,
        ),
        offset_new_packet=0x13E0,
        memory_size=0x13E0,
        link_id=link_id,
        packet_counter=packet_counter,
        cruid_dw=0x0018,
        rdh1=Rdh1(bc_reserved0=0, orbit=0x0B7DD575),
        dataformat_reserved0=data_format,
        rdh2=Rdh2(
            trigger_type=0x00006A03,
            pages_counter=pages_counter,
            stop_bit=stop_bit,
            reserved0=0,
        ),
        reserved1=0,
        rdh3=Rdh3(detector_field=0, par_bit=0, reserved0=0),
        reserved2=0,
    )


CORRECT_RDH_CRU_V7 = _sample(7, 0, 0, 2, 0, 0)
"""A valid version 7 RDH CRU."""

CORRECT_RDH_CRU_V6 = _sample(6, 2, 1, 0, 0, 0)
"""A valid version 6 RDH CRU."""

CORRECT_RDH_CRU_V7_NEXT = _sample(7, 0, 2, 2, 1, 0)
"""A version 7 RDH CRU following ``CORRECT_RDH_CRU_V7``."""

CORRECT_RDH_CRU_V7_NEXT_NEXT_STOP = _sample(7, 0, 3, 2, 2, 1)
"""A version 7 RDH CRU closing an HBF."""