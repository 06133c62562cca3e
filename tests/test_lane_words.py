import io

import pytest

from fastpasta.lane_words import Cdw, Ddw0, Tdt

LANE_0_AND_3_IN_WARNING = 0b0100_0001
LANE_4_TO_7_IN_FATAL = 0b1111_1111
LANE_8_TO_11_IN_WARNING = 0b0101_0101
LANE_12_AND_15_IN_ERROR = 0b1000_0010
LANE_16_AND_19_IN_OK = 0b0000_0000
LANE_22_IN_WARNING = 0b0001_0000
LANE_24_AND_25_IN_ERROR = 0b0000_1010

TYPICAL_TDT = bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0xF0])


def test_tdt_read_write():
    tdt = Tdt.load(io.BytesIO(TYPICAL_TDT))
    assert tdt.id() == 0xF0
    assert tdt.is_reserved_0()
    assert tdt.packet_done()
    assert tdt.to_bytes() == TYPICAL_TDT
    assert Tdt.load(io.BytesIO(tdt.to_bytes())) == tdt


def test_tdt_str_is_hex_bytes():
    tdt = Tdt.load(io.BytesIO(TYPICAL_TDT))
    assert str(tdt) == "00 00 00 00 00 00 00 00 01 F0"


def test_tdt_reporting_errors_read_write():
    raw = bytes(
        [
            LANE_0_AND_3_IN_WARNING,
            LANE_4_TO_7_IN_FATAL,
            LANE_8_TO_11_IN_WARNING,
            LANE_12_AND_15_IN_ERROR,
            LANE_16_AND_19_IN_OK,
            LANE_22_IN_WARNING,
            LANE_24_AND_25_IN_ERROR,
            0xE0,
            0x0A,
            0xF0,
        ]
    )
    tdt = Tdt.load(io.BytesIO(raw))
    assert tdt.id() == 0xF0
    assert tdt.is_reserved_0()
    assert (tdt.reserved0(), tdt.reserved1(), tdt.reserved2()) == (0, 0, 0)
    assert not tdt.packet_done()
    assert tdt.transmission_timeout()
    assert tdt.lane_starts_violation()
    assert tdt.timeout_to_start()
    assert tdt.timeout_start_stop()
    assert tdt.timeout_in_idle()
    assert tdt.lane_status_27_24() == LANE_24_AND_25_IN_ERROR
    assert tdt.lane_status_23_16() == 0x1000
    assert tdt.lane_status_15_0() == 0x8255FF41
    assert Tdt.load(io.BytesIO(tdt.to_bytes())) == tdt


def test_tdt_reserved_bits_detected():
    raw = bytes([0, 0, 0, 0, 0, 0, 0, 0x01, 0x10, 0xF0])
    tdt = Tdt.load(io.BytesIO(raw))
    assert tdt.reserved0() == 1
    assert tdt.reserved2() == 1
    assert not tdt.is_reserved_0()


def test_tdt_repr():
    tdt = Tdt.load(io.BytesIO(TYPICAL_TDT))
    assert repr(tdt) == "f0 0 0 1 0 0 0 0 0 0"


def test_ddw0_read_write():
    raw = bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xE4])
    ddw0 = Ddw0.load(io.BytesIO(raw))
    assert ddw0.id() == 0xE4
    assert ddw0.is_reserved_0()
    assert not ddw0.transmission_timeout()
    assert not ddw0.lane_starts_violation()
    assert ddw0.lane_status() == 0
    assert Ddw0.load(io.BytesIO(ddw0.to_bytes())) == ddw0


def test_ddw0_reporting_errors_read_write():
    raw = bytes(
        [
            LANE_0_AND_3_IN_WARNING,
            LANE_4_TO_7_IN_FATAL,
            LANE_8_TO_11_IN_WARNING,
            LANE_12_AND_15_IN_ERROR,
            LANE_16_AND_19_IN_OK,
            LANE_22_IN_WARNING,
            LANE_24_AND_25_IN_ERROR,
            0x00,
            0x0A,
            0xE4,
        ]
    )
    ddw0 = Ddw0.load(io.BytesIO(raw))
    assert ddw0.id() == 0xE4
    assert ddw0.index() == 0
    assert ddw0.is_reserved_0()
    assert ddw0.transmission_timeout()
    assert ddw0.lane_starts_violation()
    assert ddw0.lane_status() == 0x0A_10_00_82_55_FF_41
    assert Ddw0.load(io.BytesIO(ddw0.to_bytes())) == ddw0


def test_ddw0_index_and_reserved():
    raw = bytes([0, 0, 0, 0, 0, 0, 0, 0xAB, 0x35, 0xE4])
    ddw0 = Ddw0.load(io.BytesIO(raw))
    assert ddw0.index() == 3
    assert ddw0.reserved0_1() == 0b101
    assert ddw0.reserved2() == 0xAB
    assert not ddw0.is_reserved_0()


def test_cdw_read_write():
    raw = bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08, 0xF8])
    cdw = Cdw.load(io.BytesIO(raw))
    assert cdw.id() == 0xF8
    assert cdw.is_reserved_0()
    assert cdw.calibration_user_fields() == 0x050403020100
    assert cdw.calibration_word_index() == 0x080706
    assert Cdw.load(io.BytesIO(cdw.to_bytes())) == cdw
    assert repr(cdw) == "CDW: f8 80706 50403020100"


@pytest.mark.parametrize("cls", [Tdt, Ddw0, Cdw])
def test_short_input_raises(cls):
    with pytest.raises(EOFError):
        cls.load(io.BytesIO(bytes(9)))