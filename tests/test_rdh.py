import io

import pytest

from fastpasta.rdh import Rdh0, Rdh1, Rdh2, Rdh3

RDH0_BYTES = bytes([0x07, 0x40, 0x2A, 0x50, 0x00, 0x20, 0x00, 0x00])
RDH1_BYTES = bytes([0x00, 0x00, 0x00, 0x00, 0x75, 0xD5, 0x7D, 0x0B])
RDH2_BYTES = bytes([0x03, 0x6A, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00])
RDH3_BYTES = bytes(8)


def test_rdh0_load_fields():
    rdh0 = Rdh0.load(io.BytesIO(RDH0_BYTES))
    assert rdh0 == Rdh0(
        header_id=0x7,
        header_size=0x40,
        fee_id=0x502A,
        priority_bit=0,
        system_id=0x20,
        reserved0=0,
    )


def test_rdh0_round_trip():
    rdh0 = Rdh0.load(io.BytesIO(RDH0_BYTES))
    assert rdh0.to_bytes() == RDH0_BYTES
    assert Rdh0.load(io.BytesIO(rdh0.to_bytes())) == rdh0


def test_rdh0_display_columns():
    rdh0 = Rdh0.load(io.BytesIO(RDH0_BYTES))
    text = str(rdh0)
    assert text.split() == [str(0x7), str(0x40), str(0x502A), str(0x20)]
    assert text.startswith(str(0x7).ljust(6))


def test_rdh1_load_fields():
    rdh1 = Rdh1.load(io.BytesIO(RDH1_BYTES))
    assert rdh1.bc() == 0
    assert rdh1.reserved0() == 0
    assert rdh1.orbit == 0x0B7DD575
    assert rdh1.to_bytes() == RDH1_BYTES


def test_rdh1_display_shows_hex_orbit():
    rdh1 = Rdh1.load(io.BytesIO(RDH1_BYTES))
    assert str(rdh1).split() == ["0", hex(0x0B7DD575)]


@pytest.mark.parametrize("bc, reserved0", [(0, 0), (0xFFF, 0), (0x123, 0xABCDE), (1, 1)])
def test_rdh1_from_fields_round_trip(bc, reserved0):
    rdh1 = Rdh1.from_fields(bc, 0x0B7DD575, reserved0)
    assert rdh1.bc() == bc
    assert rdh1.reserved0() == reserved0
    assert Rdh1.load(io.BytesIO(rdh1.to_bytes())) == rdh1


def test_rdh2_load_fields():
    rdh2 = Rdh2.load(io.BytesIO(RDH2_BYTES))
    assert rdh2 == Rdh2(trigger_type=0x00006A03, pages_counter=0, stop_bit=0, reserved0=0)
    assert rdh2.to_bytes() == RDH2_BYTES


def test_rdh2_pht_trigger_bit():
    assert not Rdh2(0x00006A03, 0, 0, 0).is_pht_trigger()
    assert Rdh2(0x00006A03 | 0x10, 0, 0, 0).is_pht_trigger()


def test_rdh2_display_columns():
    rdh2 = Rdh2(trigger_type=0x00006A03, pages_counter=2, stop_bit=1, reserved0=0)
    assert str(rdh2).split() == [hex(0x00006A03), "2", "1"]


def test_rdh3_round_trip():
    rdh3 = Rdh3.load(io.BytesIO(RDH3_BYTES))
    assert rdh3 == Rdh3(detector_field=0, par_bit=0, reserved0=0)
    other = Rdh3(detector_field=0xF, par_bit=0x1, reserved0=0x2)
    assert Rdh3.load(io.BytesIO(other.to_bytes())) == other


def test_subwords_read_consecutively():
    stream = io.BytesIO(RDH0_BYTES + RDH1_BYTES + RDH2_BYTES + RDH3_BYTES)
    rdh0 = Rdh0.load(stream)
    rdh1 = Rdh1.load(stream)
    rdh2 = Rdh2.load(stream)
    rdh3 = Rdh3.load(stream)
    assert rdh0.fee_id == 0x502A
    assert rdh1.orbit == 0x0B7DD575
    assert rdh2.trigger_type == 0x00006A03
    assert rdh3.detector_field == 0
    assert stream.read() == b""


@pytest.mark.parametrize("cls", [Rdh0, Rdh1, Rdh2, Rdh3])
def test_load_short_input_raises(cls):
    with pytest.raises(EOFError):
        cls.load(io.BytesIO(bytes(7)))