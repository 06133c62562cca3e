"""Human readable descriptions of fields in raw 10-byte status words.

The functions take the raw bytes of a word whose kind is already known.
"""

_WORD_SIZE = 10

_TDH_SOC_BIT = 0b10  # byte 1, bit [9]
_TDH_INTERNAL_BIT = 0b1_0000  # byte 1, bit [12]
_TDH_NO_DATA_BIT = 0b10_0000  # byte 1, bit [13]
_TDH_CONTINUATION_BIT = 0b100_0000  # byte 1, bit [14]
_TDH_PHYSICS_BIT = 0b1_0000  # byte 0, bit [4]
_TDT_PACKET_DONE_BIT = 0b1  # byte 8, bit [64]

_LANE_WARNING_MASK = 0b0101_0101
_LANE_ERROR_MASK = 0b1010_1010
_LANE_FATAL_MASKS = (0b0000_0011, 0b0000_1100, 0b0011_0000, 0b1100_0000)


def _check(word: bytes) -> None:
    if len(word) != _WORD_SIZE:
        raise ValueError(f"a status word is {_WORD_SIZE} bytes, got {len(word)}")


def tdh_no_data(tdh_slice: bytes) -> bool:
    """True if the no_data bit of a TDH is set."""
    _check(tdh_slice)
    return tdh_slice[1] & _TDH_NO_DATA_BIT != 0


def tdh_continuation(tdh_slice: bytes) -> bool:
    """True if the continuation bit of a TDH is set."""
    _check(tdh_slice)
    return tdh_slice[1] & _TDH_CONTINUATION_BIT != 0


def tdh_trigger_as_string(tdh_slice: bytes) -> str:
    """Describe the trigger field of a TDH."""
    _check(tdh_slice)
    if tdh_slice[1] & _TDH_SOC_BIT:
        return "SOC     "
    if tdh_slice[1] & _TDH_INTERNAL_BIT:
        return "Internal"
    if tdh_slice[0] & _TDH_PHYSICS_BIT:
        return "PhT     "
    return "Other   "


def tdh_continuation_as_string(tdh_slice: bytes) -> str:
    """Describe the continuation field of a TDH."""
    _check(tdh_slice)
    if tdh_slice[1] & _TDH_CONTINUATION_BIT:
        return "Cont."
    return "     "


def tdh_no_data_as_string(tdh_slice: bytes) -> str:
    """Describe whether a TDH reports no data."""
    _check(tdh_slice)
    if tdh_slice[1] & _TDH_NO_DATA_BIT:
        return "No data"
    return "Data!  "


def tdt_packet_done(tdt_slice: bytes) -> bool:
    """True if the packet_done bit of a TDT is set."""
    _check(tdt_slice)
    return tdt_slice[8] & _TDT_PACKET_DONE_BIT != 0


def tdt_packet_done_as_string(tdt_slice: bytes) -> str:
    """Describe whether a TDT closes a complete packet."""
    _check(tdt_slice)
    if tdt_slice[8] & _TDT_PACKET_DONE_BIT:
        return "Complete"
    return "Split   "


def _any_lane_fatal(lane_bytes: bytes) -> bool:
    return any(
        byte & mask == mask for byte in lane_bytes for mask in _LANE_FATAL_MASKS
    )


def _any_lane_error(lane_bytes: bytes) -> bool:
    return any(byte & _LANE_ERROR_MASK for byte in lane_bytes)


def _any_lane_warning(lane_bytes: bytes) -> bool:
    return any(byte & _LANE_WARNING_MASK for byte in lane_bytes)


def ddw0_tdt_lane_status_as_string(ddw0_tdt_slice: bytes) -> str:
    """Describe the worst lane status reported by a DDW0 or TDT."""
    _check(ddw0_tdt_slice)
    lane_bytes = ddw0_tdt_slice[:7]
    if _any_lane_fatal(lane_bytes):
        return "Fatal  "
    if _any_lane_error(lane_bytes):
        return "Error  "
    if _any_lane_warning(lane_bytes):
        return "Warning"
    return "       "