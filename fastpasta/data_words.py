"""Helpers for data words in a CDP payload.

Data word IDs are laid out as:

* [7:5] 0b001 inner barrel data, 0b010 outer barrel data, 0b111 status word
* [4:0] for the inner barrel: lane number (0-8)
* [4:0] for the outer barrel: [4:3] connector number, [2:0] input on connector
"""

VALID_IL_ID_MIN_MAX: tuple[int, int] = (0x20, 0x28)

VALID_ML_CONNECT0_ID_MIN_MAX: tuple[int, int] = (0x43, 0x46)
VALID_ML_CONNECT1_ID_MIN_MAX: tuple[int, int] = (0x48, 0x4B)
VALID_ML_CONNECT2_ID_MIN_MAX: tuple[int, int] = (0x53, 0x56)
VALID_ML_CONNECT3_ID_MIN_MAX: tuple[int, int] = (0x58, 0x5B)

VALID_OL_CONNECT0_ID_MIN_MAX: tuple[int, int] = (0x40, 0x46)
VALID_OL_CONNECT1_ID_MIN_MAX: tuple[int, int] = (0x48, 0x4E)
VALID_OL_CONNECT2_ID_MIN_MAX: tuple[int, int] = (0x50, 0x56)
VALID_OL_CONNECT3_ID_MIN_MAX: tuple[int, int] = (0x58, 0x5E)

_OL_CONNECTORS = (
    (VALID_OL_CONNECT0_ID_MIN_MAX, 0),
    (VALID_OL_CONNECT1_ID_MIN_MAX, 7),
    (VALID_OL_CONNECT2_ID_MIN_MAX, 14),
)


def ob_data_word_id_to_lane(data_word_id: int) -> int:
    """Return the outer barrel lane number (0-27) for a data word ID."""
    for (low, high), first_lane in _OL_CONNECTORS:
        if data_word_id <= high:
            return first_lane + data_word_id % low
    return 21 + data_word_id % VALID_OL_CONNECT3_ID_MIN_MAX[0]


def ob_data_word_id_to_input_number_connector(data_word_id: int) -> int:
    """Return the input number on the connector, bits [2:0]."""
    return data_word_id & 0b111


def ob_data_word_id_to_connector(data_word_id: int) -> int:
    """Return the connector number, bits [4:3]."""
    return (data_word_id >> 3) & 0b11