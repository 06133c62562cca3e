import pytest

from fastpasta.data_words import (
    VALID_OL_CONNECT0_ID_MIN_MAX,
    VALID_OL_CONNECT1_ID_MIN_MAX,
    VALID_OL_CONNECT2_ID_MIN_MAX,
    VALID_OL_CONNECT3_ID_MIN_MAX,
    ob_data_word_id_to_connector,
    ob_data_word_id_to_input_number_connector,
    ob_data_word_id_to_lane,
)

DATA_WORDS_OB = bytes(
    [
        0xA8, 0x00, 0xC0, 0x01, 0xFE, 0x7F, 0x05, 0xFE, 0x7F, 0x46, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0xA0, 0x00, 0xC0, 0x01, 0xFE, 0x7F, 0x05, 0xFE, 0x7F, 0x48, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0xA0, 0x00, 0xC0, 0x01, 0xFE, 0x7F, 0x05, 0xFE, 0x7F, 0x49, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0xA0, 0x00, 0xC0, 0x01, 0xFE, 0x7F, 0x05, 0xFE, 0x7F, 0x4A, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
    ]
)

OL_RANGES = [
    VALID_OL_CONNECT0_ID_MIN_MAX,
    VALID_OL_CONNECT1_ID_MIN_MAX,
    VALID_OL_CONNECT2_ID_MIN_MAX,
    VALID_OL_CONNECT3_ID_MIN_MAX,
]


def _ids():
    # data format 0 pads each 10-byte word to 16 bytes; the ID is at byte 9
    return [DATA_WORDS_OB[start + 9] for start in range(0, len(DATA_WORDS_OB), 16)]


def test_ob_data_word_id_to_lane():
    assert [ob_data_word_id_to_lane(i) for i in _ids()] == [6, 7, 8, 9]


def test_ob_data_word_id_to_input_number_connector():
    assert [ob_data_word_id_to_input_number_connector(i) for i in _ids()] == [6, 0, 1, 2]


def test_ob_data_word_id_to_connector():
    assert [ob_data_word_id_to_connector(i) for i in _ids()] == [0, 1, 1, 1]


def test_all_ol_ids_map_to_distinct_lanes():
    lanes = [
        ob_data_word_id_to_lane(word_id)
        for low, high in OL_RANGES
        for word_id in range(low, high + 1)
    ]
    assert sorted(lanes) == list(range(28))


@pytest.mark.parametrize("connector, bounds", list(enumerate(OL_RANGES)))
def test_ol_ranges_match_connector_field(connector, bounds):
    low, high = bounds
    assert low <= high
    for word_id in range(low, high + 1):
        assert ob_data_word_id_to_connector(word_id) == connector