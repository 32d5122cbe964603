from italy_phrases.domain.phrase import new_phrase
from italy_phrases.ui.common import (
    APP_TITLE,
    drop_index,
    edit_button_label,
    phrase_row_text,
    section_header_text,
)


def test_labels_match_screen_copy():
    assert APP_TITLE == "Italy Phrases"
    assert edit_button_label(False) == "Edit"
    assert edit_button_label(True) == "Done"
    assert section_header_text("\U0001f9ed Directions", False) == "> \U0001f9ed Directions"
    assert section_header_text("\U0001f9ed Directions", True) == "v \U0001f9ed Directions"


def test_phrase_row_text_shows_translation_and_pronunciation():
    phrase = new_phrase("Up", "Su", "Soo")

    assert phrase_row_text(phrase) == ("Up", "Su • Soo")


def test_drop_index_maps_pointer_to_row():
    spans = [(100.0, 140.0), (140.0, 180.0), (185.0, 225.0)]

    assert drop_index(50.0, spans) == 0
    assert drop_index(100.0, spans) == 0
    assert drop_index(150.0, spans) == 1
    assert drop_index(182.0, spans) == 1
    assert drop_index(200.0, spans) == 2
    assert drop_index(999.0, spans) == 2
    assert drop_index(10.0, []) == 0
