import json

from fountain_project.io.document_settings import (
    ALT_SETTINGS_BLOCK_START,
    SETTINGS_BLOCK_END,
    SETTINGS_BLOCK_START,
    DocumentSettings,
    compose_document,
    decompose_document,
    parse_settings,
)

BODY = """Title: Test
Author: Test Author

FADE IN:

INT. HOUSE - DAY
"""


def test_parses_settings_from_file_content():
    content = BODY + "\n" + SETTINGS_BLOCK_START + '\n{"Caret Position":42,"Page Size":"A4"}\n' + SETTINGS_BLOCK_END
    split = parse_settings(content)
    assert split.settings.caret_position == 42
    assert split.settings.page_size == "A4"
    assert split.body == BODY + "\n"


def test_no_settings_block():
    split = parse_settings(BODY)
    assert len(split.settings) == 0
    assert split.settings.caret_position == 0
    assert split.body == BODY
    assert split.content_range == (0, len(BODY))
    assert split.marker_start is None


def test_alternate_start_marker():
    content = "Body\n" + ALT_SETTINGS_BLOCK_START + ' {"Locked": true} ' + SETTINGS_BLOCK_END
    split = parse_settings(content)
    assert split.settings.locked is True
    assert split.body == "Body\n"


def test_last_primary_marker_wins_over_short_marker():
    first = SETTINGS_BLOCK_START + '\n{"Caret Position":1}\n' + SETTINGS_BLOCK_END
    second = ALT_SETTINGS_BLOCK_START + '\n{"Caret Position":2}\n' + SETTINGS_BLOCK_END
    content = "Body\n" + first + "\n" + second
    split = parse_settings(content)
    assert split.settings.caret_position == 1
    assert split.body == "Body\n"


def test_short_marker_used_when_primary_is_absent():
    content = "Body\n" + ALT_SETTINGS_BLOCK_START + '\n{"Caret Position":2}\n' + SETTINGS_BLOCK_END
    split = parse_settings(content)
    assert split.settings.caret_position == 2
    assert split.body == "Body\n"


def test_value_containing_short_marker_round_trips():
    settings = DocumentSettings({"Header": "see /* BEAT: notes", "Locked": True})
    body, decoded = decompose_document(compose_document(BODY, settings))
    assert body == BODY
    assert decoded == settings
    assert decoded.locked


def test_missing_end_marker_discards_trailer():
    content = "Body text\n" + SETTINGS_BLOCK_START + '\n{"Caret Position":42}'
    split = parse_settings(content)
    assert len(split.settings) == 0
    assert split.body == "Body text\n"


def test_malformed_json_is_not_fatal(capsys):
    content = "Body\n" + SETTINGS_BLOCK_START + "\n{not json\n" + SETTINGS_BLOCK_END
    split = parse_settings(content)
    assert len(split.settings) == 0
    assert split.body == "Body\n"
    assert "[warn]" in capsys.readouterr().out


def test_non_object_json_is_ignored(capsys):
    content = "Body\n" + SETTINGS_BLOCK_START + "\n[1, 2]\n" + SETTINGS_BLOCK_END
    split = parse_settings(content)
    assert len(split.settings) == 0
    assert "[warn]" in capsys.readouterr().out


def test_generates_settings_string():
    settings = DocumentSettings()
    settings.caret_position = 100
    settings.page_size = "US Letter"
    out = settings.to_settings_string()
    assert out.startswith(SETTINGS_BLOCK_START + "\n")
    assert out.endswith("\n" + SETTINGS_BLOCK_END)
    assert '"Caret Position":100' in out


def test_empty_settings_have_no_trailer():
    assert DocumentSettings().to_settings_string() == ""
    assert compose_document("Body", DocumentSettings()) == "Body"


def test_round_trip_keeps_unknown_keys_and_order():
    values = {
        "Caret Position": 7,
        "Revision": {"color": "blue", "levels": [1, 2]},
        "Some Plugin": None,
        "Ratio": 1.5,
        "Name": "Élodie",
        "Print scene numbers": False,
    }
    body = "INT. HOUSE - DAY\n\nIt rains."
    content = compose_document(body, DocumentSettings(values))

    split = parse_settings(content)
    assert split.settings.to_dict() == values
    assert list(split.settings) == list(values)
    assert split.body == body + "\n\n"

    body_back, settings_back = decompose_document(content)
    assert body_back == body
    assert settings_back == DocumentSettings(values)
    assert compose_document(body_back, settings_back) == content


def test_trailer_json_is_compact():
    settings = DocumentSettings({"a": 1, "b": [True, "x"]})
    payload = settings.to_settings_string().split("\n")[1]
    assert payload == '{"a":1,"b":[true,"x"]}'
    assert json.loads(payload) == {"a": 1, "b": [True, "x"]}


def test_typed_getters():
    settings = DocumentSettings({
        "flag_int": 1,
        "flag_str": "TRUE",
        "num_str": "12",
        "num_float": 3.9,
        "num_bad": "twelve",
        "num_bool": True,
        "obj": {"k": 1},
    })
    assert settings.get_bool("flag_int") is True
    assert settings.get_bool("flag_str") is True
    assert settings.get_bool("missing", default=True) is True
    assert settings.get_int("num_str") == 12
    assert settings.get_int("num_float") == 3
    assert settings.get_int("num_bad", default=-1) == -1
    assert settings.get_int("num_bool", default=5) == 5
    assert settings.get_string("num_float") == "3.9"
    assert settings.get_string("missing", default="x") == "x"


def test_defaults_for_well_known_keys():
    settings = DocumentSettings()
    assert settings.page_size == "A4"
    assert settings.print_scene_numbers is True
    assert settings.locked is False
    settings.locked = True
    settings.print_scene_numbers = False
    assert settings.get("Locked") is True
    assert settings.get("Print scene numbers") is False


def test_set_has_remove():
    settings = DocumentSettings()
    settings.set("x", [1])
    assert settings.has("x") and "x" in settings
    settings.remove("x")
    settings.remove("never there")
    assert not settings.has("x")
