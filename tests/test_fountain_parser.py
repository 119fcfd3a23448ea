from fountain_project.model.line_kind import LineKind, is_export_only
from fountain_project.parser.fountain_parser import FountainParser, parse_screenplay
from fountain_project.parser.segmenter import segment_text

SAMPLE = """Title: Big Fish
Author: John August

INT. BLOOM HOUSE - NIGHT

Edward sits on the **edge** of the bed.

EDWARD (V.O.)
There are some fish that cannot be caught.

WILL
(quietly)
Dad.

SANDRA ^
Let him *talk*.

CUT TO:

EXT. RIVER - DAY

WILL
Again?

>THE END<
"""


def test_empty_document():
    parser = FountainParser()
    parser.parse_text("")
    assert len(parser.lines) == 1
    assert parser.lines[0].kind == LineKind.EMPTY
    assert parser.lines[0].offset == 0


def test_segment_offsets():
    segments = segment_text("ab\n\ncde\n")
    assert [s.offset for s in segments] == [0, 3, 4, 8]
    assert [s.text for s in segments] == ["ab", "", "cde", ""]


def test_crlf_is_not_special():
    lines = parse_screenplay("INT. A\r\nB").lines
    assert lines[0].text == "INT. A\r"


def test_offsets_reconstruct_text():
    parser = FountainParser(SAMPLE)
    for line in parser.lines:
        assert SAMPLE[line.offset:line.offset + line.length] == line.text
    offsets = [line.offset for line in parser.lines]
    assert offsets == sorted(offsets)
    assert parser.raw_text == SAMPLE


def test_reparse_of_raw_text_is_idempotent():
    first = FountainParser(SAMPLE)
    second = FountainParser(first.raw_text)
    assert [ln.kind for ln in first.lines] == [ln.kind for ln in second.lines]


def test_queries():
    parser = FountainParser(SAMPLE)
    assert [ln.text for ln in parser.scene_headings] == [
        "INT. BLOOM HOUSE - NIGHT",
        "EXT. RIVER - DAY",
    ]
    assert [ln.text for ln in parser.character_cues] == [
        "EDWARD (V.O.)",
        "WILL",
        "SANDRA ^",
        "WILL",
    ]
    assert parser.character_names == {"EDWARD", "WILL", "SANDRA"}
    assert parser.character_frequencies()["WILL"] == 2
    assert set(parser.title_page) == {"title", "author"}


def test_kinds_in_sample():
    parser = FountainParser(SAMPLE)
    by_text = {ln.text: ln.kind for ln in parser.lines if ln.text}
    assert by_text["(quietly)"] == LineKind.PARENTHETICAL
    assert by_text["SANDRA ^"] == LineKind.DUAL_DIALOGUE_CHARACTER
    assert by_text["Let him *talk*."] == LineKind.DUAL_DIALOGUE
    assert by_text["CUT TO:"] == LineKind.TRANSITION
    assert by_text[">THE END<"] == LineKind.CENTERED
    assert by_text["Edward sits on the **edge** of the bed."] == LineKind.ACTION
    assert not any(is_export_only(ln.kind) for ln in parser.lines)


def test_formatting_is_attached():
    parser = FountainParser(SAMPLE)
    action = next(ln for ln in parser.lines if ln.text.startswith("Edward sits"))
    assert len(action.bold_ranges) == 1
    dual = next(ln for ln in parser.lines if ln.text == "Let him *talk*.")
    assert len(dual.italic_ranges) == 1


def test_reparse_replaces_line_list():
    parser = FountainParser("INT. A - DAY")
    before = parser.lines
    parser.parse_text("EXT. B - NIGHT\n\nAction.")
    assert before[0].text == "INT. A - DAY"
    assert len(parser.lines) == 3
    assert parser.lines[0] not in before


def test_parse_change_in_range():
    parser = FountainParser("INT. HOUSE - DAY\n\nJohn waits.")
    parser.parse_change_in_range(0, 3, "EXT")
    assert parser.lines[0].text == "EXT. HOUSE - DAY"
    assert parser.lines[0].kind == LineKind.HEADING
    parser.parse_change_in_range(len(parser.raw_text), 0, "\n\nMARY\nHello.")
    assert parser.lines[-2].kind == LineKind.CHARACTER
    assert parser.lines[-1].kind == LineKind.DIALOGUE


def test_line_ids_are_fresh_per_parse():
    parser = FountainParser("A\nB")
    ids = {ln.line_id for ln in parser.lines}
    parser.parse_text("A\nB")
    assert ids.isdisjoint({ln.line_id for ln in parser.lines})
