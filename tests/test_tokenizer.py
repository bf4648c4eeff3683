from __future__ import annotations

from icsfeed.ics import Token, parse_token, unfold_lines


def test_unfold_joins_continuation_lines_without_separator() -> None:
    raw = "BEGIN:VCALENDAR\r\nSUMMARY:abc\r\n def\r\n  ghi\r\nEND:VCALENDAR"
    assert unfold_lines(raw) == ["BEGIN:VCALENDAR", "SUMMARY:abcdef ghi", "END:VCALENDAR"]


def test_unfold_accepts_bare_and_crlf_line_endings() -> None:
    assert unfold_lines("A:1\nB:2\r\nC:3") == ["A:1", "B:2", "C:3"]


def test_unfold_trims_surrounding_blank_lines() -> None:
    assert unfold_lines("\n\n  A:1\nB:2\n\n") == ["A:1", "B:2"]


def test_unfold_leading_space_on_first_line_is_trimmed() -> None:
    assert unfold_lines(" A:1\n B:2\nC:3") == ["A:1B:2", "C:3"]


def test_parse_token_without_parameters() -> None:
    assert parse_token("SUMMARY:Team sync") == Token(key="SUMMARY", value="Team sync")


def test_parse_token_splits_on_first_colon_only() -> None:
    token = parse_token("URL:https://example.com/a:b")
    assert token.key == "URL"
    assert token.value == "https://example.com/a:b"


def test_parse_token_parameters() -> None:
    token = parse_token("DTSTART;TZID=Europe/Paris;VALUE=DATE:20240506")
    assert token.key == "DTSTART"
    assert token.value == "20240506"
    assert token.parameters == {"TZID": "Europe/Paris", "VALUE": "DATE"}


def test_parse_token_parameter_value_split_on_first_equals() -> None:
    token = parse_token("X-PROP;X-EXPR=a=b;FLAG:value")
    assert token.parameters == {"X-EXPR": "a=b", "FLAG": ""}


def test_parse_token_decodes_only_escaped_newlines() -> None:
    token = parse_token("DESCRIPTION:line one\\nline two\\, still two")
    assert token.value == "line one\nline two\\, still two"


def test_parse_token_without_colon_keeps_whole_line_as_key() -> None:
    assert parse_token("GARBAGE LINE") == Token(key="GARBAGE LINE", value="", parameters={})


def test_tokens_are_hashable_and_compare_parameters() -> None:
    token = parse_token("DTSTART;TZID=Asia:20240506T141312")
    assert hash(token) == hash(parse_token("DTSTART;TZID=Asia:20240506T141312"))
    assert token != parse_token("DTSTART;TZID=Europe:20240506T141312")
    assert len({token, parse_token("DTSTART;TZID=Asia:20240506T141312")}) == 1
