"""Line unfolding and content-line tokenizing."""

from __future__ import annotations

from .constants import LINE_BREAK_RE
from .models import Token


def unfold_lines(raw: str) -> list[str]:
    lines: list[str] = []
    for physical in LINE_BREAK_RE.split(raw.strip()):
        if physical.startswith(" "):
            if lines:
                lines[-1] += physical[1:]
            else:
                lines.append(physical[1:])
        else:
            lines.append(physical)
    return lines


def parse_token(line: str) -> Token:
    """Split one logical line into key, parameters and value.

    Only the escaped newline sequence is decoded in the value. A line without
    a colon becomes a token whose key is the whole line and whose value is empty.
    """
    name, separator, value = line.partition(":")
    if not separator:
        return Token(key=line)

    value = value.replace("\\n", "\n")
    if ";" not in name:
        return Token(key=name, value=value)

    key, *segments = name.split(";")
    parameters: dict[str, str] = {}
    for segment in segments:
        param_name, _, param_value = segment.partition("=")
        parameters[param_name] = param_value
    return Token(key=key, value=value, parameters=parameters)
