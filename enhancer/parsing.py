from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable, List, Tuple

from enhancer.errors import CompletionParseError


# "[SUBJECT]", "[Overall Mood]:", "[photography] soft flash ..."
_SECTION_HEADER = re.compile(r"^\s*\[([A-Za-z][A-Za-z0-9 _-]*)\]\s*:?\s*(.*)$")


def strip_code_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = stripped[3:]
        first_line, sep, rest = stripped.partition("\n")
        # ```json / ```JSON / ```text language tag on the opening fence
        if sep and re.fullmatch(r"[A-Za-z0-9_+-]*", first_line.strip()):
            stripped = rest
        stripped = stripped.rstrip()
        if stripped.endswith("```"):
            stripped = stripped[:-3]
    return stripped.strip()


def parse_json_completion(content: str) -> Any:
    cleaned = strip_code_fences(content)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise CompletionParseError("Failed to parse enhanced prompt as JSON", raw=cleaned) from exc


def section_key(header: str) -> str:
    return re.sub(r"[\s-]+", "_", header.strip()).lower()


def _scan_sections(text: str, known: Iterable[str]) -> List[Tuple[str, str]]:
    # A bracketed line opens a section when it names a configured section or
    # stands alone; "[Flash] harsh light" inside a body stays body text.
    known_keys = set(known)
    found: List[Tuple[str, List[str]]] = []
    for line in text.splitlines():
        match = _SECTION_HEADER.match(line)
        if match:
            key, rest = section_key(match.group(1)), match.group(2)
            if key in known_keys or not rest.strip():
                found.append((key, [rest]))
                continue
        if found:
            found[-1][1].append(line)
    return [(key, "\n".join(lines).strip()) for key, lines in found]


def parse_template_completion(content: str, sections: Iterable[str]) -> Dict[str, str]:
    """Split a bracket-headed completion into a ``section -> text`` mapping.

    Every expected section is present in the result, in order, with ``""``
    for the ones the model left out. Extra sections follow them. A repeated
    header keeps its first body.
    """
    expected = [section_key(name) for name in sections]
    cleaned = strip_code_fences(content)
    scanned = _scan_sections(cleaned, expected)
    if not scanned:
        raise CompletionParseError("No template sections found in enhanced prompt", raw=cleaned)

    bodies: Dict[str, str] = {}
    for key, body in scanned:
        bodies.setdefault(key, body)

    result: Dict[str, str] = {}
    for key in expected:
        result[key] = bodies.pop(key, "")
    result.update(bodies)
    return result
