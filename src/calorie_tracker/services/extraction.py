"""Extract a structured record from free-form model replies."""

import json

from calorie_tracker.domain.errors import ResolutionError, ResolutionErrorKind


def reply_text(reply: object) -> str | None:
    """Return the textual body of a model reply, or None when there is none.

    Understands the content-parts envelope (`generateContent`), the
    authored-message envelope (`generateMessage`) and the bare-text envelope
    (`generateText`).
    """
    if not isinstance(reply, dict):
        return None
    candidates = reply.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if not isinstance(first, dict):
        return None

    text: object = None
    content = first.get("content")
    if isinstance(content, dict):
        parts = content.get("parts")
        if isinstance(parts, list):
            text = "".join(
                part["text"]
                for part in parts
                if isinstance(part, dict) and isinstance(part.get("text"), str)
            )
    elif isinstance(content, str):
        text = content
    else:
        text = first.get("output")

    if not isinstance(text, str) or not text.strip():
        return None
    return text


def extract_json_object(text: str) -> dict[str, object]:
    """Return the first outermost balanced `{...}` region that decodes to an object.

    Regions are found in a single pass; nested regions are only reached
    through their enclosing region, so each character is decoded at most once.
    """
    start = text.find("{")
    if start == -1:
        raise ResolutionError(
            ResolutionErrorKind.UNPARSABLE_OUTPUT, "no '{' in model output"
        )

    decoder = json.JSONDecoder()
    for region_start in _outer_region_starts(text, start):
        try:
            decoded, _ = decoder.raw_decode(text, region_start)
        except (ValueError, RecursionError):
            continue
        if isinstance(decoded, dict):
            return decoded

    raise ResolutionError(
        ResolutionErrorKind.INVALID_JSON, "no balanced region decodes to an object"
    )


def _outer_region_starts(text: str, start: int) -> list[int]:
    """Return start indexes of balanced regions not nested in another one."""
    open_positions: list[int] = []
    regions: list[tuple[int, int]] = []
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            open_positions.append(index)
        elif char == "}" and open_positions:
            regions.append((open_positions.pop(), index))

    regions.sort()
    starts: list[int] = []
    last_end = -1
    for region_start, region_end in regions:
        if region_start > last_end:
            starts.append(region_start)
            last_end = region_end
    return starts
