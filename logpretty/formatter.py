"""Render one structured JSON log line as a readable multi-line block.

The header line combines timestamp, level, and message; every other field
follows as an indented ``key: "value"`` listing, with nested objects
expanded in braces.
"""

import json
import logging

from logpretty.errors import NestingTooDeepError
from logpretty.options import DEFAULT_MAX_DEPTH, PrettyOptions
from logpretty.timestamp import format_clock, parse_rfc3339

logger = logging.getLogger(__name__)

INITIAL_INDENT = 4
INDENT_INCREMENT = 2

# ANSI color codes
GREEN = "\033[32m"
CYAN = "\033[36m"
DEFAULT_FG = "\033[39m"


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def _to_text(raw: bytes | str) -> str:
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8", errors="replace")
    return raw


def decode_record(text: str) -> dict | None:
    """Decode a line into a field mapping. Returns None unless it is one JSON object."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise NestingTooDeepError("record nesting exceeds the decoder's limit") from e
    except ValueError as e:
        logger.debug("Passing line through, not JSON: %s", e)
        return None

    if not isinstance(data, dict):
        logger.debug("Passing line through, JSON %s is not an object", type(data).__name__)
        return None
    return data


def render_value(value) -> str:
    """Display text for any non-object value: strings as-is, the rest as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def colorize(level: str, message: str) -> tuple[str, str]:
    """Wrap level in green and message in cyan."""
    return f"{GREEN}{level}{DEFAULT_FG}", f"{CYAN}{message}{DEFAULT_FG}"


def render_fields(
    fields: dict,
    indent: int = INITIAL_INDENT,
    *,
    quote_keys: bool = True,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Render a mapping as indented ``key: "value"`` lines.

    Nested mappings open with ``key: {`` and close with ``}`` at the same
    indentation, their entries sitting INDENT_INCREMENT further in. Keys at
    nested levels are always quoted; ``quote_keys`` only controls the first
    level. ``depth`` is the nesting level of ``fields`` itself, and opening
    an object deeper than ``max_depth`` raises NestingTooDeepError.

    Walks with an explicit stack, so Python's recursion limit never applies.
    """
    out = []
    stack = [(iter(fields.items()), indent, depth, quote_keys)]
    while stack:
        items, level_indent, level_depth, quoted = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            if stack:
                out.append(f"{' ' * stack[-1][1]}}}\n")
            continue

        key, value = entry
        pad = " " * level_indent
        label = f'"{key}"' if quoted else key
        if isinstance(value, dict):
            if level_depth + 1 > max_depth:
                raise NestingTooDeepError(f"field {key!r} nests deeper than {max_depth} levels")
            out.append(f"{pad}{label}: {{\n")
            stack.append((iter(value.items()), level_indent + INDENT_INCREMENT, level_depth + 1, True))
        else:
            out.append(f'{pad}{label}: "{render_value(value)}"\n')
    return "".join(out)


def pretty(raw: bytes | str, options: PrettyOptions | None = None) -> str:
    """Format one log line.

    Lines that are not a single JSON object come back unchanged plus a
    newline. A missing or malformed timestamp is left out of the header;
    a missing or non-string level or message renders as an empty string.
    """
    if options is None:
        options = PrettyOptions()

    time_key = options.effective_time_key
    level_key = options.effective_level_key
    msg_key = options.effective_message_key

    text = _to_text(raw)
    record = decode_record(text)
    if record is None:
        return f"{text}\n"

    timestamp = ""
    parsed_time = parse_rfc3339(record.get(time_key))
    if parsed_time is not None:
        clock = format_clock(parsed_time)
        timestamp = f" {clock}" if options.level_first else f"{clock} "

    level = record.get(level_key)
    level = level if isinstance(level, str) else ""
    msg = record.get(msg_key)
    msg = msg if isinstance(msg, str) else ""

    if options.colorize:
        level, msg = colorize(level, msg)

    reserved = (time_key, level_key, msg_key)
    extra = {key: value for key, value in record.items() if key not in reserved}
    body = render_fields(extra, INITIAL_INDENT, quote_keys=False, max_depth=options.max_depth)

    if options.level_first:
        return f"{level}{timestamp}: {msg}\n{body}"
    return f"{timestamp}{level}: {msg}\n{body}"
