# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Best-effort parser for the Prometheus text exposition format.

Each line is classified on its own, so the result does not depend on whether a
family's `# HELP` / `# TYPE` directives come before, after, or between its
samples. Lines that are neither a directive nor a well-formed sample are
skipped without raising.

Supported sample grammar::

    metric_name{label1="value1",label2="value2"} <value> [<integer-timestamp>]

The trailing timestamp is recognised and discarded. A value that is not a
number is kept as NaN.
"""

import re
import string

from promview.common.models import MetricFamily, MetricSample, ParseResult
from promview.common.promview_logger import PromViewLogger

__all__ = ["parse_labels", "parse_metrics", "parse_sample_value"]

_logger = PromViewLogger(__name__)

HELP_PREFIX = "# HELP"
TYPE_PREFIX = "# TYPE"
NAN_TOKEN = "NaN"

_NAME_START_CHARS = frozenset(string.ascii_letters + "_:")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_:")
_LABEL_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_")

# Only these separate lines. str.splitlines() would also break on form feeds,
# vertical tabs and Unicode separators inside HELP text.
_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")
_NUMERIC_PREFIX_PATTERN = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_metrics(text: str) -> ParseResult:
    """Parse exposition text into a mapping of family name to MetricFamily.

    Args:
        text: Raw exposition payload. `\\n`, `\\r\\n` and `\\r` line endings are accepted.

    Returns:
        ParseResult: A fresh dict keyed by family name. Families appear in the order
            their name was first seen, and samples in the order of their lines.

    Raises:
        TypeError: If `text` is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Metrics text must be a str, got {type(text).__name__}"
        )

    families: ParseResult = {}
    skipped = 0

    for line in _NEWLINE_PATTERN.split(text):
        if not line.strip():
            continue

        if line.startswith("#"):
            if line.startswith(HELP_PREFIX):
                _apply_help(families, line)
            elif line.startswith(TYPE_PREFIX):
                _apply_type(families, line)
            continue

        parsed = _parse_sample_line(line)
        if parsed is None:
            skipped += 1
            _logger.trace(lambda line=line: f"Skipping unrecognised line: {line!r}")
            continue

        name, labels, value = parsed
        _ensure_family(families, name).samples.append(
            MetricSample(labels=labels, value=value)
        )

    _logger.debug(
        lambda: f"Parsed {len(families)} metric families ({skipped} lines skipped)"
    )
    return families


def parse_labels(label_block: str | None) -> dict[str, str]:
    """Parse a label block such as `{le="100",type="test"}` into a dict.

    Scans for `key="value"` pairs, where the value is the raw text up to the next
    double quote. Escapes are not interpreted. Text between pairs is ignored, and
    a repeated key keeps its last value.
    """
    labels: dict[str, str] = {}
    if not label_block:
        return labels

    pos = 0
    while True:
        eq = label_block.find('="', pos)
        if eq == -1:
            break

        key_start = eq
        while key_start > pos and label_block[key_start - 1] in _LABEL_KEY_CHARS:
            key_start -= 1

        value_start = eq + 2
        value_end = label_block.find('"', value_start)
        if value_end == -1:
            break

        if key_start < eq:
            labels[label_block[key_start:eq]] = label_block[value_start:value_end]
        pos = value_end + 1

    return labels


def parse_sample_value(token: str) -> float:
    """Parse a sample value token.

    `NaN` maps to float("nan"). A token that float() accepts is parsed as is, so
    `+Inf`, `-Inf` and exponent forms work. Otherwise the longest leading
    decimal number is used (`1 -5` gives 1.0), and a token with no leading
    number gives NaN.
    """
    if token == NAN_TOKEN:
        return float("nan")
    # float() also accepts digit separators, which the exposition format does not
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    match = _NUMERIC_PREFIX_PATTERN.match(token.lstrip())
    if match is None:
        return float("nan")
    return float(match.group())


def _ensure_family(families: ParseResult, name: str) -> MetricFamily:
    family = families.get(name)
    if family is None:
        family = families[name] = MetricFamily()
    return family


def _split_directive(line: str, prefix: str) -> tuple[str, str] | None:
    """Split `<prefix> <name> <rest>` into (name, rest).

    Exactly one space separates each part. Returns None if the name or the rest
    is missing.
    """
    body = line[len(prefix) :]
    if not body.startswith(" "):
        return None
    body = body[1:]

    name_end = 0
    while name_end < len(body) and not body[name_end].isspace():
        name_end += 1
    if name_end == 0:
        return None

    name, remainder = body[:name_end], body[name_end:]
    if not remainder.startswith(" ") or len(remainder) < 2:
        return None
    return name, remainder[1:]


def _apply_help(families: ParseResult, line: str) -> None:
    parts = _split_directive(line, HELP_PREFIX)
    if parts is None:
        return
    name, help_text = parts
    _ensure_family(families, name).help = help_text


def _apply_type(families: ParseResult, line: str) -> None:
    parts = _split_directive(line, TYPE_PREFIX)
    if parts is None:
        return
    name, remainder = parts
    kind = remainder.split(maxsplit=1)
    if not kind or remainder[0].isspace():
        return
    _ensure_family(families, name).type = kind[0]


def _scan_name(line: str) -> int:
    """Return the length of the metric name at the start of `line` (0 if none)."""
    if not line or line[0] not in _NAME_START_CHARS:
        return 0
    end = 1
    while end < len(line) and line[end] in _NAME_CHARS:
        end += 1
    return end


def _split_value_region(tail: str) -> str | None:
    """Return the value text of `<whitespace><value>[<whitespace><digits>]`.

    Returns None if `tail` does not start with whitespace or holds no value. A
    trailing run of ASCII digits after whitespace is the timestamp and is
    dropped. Everything else, including further tokens, stays in the value.
    """
    if not tail or not tail[0].isspace():
        return None

    body = tail.lstrip()
    if not body:
        # The value itself may be whitespace when at least two whitespace
        # characters follow the name or label block.
        return tail[1:] if len(tail) > 1 else None

    digits_start = len(body)
    while digits_start > 0 and body[digits_start - 1] in string.digits:
        digits_start -= 1
    if 0 < digits_start < len(body) and body[digits_start - 1].isspace():
        return body[:digits_start].rstrip()
    return body


def _parse_sample_line(line: str) -> tuple[str, dict[str, str], float] | None:
    """Split a sample line into (name, labels, value), or None if it does not match.

    The label block, if any, must follow the name directly. It closes at the
    first `}` that is followed by whitespace and a value, so a `}` inside a
    quoted label value does not end it.
    """
    name_end = _scan_name(line)
    if name_end == 0:
        return None

    name, rest = line[:name_end], line[name_end:]

    label_block = None
    value_text = None
    if rest.startswith("{"):
        close = rest.find("}")
        while close != -1:
            value_text = _split_value_region(rest[close + 1 :])
            if value_text is not None:
                label_block = rest[: close + 1]
                break
            close = rest.find("}", close + 1)
    else:
        value_text = _split_value_region(rest)

    if value_text is None:
        return None

    return name, parse_labels(label_block), parse_sample_value(value_text)
