# directives.py
# Report customization directive grammar (this file):
#   literal: content between two matching quotes, either '...' or "..."
#     - content is non-empty and never crosses a line break
#     - the closing quote is the nearest matching one (no escapes), so a
#       '-literal cannot contain ' and a "-literal cannot contain "
#     - quote styles may be mixed freely within one string
#   set directive:        literal [sep literal ...]          'a','b',"c"
#   map directive:        literal ':' literal [sep ...]      'k':"v",'k2':'v2'
#   nested map directive: literal '.' literal ':' literal    'col'.'old':'new'
#   sep: anything at all; text that is not part of a match is ignored
#
# Scanning: left to right. At each offset try the grammar; on success record
# it and continue after the match, otherwise move one character forward.
# Repeated keys: the last match wins.
#
# Parsing never fails: None/blank input gives an empty collection and
# malformed fragments are skipped.
#
# CLI: python3 directives.py <set|map|nested> <file>
# Usage errors: print exactly one line to stderr starting with "ERROR -- "
# and exit 66.

import sys
from typing import Callable, Dict, List, Optional, Set, Tuple

QUOTES = frozenset("'\"")
LINE_BREAKS = frozenset("\n\r\u0085\u2028\u2029")

EXIT_USAGE = 66


class DirectiveUsageError(Exception):
    pass


# -------- Literal scanning --------
class Cursor:
    def __init__(self, s: str):
        self.s = s
        self.i = 0
        self.n = len(s)

    def peek(self, k: int = 0) -> str:
        j = self.i + k
        return self.s[j] if j < self.n else ''

    def at_end(self) -> bool:
        return self.i >= self.n


def _scan_literal(s: str, start: int) -> Optional[Tuple[str, int]]:
    """
    Read the literal opening at s[start]. Returns (content, end) where end is
    the offset just past the closing quote, or None if there is no literal.
    """
    if start >= len(s) or s[start] not in QUOTES:
        return None
    quote = s[start]
    # content needs at least one character, so the closing quote is at start+2
    # or later; a quote right after the opener is content
    close = s.find(quote, start + 2)
    if close == -1:
        return None
    content = s[start + 1:close]
    if any(ch in LINE_BREAKS for ch in content):
        return None
    return content, close + 1


def _expect(s: str, pos: int, ch: str) -> Optional[int]:
    if pos < len(s) and s[pos] == ch:
        return pos + 1
    return None


# -------- Clause matchers: (captured literals, end) or None --------
def _match_value(s: str, pos: int) -> Optional[Tuple[Tuple[str, ...], int]]:
    lit = _scan_literal(s, pos)
    if lit is None:
        return None
    value, end = lit
    return (value,), end


def _match_pair(s: str, pos: int) -> Optional[Tuple[Tuple[str, ...], int]]:
    key = _scan_literal(s, pos)
    if key is None:
        return None
    colon = _expect(s, key[1], ':')
    if colon is None:
        return None
    value = _scan_literal(s, colon)
    if value is None:
        return None
    return (key[0], value[0]), value[1]


def _match_triple(s: str, pos: int) -> Optional[Tuple[Tuple[str, ...], int]]:
    outer = _scan_literal(s, pos)
    if outer is None:
        return None
    dot = _expect(s, outer[1], '.')
    if dot is None:
        return None
    pair = _match_pair(s, dot)
    if pair is None:
        return None
    (inner, value), end = pair
    return (outer[0], inner, value), end


Matcher = Callable[[str, int], Optional[Tuple[Tuple[str, ...], int]]]


def _find_all(s: str, match: Matcher) -> List[Tuple[str, ...]]:
    """Every match of `match` in s, left to right, skipping what doesn't fit."""
    found: List[Tuple[str, ...]] = []
    cur = Cursor(s)
    while not cur.at_end():
        if cur.peek() not in QUOTES:
            cur.i += 1
            continue
        m = match(s, cur.i)
        if m is None:
            cur.i += 1
            continue
        groups, end = m
        found.append(groups)
        cur.i = end
    return found


def _is_blank(raw: Optional[str]) -> bool:
    return raw is None or not raw.strip()


# -------- Public entry points --------
def parse_set(raw: Optional[str]) -> Set[str]:
    """
    Parses quoted values like 'value1',"value2",'value3' into a set.
    """
    result: Set[str] = set()
    if _is_blank(raw):
        return result
    for (value,) in _find_all(raw, _match_value):
        result.add(value)
    return result


def parse_map(raw: Optional[str]) -> Dict[str, str]:
    """
    Parses key/value pairs like 'key1':'value1',"key2":"value2" into a dict.
    Key and value quotes are independent of each other.
    """
    result: Dict[str, str] = {}
    if _is_blank(raw):
        return result
    for key, value in _find_all(raw, _match_pair):
        result[key] = value
    return result


def parse_nested_map(raw: Optional[str]) -> Dict[str, Dict[str, str]]:
    """
    Parses triples like 'col'.'old':'new',"col2"."a":"b" into a two-level
    dict: {outer: {inner: value}}.
    """
    result: Dict[str, Dict[str, str]] = {}
    if _is_blank(raw):
        return result
    for outer, inner, value in _find_all(raw, _match_triple):
        result.setdefault(outer, {})[inner] = value
    return result


# -------- Pretty output --------
def _format_set(values: Set[str]) -> List[str]:
    out = ["begin-set"]
    out.extend(f"value -- {v}" for v in sorted(values))
    out.append("end-set")
    return out


def _format_map(entries: Dict[str, str]) -> List[str]:
    out = ["begin-map"]
    out.extend(f"{k} -- {entries[k]}" for k in sorted(entries))
    out.append("end-map")
    return out


def _format_nested_map(entries: Dict[str, Dict[str, str]]) -> List[str]:
    out = ["begin-map"]
    for outer in sorted(entries):
        out.append(f"{outer} -- map -- ")
        out.extend(_format_map(entries[outer]))
    out.append("end-map")
    return out


KINDS: Dict[str, Callable[[Optional[str]], List[str]]] = {
    "set": lambda raw: _format_set(parse_set(raw)),
    "map": lambda raw: _format_map(parse_map(raw)),
    "nested": lambda raw: _format_nested_map(parse_nested_map(raw)),
}


def render(kind: str, raw: Optional[str]) -> List[str]:
    """Parse raw as the given directive kind and return the output lines."""
    try:
        fmt = KINDS[kind]
    except KeyError:
        raise DirectiveUsageError(f"unknown directive kind: {kind}") from None
    return fmt(raw)


# ---------- CLI (LF-only output and single-line error) ----------
def _writeline_stdout(line: str) -> None:
    sys.stdout.buffer.write((line + "\n").encode("utf-8"))

def _writeline_stderr_error(msg: str) -> None:
    sys.stderr.buffer.write((f"ERROR -- {msg}\n").encode("utf-8"))

def main(argv: list[str]) -> int:
    if len(argv) != 3:
        _writeline_stderr_error("usage: directives.py <set|map|nested> <file>")
        return EXIT_USAGE
    kind, path = argv[1], argv[2]
    try:
        if kind not in KINDS:
            raise DirectiveUsageError(f"unknown directive kind: {kind}")
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        for line in render(kind, data):
            _writeline_stdout(line)
        return 0
    except FileNotFoundError:
        _writeline_stderr_error("file not found")
        return EXIT_USAGE
    except UnicodeDecodeError:
        _writeline_stderr_error("input is not valid UTF-8")
        return EXIT_USAGE
    except DirectiveUsageError as e:
        _writeline_stderr_error(str(e))
        return EXIT_USAGE

if __name__ == "__main__":
    sys.exit(main(sys.argv))
