"""Structural editing of JavaScript configuration modules.

ConfigSource parses the object literal a config module exports (unwrapping a
single factory call such as ``defineNuxtConfig({...})``) into a tree of
source spans. Edits splice new text into those spans and re-parse, so every
byte outside an edited span (comments, blank lines, quoting style) is kept.

Only object literals, array literals and string literals are understood;
any other value is kept as an opaque expression.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from nuxt_hasura_cli.utils.errors import ConfigParseError

_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")
_PROPERTY_NAME = re.compile(r"[A-Za-z_$][\w$]*|\d+(?:\.\d+)?")
_CALLEE = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*")
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?$")
_EXPORT_PATTERNS = (
    re.compile(r"\bexport\s+default\b"),
    re.compile(r"\bmodule\.exports\s*="),
)
_OPENERS = "([{"
_CLOSERS = ")]}"
_DEFAULT_INDENT_UNIT = "  "


@dataclass(frozen=True)
class RawExpression:
    """JavaScript source inserted verbatim, e.g. ``process.env.API_URL``."""

    source: str


@dataclass
class Node:
    start: int
    end: int


@dataclass
class StringNode(Node):
    value: str = ""


@dataclass
class ExpressionNode(Node):
    pass


@dataclass
class Entry:
    """One property of an object or element of an array.

    ``end`` is the end of the value; ``comma`` the index of the separating
    comma after it, if any.
    """

    start: int
    end: int
    comma: int | None
    value: Node
    key: str | None = None


@dataclass
class ObjectNode(Node):
    entries: list[Entry] = field(default_factory=list)

    def find(self, key: str) -> Entry | None:
        # Later duplicates win, as in JavaScript
        for entry in reversed(self.entries):
            if entry.key == key:
                return entry
        return None


@dataclass
class ArrayNode(Node):
    entries: list[Entry] = field(default_factory=list)


def _line_number(text: str, index: int) -> int:
    return text.count("\n", 0, index) + 1


def _unescape(content: str) -> str:
    replacements = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}
    return re.sub(r"\\(.)", lambda m: replacements.get(m.group(1), m.group(1)), content, flags=re.DOTALL)


class _Masker:
    """Blanks out comments and string contents, keeping offsets and newlines.

    Quote characters stay in place so string literals can still be located.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.out = list(text)
        self.single_quoted = 0
        self.double_quoted = 0

    def _blank(self, start: int, end: int) -> None:
        for i in range(start, end):
            if self.text[i] != "\n":
                self.out[i] = " "

    def mask(self) -> str:
        self._scan(0, in_template_expression=False)
        return "".join(self.out)

    def _scan(self, i: int, in_template_expression: bool) -> int:
        text = self.text
        depth = 0
        while i < len(text):
            char = text[i]
            if text.startswith("//", i):
                end = text.find("\n", i)
                end = len(text) if end == -1 else end
                self._blank(i, end)
                i = end
            elif text.startswith("/*", i):
                end = text.find("*/", i + 2)
                if end == -1:
                    raise ConfigParseError(f"Unterminated comment at line {_line_number(text, i)}")
                self._blank(i, end + 2)
                i = end + 2
            elif char in "'\"":
                i = self._string(i, char)
            elif char == "`":
                i = self._template(i)
            elif in_template_expression and char == "{":
                depth += 1
                i += 1
            elif in_template_expression and char == "}":
                if depth == 0:
                    return i
                depth -= 1
                i += 1
            else:
                i += 1
        if in_template_expression:
            raise ConfigParseError("Unterminated template literal expression")
        return i

    def _string(self, start: int, quote: str) -> int:
        text = self.text
        i = start + 1
        while i < len(text):
            if text[i] == "\\":
                i += 2
                continue
            if text[i] == quote:
                self._blank(start + 1, i)
                if quote == "'":
                    self.single_quoted += 1
                else:
                    self.double_quoted += 1
                return i + 1
            if text[i] == "\n":
                break
            i += 1
        raise ConfigParseError(f"Unterminated string at line {_line_number(text, start)}")

    def _template(self, start: int) -> int:
        text = self.text
        i = start + 1
        while i < len(text):
            if text[i] == "\\":
                i += 2
                continue
            if text[i] == "`":
                self._blank(start + 1, i)
                return i + 1
            if text.startswith("${", i):
                i = self._scan(i + 2, in_template_expression=True) + 1
                continue
            i += 1
        raise ConfigParseError(f"Unterminated template literal at line {_line_number(text, start)}")


class _Parser:
    def __init__(self, text: str, masked: str) -> None:
        self.text = text
        self.masked = masked

    def error(self, message: str, index: int) -> ConfigParseError:
        return ConfigParseError(f"{message} at line {_line_number(self.text, index)}")

    def char(self, i: int) -> str:
        return self.masked[i] if i < len(self.masked) else ""

    def skip_ws(self, i: int) -> int:
        while i < len(self.masked) and self.masked[i].isspace():
            i += 1
        return i

    def matching(self, i: int) -> int:
        """Index of the bracket closing the one at ``i``."""
        depth = 0
        for j in range(i, len(self.masked)):
            char = self.masked[j]
            if char in _OPENERS:
                depth += 1
            elif char in _CLOSERS:
                depth -= 1
                if depth == 0:
                    return j
        raise self.error("Unbalanced bracket", i)

    def expression_end(self, i: int) -> int:
        """End of the expression starting at ``i``, trailing whitespace excluded."""
        depth = 0
        j = i
        while j < len(self.masked):
            char = self.masked[j]
            if char in _OPENERS:
                depth += 1
            elif char in _CLOSERS:
                if depth == 0:
                    break
                depth -= 1
            elif depth == 0 and char in ",;":
                break
            j += 1
        while j > i and self.masked[j - 1].isspace():
            j -= 1
        if j == i:
            raise self.error("Expected a value", i)
        return j

    def value(self, start: int, end: int) -> Node:
        char = self.char(start)
        if char == "{" and self.matching(start) == end - 1:
            return self.object(start)
        if char == "[" and self.matching(start) == end - 1:
            return self.array(start)
        if char in "'\"" and self.masked.find(char, start + 1) == end - 1:
            return StringNode(start, end, value=_unescape(self.text[start + 1 : end - 1]))
        return ExpressionNode(start, end)

    def _separator(self, value_end: int, close: int) -> tuple[int | None, int]:
        k = self.skip_ws(value_end)
        if self.char(k) == ",":
            return k, k + 1
        if k == close:
            return None, k
        raise self.error("Expected ',' or closing bracket", k)

    def object(self, start: int) -> ObjectNode:
        close = self.matching(start)
        node = ObjectNode(start, close + 1)
        i = start + 1
        while True:
            i = self.skip_ws(i)
            if i >= close:
                return node
            entry_start = i
            key: str | None
            char = self.char(i)
            if self.masked.startswith("...", i):
                key, after_key = None, i
            elif char in "'\"":
                quote_end = self.masked.index(char, i + 1)
                key, after_key = _unescape(self.text[i + 1 : quote_end]), quote_end + 1
            elif char == "[":
                key, after_key = None, self.matching(i) + 1
            else:
                match = _PROPERTY_NAME.match(self.masked, i)
                if not match:
                    raise self.error(f"Unexpected {char!r} in object literal", i)
                key, after_key = match.group(), match.end()

            colon = self.skip_ws(after_key)
            if after_key != entry_start and self.char(colon) == ":":
                value_start = self.skip_ws(colon + 1)
                value_end = self.expression_end(value_start)
                value = self.value(value_start, value_end)
            else:
                # spread, shorthand property or method definition
                value_end = self.expression_end(entry_start)
                value = ExpressionNode(entry_start, value_end)

            comma, i = self._separator(value_end, close)
            node.entries.append(Entry(entry_start, value_end, comma, value, key))

    def array(self, start: int) -> ArrayNode:
        close = self.matching(start)
        node = ArrayNode(start, close + 1)
        i = start + 1
        while True:
            i = self.skip_ws(i)
            if i >= close:
                return node
            if self.char(i) == ",":
                raise self.error("Sparse arrays are not supported", i)
            value_end = self.expression_end(i)
            value = self.value(i, value_end)
            comma, next_i = self._separator(value_end, close)
            node.entries.append(Entry(i, value_end, comma, value))
            i = next_i

    def exported_object(self) -> ObjectNode:
        """Locate the exported config object, unwrapping one factory call."""
        for pattern in _EXPORT_PATTERNS:
            match = pattern.search(self.masked)
            if match:
                break
        else:
            raise ConfigParseError("No default export found")

        i = self.skip_ws(match.end())
        callee = _CALLEE.match(self.masked, i)
        if callee:
            paren = self.skip_ws(callee.end())
            if self.char(paren) != "(":
                raise self.error(f"Default export '{callee.group()}' is not an object literal", i)
            i = self.skip_ws(paren + 1)
            if self.char(i) != "{":
                raise self.error(f"{callee.group()}() must be called with an object literal", i)
            after = self.skip_ws(self.matching(i) + 1)
            if self.char(after) == ",":
                after = self.skip_ws(after + 1)
            if self.char(after) != ")":
                raise self.error(f"{callee.group()}() must have a single argument", after)

        if self.char(i) != "{":
            raise self.error("Default export is not an object literal", i)
        return self.object(i)


class ConfigSource:
    """An editable config module.

    Paths are tuples of property names from the exported object, e.g.
    ``("runtimeConfig", "public", "apiBase")``.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._parse()

    def _parse(self) -> None:
        masker = _Masker(self.text)
        self.masked = masker.mask()
        self.quote = '"' if masker.double_quoted > masker.single_quoted else "'"
        self.root = _Parser(self.text, self.masked).exported_object()

    # -- reading ---------------------------------------------------------

    def _node_at(self, path: tuple[str, ...]) -> Node | None:
        node: Node = self.root
        for key in path:
            if not isinstance(node, ObjectNode):
                return None
            entry = node.find(key)
            if entry is None:
                return None
            node = entry.value
        return node

    def _to_python(self, node: Node) -> Any:
        if isinstance(node, StringNode):
            return node.value
        if isinstance(node, ArrayNode):
            return [self._to_python(entry.value) for entry in node.entries]
        if isinstance(node, ObjectNode):
            return {
                entry.key: self._to_python(entry.value)
                for entry in node.entries
                if entry.key is not None
            }
        source = self.text[node.start : node.end]
        if source in ("true", "false"):
            return source == "true"
        if source == "null":
            return None
        if _NUMBER.match(source):
            return float(source) if "." in source else int(source)
        return RawExpression(source)

    def get(self, path: tuple[str, ...]) -> Any:
        """Return the value at ``path`` as Python data, or None if absent.

        Values that are not plain literals come back as RawExpression.
        """
        node = self._node_at(path)
        return None if node is None else self._to_python(node)

    def has(self, path: tuple[str, ...]) -> bool:
        return self._node_at(path) is not None

    # -- formatting ------------------------------------------------------

    def _line_indent(self, index: int) -> str:
        line_start = self.text.rfind("\n", 0, index) + 1
        indent = []
        for char in self.text[line_start:index]:
            if char not in " \t":
                break
            indent.append(char)
        return "".join(indent)

    def _indent_unit(self) -> str:
        if self.root.entries and "\n" in self.text[self.root.start : self.root.entries[0].start]:
            outer = self._line_indent(self.root.start)
            inner = self._line_indent(self.root.entries[0].start)
            if inner.startswith(outer) and len(inner) > len(outer):
                return inner[len(outer) :]
        return _DEFAULT_INDENT_UNIT

    def _quote(self, value: str) -> str:
        escaped = (
            value.replace("\\", "\\\\")
            .replace(self.quote, "\\" + self.quote)
            .replace("\n", "\\n")
            .replace("\r", "\\r")
        )
        return f"{self.quote}{escaped}{self.quote}"

    def _key(self, key: str) -> str:
        return key if _IDENTIFIER.fullmatch(key) else self._quote(key)

    def render(self, value: Any, indent: str = "") -> str:
        """Render Python data as JavaScript source at the given indentation."""
        if isinstance(value, RawExpression):
            return value.source
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "null"
        if isinstance(value, (int, float)):
            return repr(value)
        if isinstance(value, str):
            return self._quote(value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.render(item, indent) for item in value) + "]"
        if isinstance(value, dict):
            if not value:
                return "{}"
            inner = indent + self._indent_unit()
            lines = [f"{inner}{self._key(k)}: {self.render(v, inner)}," for k, v in value.items()]
            return "{\n" + "\n".join(lines) + f"\n{indent}}}"
        raise TypeError(f"Cannot render {type(value).__name__} as JavaScript")

    # -- editing ---------------------------------------------------------

    def _splice(self, start: int, end: int, replacement: str) -> None:
        self.text = self.text[:start] + replacement + self.text[end:]
        self._parse()

    def _child_indent(self, container: ObjectNode | ArrayNode) -> str:
        if container.entries and "\n" in self.text[container.start : container.entries[0].start]:
            return self._line_indent(container.entries[-1].start)
        return self._line_indent(container.start) + self._indent_unit()

    def _insert(self, container: ObjectNode | ArrayNode, render_entry) -> None:
        """Insert a new last entry; ``render_entry(indent)`` returns its source."""
        close = container.end - 1
        child_indent = self._child_indent(container)
        entry = render_entry(child_indent)

        if not container.entries:
            if isinstance(container, ArrayNode):
                self._splice(container.start + 1, close, entry)
            else:
                outer = self._line_indent(container.start)
                self._splice(container.start + 1, close, f"\n{child_indent}{entry},\n{outer}")
            return

        first, last = container.entries[0], container.entries[-1]
        multiline = "\n" in self.text[container.start : first.start]

        if not multiline:
            if last.comma is not None:
                self._splice(last.comma + 1, last.comma + 1, f" {entry},")
            else:
                self._splice(last.end, last.end, f", {entry}")
            return

        trailing_comma = last.comma is not None
        anchor = last.comma + 1 if last.comma is not None else last.end
        line_end = self.text.find("\n", anchor)
        if line_end != -1 and line_end < close and not self.masked[anchor:line_end].strip():
            # keep a same-line comment attached to the previous entry
            anchor = line_end
        new_entry = f"\n{child_indent}{entry}" + ("," if trailing_comma else "")
        if last.comma is None:
            self.text = self.text[: last.end] + "," + self.text[last.end : anchor] + new_entry + self.text[anchor:]
            self._parse()
        else:
            self._splice(anchor, anchor, new_entry)

    def _object_at(self, path: tuple[str, ...]) -> ObjectNode:
        """Walk to the object at ``path``, creating missing levels as ``{}``."""
        node = self.root
        for depth, key in enumerate(path):
            entry = node.find(key)
            if entry is None:
                self._insert(node, lambda indent, key=key: f"{self._key(key)}: {{}}")
                return self._object_at(path)
            if not isinstance(entry.value, ObjectNode):
                dotted = ".".join(path[: depth + 1])
                raise ConfigParseError(f"'{dotted}' is not an object literal")
            node = entry.value
        return node

    def ensure_object(self, path: tuple[str, ...]) -> None:
        """Create each missing object along ``path`` (existing ones are kept)."""
        self._object_at(path)

    def set_value(self, path: tuple[str, ...], value: Any, *, raw: bool = False) -> None:
        """Set the property at ``path``, replacing only its value if it exists.

        Args:
            path: Property path; parents are created when missing
            value: Python data, or JavaScript source when ``raw`` is True
            raw: Insert ``value`` as a verbatim expression
        """
        if not path:
            raise ValueError("Path must not be empty")
        if raw:
            value = RawExpression(str(value))
        parent = self._object_at(path[:-1])
        key = path[-1]
        entry = parent.find(key)
        if entry is None:
            self._insert(parent, lambda indent: f"{self._key(key)}: {self.render(value, indent)}")
            return
        indent = self._line_indent(entry.start)
        if entry.value.start == entry.start:
            # shorthand or method: replace the whole property
            self._splice(entry.start, entry.end, f"{self._key(key)}: {self.render(value, indent)}")
        else:
            self._splice(entry.value.start, entry.value.end, self.render(value, indent))

    def add_to_list(self, path: tuple[str, ...], item: str) -> bool:
        """Append a string to the array at ``path`` unless it is already listed.

        Entries of the form ``[item, {options}]`` count as already listed.

        Returns:
            True if the item was added, False if it was already present
        """
        if not path:
            raise ValueError("Path must not be empty")
        parent = self._object_at(path[:-1])
        key = path[-1]
        entry = parent.find(key)
        if entry is None:
            self._insert(parent, lambda indent: f"{self._key(key)}: {self.render([item], indent)}")
            return True
        if not isinstance(entry.value, ArrayNode):
            raise ConfigParseError(f"'{'.'.join(path)}' is not an array literal")

        for element in entry.value.entries:
            value = element.value
            if isinstance(value, ArrayNode) and value.entries:
                value = value.entries[0].value
            if isinstance(value, StringNode) and value.value == item:
                return False

        self._insert(entry.value, lambda indent: self.render(item, indent))
        return True


__all__ = [
    "ConfigSource",
    "RawExpression",
]
