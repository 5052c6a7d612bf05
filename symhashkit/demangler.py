"""Demangler reproducing the CodeWarrior-style demangler used in the Shield ports.

The output deliberately mirrors that demangler, including its quirks: only a
fixed set of basic types, a single template argument, modifier order ignored,
and function-parameter lists rendered as ``( ... )``.
"""

from __future__ import annotations

BASIC_TYPES = {
    "v": "void",
    "b": "bool",
    "c": "char",
    "s": "short",
    "i": "int",
    "l": "long",
    "f": "float",
    "d": "double",
    "w": "wchar_t",
}

_DIGITS = "0123456789"


class _ParseError(Exception):
    """Generic parse failure."""


class _OutOfRange(_ParseError):
    """Read past the end of the input or an unknown type code."""


class _Parser:
    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else "\0"

    def at(self, pos: int) -> str:
        if 0 <= pos < len(self.text):
            return self.text[pos]
        raise _OutOfRange(pos)

    @staticmethod
    def basic_type(code: str) -> str:
        try:
            return BASIC_TYPES[code]
        except KeyError:
            raise _OutOfRange(code) from None

    def class_or_basic_type(self, out: list[str]) -> None:
        c = self.peek()
        if c == "Q":
            self.pos += 1
            self.q_class(out)
        elif c in _DIGITS:
            self.simple_class(out)
        else:
            if c == "U":
                self.pos += 1
                out.append("unsigned " + self.basic_type(self.peek()))
            else:
                out.append(self.basic_type(c))
            self.pos += 1

    def q_class(self, out: list[str]) -> None:
        count = ord(self.at(self.pos)) - ord("0")
        self.pos += 1
        for index in range(count):
            self.simple_class(out)
            if index < count - 1:
                out.append("::")

    def simple_class(self, out: list[str]) -> None:
        size = 0
        while self.pos < len(self.text) and self.text[self.pos] in _DIGITS:
            size = size * 10 + int(self.text[self.pos])
            self.pos += 1
        end = self.pos + size
        while self.pos < end:
            c = self.at(self.pos)
            out.append(c)
            self.pos += 1
            if c == "<":
                self.arg_type(out)

    def arg_type(self, out: list[str]) -> None:
        is_const = is_ptr = is_ref = False
        while self.pos < len(self.text):
            c = self.text[self.pos]
            if c == "C":
                is_const = True
            elif c == "P":
                is_ptr = True
            elif c == "R":
                is_ref = True
            elif c == "F":
                out.append("( ")
                self.pos += 1
                try:
                    self.function(out)
                except _ParseError:
                    out.append(" )")
                    # The original rethrows a sliced copy, losing the specific type.
                    raise _ParseError() from None
                out.append(" )")
                break
            else:
                break
            self.pos += 1

        if is_const:
            out.append("const ")
        type_name: list[str] = []
        try:
            self.class_or_basic_type(type_name)
        except _OutOfRange:
            if "".join(type_name):
                self._emit_type(out, type_name, is_ptr, is_ref)
            raise
        self._emit_type(out, type_name, is_ptr, is_ref)

    @staticmethod
    def _emit_type(out: list[str], type_name: list[str], is_ptr: bool, is_ref: bool) -> None:
        out.extend(type_name)
        if is_ptr:
            out.append("*")
        if is_ref:
            out.append("&")

    def function(self, out: list[str]) -> None:
        while self.pos < len(self.text):
            self.arg_type(out)
            if self.pos < len(self.text):
                out.append(", ")


def _is_marker(mangled: str, i: int) -> bool:
    """True if ``__`` followed by C, F, Q or a digit starts at ``i``."""
    if i + 2 >= len(mangled) or mangled[i:i + 2] != "__":
        return False
    after = mangled[i + 2]
    return after in "CFQ" or after in _DIGITS


def demangle(mangled: str) -> str:
    """Demangle one symbol name; names without a mangling marker are returned as is."""
    n = len(mangled)
    i = 0
    while i < n:
        i += 1
        if _is_marker(mangled, i):
            break
    if i == n:
        return mangled
    func_name = mangled[:i]

    parser = _Parser(mangled, i + 2)
    out: list[str] = []
    try:
        if parser.peek() not in ("F", "C"):
            parser.class_or_basic_type(out)
            out.append("::")
        out.append(func_name)
    except _ParseError:
        pass

    if parser.pos == n:
        return "".join(out)

    is_const = parser.peek() == "C"
    if is_const:
        parser.pos += 1

    try:
        parser.arg_type(out)
    except _ParseError:
        pass
    if is_const:
        out.append(" const")
    return "".join(out)


def demangle_lines(text: str) -> str:
    """Demangle every line of ``text``, each result followed by a newline."""
    return "".join(demangle(line) + "\n" for line in text.split("\n"))