"""Two-pass assembler for SUBLEQ assembly source."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Optional

from subleqvm.interpreter import INPUT_ADDR_MARKER, OUTPUT_ADDR_MARKER

_WORD_PATTERN = re.compile(r"[^ \t\n\v\f\r]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class AssemblyError(Exception):
    """Raised when assembly source cannot be read or assembled."""


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _strip_trailing_symbols(text: str) -> str:
    end = len(text)
    while end and not _is_alnum(text[end - 1]):
        end -= 1
    return text[:end]


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring what follows it.

    Raises ValueError if there is none and OverflowError if it does not fit
    in 32 bits.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(text)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(text)
    return value


def _offset(text: str) -> int:
    try:
        return _leading_int(text)
    except OverflowError:
        raise AssemblyError(f"Number out of range: {text}") from None
    except ValueError:
        raise AssemblyError(f"Invalid offset: {text}") from None


def resolve_operand(operand: str, symbols: Mapping[str, int]) -> int:
    """Turn an operand (number, marker, label or label±offset) into a value."""
    text = _strip_trailing_symbols(operand)
    if text == "@IN":
        return INPUT_ADDR_MARKER
    if text == "@OUT":
        return OUTPUT_ADDR_MARKER

    try:
        return _leading_int(text)
    except OverflowError:
        raise AssemblyError(f"Number out of range: {text}") from None
    except ValueError:
        pass

    for separator, sign in (("+", 1), ("-", -1)):
        label, found, offset = text.partition(separator)
        if found:
            if label not in symbols:
                raise AssemblyError(f"Undefined symbol in expression: {label}")
            return symbols[label] + sign * _offset(offset)

    if text in symbols:
        return symbols[text]
    raise AssemblyError(f"Undefined symbol: {text}")


def _split_statement(line: str) -> Optional[tuple[Optional[str], str, list[re.Match[str]]]]:
    """Split a line into (label, mnemonic, remaining word matches).

    Returns None for blank and comment lines.
    """
    words = list(_WORD_PATTERN.finditer(line))
    if not words or words[0].group().startswith(";"):
        return None
    label = None
    if words[0].group().endswith(":"):
        label = _strip_trailing_symbols(words[0].group()[:-1])
        words = words[1:]
    if not words:
        return label, "", []
    return label, words[0].group(), words[1:]


class AssemblyParser:
    """Assembles ``subleq`` instructions and ``.data`` words into machine code."""

    def __init__(self) -> None:
        self.symbol_table: dict[str, int] = {}
        self.machine_code: list[int] = []

    def parse(self, filename: str) -> list[int]:
        """Assemble the file at filename."""
        try:
            with open(filename, encoding="utf-8") as source:
                lines = source.read().splitlines()
        except OSError as exc:
            raise AssemblyError(f"Could not open file: {filename}") from exc
        return self.parse_lines(lines)

    def parse_lines(self, lines: Iterable[str] | str) -> list[int]:
        """Assemble source given as text or as a sequence of lines."""
        if isinstance(lines, str):
            lines = lines.splitlines()
        source = [line.rstrip("\r\n") for line in lines]
        self.symbol_table = {}
        self.machine_code = []
        self._collect_symbols(source)
        self._emit_code(source)
        return list(self.machine_code)

    def _collect_symbols(self, lines: list[str]) -> None:
        location = 0
        for line in lines:
            statement = _split_statement(line)
            if statement is None:
                continue
            label, mnemonic, _ = statement
            if label is not None:
                self.symbol_table[label] = location
            if mnemonic == "subleq":
                location += 3
            elif mnemonic == ".data":
                location += 1

    def _emit_code(self, lines: list[str]) -> None:
        address = 0
        for line in lines:
            statement = _split_statement(line)
            if statement is None:
                continue
            _, mnemonic, words = statement
            if mnemonic == "subleq":
                self.machine_code.extend(self._subleq(line, words, address))
                address += 3
            elif mnemonic == ".data":
                value = words[0].group() if words else ""
                self.machine_code.append(resolve_operand(value, self.symbol_table))
                address += 1

    def _subleq(self, line: str, words: list[re.Match[str]], address: int) -> list[int]:
        a_text = words[0].group() if words else ""
        b_text = words[1].group() if len(words) > 1 else ""
        rest = line[words[1].end():] if len(words) > 1 else ""
        rest = rest.lstrip(" \t")

        a_value = resolve_operand(a_text, self.symbol_table)
        b_value = resolve_operand(b_text, self.symbol_table)
        if not rest or rest.startswith(";"):
            c_value = address + 3
        else:
            c_text = rest.split(";", 1)[0].rstrip(" \t")
            c_value = resolve_operand(c_text, self.symbol_table)
        return [a_value, b_value, c_value]