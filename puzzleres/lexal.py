"""Lexical analyser for resource description files."""

from dataclasses import dataclass
from enum import Enum

from .errors import PuzzleError


class LexemeType(Enum):
    """Kind of a lexeme."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    IDENT = "ident"
    SYMBOL = "symbol"
    EOF = "eof"


def pos_to_str(line, pos):
    """Render a source position as ``(line:pos)``."""
    return f"({line}:{pos})"


@dataclass(frozen=True)
class Lexeme:
    """A lexeme with its content and start position."""

    type: LexemeType
    content: str
    line: int
    pos: int

    def pos_str(self):
        """Start position rendered as ``(line:pos)``."""
        return pos_to_str(self.line, self.pos)


_WHITESPACE = frozenset(" \t\n\r")
_SYMBOLS = frozenset("{},=;")
_QUOTES = frozenset("'\"")


def _is_letter(ch):
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_digit(ch):
    return "0" <= ch <= "9"


def _is_ident_start(ch):
    return _is_letter(ch) or ch == "_"


def _is_ident_cont(ch):
    return _is_letter(ch) or ch in "_." or _is_digit(ch)


class _CharReader:
    """Character source with pushback."""

    def __init__(self, text):
        self._text = text
        self._index = 0
        self._pushed = []

    def is_eof(self):
        return not self._pushed and self._index >= len(self._text)

    def next_char(self):
        if self._pushed:
            return self._pushed.pop()
        if self._index >= len(self._text):
            raise PuzzleError("Unexpected end of input")
        ch = self._text[self._index]
        self._index += 1
        return ch

    def unget(self, ch):
        self._pushed.append(ch)


class Lexer:
    """Splits description text into lexemes, tracking line and column."""

    def __init__(self, text):
        self._reader = _CharReader(text)
        self.line = 1
        self.pos = 0

    def __iter__(self):
        """Yield lexemes up to, but not including, the end of input."""
        while True:
            lexeme = self.next_lexeme()
            if lexeme.type is LexemeType.EOF:
                return
            yield lexeme

    def next_lexeme(self):
        """Read the next lexeme; an EOF lexeme marks the end of input."""
        self._skip_spaces()
        reader = self._reader
        if reader.is_eof():
            return Lexeme(LexemeType.EOF, "", self.line, self.pos)

        start_line, start_pos = self.line, self.pos
        ch = reader.next_char()
        self.pos += 1

        if _is_ident_start(ch):
            return self._read_ident(start_line, start_pos, ch)
        if _is_digit(ch):
            return self._read_number(start_line, start_pos, ch)
        if ch in _QUOTES:
            return self._read_string(start_line, start_pos, ch)
        if ch in _SYMBOLS:
            return Lexeme(LexemeType.SYMBOL, ch, start_line, start_pos)
        raise PuzzleError("Invalid character at " + pos_to_str(start_line, start_pos))

    def _read_string(self, start_line, start_pos, quote):
        reader = self._reader
        chars = []
        closed = False
        while not reader.is_eof():
            ch = reader.next_char()
            self.pos += 1
            if ch == "\n":
                self.line += 1
                self.pos = 0
                chars.append(ch)
            elif ch == "\\":
                if not reader.is_eof():
                    next_ch = reader.next_char()
                    if next_ch in _WHITESPACE:
                        raise PuzzleError(
                            "Invalid escape sequence at " + pos_to_str(self.line, self.pos)
                        )
                    self.pos += 1
                    chars.append(next_ch)
            elif ch == quote:
                closed = True
                break
            else:
                chars.append(ch)

        if not closed:
            raise PuzzleError(
                "String at " + pos_to_str(start_line, start_pos) + " doesn't closed"
            )
        return Lexeme(LexemeType.STRING, "".join(chars), start_line, start_pos)

    def _read_number(self, start_line, start_pos, first):
        reader = self._reader
        chars = [first]
        kind = LexemeType.INTEGER
        while not reader.is_eof():
            ch = reader.next_char()
            self.pos += 1
            if _is_digit(ch):
                chars.append(ch)
            elif ch == ".":
                if kind is not LexemeType.INTEGER:
                    raise PuzzleError(
                        "To many dots in number at " + pos_to_str(self.line, self.pos)
                    )
                kind = LexemeType.FLOAT
                chars.append(ch)
            elif ch not in _SYMBOLS and ch not in _WHITESPACE:
                raise PuzzleError("invalid number at " + pos_to_str(self.line, self.pos))
            else:
                self.pos -= 1
                reader.unget(ch)
                break

        if chars[-1] == ".":
            raise PuzzleError(
                "Missing digit after dot at " + pos_to_str(self.line, self.pos)
            )
        return Lexeme(kind, "".join(chars), start_line, start_pos)

    def _read_ident(self, start_line, start_pos, first):
        reader = self._reader
        chars = [first]
        while not reader.is_eof():
            ch = reader.next_char()
            if not _is_ident_cont(ch):
                reader.unget(ch)
                break
            chars.append(ch)
            self.pos += 1
        return Lexeme(LexemeType.IDENT, "".join(chars), start_line, start_pos)

    def _skip_to_line_end(self):
        reader = self._reader
        while not reader.is_eof():
            ch = reader.next_char()
            self.pos += 1
            if ch == "\n":
                self.pos = 0
                self.line += 1
                return

    def _skip_multiline_comment(self, start_line, start_pos):
        # A block comment consumes the rest of the input and is always
        # reported as unterminated.
        reader = self._reader
        while not reader.is_eof():
            ch = reader.next_char()
            self.pos += 1
            if ch == "\n":
                self.pos = 0
                self.line += 1
            elif ch == "*" and not reader.is_eof():
                next_ch = reader.next_char()
                if next_ch != "/":
                    reader.unget(next_ch)
        raise PuzzleError(
            "Remark started at " + pos_to_str(start_line, start_pos) + " is not closed"
        )

    def _skip_spaces(self):
        reader = self._reader
        while not reader.is_eof():
            ch = reader.next_char()
            self.pos += 1
            if ch in _WHITESPACE:
                if ch == "\n":
                    self.pos = 0
                    self.line += 1
                continue
            if ch == "#":
                self._skip_to_line_end()
                continue
            finish = True
            if ch == "/" and not reader.is_eof():
                next_ch = reader.next_char()
                self.pos += 1
                if next_ch == "/":
                    self._skip_to_line_end()
                    finish = False
                elif next_ch == "*":
                    self._skip_multiline_comment(self.line, self.pos)
                else:
                    self.pos -= 1
                    reader.unget(next_ch)
            if finish:
                self.pos -= 1
                reader.unget(ch)
                return