"""Localized message templates stored in compiled message files."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .convert import to_float32, to_string
from .errors import PuzzleError


class CmdType(IntEnum):
    """Kind of a message template command."""

    EMPTY_CMD = 0
    TEXT_COMMAND = 1
    INT_ARG = 2
    STRING_ARG = 3
    DOUBLE_ARG = 4
    FLOAT_ARG = 5


# Command codes as stored in the file; note FLOAT before DOUBLE.
_FILE_CODES = {
    1: CmdType.TEXT_COMMAND,
    2: CmdType.INT_ARG,
    3: CmdType.STRING_ARG,
    4: CmdType.FLOAT_ARG,
    5: CmdType.DOUBLE_ARG,
}

_ARG_TYPES = frozenset(
    (CmdType.INT_ARG, CmdType.STRING_ARG, CmdType.FLOAT_ARG, CmdType.DOUBLE_ARG)
)


@dataclass(frozen=True)
class Command:
    """One template piece: literal text or a 1-based argument reference."""

    type: CmdType
    value: Union[str, int]


def _read_int(data, offset):
    if offset < 0 or offset + 4 > len(data):
        raise PuzzleError("Unexpected end of message data")
    return int.from_bytes(data[offset:offset + 4], "little", signed=True)


class MessageFormatter:
    """A message template parsed from a compiled message buffer."""

    def __init__(self, data, offset):
        data = bytes(data)
        count = _read_int(data, offset)
        offset += 4
        commands = []
        for _ in range(max(count, 0)):
            if offset >= len(data):
                raise PuzzleError("Unexpected end of message data")
            code = data[offset]
            offset += 1
            size = _read_int(data, offset)
            offset += 4
            if size < 0 or offset + size > len(data):
                raise PuzzleError("Unexpected end of message data")
            kind = _FILE_CODES.get(code)
            if kind is CmdType.TEXT_COMMAND:
                try:
                    text = data[offset:offset + size].decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise PuzzleError("Invalid UTF-8 in message text") from exc
                commands.append(Command(kind, text))
            elif kind is not None:
                number = _read_int(data, offset)
                if number < 1:
                    raise PuzzleError(f"Invalid argument number {number}")
                commands.append(Command(kind, number))
            offset += size

        self.commands = tuple(commands)
        max_arg = max(
            (c.value for c in self.commands if c.type in _ARG_TYPES), default=0
        )
        arg_types = [CmdType.EMPTY_CMD] * max_arg
        for command in self.commands:
            if command.type in _ARG_TYPES:
                arg_types[command.value - 1] = command.type
        self.arg_types = tuple(arg_types)

    def get_message(self):
        """Return the template's literal text with arguments left out."""
        return "".join(
            c.value for c in self.commands if c.type is CmdType.TEXT_COMMAND
        )

    @staticmethod
    def _convert(kind, value):
        if kind is CmdType.INT_ARG:
            return to_string(int(value))
        if kind is CmdType.STRING_ARG:
            return str(value)
        if kind is CmdType.DOUBLE_ARG:
            return to_string(float(value))
        return to_string(to_float32(value))

    def format(self, *args):
        """Fill the template with positional arguments."""
        if not self.arg_types:
            return self.get_message()

        values = []
        for kind in self.arg_types:
            if kind is CmdType.EMPTY_CMD:
                break
            if len(values) >= len(args):
                raise PuzzleError(f"Missing value for argument {len(values) + 1}")
            values.append(self._convert(kind, args[len(values)]))

        parts = []
        for command in self.commands:
            if command.type is CmdType.TEXT_COMMAND:
                parts.append(command.value)
            elif command.type in (CmdType.STRING_ARG, CmdType.INT_ARG):
                index = command.value - 1
                if index < len(values):
                    parts.append(values[index])
        return "".join(parts)