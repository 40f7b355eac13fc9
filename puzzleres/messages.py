"""Table of localized messages loaded from compiled message bundles."""

from dataclasses import dataclass

from .errors import PuzzleError
from .formatter import MessageFormatter


@dataclass
class _ScoredMessage:
    score: int
    message: MessageFormatter


def _read_int(data, offset):
    if offset < 0 or offset + 4 > len(data):
        raise PuzzleError("Unexpected end of message file")
    return int.from_bytes(data[offset:offset + 4], "little", signed=True)


class Messages:
    """Localized message table keyed by message name.

    When several bundles define the same key, the one with the highest
    locale score wins; on equal scores the later bundle wins.
    """

    def __init__(self):
        self._messages = {}

    def load_bundle(self, score, data):
        """Add the messages of a compiled message bundle."""
        data = bytes(data)
        if data[:3] != b"CMF":
            raise PuzzleError("Invalid format of message file")
        if _read_int(data, 3) != 1:
            raise PuzzleError("Unknown version of message file")

        offset = _read_int(data, len(data) - 4)
        count = _read_int(data, offset)
        offset += 4

        for _ in range(max(count, 0)):
            size = _read_int(data, offset)
            offset += 4
            if size > 0:
                if offset + size > len(data):
                    raise PuzzleError("Unexpected end of message file")
                try:
                    name = data[offset:offset + size].decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise PuzzleError("Invalid UTF-8 in message name") from exc
                msg_offset = _read_int(data, offset + size)
                existing = self._messages.get(name)
                if existing is None:
                    self._messages[name] = _ScoredMessage(
                        score, MessageFormatter(data, msg_offset)
                    )
                elif existing.score <= score:
                    existing.score = score
                    existing.message = MessageFormatter(data, msg_offset)
            offset += size + 4

    def get_message(self, key):
        """Return the plain text of a message, or the key if it is unknown."""
        entry = self._messages.get(key)
        if entry is None:
            return key
        return entry.message.get_message()

    def __getitem__(self, key):
        return self.get_message(key)

    def __contains__(self, key):
        return key in self._messages

    def format(self, key, *args):
        """Fill a message with arguments, or return the key if it is unknown."""
        entry = self._messages.get(key)
        if entry is None:
            return key
        return entry.message.format(*args)

    def __call__(self, key, *args):
        return self.format(key, *args)