"""Packing of resource files into a single compressed resource archive."""

import sys
import zlib
from dataclasses import dataclass
from typing import Optional

from .buffer import Buffer
from .convert import to_string
from .errors import PuzzleError
from .format import Formatter


@dataclass
class Entry:
    """One resource to be stored in the archive."""

    name: str
    compr_level: int = 9
    group: str = ""
    file_name: Optional[str] = None
    formatter: Optional[Formatter] = None
    real_size: int = 0
    offset: int = 0
    packed_size: int = 0

    def __post_init__(self):
        if self.file_name is None:
            self.file_name = self.name


def pack(data, level):
    """Deflate ``data`` at ``level``; level 0 stores it unchanged."""
    data = bytes(data)
    if not level:
        return data
    try:
        return zlib.compress(data, level)
    except (ValueError, zlib.error) as exc:
        raise PuzzleError("Can't init compressor") from exc


def _int_bytes(value):
    return (value & 0xFFFFFFFF).to_bytes(4, "little")


def _string_bytes(value):
    return value.encode("utf-8") + b"\0"


class ResourceCompressor:
    """Collects resource entries and writes them as one archive."""

    def __init__(self, priority=1000):
        self.priority = priority
        self._entries = []

    @property
    def entries(self):
        return tuple(self._entries)

    def add(self, entry):
        """Append an entry to the archive."""
        self._entries.append(entry)

    @staticmethod
    def _read_data(file_name):
        try:
            with open(file_name, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise PuzzleError(f"Error opening file '{file_name}'") from exc
        if not data:
            raise PuzzleError(f"File '{file_name}' has invalid size")
        return data

    @staticmethod
    def _run_formatter(formatter, file_name):
        buffer = Buffer()
        formatter.format(file_name, buffer)
        return buffer.getvalue()

    @staticmethod
    def _show_entry_stat(entry):
        if entry.real_size:
            ratio = (100.0 / entry.real_size) * entry.packed_size
        else:
            ratio = float("nan") if entry.packed_size == 0 else float("inf")
        print(
            f"{entry.name}  before: {entry.real_size}, after: {entry.packed_size}, "
            f"ratio: {to_string(ratio)}%",
            file=sys.stderr,
        )

    def write_to(self, stream, verbose=False):
        """Write the archive to a binary stream; return the bytes written."""
        header = (
            _string_bytes("CRF") + _int_bytes(2) + _int_bytes(1) + _int_bytes(self.priority)
        )
        stream.write(header)
        offset = len(header)

        for entry in self._entries:
            entry.offset = offset
            if entry.formatter is None:
                data = self._read_data(entry.file_name)
            else:
                data = self._run_formatter(entry.formatter, entry.file_name)
            entry.real_size = len(data)
            packed = pack(data, entry.compr_level)
            entry.packed_size = len(packed)
            stream.write(packed)
            offset += entry.packed_size
            if verbose:
                self._show_entry_stat(entry)

        start = offset
        footer = bytearray()
        for entry in self._entries:
            footer += _string_bytes(entry.name)
            footer += _int_bytes(entry.real_size)
            footer += _int_bytes(entry.offset)
            footer += _int_bytes(entry.packed_size)
            footer += _int_bytes(entry.compr_level)
            footer += _string_bytes(entry.group)
        footer += _int_bytes(start)
        footer += _int_bytes(len(self._entries))
        stream.write(bytes(footer))
        return offset + len(footer)

    def compress(self, output_file, verbose=False):
        """Write the archive to a file, or to standard output for '' or '-'."""
        if output_file and output_file != "-":
            try:
                handle = open(output_file, "wb")
            except OSError as exc:
                raise PuzzleError("Can't open output file") from exc
            with handle:
                return self.write_to(handle, verbose)
        stream = sys.stdout.buffer
        written = self.write_to(stream, verbose)
        stream.flush()
        return written

    def print_deps(self, output_file, source_file, out=None):
        """Print a make dependency rule for the archive."""
        if out is None:
            out = sys.stdout
        out.write(f"\n{output_file}: {source_file} ")
        width = len(output_file) + len(source_file) + 3
        for entry in self._entries:
            out.write(" ")
            length = len(entry.file_name) + 1
            if length + width > 77:
                out.write("\\\n\t")
                width = 7
            out.write(entry.file_name)
            width += length
        out.write("\n")