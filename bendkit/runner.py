"""Running compiled books with an external HVM process."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO

from .hvm_ast import Book, display_hvm_book

HVM_OUTPUT_END_MARKER = "Result: "
_OUT_PATH = ".out.hvm"
_CHUNK_SIZE = 1024


class HvmRunError(Exception):
    """Raised when HVM cannot be run or its result cannot be found."""


def filter_hvm_output(stream: BinaryIO, output: BinaryIO) -> str:
    """Copy HVM's output up to the result marker to ``output``; return what follows it."""
    capturing = False
    result: list[str] = []
    while True:
        try:
            chunk = stream.read(_CHUNK_SIZE)
        except OSError as e:
            print(e, file=sys.stderr)
            break
        if not chunk:
            break
        text = chunk.decode("utf-8", errors="replace")
        if capturing:
            result.append(text)
            continue
        before, marker, after = text.partition(HVM_OUTPUT_END_MARKER)
        to_write = before.encode("utf-8") if marker else chunk
        try:
            output.write(to_write)
        except OSError as e:
            print(f"Error writing HVM output. {e}", file=sys.stderr)
        if marker:
            result.append(after)
            capturing = True
    try:
        output.flush()
    except OSError as e:
        print(f"Error writing HVM output. {e}", file=sys.stderr)
    if not capturing:
        raise HvmRunError("Failed to parse result from HVM.")
    return "".join(result)


def _stdout_bytes() -> BinaryIO:
    return getattr(sys.stdout, "buffer", sys.stdout)


def run_hvm(book: Book, cmd: str) -> str:
    """Run a book with the ``hvm`` program; return the text after the result marker."""
    try:
        with open(_OUT_PATH, "w", encoding="utf-8") as f:
            f.write(display_hvm_book(book))
    except OSError as e:
        raise HvmRunError(str(e)) from e

    try:
        try:
            process = subprocess.Popen(["hvm", cmd, _OUT_PATH], stdout=subprocess.PIPE)
        except OSError as e:
            raise HvmRunError(f"Failed to start hvm process.\n{e}") from e
        try:
            result = filter_hvm_output(process.stdout, _stdout_bytes())
        finally:
            process.wait()
    finally:
        try:
            os.remove(_OUT_PATH)
        except OSError as e:
            print(f"Error removing HVM output file. {e}", file=sys.stderr)
    return result