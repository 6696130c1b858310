"""Byte stream transfer."""

from typing import BinaryIO

from .config import DEFAULT_CHUNK_SIZE


def pump(source: BinaryIO,
         target: BinaryIO,
         close_input: bool = True,
         close_output: bool = True,
         chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Copy every byte from ``source`` to ``target``.

    Streams are closed according to the flags whether or not the transfer
    succeeds.

    Returns:
        Number of bytes copied
    """
    copied = 0
    try:
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                break
            target.write(chunk)
            copied += len(chunk)
        target.flush()
    finally:
        try:
            if close_input:
                source.close()
        finally:
            if close_output:
                target.close()
    return copied
