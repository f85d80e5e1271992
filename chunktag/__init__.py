"""
# Chunk type identifiers.

Tagged binary containers (PNG being the best known) identify each chunk with
a 4-byte type made of ASCII letters; the case of each letter is a flag

 1. critical or ancillary
 2. public or private
 3. reserved, it must be uppercase
 4. unsafe or safe to copy

so that a program that doesn't know a chunk can still decide what to do with it.

This package builds and validates such identifiers

    >>> from chunktag import ChunkType
    >>> chunk_type = ChunkType.from_str('RuSt')
    >>> chunk_type.is_critical(), chunk_type.is_safe_to_copy()
    (True, True)

"""
from .chunk_type import ChunkType
from .enum import Compliant, ChunkProperty
from .exceptions import (
    ChunkTypeException,
    InvalidReservedByte,
    NonLetterByte,
    MalformedBytes,
    MalformedText,
    UnrecoverableException,
    NonTextualBytes,
)
