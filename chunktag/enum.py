from enum import Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the chunk type must reflect the format'''
    NONE     = 0
    RESERVED = 1 << 0
    LETTERS  = 1 << 1
    STRICT   = RESERVED | LETTERS


DEFAULT_COMPLIANT = Compliant.RESERVED


class ChunkProperty(Flag):
    '''The property bits encoded into the case of the chunk type letters.

    Each member is set when bit 5 (0x20, i.e. lowercase) of the corresponding
    byte is set: the n-th bit of the set maps to the n-th byte.'''
    NONE           = 0
    ANCILLARY      = 1 << 0
    PRIVATE        = 1 << 1
    RESERVED       = 1 << 2
    SAFE_TO_COPY   = 1 << 3
