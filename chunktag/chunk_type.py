'''
The chunk type is the 4-byte tag that identifies a chunk inside a container
like PNG: each byte is an ASCII letter and the case of each letter is a flag
that decoders use without knowing the chunk itself.

    ancillary bit  (byte 0): 0 (uppercase) = critical, 1 (lowercase) = ancillary
    private bit    (byte 1): 0 (uppercase) = public, 1 (lowercase) = private
    reserved bit   (byte 2): must be 0 (uppercase) in the current format
    safe-to-copy   (byte 3): 0 (uppercase) = unsafe, 1 (lowercase) = safe to copy

See <https://www.w3.org/TR/PNG-Structure.html#Chunk-naming-conventions>.
'''
import logging

from bitstring import Bits

from .enum import Compliant, ChunkProperty, DEFAULT_COMPLIANT
from .exceptions import (
    InvalidReservedByte,
    NonLetterByte,
    MalformedBytes,
    MalformedText,
    NonTextualBytes,
)


logger = logging.getLogger(__name__)

LENGTH = 4
RESERVED_FORBIDDEN = ord('1')

# the case bit is 0x20, bitstring counts from the most significant bit
_CASE_BIT_OFFSET = 2

_PROPERTIES = (
    ChunkProperty.ANCILLARY,
    ChunkProperty.PRIVATE,
    ChunkProperty.RESERVED,
    ChunkProperty.SAFE_TO_COPY,
)


def _to_bytes(raw) -> bytes:
    if isinstance(raw, (str, int)):
        raise MalformedBytes(raw, f'{raw.__class__.__name__} is not a sequence of bytes')

    try:
        value = bytes(raw)
    except (TypeError, ValueError) as e:
        raise MalformedBytes(raw, f'{raw!r} is not a sequence of unsigned bytes') from e

    if len(value) != LENGTH:
        raise MalformedBytes(raw, f'a chunk type is {LENGTH} bytes long, got {len(value)}')

    return value


class ChunkType(object):
    '''Immutable value wrapping the 4 bytes of a chunk type.

    It's possible to build it from the raw bytes

        ChunkType(b'IHDR')
        ChunkType([82, 117, 83, 116])

    or from its name

        ChunkType.from_str('RuSt')

    The "compliant" argument decides how much the bytes are checked: by default
    only the third byte is checked against the forbidden '1', with Compliant.LETTERS
    all the bytes must be ASCII letters.
    '''
    __slots__ = ('_raw',)

    def __init__(self, raw, compliant: Compliant = DEFAULT_COMPLIANT):
        value = _to_bytes(raw)

        if compliant & Compliant.RESERVED and value[2] == RESERVED_FORBIDDEN:
            logger.warning('third byte of chunk type %r is the reserved value %r', value, chr(RESERVED_FORBIDDEN))
            raise InvalidReservedByte(value, f'third byte of {value!r} cannot be {chr(RESERVED_FORBIDDEN)!r}')

        if compliant & Compliant.LETTERS and not value.isalpha():
            logger.warning('chunk type %r contains non-letter bytes', value)
            raise NonLetterByte(value, f'{value!r} must be made of ASCII letters only')

        object.__setattr__(self, '_raw', value)

        logger.debug('built %r with compliant %s', self, compliant)

    @classmethod
    def from_str(cls, text: str, compliant: Compliant = DEFAULT_COMPLIANT) -> 'ChunkType':
        '''Build the chunk type from its name using the first 4 characters.'''
        if not isinstance(text, str):
            raise MalformedText(text, f'{text.__class__.__name__} is not a chunk type name')

        if len(text) < LENGTH:
            raise MalformedText(text, f'a chunk type name needs {LENGTH} characters, got {len(text)}')

        try:
            raw = text[:LENGTH].encode('ascii')
        except UnicodeEncodeError as e:
            raise MalformedText(text, f'{text!r} is not made of ASCII characters') from e

        return cls(raw, compliant=compliant)

    def __setattr__(self, name, value):
        raise AttributeError(f"'{self.__class__.__name__}' is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"'{self.__class__.__name__}' is immutable")

    def __reduce__(self):
        # the bytes were already checked when built
        return (self.__class__, (self._raw, Compliant.NONE))

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        try:
            return self._raw.decode('ascii')
        except UnicodeDecodeError as e:
            raise NonTextualBytes(self._raw, f'{self._raw!r} cannot be rendered as text') from e

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _case_bit(self, position: int) -> bool:
        '''True if the byte at the given position is lowercase.'''
        return Bits(self._raw)[position * 8 + _CASE_BIT_OFFSET]

    @property
    def flags(self) -> ChunkProperty:
        flags = ChunkProperty.NONE
        for position, prop in enumerate(_PROPERTIES):
            if self._case_bit(position):
                flags |= prop

        return flags

    def is_critical(self) -> bool:
        return not self._case_bit(0)

    def is_public(self) -> bool:
        return not self._case_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._case_bit(2)

    def is_valid(self) -> bool:
        return self.is_reserved_bit_valid()

    def is_safe_to_copy(self) -> bool:
        return self._case_bit(3)
