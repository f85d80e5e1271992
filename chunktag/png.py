'''
# Portable Network Graphics

Chunk types defined by the PNG specification at
<http://www.libpng.org/pub/png/spec/1.2/PNG-Chunks.html>.

# Critical chunks

 1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
 2. PLTE: contains the palette data
 3. IDAT: contains the actual image data (compressed)
 4. IEND: is the terminator chunk
'''
from .chunk_type import ChunkType
from .enum import Compliant


def _chunk_type(name):
    return ChunkType.from_str(name, compliant=Compliant.STRICT)


IHDR = _chunk_type('IHDR')
PLTE = _chunk_type('PLTE')
IDAT = _chunk_type('IDAT')
IEND = _chunk_type('IEND')

CRITICAL = (IHDR, PLTE, IDAT, IEND)

# ancillary
cHRM = _chunk_type('cHRM')
gAMA = _chunk_type('gAMA')
iCCP = _chunk_type('iCCP')
sBIT = _chunk_type('sBIT')
sRGB = _chunk_type('sRGB')
bKGD = _chunk_type('bKGD')
hIST = _chunk_type('hIST')
tRNS = _chunk_type('tRNS')
pHYs = _chunk_type('pHYs')
sPLT = _chunk_type('sPLT')
tIME = _chunk_type('tIME')
iTXt = _chunk_type('iTXt')
tEXt = _chunk_type('tEXt')
zTXt = _chunk_type('zTXt')

ANCILLARY = (cHRM, gAMA, iCCP, sBIT, sRGB, bKGD, hIST, tRNS, pHYs, sPLT, tIME, iTXt, tEXt, zTXt)
