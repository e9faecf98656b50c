"""Output encoders for byteslice."""

from .plain import RawEncoder, HexEncoder, Base64Encoder
from .dump import DumpEncoder
from .literal import ArrayLiteralEncoder, StringLiteralEncoder
from .cstring import CStringEncoder, CStringSafeEncoder
from .digest import MD5Encoder, SHA256Encoder

# registration order is the order shown in --help / --list-formats
ALL_ENCODERS = (
    RawEncoder,
    HexEncoder,
    DumpEncoder,
    ArrayLiteralEncoder,
    StringLiteralEncoder,
    CStringEncoder,
    CStringSafeEncoder,
    Base64Encoder,
    MD5Encoder,
    SHA256Encoder,
)
