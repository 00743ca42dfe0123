from .encoding import (
    INFINITY_ENCODING,
    decode_coordinates,
    decompress_y,
    encode_coordinates,
)
from .modular import byte_length, format_int, mod_inverse, mod_reduce, parse_int
