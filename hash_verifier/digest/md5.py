"""Pure-Python MD5 (RFC 1321) with a hashlib-style interface."""

import struct

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# T[i] = floor(2**32 * abs(sin(i + 1)))
_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A,
    0xA8304613, 0xFD469501, 0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821, 0xF61E2562, 0xC040B340,
    0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8,
    0x676F02D9, 0x8D2A4C8A, 0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70, 0x289B7EC6, 0xEAA127FA,
    0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92,
    0xFFEFF47D, 0x85845DD1, 0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_MESSAGE_INDEX = tuple(
    i if i < 16
    else (5 * i + 1) % 16 if i < 32
    else (3 * i + 5) % 16 if i < 48
    else (7 * i) % 16
    for i in range(64)
)

_BLOCK = struct.Struct("<16I")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = _BLOCK.unpack(block)
    a, b, c, d = state

    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
        elif i < 32:
            f = (d & b) | (~d & c)
        elif i < 48:
            f = b ^ c ^ d
        else:
            f = c ^ (b | (~d & _MASK))
        rotated = _rotl((a + f + _K[i] + words[_MESSAGE_INDEX[i]]) & _MASK, _SHIFTS[i])
        a, b, c, d = d, (b + rotated) & _MASK, b, c

    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5, interchangeable with ``hashlib.md5()`` for our uses."""

    name = "md5"
    digest_size = 16
    block_size = 64

    def __init__(self, data: bytes = b""):
        self._state = _INITIAL_STATE
        self._pending = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        data = bytes(data)
        self._length += len(data)
        pending = self._pending + data
        full = len(pending) - len(pending) % 64
        state = self._state
        for offset in range(0, full, 64):
            state = _compress(state, pending[offset:offset + 64])
        self._state = state
        self._pending = pending[full:]

    def copy(self) -> "MD5":
        clone = MD5()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        # 0x80, zeros up to 56 mod 64 bytes, then the bit length (LE, mod 2**64)
        padding = b"\x80" + b"\x00" * ((55 - self._length) % 64)
        tail = self._pending + padding + struct.pack("<Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for offset in range(0, len(tail), 64):
            state = _compress(state, tail[offset:offset + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()


def md5_hex(data: bytes) -> str:
    return MD5(data).hexdigest()
