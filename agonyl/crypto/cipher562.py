"""
562 cipher — legacy XOR stream cipher of the A3 client, version 562.

Bytes before OFFSET (the message header) are left in clear. The rest is
processed in whole 4-byte blocks; each block restarts from the dynamic key and
evolves it per byte from the ciphertext. A trailing partial block is left
untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

OFFSET = 0x0C
BLOCK_SIZE = 4

_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class Crypto562:
    """In-place encrypt/decrypt with a session dynamic key.

    Both directions mutate the given bytearray; pass a copy to keep the
    original.
    """
    dynamic_key: int
    const_key1: int = 0x241AE7
    const_key2: int = 0x15DCB2

    def _next_key(self, key: int, cipher_byte: int) -> int:
        # Key arithmetic wraps like a signed 64-bit integer; only the low bits matter.
        return ((cipher_byte + key) * self.const_key1 + self.const_key2) & _MASK64

    def decrypt_in_place(self, data: bytearray) -> None:
        for start in range(OFFSET, len(data) - BLOCK_SIZE + 1, BLOCK_SIZE):
            key = self.dynamic_key & _MASK64
            for i in range(start, start + BLOCK_SIZE):
                src = data[i]
                data[i] = src ^ ((key >> 8) & 0xFF)
                key = self._next_key(key, src)

    def encrypt_in_place(self, data: bytearray) -> None:
        for start in range(OFFSET, len(data) - BLOCK_SIZE + 1, BLOCK_SIZE):
            key = self.dynamic_key & _MASK64
            for i in range(start, start + BLOCK_SIZE):
                data[i] ^= (key >> 8) & 0xFF
                key = self._next_key(key, data[i])

    def decrypt(self, data: bytes) -> bytes:
        buf = bytearray(data)
        self.decrypt_in_place(buf)
        return bytes(buf)

    def encrypt(self, data: bytes) -> bytes:
        buf = bytearray(data)
        self.encrypt_in_place(buf)
        return bytes(buf)
