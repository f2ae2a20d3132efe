"""
FNV-1a 32 bit hashing.

Used to fingerprint website URLs in the diagnostic output. This is a fast
hash-table style digest, not a cryptographic one: never rely on it for
collision resistance against untrusted input.
"""

FNV32_OFFSET = 2166136261
FNV32_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


class Fnv32a:
    """Stateful FNV-1a accumulator with a hashlib-like surface.

    Bytes are folded in strictly left to right; call ``reset`` before
    hashing unrelated input.
    """

    name = "fnv1a_32"
    digest_size = 4
    block_size = 1

    def __init__(self, data: bytes = b"") -> None:
        self._value = FNV32_OFFSET
        if data:
            self.write(data)

    def reset(self) -> None:
        self._value = FNV32_OFFSET

    def write(self, data: bytes) -> int:
        """Accumulate ``data`` and return the number of bytes consumed (all of them)."""
        value = self._value
        for byte in data:
            value ^= byte
            value = (value * FNV32_PRIME) & _MASK32
        self._value = value
        return len(data)

    def sum32(self) -> int:
        return self._value

    def digest(self) -> bytes:
        """Big-endian bytes of the current value; does not change the state."""
        return self._value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()


def hash_string(value: str) -> int:
    """Return the FNV-1a 32 bit hash of the UTF-8 encoding of ``value``."""
    hasher = Fnv32a()
    hasher.write(value.encode("utf-8"))
    return hasher.sum32()
