# src/polychain/codec/scale.py
from __future__ import annotations

"""SCALE-compatible primitives.

  - fixed byte arrays: raw
  - uN: little-endian, N/8 bytes
  - Vec<T>: compact length prefix, then items
  - enum: one discriminant byte, then the variant payload
"""

from typing import List

from polychain.errors import DecodeError


class Writer:
    def __init__(self) -> None:
        self._parts: List[bytes] = []

    def fixed(self, b: bytes, size: int) -> "Writer":
        if len(b) != size:
            raise ValueError(f"expected {size} bytes, got {len(b)}")
        self._parts.append(bytes(b))
        return self

    def u8(self, v: int) -> "Writer":
        return self._uint(v, 1)

    def u32(self, v: int) -> "Writer":
        return self._uint(v, 4)

    def u64(self, v: int) -> "Writer":
        return self._uint(v, 8)

    def u128(self, v: int) -> "Writer":
        return self._uint(v, 16)

    def _uint(self, v: int, width: int) -> "Writer":
        if isinstance(v, bool) or not isinstance(v, int) or v < 0 or v >= 1 << (8 * width):
            raise ValueError(f"value out of range for u{8 * width}: {v!r}")
        self._parts.append(v.to_bytes(width, "little"))
        return self

    def compact(self, v: int) -> "Writer":
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise ValueError(f"compact value must be a non-negative int: {v!r}")
        if v < 1 << 6:
            self._parts.append(bytes([v << 2]))
        elif v < 1 << 14:
            self._parts.append(((v << 2) | 0b01).to_bytes(2, "little"))
        elif v < 1 << 30:
            self._parts.append(((v << 2) | 0b10).to_bytes(4, "little"))
        else:
            n = (v.bit_length() + 7) // 8
            if n > 67:
                raise ValueError("compact value too large")
            self._parts.append(bytes([((n - 4) << 2) | 0b11]) + v.to_bytes(n, "little"))
        return self

    def to_bytes(self) -> bytes:
        return b"".join(self._parts)


class Reader:
    def __init__(self, data: bytes) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodeError("invalid_input", f"expected bytes, got {type(data).__name__}")
        self._data = bytes(data)
        self._pos = 0

    def take(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._data):
            raise DecodeError("truncated", f"need {n} bytes at offset {self._pos}, have {len(self._data) - self._pos}")
        out = self._data[self._pos:end]
        self._pos = end
        return out

    def fixed(self, size: int) -> bytes:
        return self.take(size)

    def u8(self) -> int:
        return self.take(1)[0]

    def u32(self) -> int:
        return int.from_bytes(self.take(4), "little")

    def u64(self) -> int:
        return int.from_bytes(self.take(8), "little")

    def u128(self) -> int:
        return int.from_bytes(self.take(16), "little")

    def compact(self) -> int:
        first = self.u8()
        mode = first & 0b11
        if mode == 0b00:
            return first >> 2
        if mode == 0b01:
            return int.from_bytes(bytes([first]) + self.take(1), "little") >> 2
        if mode == 0b10:
            return int.from_bytes(bytes([first]) + self.take(3), "little") >> 2
        return int.from_bytes(self.take((first >> 2) + 4), "little")

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def finish(self) -> None:
        if self.remaining():
            raise DecodeError("trailing_bytes", f"{self.remaining()} unread bytes after value")


__all__ = ["Reader", "Writer"]
