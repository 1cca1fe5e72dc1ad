# cxxtarget/codegen/encoding.py
"""텍스트 인코딩 전략 (8/16/32비트 코드 유닛).

개요
----
- Encoding은 닫힌 열거형이다: UTF8, UTF16, UTF32.
- 입력 문자열은 **UTF-16 코드 유닛 열**로 해석한다.
  * U+FFFF를 넘는 문자는 서로게이트 2유닛으로 센다.
  * 짝 없는 서로게이트 문자는 유닛 1개로 그대로 남는다.
- 각 인코딩은 그 유닛 열을 자기 규칙으로 코드 열로 바꾼다.

  * UTF8 : UTF-8 바이트 (max 0xFF)
  * UTF16: 코드 유닛 그대로 (max 0xFFFF)
  * UTF32: 서로게이트 쌍을 합친 스칼라 값 (max 0x10FFFF)

불변식
------
- is_single_code(s) 는 decode(s) 가 성공하고 코드가 정확히 1개일 때만 True.
- decode 는 잘못된 입력에서 DecodeError 를 던진다(None 반환 없음).
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, List, Optional


class DecodeError(ValueError):
    """선택된 인코딩으로 표현할 수 없는 입력."""


_HI_MIN, _HI_MAX = 0xD800, 0xDBFF
_LO_MIN, _LO_MAX = 0xDC00, 0xDFFF


def _is_high(u: int) -> bool:
    return _HI_MIN <= u <= _HI_MAX


def _is_low(u: int) -> bool:
    return _LO_MIN <= u <= _LO_MAX


def utf16_units(s: str) -> List[int]:
    """문자열을 UTF-16 코드 유닛 리스트로 펼친다."""
    units: List[int] = []
    for ch in s:
        o = ord(ch)
        if o > 0xFFFF:
            o -= 0x10000
            units.append(_HI_MIN + (o >> 10))
            units.append(_LO_MIN + (o & 0x3FF))
        else:
            units.append(o)
    return units


# ---------- 인코딩별 디코더 ----------

def _decode_utf8(s: str) -> List[int]:
    try:
        return list(s.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise DecodeError(f"UTF8: cannot encode {s[e.start:e.end]!r} at {e.start} (unpaired surrogate)")


def _decode_utf16(s: str) -> List[int]:
    return utf16_units(s)


def _decode_utf32(s: str) -> List[int]:
    units = utf16_units(s)
    codes: List[int] = []
    i = 0
    while i < len(units):
        u = units[i]
        if _is_high(u) and i + 1 < len(units) and _is_low(units[i + 1]):
            codes.append(0x10000 + ((u - _HI_MIN) << 10) + (units[i + 1] - _LO_MIN))
            i += 2
            continue
        if _is_high(u) or _is_low(u):
            raise DecodeError(f"UTF32: unpaired surrogate 0x{u:04X} at unit {i}")
        codes.append(u)
        i += 1
    return codes


# ---------- 역변환(코드 → 문자열) ----------

def _encode_utf8(codes: Iterable[int]) -> str:
    try:
        return bytes(codes).decode("utf-8")
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"UTF8: not a valid byte sequence: {e}")


def _encode_utf16(codes: Iterable[int]) -> str:
    try:
        raw = b"".join(int(c).to_bytes(2, "little") for c in codes)
    except OverflowError:
        raise DecodeError("UTF16: code unit out of range 0..0xFFFF")
    return raw.decode("utf-16-le", "surrogatepass")


def _encode_utf32(codes: Iterable[int]) -> str:
    try:
        return "".join(chr(c) for c in codes)
    except ValueError:
        raise DecodeError("UTF32: code out of range 0..0x10FFFF")


class Encoding(Enum):
    UTF8  = "UTF8"
    UTF16 = "UTF16"
    UTF32 = "UTF32"

    @classmethod
    def from_option(cls, name: Optional[str]) -> "Encoding":
        """옵션 문자열에서 인코딩을 고른다. 없거나 모르는 값이면 DEFAULT_ENCODING."""
        if name is None:
            return DEFAULT_ENCODING
        key = str(name).strip().upper().replace("-", "").replace("_", "")
        for enc in cls:
            if enc.value == key:
                return enc
        return DEFAULT_ENCODING

    def encoding_name(self) -> str:
        return self.value

    def max_code_value(self) -> int:
        return _MAX_CODE[self]

    def is_single_code(self, s: str) -> bool:
        try:
            return len(self.decode(s)) == 1
        except DecodeError:
            return False

    def decode(self, s: str) -> List[int]:
        return _DECODERS[self](s)

    def encode(self, codes: Iterable[int]) -> str:
        return _ENCODERS[self](codes)


DEFAULT_ENCODING = Encoding.UTF16

_MAX_CODE: Dict[Encoding, int] = {
    Encoding.UTF8:  0xFF,
    Encoding.UTF16: 0xFFFF,
    Encoding.UTF32: 0x10FFFF,
}

_DECODERS = {
    Encoding.UTF8:  _decode_utf8,
    Encoding.UTF16: _decode_utf16,
    Encoding.UTF32: _decode_utf32,
}

_ENCODERS = {
    Encoding.UTF8:  _encode_utf8,
    Encoding.UTF16: _encode_utf16,
    Encoding.UTF32: _encode_utf32,
}


def supports_encoding(name: Optional[str]) -> bool:
    """C++ 타깃은 세 인코딩 모두 지원한다(모르는 이름도 기본값으로 처리)."""
    return True
