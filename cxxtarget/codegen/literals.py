# cxxtarget/codegen/literals.py
"""C++ 리터럴 합성기.

문법 리터럴(`'...'`)을 받아 C++ 소스에 그대로 박을 수 있는 리터럴 텍스트를 만든다.

문자 리터럴 규칙 (char_literal / code_literal)
--------------------------------------------
1) 예약 이스케이프(\\n, \\t, \\\\ ...)가 있으면 그것을 사용  → `'\\n'`
2) 0x20 미만 또는 0x7F 이상이면 16진 상수                    → `0x00E9`
   - 자릿수: 인코딩 최대값이 1바이트면 2자리, 아니면 4자리(최소 폭)
3) 그 외에는 문자 그대로                                    → `'a'`

문자열 리터럴 규칙 (string_literal)
----------------------------------
- 인코딩 접두사(u8 / u / U) + `"` + 코드별 이스케이프 + `"`
- 숫자 이스케이프는 `\\x` + 16진. 바로 뒤에 16진 숫자 문자가 오면
  `""` 로 문자열을 끊어 이스케이프가 뒤 문자를 삼키지 않게 한다.

해석 불가 문자 리터럴
-------------------
잘못된 이스케이프, 코드 2개 이상, 디코드 실패 시 `"0"` 을 돌려준다.
이 경우 `degraded` 에 기록이 남고 경고 로그가 찍힌다(strict=True면 LiteralError).
이 폴백은 문법 오류를 가릴 수 있으므로 호출자가 `degraded` 를 확인해야 한다.
"""

from __future__ import annotations
import logging
import string
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .encoding import DEFAULT_ENCODING, DecodeError, Encoding
from ..grammar.literals import LiteralError, unescape_grammar_literal

logger = logging.getLogger(__name__)

LOWEST_PRINTABLE = 0x20
# 상한은 0x7F(미포함): DEL(0x7F)도 숫자 이스케이프로 내보낸다.
# 0x80 상한을 쓰는 구현과 달리 '\x7f' 문자가 소스에 그대로 들어가지 않는다.
PRINTABLE_LIMIT = 0x7F


TARGET_CHAR_VALUE_ESCAPE: Dict[int, str] = {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\\"): "\\\\",
    ord("'"):  "\\'",
    ord('"'):  '\\"',
}

_PREFIX: Dict[Encoding, str] = {
    Encoding.UTF8:  "u8",
    Encoding.UTF16: "u",
    Encoding.UTF32: "U",
}

_HEX_DIGITS = frozenset(string.hexdigits)


def literal_prefix(encoding: Encoding) -> str:
    """인코딩별 문자열 리터럴 접두사. 닫힌 집합 밖의 값은 내부 불변식 위반."""
    try:
        return _PREFIX[encoding]
    except (KeyError, TypeError):
        raise AssertionError(f"literal_prefix: encoding outside the closed set: {encoding!r}")


def _escape_entry(code: int, quote: str) -> str:
    """예약 이스케이프 조회. 다른 종류의 따옴표는 이스케이프하지 않는다."""
    esc = TARGET_CHAR_VALUE_ESCAPE.get(code)
    if esc is None:
        return ""
    if code in (ord("'"), ord('"')) and chr(code) != quote:
        return ""
    return esc


def _needs_numeric(code: int) -> bool:
    return code < LOWEST_PRINTABLE or code >= PRINTABLE_LIMIT


@dataclass
class DegradedLiteral:
    """`"0"` 으로 대체된 문자 리터럴 기록."""
    literal: str
    reason: str


@dataclass
class LiteralSynthesizer:
    """
    LiteralSynthesizer
    ==================
    활성 Encoding 하나에 묶인 리터럴 합성기.

    Fields
    ------
    encoding : 활성 인코딩(실행 동안 불변)
    strict   : True면 해석 불가 문자 리터럴에서 LiteralError
    degraded : `"0"` 폴백이 일어난 리터럴 목록
    """
    encoding: Encoding = DEFAULT_ENCODING
    strict: bool = False
    degraded: List[DegradedLiteral] = field(default_factory=list)

    @property
    def hex_width(self) -> int:
        return 2 if self.encoding.max_code_value() < 0x100 else 4

    def _hex(self, code: int) -> str:
        return f"{code:0{self.hex_width}X}"

    # ---- 문자 리터럴 ----

    def char_literal(self, literal: str) -> str:
        try:
            unescaped = unescape_grammar_literal(literal)
            codes = self.encoding.decode(unescaped)
            if len(codes) != 1:
                raise LiteralError(
                    f"{literal!r} is {len(codes)} codes under {self.encoding.encoding_name()}, expected 1"
                )
        except (LiteralError, DecodeError) as e:
            return self._degrade(literal, e)
        return self.code_literal(codes[0])

    def code_literal(self, code: int) -> str:
        if not (0 <= code <= self.encoding.max_code_value()):
            raise LiteralError(
                f"code 0x{code:X} out of range for {self.encoding.encoding_name()} "
                f"(max 0x{self.encoding.max_code_value():X})"
            )
        esc = _escape_entry(code, "'")
        if esc:
            return f"'{esc}'"
        if _needs_numeric(code):
            return "0x" + self._hex(code)
        return f"'{chr(code)}'"

    def _degrade(self, literal: str, err: Exception) -> str:
        if self.strict:
            raise LiteralError(f"unresolvable char literal {literal!r}: {err}") from err
        self.degraded.append(DegradedLiteral(literal=literal, reason=str(err)))
        logger.warning("char literal %r degraded to 0: %s", literal, err)
        return "0"

    def drain_degraded(self) -> List[DegradedLiteral]:
        """쌓인 폴백 기록을 돌려주고 비운다(문법 하나를 끝낼 때마다 호출)."""
        out, self.degraded = self.degraded, []
        return out

    # ---- 문자열 리터럴 ----

    def string_literal(self, literal: str) -> str:
        codes = self.encoding.decode(unescape_grammar_literal(literal))
        return literal_prefix(self.encoding) + '"' + self.escape_codes(codes) + '"'

    def escape_codes(self, codes: Iterable[int]) -> str:
        """코드 열을 문자열 리터럴 본문(따옴표 제외)으로 직렬화한다."""
        out: List[str] = []
        after_hex = False
        for code in codes:
            esc = _escape_entry(code, '"')
            if esc:
                out.append(esc)
                after_hex = False
            elif _needs_numeric(code):
                out.append("\\x" + self._hex(code))
                after_hex = True
            else:
                ch = chr(code)
                if after_hex and ch in _HEX_DIGITS:
                    out.append('""')
                out.append(ch)
                after_hex = False
        return "".join(out)
