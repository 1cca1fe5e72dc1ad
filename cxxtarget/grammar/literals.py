# cxxtarget/grammar/literals.py
"""문법 리터럴 언이스케이프.

문법 파일에 적힌 `'...'` 형태의 리터럴을 실제 문자열로 되돌린다.
결과 문자열은 **UTF-16 코드 유닛 관점**으로 해석된다.
즉 `'\\uD83D\\uDE00'` 은 두 개의 서로게이트 문자로 남고,
어떻게 합칠지는 Encoding 쪽에서 결정한다.

지원 이스케이프
---------------
- `\\n \\r \\t \\b \\f \\\\ \\' \\"`
- `\\uXXXX` (정확히 16진 4자리, 대소문자 `u`/`U` 모두 허용)

그 외(숫자 이스케이프, 알 수 없는 문자, 끝의 역슬래시)는 LiteralError.
"""

from __future__ import annotations
from typing import Dict

import regex


class LiteralError(ValueError):
    """문법 리터럴을 해석할 수 없을 때."""


GRAMMAR_ESCAPES: Dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

# 이스케이프 1개 또는 일반 문자 1개
_PIECE = regex.compile(
    r"""
    \\ (?: [uU] (?P<hex>[0-9A-Fa-f]{4}) | (?P<esc>.) | (?P<dangling>\Z) )
    | (?P<plain>[^\\])
    """,
    regex.VERBOSE | regex.DOTALL,
)


def strip_quotes(literal: str) -> str:
    """바깥 따옴표를 떼어낸다. 짝이 맞지 않으면 LiteralError."""
    if len(literal) < 2 or literal[0] not in "'\"" or literal[-1] != literal[0]:
        raise LiteralError(f"grammar literal must be quoted: {literal!r}")
    return literal[1:-1]


def unescape_grammar_literal(literal: str) -> str:
    """
    unescape_grammar_literal(literal) -> str
    ----------------------------------------
    따옴표로 감싼 문법 리터럴을 언이스케이프한 문자열로 돌려준다.

    >>> unescape_grammar_literal("'a\\\\n'")
    'a\\n'
    """
    body = strip_quotes(literal)
    out = []
    pos = 0
    while pos < len(body):
        m = _PIECE.match(body, pos)
        if m is None:
            raise LiteralError(f"bad escape at offset {pos} in {literal!r}")
        if m.group("plain") is not None:
            out.append(m.group("plain"))
        elif m.group("hex") is not None:
            out.append(chr(int(m.group("hex"), 16)))
        elif m.group("dangling") is not None:
            raise LiteralError(f"dangling backslash in {literal!r}")
        else:
            ch = m.group("esc")
            if ch not in GRAMMAR_ESCAPES:
                raise LiteralError(f"unknown escape '\\{ch}' in {literal!r}")
            out.append(GRAMMAR_ESCAPES[ch])
        pos = m.end()
    return "".join(out)
