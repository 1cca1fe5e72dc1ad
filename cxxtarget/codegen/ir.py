"""
cxxtarget 파일 속성 IR
=======

이 모듈은 Grammar와 CxxTarget을 받아, 템플릿 렌더러가 소비하기 쉬운
**파일 단위 속성 묶음(IR)** 으로 변환한다.

설계 포인트
-----------
- 인식기(.cpp)와 헤더(.hpp) 파일 이름을 함께 계산한다.
- 헤더용 토큰 목록에서는 EOF 토큰을 뺀다.
- 네임스페이스는 합성 문법이면 루트 문법에서 가져온다.

주의
----
- 잘못 놓인 액션 스코프는 `rejected_scopes` 로 모아 돌려준다.
  실제 무시/경고는 호출자 몫이다.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .target import CxxTarget
from ..grammar.ast import Grammar, TokenDecl


@dataclass
class CxxFileIR:
    """
    CxxFileIR
    =========
    Fields
    ------
    recognizer_file     : 인식기 소스 파일 이름 (예: ExprParser.cpp)
    header_file         : 헤더 파일 이름 (예: ExprParser.hpp)
    namespace_components: 네임스페이스 경로 조각
    tokens              : 헤더에 방출할 토큰(EOF 제외)
    encoding            : 인코딩 이름
    literal_prefix      : 문자열 리터럴 접두사
    rejected_scopes     : (scope, action_name) 중 이 문법 종류에서 허용되지 않는 것
    """
    recognizer_file: str
    header_file: str
    namespace_components: List[str]
    tokens: List[TokenDecl]
    encoding: str
    literal_prefix: str
    rejected_scopes: List[Tuple[str, str]] = field(default_factory=list)


def _preflight_check(g: Grammar) -> None:
    """기본 전제 조건을 조기 검증한다."""
    if not g.name:
        raise ValueError("file IR: grammar name is empty")
    if not g.name.isidentifier():
        raise ValueError(f"file IR: grammar name {g.name!r} is not a valid identifier")


def build_file_ir(target: CxxTarget, g: Grammar, header_ext: Optional[str] = None) -> CxxFileIR:
    _preflight_check(g)

    rejected: List[Tuple[str, str]] = []
    for scope, acts in g.actions.items():
        if not target.is_valid_action_scope(g.kind, scope):
            rejected.extend((scope, name) for name in acts)

    return CxxFileIR(
        recognizer_file=target.recognizer_file_name(g),
        header_file=target.header_file_name(g, header_ext),
        namespace_components=target.namespace_components(g),
        tokens=target.header_tokens(g.tokens),
        encoding=target.encoding.encoding_name(),
        literal_prefix=target.literal_prefix,
        rejected_scopes=rejected,
    )
