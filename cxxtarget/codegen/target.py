# cxxtarget/codegen/target.py
"""타깃 백엔드 인터페이스와 C++ 구현.

생성기는 설정 단계에서 `get_target()` 으로 타깃을 하나 고르고,
문법마다 다음 순서로 사용한다.

    target = get_target("cxx", config.encoding)
    thresholds = target.prepare_analysis(config.thresholds)   # 분석 전 1회
    target.char_literal("'\\n'")                              # 리터럴마다
    target.string_literal("'abc'")
    target.is_valid_action_scope(g.kind, "header")             # 파일 속성 준비
    target.namespace_components(g)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .encoding import DEFAULT_ENCODING, Encoding, supports_encoding
from .heuristics import CXX_THRESHOLDS, DEFAULT_THRESHOLDS, ThresholdSet, merge_thresholds
from .literals import DegradedLiteral, LiteralSynthesizer, literal_prefix
from .namespace import grammar_namespace
from .scopes import is_valid_action_scope
from ..grammar.ast import Grammar, GrammarKind, TokenDecl

EOF_TOKEN_NAME = "EOF"


@dataclass
class TargetConfig:
    """
    TargetConfig
    ============
    CLI/호출자 옵션을 모아둔 설정.

    encoding       : "UTF8" | "UTF16" | "UTF32" | None(기본값)
    thresholds     : 호출자가 지정한 임계값(기본값이면 타깃 선호값으로 대체됨)
    header_ext     : 헤더 파일 확장자
    strict_literals: 해석 불가 문자 리터럴을 오류로 처리
    """
    encoding: Optional[str] = None
    thresholds: ThresholdSet = DEFAULT_THRESHOLDS
    header_ext: str = ".hpp"
    strict_literals: bool = False


class Target:
    """타깃이 제공해야 하는 최소 인터페이스."""
    language: str = ""

    def char_literal(self, literal: str) -> str:
        raise NotImplementedError
    def string_literal(self, literal: str) -> str:
        raise NotImplementedError
    def prepare_analysis(self, thresholds: ThresholdSet) -> ThresholdSet:
        raise NotImplementedError
    def is_valid_action_scope(self, kind: object, scope: object) -> bool:
        raise NotImplementedError
    def namespace_components(self, g: Grammar) -> List[str]:
        raise NotImplementedError


class CxxTarget(Target):
    """
    CxxTarget
    =========
    C++ 백엔드. 인코딩 하나에 묶여 실행 동안 유지된다.
    """
    language = "cxx"
    recognizer_ext = ".cpp"

    def __init__(self, encoding: Encoding = DEFAULT_ENCODING, *,
                 strict_literals: bool = False,
                 config: Optional[TargetConfig] = None):
        self.encoding = encoding
        self.config = config if config is not None else TargetConfig(
            encoding=encoding.encoding_name(), strict_literals=strict_literals)
        self.literals = LiteralSynthesizer(encoding=encoding, strict=strict_literals)

    @classmethod
    def from_config(cls, cfg: TargetConfig) -> "CxxTarget":
        return cls(Encoding.from_option(cfg.encoding), strict_literals=cfg.strict_literals, config=cfg)

    # ---- 리터럴 ----
    def char_literal(self, literal: str) -> str:
        return self.literals.char_literal(literal)

    def string_literal(self, literal: str) -> str:
        return self.literals.string_literal(literal)

    @property
    def literal_prefix(self) -> str:
        return literal_prefix(self.encoding)

    @property
    def degraded(self) -> List[DegradedLiteral]:
        return self.literals.degraded

    def drain_degraded(self) -> List[DegradedLiteral]:
        return self.literals.drain_degraded()


    def supports_encoding(self, name: Optional[str]) -> bool:
        return supports_encoding(name)

    # ---- 분석 준비 ----
    def prepare_analysis(self, thresholds: Optional[ThresholdSet] = None) -> ThresholdSet:
        """thresholds 미지정 시 설정(config.thresholds)을 기준으로 병합한다."""
        if thresholds is None:
            thresholds = self.config.thresholds
        return merge_thresholds(thresholds, CXX_THRESHOLDS)

    # ---- 스코프 / 네임스페이스 ----
    def is_valid_action_scope(self, kind: object, scope: object) -> bool:
        return is_valid_action_scope(kind, scope)

    def namespace_components(self, g: Grammar) -> List[str]:
        return grammar_namespace(g)

    # ---- 파일 이름 / 헤더 ----
    def recognizer_name(self, g: Grammar) -> str:
        if g.kind is GrammarKind.COMBINED:
            return g.name + "Parser"
        return g.name

    def recognizer_file_name(self, g: Grammar) -> str:
        return self.recognizer_name(g) + self.recognizer_ext

    def header_file_name(self, g: Grammar, ext: Optional[str] = None) -> str:
        """ext 미지정 시 config.header_ext 를 쓴다."""
        if ext is None:
            ext = self.config.header_ext
        fname = self.recognizer_file_name(g)
        return fname[: -len(self.recognizer_ext)] + ext

    def header_tokens(self, tokens: List[TokenDecl]) -> List[TokenDecl]:
        """헤더에서는 EOF 토큰을 뺀다(헤더가 EOF_TOKEN 을 따로 정의)."""
        out = list(tokens)
        for i, tok in enumerate(out):
            if tok.name == EOF_TOKEN_NAME:
                del out[i]
                break
        return out


_TARGETS = {
    "cxx": CxxTarget,
    "cpp": CxxTarget,
    "c++": CxxTarget,
}


def get_target(language: str = "cxx",
               encoding: Optional[str] = None,
               *, strict_literals: bool = False) -> Target:
    try:
        cls = _TARGETS[language.lower()]
    except KeyError:
        raise ValueError(f"unsupported target language: {language!r} (known: {sorted(_TARGETS)})")
    return cls(Encoding.from_option(encoding), strict_literals=strict_literals)
