# cxxtarget/cxxtc.py
"""cxxtc – cxxtarget CLI

사용 예)
    $ python -m cxxtarget.cxxtc char "'\\n'" -e UTF16
    $ python -m cxxtarget.cxxtc string "'héllo'" -e UTF8
    $ python -m cxxtarget.cxxtc scope combined lexer
    $ python -m cxxtarget.cxxtc namespace "my::" "expr"
    $ python -m cxxtarget.cxxtc thresholds --min-switch-alts 5
    $ python -m cxxtarget.cxxtc attrs tests/data/expr.json -D

기능
----
- char/string : 문법 리터럴 → C++ 리터럴 텍스트
- scope       : (문법 종류, 스코프 이름) 유효성 (유효 0 / 무효 1)
- namespace   : 네임스페이스 액션 본문 → 경로 조각
- thresholds  : 분석 임계값 병합 결과
- attrs       : 문법 설명(JSON) → 파일 단위 속성

디버그 모드(-D/--debug)를 켜면 인코딩/임계값/폴백 정보를 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

from .codegen.heuristics import DEFAULT_THRESHOLDS, ThresholdSet
from .codegen.target import CxxTarget, TargetConfig

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _make_config(args) -> TargetConfig:
    """서브커맨드별 옵션을 TargetConfig 하나로 모은다(없는 옵션은 기본값)."""
    cfg = TargetConfig(
        encoding=getattr(args, "encoding", None),
        strict_literals=getattr(args, "strict", False),
        header_ext=getattr(args, "header_ext", ".hpp"),
    )
    if hasattr(args, "min_switch_alts"):
        cfg.thresholds = ThresholdSet(
            max_inline_dfa_states=args.max_inline_dfa_states,
            max_switch_case_labels=args.max_switch_case_labels,
            min_switch_alts=args.min_switch_alts,
        )
    return cfg


def _make_target(args) -> CxxTarget:
    target = CxxTarget.from_config(_make_config(args))
    if args.debug:
        _eprint(f"[DEBUG] encoding option={target.config.encoding!r} -> {target.encoding.encoding_name()} "
                f"prefix={target.literal_prefix}")
    return target


def _report_degraded(target: CxxTarget) -> None:
    for d in target.drain_degraded():
        _eprint(f"[WARN] char literal {d.literal} degraded to 0: {d.reason}")

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_char(args) -> int:
    try:
        target = _make_target(args)
        print(target.char_literal(args.literal))
    except ValueError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    _report_degraded(target)
    return 0


def cmd_string(args) -> int:
    try:
        target = _make_target(args)
        print(target.string_literal(args.literal))
    except ValueError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    return 0


def cmd_scope(args) -> int:
    from .codegen.scopes import is_valid_action_scope
    ok = is_valid_action_scope(args.kind, args.name)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_namespace(args) -> int:
    from .codegen.namespace import split_namespace
    parts = split_namespace(args.fragments)
    if args.debug:
        _eprint(f"[DEBUG] raw={''.join(args.fragments)!r} components={len(parts)}")
    print("::".join(parts))
    return 0


def cmd_thresholds(args) -> int:
    target = _make_target(args)
    merged = target.prepare_analysis()
    if args.debug:
        _eprint(f"[DEBUG] caller={target.config.thresholds}")
    print(f"max_inline_dfa_states={merged.max_inline_dfa_states}")
    print(f"max_switch_case_labels={merged.max_switch_case_labels}")
    print(f"min_switch_alts={merged.min_switch_alts}")
    return 0


def cmd_attrs(args) -> int:
    from .codegen.ir import build_file_ir
    from .grammar.loader import load_grammar
    try:
        target = _make_target(args)
        g = load_grammar(args.file)
        ir = build_file_ir(target, g)
    except (OSError, ValueError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug:
        _eprint(f"[DEBUG] grammar={g.name} kind={g.kind.value} tokens={len(g.tokens)}")
    for scope, name in ir.rejected_scopes:
        _eprint(f"[WARN] action @{scope}::{name} is not valid for a {g.kind.value} grammar; ignored")

    print(f"recognizer: {ir.recognizer_file}")
    print(f"header: {ir.header_file}")
    print(f"namespace: {'::'.join(ir.namespace_components)}")
    print(f"encoding: {ir.encoding} ({ir.literal_prefix})")
    print("tokens: " + ", ".join(f"{t.name}={t.ttype}" for t in ir.tokens))
    return 0


# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="cxxtc", description="cxxtarget C++ backend CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")

    enc = argparse.ArgumentParser(add_help=False)
    enc.add_argument("-e", "--encoding", default=None, help="UTF8 | UTF16 | UTF32 (미지정/미지원 값은 UTF16)")

    p_char = sub.add_parser("char", parents=[common, enc], help="문법 문자 리터럴을 C++ 문자 리터럴로 변환합니다")
    p_char.add_argument("literal", help="따옴표 포함 문법 리터럴 (예: 'a')")
    p_char.add_argument("--strict", action="store_true", help="해석 불가 리터럴을 0 대신 오류로 처리")
    p_char.set_defaults(func=cmd_char)

    p_str = sub.add_parser("string", parents=[common, enc], help="문법 문자열 리터럴을 C++ 문자열 리터럴로 변환합니다")
    p_str.add_argument("literal", help="따옴표 포함 문법 리터럴 (예: 'abc')")
    p_str.set_defaults(func=cmd_string)

    p_scope = sub.add_parser("scope", parents=[common], help="액션 스코프 유효성을 검사합니다")
    p_scope.add_argument("kind", help="lexer | parser | combined | treeparser")
    p_scope.add_argument("name", help="스코프 이름 (예: header)")
    p_scope.set_defaults(func=cmd_scope)

    p_ns = sub.add_parser("namespace", parents=[common], help="네임스페이스 액션 본문을 경로 조각으로 나눕니다")
    p_ns.add_argument("fragments", nargs="+", help="액션 본문 조각들(이어 붙여 해석)")
    p_ns.set_defaults(func=cmd_namespace)

    p_th = sub.add_parser("thresholds", parents=[common], help="C++ 분석 임계값 병합 결과를 출력합니다")
    p_th.add_argument("--max-inline-dfa-states", type=int, default=DEFAULT_THRESHOLDS.max_inline_dfa_states)
    p_th.add_argument("--max-switch-case-labels", type=int, default=DEFAULT_THRESHOLDS.max_switch_case_labels)
    p_th.add_argument("--min-switch-alts", type=int, default=DEFAULT_THRESHOLDS.min_switch_alts)
    p_th.set_defaults(func=cmd_thresholds)

    p_attrs = sub.add_parser("attrs", parents=[common, enc], help="문법 설명(JSON)에서 파일 속성을 계산합니다")
    p_attrs.add_argument("file", help="문법 설명 .json 파일")
    p_attrs.add_argument("--header-ext", default=".hpp", help="헤더 확장자")
    p_attrs.set_defaults(func=cmd_attrs)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
