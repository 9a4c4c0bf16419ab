"""Command-line walk-through of the stateless strategy API."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from nicehand.quick_api import QuickPokerAPI, StrategyResponse, WebGameState

_REQUESTS = (
    (
        "요청 1: 포켓 에이스를 가진 프리플랍",
        WebGameState(hole_cards=(12, 25), board=(), street=0, pot=150,
                     to_call=50, my_stack=1000, opponent_stack=1000),
    ),
    (
        "요청 2: 탑 페어가 있는 플랍",
        WebGameState(hole_cards=(12, 7), board=(25, 1, 14), street=1, pot=200,
                     to_call=75, my_stack=925, opponent_stack=875),
    ),
    (
        "요청 3: 플러시 드로우가 있는 턴",
        WebGameState(hole_cards=(12, 11), board=(25, 1, 14, 10), street=2, pot=400,
                     to_call=150, my_stack=750, opponent_stack=700),
    ),
)

_PERF_REQUEST = WebGameState(hole_cards=(8, 21), board=(), street=0, pot=100,
                             to_call=25, my_stack=975, opponent_stack=950)
_PERF_ROUNDS = 100


def _format_seconds(seconds: float) -> str:
    return f"{seconds * 1_000_000:.1f}µs"


def _print_response(response: StrategyResponse, elapsed: float) -> None:
    print(f"💡 추천 액션: {response.recommended_action}")
    print("📊 액션 확률:")
    for action, prob in response.strategy.items():
        print(f"   {action}: {prob * 100.0:.1f}%")
    print(f"🎯 기댓값: {response.expected_value:.2f}")
    print(f"⚡ 응답 시간: {_format_seconds(elapsed)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo and print its results."""
    parser = argparse.ArgumentParser(
        prog="nicehand-demo",
        description="Demonstrate the stateless poker strategy API.",
    )
    parser.parse_args(argv)

    print("🚀 텍사스 홀덤 간단한 웹 API 데모")
    print("====================================")
    print("✨ 훈련 불필요 - 즉시 응답!")

    print("\n🌐 빠른 포커 API 초기화 중...")
    api = QuickPokerAPI()
    print("✅ API가 즉시 요청 처리 준비 완료")

    print("\n📡 웹 요청 시뮬레이션...")
    for title, request in _REQUESTS:
        print(f"\n🃏 {title}")
        start = time.perf_counter()
        response = api.get_optimal_strategy(request)
        _print_response(response, time.perf_counter() - start)

    print(f"\n⚡ 성능 테스트: {_PERF_ROUNDS}회 요청")
    start = time.perf_counter()
    for _ in range(_PERF_ROUNDS):
        api.get_optimal_strategy(_PERF_REQUEST)
    total = time.perf_counter() - start
    average = total / _PERF_ROUNDS

    print(f"🚀 {_PERF_ROUNDS}회 요청이 {_format_seconds(total)}에 완료됨")
    print(f"📊 평균 응답 시간: {_format_seconds(average)}")
    rate = 1.0 / average if average > 0 else float("inf")
    print(f"🔥 초당 요청 수: {rate:.0f}")

    print("\n📋 요약")
    print("=========")
    print("✅ 간단한 API가 훈련 없이 작동")
    print("✅ 무상태 요청이 올바르게 작동")
    print("✅ 서브 밀리초 응답 시간")
    print("✅ 즉시 프로덕션 사용 준비")
    print("✅ 캐주얼 플레이에 적합한 휴리스틱 기반 전략")

    print("\n🎯 웹 서버 통합:")
    print("   1. 서버 시작 시 QuickPokerAPI() 초기화")
    print("   2. get_optimal_strategy()로 HTTP 요청 처리")
    print("   3. 각 요청은 완전히 독립적 (무상태)")
    print("   4. 훈련이나 사전 계산 불필요")
    print("   5. 실시간 포커 애플리케이션에 완벽")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())