#!/usr/bin/env python3
"""Insert random demo posts.

Usage:
    SEED_COUNT=100 python scripts/seed_db.py

About 70% of posts are about one of ten Korean large caps; creation times
are spread over the last 180 days so sorting and trending have something to
work with.
"""

import asyncio
import os
import random
import sys
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import logfire
from sqlalchemy import insert

from stockboard.config import Settings
from stockboard.domain.value import PositionType, Sentiment
from stockboard.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from stockboard.persistence.tables import posts_table
from stockboard.util.logging import setup_logging
from stockboard.util.observability import configure_logfire

BATCH_SIZE = 25

STOCKS = [
    ("005930", "삼성전자"),
    ("000660", "SK하이닉스"),
    ("035420", "NAVER"),
    ("035720", "카카오"),
    ("051910", "LG화학"),
    ("068270", "셀트리온"),
    ("105560", "KB금융"),
    ("055550", "신한지주"),
    ("066570", "LG전자"),
    ("028260", "삼성물산"),
]

AUTHORS = [
    "알파투자자",
    "베타트레이더",
    "감자농부",
    "퀀트덕후",
    "초보개미",
    "재무분석러",
    "롱숏마스터",
    "주린이A",
    "가치투자자",
    "단타장인",
]

TITLE_SUFFIXES = [
    "분석",
    "전망",
    "실적 코멘트",
    "리스크 점검",
    "모멘텀 체크",
    "뉴스 요약",
    "기술적 관점",
    "가치평가",
]

GENERIC_TOPICS = ["시장 코멘트", "금리와 증시", "섹터 스캔", "인플레이션 영향"]

CONTENT_LINES = [
    "전일 대비 수급 동향을 간단히 정리해봅니다.",
    "단기 추세가 과열 구간에 진입한 것으로 보입니다.",
    "밸류에이션은 동종 업계 평균 대비 소폭 프리미엄 구간입니다.",
    "중장기 관점에서 실적 모멘텀이 유효하다고 판단합니다.",
    "리스크로는 환율 변동성과 주요 원자재 가격 상승을 꼽을 수 있습니다.",
    "기술적 저항선을 돌파하면 추가 랠리를 기대해볼 만합니다.",
    "기관 수급이 개선되고 있는 점이 긍정적입니다.",
]


def random_past_date(days: int = 180) -> datetime:
    now = datetime.now(timezone.utc)
    return (now - timedelta(days=random.randint(0, days))).replace(
        hour=random.randint(0, 23),
        minute=random.randint(0, 59),
        second=random.randint(0, 59),
        microsecond=0,
    )


def make_post(stock: Optional[tuple[str, str]]) -> dict[str, Any]:
    """Build one random row for the posts table."""
    suffix = random.choice(TITLE_SUFFIXES)
    body = "\n\n".join(random.choice(CONTENT_LINES) for _ in range(random.randint(2, 5)))
    created = random_past_date()

    # Every row carries the same keys so one executemany covers the batch
    row: dict[str, Any] = {
        "stock_code": None,
        "stock_name": None,
        "entry_price": None,
        "target_price": None,
        "author": random.choice(AUTHORS),
        "sentiment": random.choice(list(Sentiment)).value,
        "position_type": random.choice(list(PositionType)).value,
        "created_at": created,
        "updated_at": created,
    }

    if stock is None:
        row["title"] = f"{random.choice(GENERIC_TOPICS)} - {suffix}"
        row["content"] = body
        return row

    code, name = stock
    entry_price = random.randint(10, 900) * 100
    row.update(
        title=f"{name} ({code}) {suffix}",
        content=f"종목 포인트: {name} ({code})\n\n{body}",
        stock_code=code,
        stock_name=name,
        entry_price=entry_price if random.random() < 0.6 else None,
        target_price=(
            round(entry_price * random.uniform(0.8, 1.4), -2)
            if random.random() < 0.6
            else None
        ),
    )
    return row


async def seed(settings: Settings, count: int) -> None:
    rows = [
        make_post(random.choice(STOCKS) if random.random() < 0.7 else None)
        for _ in range(count)
    ]

    engine = create_engine(settings)
    try:
        session_factory = create_session_factory(engine)
        async with get_session(session_factory) as session:
            for start in range(0, len(rows), BATCH_SIZE):
                chunk = rows[start : start + BATCH_SIZE]
                await session.execute(insert(posts_table), chunk)
                logfire.info(
                    "Inserted posts",
                    inserted=min(start + BATCH_SIZE, len(rows)),
                    total=len(rows),
                )
            await session.commit()
    finally:
        await engine.dispose()


def main() -> int:
    """Seed the posts table and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    count = int(os.environ.get("SEED_COUNT", "50"))

    try:
        logfire.info("Seeding posts", count=count)
        asyncio.run(seed(settings, count))
        logfire.info("Seeding finished", count=count)
        return 0

    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
