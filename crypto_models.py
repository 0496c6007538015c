"""Records produced from CryptoPanic API payloads."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from logging_config import logger


@dataclass(frozen=True)
class ArticleRecord:
    """A single news post ready to be rendered."""

    id: Any
    title: str
    url: str
    published_at: Optional[datetime]
    source_title: str
    domain: str


@dataclass(frozen=True)
class PriceRecord:
    """Price and market data for one currency, valid for the current update only."""

    symbol: str
    price_usd: float
    percent_change_24h: float = 0.0
    market_cap_usd: float = 0.0


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as '2024-03-01T12:30:00Z' into an aware datetime."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        logger.debug(f"Unparsable timestamp from API: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def article_from_api(item: Dict[str, Any]) -> Optional[ArticleRecord]:
    """
    Build an ArticleRecord from one entry of the posts endpoint's `results`.

    Returns None if the entry lacks an id, title or url.
    """
    if not isinstance(item, dict):
        return None

    item_id = item.get('id')
    title = item.get('title')
    url = item.get('url')
    if item_id is None or not title or not url:
        return None

    source = item.get('source')
    source_title = source.get('title', '') if isinstance(source, dict) else ''

    return ArticleRecord(
        id=item_id,
        title=str(title),
        url=str(url),
        published_at=parse_timestamp(item.get('published_at')),
        source_title=str(source_title or 'Unknown'),
        domain=str(item.get('domain') or ''),
    )


def _as_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def price_from_api(item: Dict[str, Any], symbol: str) -> Optional[PriceRecord]:
    """
    Build a PriceRecord from one entry of the currencies endpoint's `results`.

    Returns None if the entry has no usable, positive `price_usd`.
    """
    if not isinstance(item, dict):
        return None

    price = _as_float(item.get('price_usd'))
    if price is None or price <= 0:
        return None

    return PriceRecord(
        symbol=str(item.get('code') or symbol),
        price_usd=price,
        percent_change_24h=_as_float(item.get('percent_change_24h'), 0.0),
        market_cap_usd=_as_float(item.get('market_cap_usd'), 0.0),
    )
