"""
News fetcher for the crypto bot.
Pulls the post listing and keeps only items the ledger hasn't seen yet.
"""

import logging
from typing import List, Optional

from crypto_models import ArticleRecord, article_from_api
from cryptopanic_client import CryptoPanicClient, CryptoPanicError
from news_ledger import NewsLedger

logger = logging.getLogger('crypto_bot.news_fetcher')

async def fetch_new_articles(
    api: CryptoPanicClient,
    ledger: NewsLedger,
    currency: str = 'BTC',
    kind: Optional[str] = 'news',
    filter: Optional[str] = 'important',
    limit: int = 3,
) -> List[ArticleRecord]:
    """
    Fetch news posts and return up to `limit` that haven't been posted before.

    Items are taken in the order the API returns them. Every accepted item's
    ID goes into the ledger; unseen items beyond `limit` are left for the
    next cycle and are not recorded.

    Args:
        api: The CryptoPanic client
        ledger: Record of already posted IDs, mutated for accepted items only
        currency: Currency code to filter news by
        kind: Post kind passed to the API
        filter: Listing filter passed to the API
        limit: Maximum number of articles to return

    Returns:
        List[ArticleRecord]: New articles, possibly empty
    """
    try:
        results = await api.get_posts(currency, kind=kind, filter=filter)
    except CryptoPanicError as e:
        logger.error(f"Failed to fetch news: {e}")
        return []

    accepted: List[ArticleRecord] = []
    for item in results:
        if len(accepted) >= limit:
            break

        article = article_from_api(item)
        if article is None:
            logger.warning(f"Skipping malformed news item: {str(item)[:100]}")
            continue

        if ledger.contains(article.id):
            continue

        ledger.insert(article.id)
        accepted.append(article)

    logger.info(f"Fetched {len(results)} news items, {len(accepted)} new (ledger size {len(ledger)})")
    return accepted
