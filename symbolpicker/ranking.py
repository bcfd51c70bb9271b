"""Query scoring, filtering, and priority ordering over a symbol catalog.

Scores are a substring/word-overlap heuristic: a name hit is worth 100, each
token containing the query is worth 50, and each whole query word that also
appears as a token word is worth 30. Entries scoring zero are dropped. Ties
keep catalog order because ``list.sort`` is stable.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .types import SymbolEntry

NAME_MATCH_SCORE = 100
TOKEN_MATCH_SCORE = 50
WORD_MATCH_SCORE = 30


def normalize_query(query: str) -> str:
    return query.strip().lower()


def match_score(query: str, entry: SymbolEntry) -> int:
    """Score ``entry`` against an already trimmed, lower-cased ``query``."""
    tokens_lower = [token.lower() for token in entry.search_tokens]

    score = 0
    if query in entry.name.lower():
        score += NAME_MATCH_SCORE

    for token in tokens_lower:
        if query in token:
            score += TOKEN_MATCH_SCORE

    query_words = set(query.split())
    token_words = {word for token in tokens_lower for word in token.split()}
    score += len(query_words & token_words) * WORD_MATCH_SCORE
    return score


def rank_with_scores(query: str, catalog: Sequence[SymbolEntry]) -> list[tuple[SymbolEntry, int]]:
    """Return matching entries paired with scores, best first.

    An empty or whitespace-only query passes the catalog through in order with
    a score of ``0`` for every entry.
    """
    normalized = normalize_query(query)
    if not normalized:
        return [(entry, 0) for entry in catalog]

    scored: list[tuple[SymbolEntry, int]] = []
    for entry in catalog:
        score = match_score(normalized, entry)
        if score > 0:
            scored.append((entry, score))
    scored.sort(key=lambda item: -item[1])
    return scored


def rank(query: str, catalog: Sequence[SymbolEntry]) -> list[SymbolEntry]:
    """Filter and order ``catalog`` for ``query``; never returns ``None``."""
    if not normalize_query(query):
        return list(catalog)
    return [entry for entry, _ in rank_with_scores(query, catalog)]


def prioritize(catalog: Sequence[SymbolEntry], priority: Iterable[str]) -> list[SymbolEntry]:
    """Stable partition: entries named in ``priority`` first, the rest after."""
    preferred = set(priority)
    head = [entry for entry in catalog if entry.name in preferred]
    tail = [entry for entry in catalog if entry.name not in preferred]
    return head + tail
