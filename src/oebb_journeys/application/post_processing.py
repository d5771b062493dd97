"""Post-fetch deduplication, filtering and truncation of journeys."""

from collections.abc import Iterable

from oebb_journeys.domain.models import Journey, SearchRequest


def deduplicate(journeys: Iterable[Journey]) -> list[Journey]:
    """Drop repeated journey ids, keeping the first occurrence in order."""
    seen: set[str] = set()
    unique = []
    for journey in journeys:
        if journey.id not in seen:
            seen.add(journey.id)
            unique.append(journey)
    return unique


def post_process(journeys: Iterable[Journey], request: SearchRequest) -> list[Journey]:
    """Apply dedup, interval window, transfer bound and result count, in that order.

    Order is preserved; nothing here re-sorts.
    """
    result = deduplicate(journeys)

    if request.end_time is not None:
        result = [j for j in result if j.departure <= request.end_time]

    if request.max_transfers is not None:
        result = [j for j in result if len(j.legs) <= request.max_transfers + 1]

    if request.result_count is not None:
        result = result[: request.result_count]

    return result
