from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from .errors import InvalidCountError, UnknownCityError
from .models import CafeQuery
from .registry import SEPARATOR, CityRegistry

logger = logging.getLogger(__name__)

# Plain base-10 digits only: no sign, whitespace or underscores.
_COUNT_RE = re.compile(r"[0-9]+")


def parse_count(raw: str | None) -> int | None:
    """Parse the ``count`` parameter. ``None`` (absent) means no limit."""
    if raw is None:
        return None
    if not _COUNT_RE.fullmatch(raw):
        logger.debug("Rejected count %r", raw)
        raise InvalidCountError()
    return int(raw)


def parse_query(params: Mapping[str, str], registry: CityRegistry) -> CafeQuery:
    """Validate raw query parameters against the registry.

    The city is checked before the count, so a request that gets both wrong
    is reported as an unknown city.
    """
    city = params.get("city")
    if not city or city not in registry:
        logger.debug("Rejected city %r", city)
        raise UnknownCityError()

    count = parse_count(params.get("count"))
    return CafeQuery(city=city, count=count, search=params.get("search"))


def filter_cafes(cafes: Sequence[str], search: str | None) -> list[str]:
    """Keep cafés whose name contains ``search``, ignoring case.

    Uses ``str.casefold`` so non-ASCII names (Cyrillic etc.) compare
    correctly. An empty or missing search keeps everything.
    """
    if not search:
        return list(cafes)
    needle = search.casefold()
    return [name for name in cafes if needle in name.casefold()]


def truncate(cafes: Sequence[str], count: int | None) -> list[str]:
    if count is None:
        return list(cafes)
    return list(cafes[:count])


def serialize(cafes: Sequence[str]) -> str:
    """Join names with a bare comma; an empty list gives an empty body."""
    return SEPARATOR.join(cafes)


def find_cafes(registry: CityRegistry, query: CafeQuery) -> list[str]:
    cafes = registry.lookup(query.city)
    if cafes is None:
        raise UnknownCityError()
    # Filter before truncating, otherwise count would cap the unfiltered list.
    return truncate(filter_cafes(cafes, query.search), query.count)


def handle_query(params: Mapping[str, str], registry: CityRegistry) -> str:
    """Run one request's parameters through the whole pipeline."""
    query = parse_query(params, registry)
    return serialize(find_cafes(registry, query))
