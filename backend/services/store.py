"""
Immutable in-memory insight snapshot.
Built once at startup; every query reads from it and nothing writes to it.
"""
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from core.errors import InvalidRange
from models.insight import (
    RANGES,
    InsightRecord,
    StatusInsight,
    TimeseriesInsight,
    parse_ts,
)


def _check_points(record_id: str, points: Sequence, latest_value) -> None:
    if not points:
        raise ValueError(f"{record_id}: series/history must not be empty")
    stamps = [parse_ts(p.ts) for p in points]
    if any(b < a for a, b in zip(stamps, stamps[1:])):
        raise ValueError(f"{record_id}: points must be ascending by ts")
    if points[-1].value != latest_value:
        raise ValueError(f"{record_id}: last point does not match latest.value")


def _validate_range(range_: str, records: Sequence[InsightRecord]) -> None:
    seen_ids: set[str] = set()
    seen_metrics: set[str] = set()
    for record in records:
        if record.id in seen_ids:
            raise ValueError(f"{range_}: duplicate insight id {record.id}")
        seen_ids.add(record.id)
        if isinstance(record, TimeseriesInsight):
            if record.metric in seen_metrics:
                raise ValueError(f"{range_}: duplicate metric {record.metric}")
            seen_metrics.add(record.metric)
            _check_points(record.id, record.series, record.latest.value)
        elif isinstance(record, StatusInsight):
            _check_points(record.id, record.history, record.latest.value)
        else:
            raise TypeError(f"{range_}: unsupported insight {type(record).__name__}")


class InsightStore:
    """Read-only catalog of insights per range plus the shared favourite ids."""

    def __init__(
        self,
        by_range: Mapping[str, Iterable[InsightRecord]],
        favourites: Iterable[str],
    ):
        missing = [r for r in RANGES if r not in by_range]
        unknown = [r for r in by_range if r not in RANGES]
        if missing or unknown:
            raise ValueError(f"ranges mismatch: missing={missing} unknown={unknown}")

        collections: dict[str, tuple[InsightRecord, ...]] = {}
        for range_ in RANGES:
            records = tuple(by_range[range_])
            _validate_range(range_, records)
            collections[range_] = records

        self._by_range = MappingProxyType(collections)
        # dict.fromkeys keeps declared order and drops duplicates
        self._favourite_order = tuple(dict.fromkeys(favourites))
        self._favourites = frozenset(self._favourite_order)

    def get_by_range(self, range_: str) -> tuple[InsightRecord, ...]:
        try:
            return self._by_range[range_]
        except (KeyError, TypeError):
            raise InvalidRange(range_, RANGES) from None

    def is_favourited(self, insight_id: str) -> bool:
        return insight_id in self._favourites

    def favourite_ids(self) -> tuple[str, ...]:
        return self._favourite_order

    def get_by_id(self, insight_id: str, range_: str) -> InsightRecord | None:
        for record in self.get_by_range(range_):
            if record.id == insight_id:
                return record
        return None

    def sizes(self) -> dict[str, int]:
        return {range_: len(records) for range_, records in self._by_range.items()}
