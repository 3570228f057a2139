"""Human-readable elapsed time ("3 days ago").

Calendar units are approximated: a year is 365 days and a month is 30 days.
The largest unit with a count of at least one wins; anything under a minute,
including dates in the future, is reported as "just now".
"""

from datetime import datetime, timezone
from typing import NamedTuple


class _Unit(NamedTuple):
    seconds: int
    singular: str
    plural: str


class _Phrasing(NamedTuple):
    template: str
    just_now: str
    units: tuple[_Unit, ...]


PHRASINGS: dict[str, _Phrasing] = {
    "fr": _Phrasing(
        template="Il y a {count} {unit}",
        just_now="À l'instant",
        units=(
            _Unit(31_536_000, "an", "ans"),
            _Unit(2_592_000, "mois", "mois"),
            _Unit(604_800, "semaine", "semaines"),
            _Unit(86_400, "jour", "jours"),
            _Unit(3_600, "heure", "heures"),
            _Unit(60, "minute", "minutes"),
        ),
    ),
    "en": _Phrasing(
        template="{count} {unit} ago",
        just_now="just now",
        units=(
            _Unit(31_536_000, "year", "years"),
            _Unit(2_592_000, "month", "months"),
            _Unit(604_800, "week", "weeks"),
            _Unit(86_400, "day", "days"),
            _Unit(3_600, "hour", "hours"),
            _Unit(60, "minute", "minutes"),
        ),
    ),
}


def _now_like(date: datetime) -> datetime:
    if date.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


def time_elapsed(
    date: datetime, *, now: datetime | None = None, language: str = "fr"
) -> str:
    """Describe how long ago ``date`` was.

    Args:
        date: The reference moment.
        now: The current moment. Defaults to the wall clock, naive or aware to
            match ``date``.
        language: ``"fr"`` or ``"en"``.

    Returns:
        A phrase such as ``"Il y a 2 heures"`` or ``"2 hours ago"``.

    Raises:
        ValueError: If ``language`` is not supported.
        TypeError: If ``date`` and ``now`` mix naive and aware datetimes.
    """
    try:
        phrasing = PHRASINGS[language]
    except KeyError as e:
        supported = ", ".join(sorted(PHRASINGS))
        raise ValueError(
            f"Unsupported language {language!r} (expected one of: {supported})"
        ) from e

    now = now if now is not None else _now_like(date)
    seconds = int((now - date).total_seconds())

    for unit in phrasing.units:
        if (count := seconds // unit.seconds) >= 1:
            name = unit.singular if count == 1 else unit.plural
            return phrasing.template.format(count=count, unit=name)
    return phrasing.just_now
