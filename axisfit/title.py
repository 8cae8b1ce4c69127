from __future__ import annotations

from typing import Sequence

from axisfit.fields import FieldStats


def resolve_title(
    fields: Sequence[FieldStats],
    user_title: str | None = None,
    *,
    separator: str = ", ",
) -> str | None:
    """Axis title for ``fields``; ``None`` means no space should be reserved for one.

    An explicit ``user_title`` always wins, and an empty one suppresses the
    title. Otherwise the labels of the displayable fields are joined, falling
    back to their pre-summary labels when those are fewer.
    """
    if user_title is not None:
        return user_title or None

    titles: dict[str, None] = {}
    original_titles: dict[str, None] = {}
    for f in fields:
        if f.synthetic or f.name.startswith("'"):
            continue
        titles[f.label] = None
        original = f.original_label()
        original_titles[f.label if original is None else original] = None

    chosen = original_titles if len(original_titles) < len(titles) else titles
    if not chosen:
        return None
    return separator.join(chosen)
