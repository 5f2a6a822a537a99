from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ...application.models import MappingSummary

INDEX_COLUMNS = [
    "name",
    "construct",
    "profile",
    "implementing_type",
    "is_open_generic",
    "element_count",
    "elements",
]


def summaries_to_frame(summaries: Iterable[MappingSummary]) -> pd.DataFrame:
    rows = [
        {
            "name": summary.name,
            "construct": summary.construct.value,
            "profile": summary.profile or "",
            "implementing_type": summary.implementing_type,
            "is_open_generic": summary.is_open_generic,
            "element_count": summary.element_count,
            "elements": ";".join(element.name for element in summary.elements),
        }
        for summary in summaries
    ]
    frame = pd.DataFrame(rows, columns=INDEX_COLUMNS)
    return frame.sort_values(["construct", "name"], kind="stable").reset_index(
        drop=True
    )


def write_index_csv(summaries: Iterable[MappingSummary], output_path: Path) -> Path:
    frame = summaries_to_frame(summaries)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output_path, index=False, encoding="utf-8")
    return output_path
