from __future__ import annotations

from dataclasses import dataclass, field
import html
from typing import List, Optional, Sequence

from models import Alternative

RESULTS_TITLE = "Decider Results"


def escape(text: str | None) -> str:
    if text is None:
        return ""
    return html.escape(text, quote=False)


def format_score(score: Optional[float]) -> str:
    if score is None:
        return ""
    return f"{score:.4f}"


@dataclass(frozen=True)
class ResultRow:
    name: str
    score: str


@dataclass(frozen=True)
class ResultSummary:
    title: str = RESULTS_TITLE
    best: Optional[str] = None
    rows: List[ResultRow] = field(default_factory=list)

    def to_html(self) -> str:
        parts = [f"<h3>{escape(self.title)}</h3>"]
        if self.best is not None:
            parts.append(f"<p>Preferred choice: <b>{escape(self.best)}</b></p>")
        parts.append("<table border='0' cellspacing='2' cellpadding='2'>")
        for row in self.rows:
            parts.append(f"<tr><td>{escape(row.name)}</td>")
            if row.score:
                parts.append(f"<td style='padding-left:16px'>(score: {row.score})</td>")
            else:
                parts.append("<td></td>")
            parts.append("</tr>")
        parts.append("</table>")
        return "".join(parts)

    def to_text(self) -> str:
        lines = [self.title]
        if self.best is not None:
            lines.append(f"Preferred choice: {self.best}")
        for row in self.rows:
            lines.append(f"{row.name}: {row.score}" if row.score else row.name)
        return "\n".join(lines)


class ResultPresenter:
    """Builds a read-only summary of alternatives already ranked best first."""

    def present(self, ranked: Sequence[Alternative]) -> ResultSummary:
        rows = [ResultRow(name=alternative.name, score=format_score(alternative.score)) for alternative in ranked]
        best = ranked[0].name if ranked else None
        return ResultSummary(best=best, rows=rows)
