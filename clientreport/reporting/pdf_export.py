"""Renders a persisted report to a PDF document."""

import io
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import ListFlowable, ListItem, Paragraph, SimpleDocTemplate, Spacer

from clientreport.database.models import ReportRecord


class ReportPdfExporter:
    """Lays out title, summary, insight sections and a content excerpt on A4 pages."""

    def __init__(self, content_preview_chars: int = 2000) -> None:
        self._content_preview_chars = content_preview_chars
        self._styles = getSampleStyleSheet()
        self._body = ParagraphStyle("ReportBody", parent=self._styles["BodyText"], leading=14)

    def export(self, report: ReportRecord) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            title=report.title,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )
        doc.build(self._story(report))
        return buf.getvalue()

    def _story(self, report: ReportRecord) -> list[Any]:
        story: list[Any] = [Paragraph(escape(report.title), self._styles["Title"])]
        if report.generated_at is not None:
            story.append(
                Paragraph(
                    f"Generated {report.generated_at:%Y-%m-%d %H:%M}", self._styles["Italic"]
                )
            )
        story.append(Spacer(1, 6 * mm))

        story.extend(self._section("Summary", report.summary or "No summary available"))
        insights = report.insights or {}
        story.extend(self._section("Key Metrics", self._metric_lines(insights.get("metrics"))))
        story.extend(self._section("Trends", insights.get("trends") or "No trends identified"))
        story.extend(
            self._section("Actions", insights.get("actions") or "No specific actions recommended")
        )

        excerpt = report.content[: self._content_preview_chars]
        if excerpt:
            if len(report.content) > self._content_preview_chars:
                excerpt += "..."
            story.extend(self._section("Content Excerpt", excerpt))
        return story

    def _section(self, heading: str, body: str | list[str]) -> list[Any]:
        flowables: list[Any] = [Paragraph(escape(heading), self._styles["Heading2"])]
        if isinstance(body, list):
            items = [ListItem(Paragraph(escape(str(line)), self._body)) for line in body]
            flowables.append(ListFlowable(items, bulletType="bullet"))
        else:
            for block in str(body).split("\n\n"):
                text = escape(block).replace("\n", "<br/>")
                flowables.append(Paragraph(text, self._body))
        flowables.append(Spacer(1, 4 * mm))
        return flowables

    @staticmethod
    def _metric_lines(metrics: Any) -> str | list[str]:
        if not metrics:
            return "No metrics detected"
        if isinstance(metrics, str):
            return metrics
        lines = []
        for metric in metrics:
            line = f"{metric.get('value', '')} ({metric.get('type', 'metric')})"
            if metric.get("context"):
                line += f": ...{metric['context']}..."
            lines.append(line)
        return lines
