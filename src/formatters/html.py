import json
from typing import Any, List, Optional, Sequence
from html import escape as html_escape

from arraychanges.changes import ArrayChanges
from formatters.base import BaseFormatter, FormatterFactory


DEFAULT_STYLES = """
body { font-family: monospace; margin: 20px; background: #fafafa; color: #333; }
.changes-container { border: 1px solid #ddd; border-radius: 4px; overflow: hidden; margin-bottom: 20px; }
.changes-header { background: #f7f7f7; padding: 10px 15px; border-bottom: 1px solid #ddd; font-weight: bold; }
table { width: 100%; border-collapse: collapse; font-size: 13px; }
td { padding: 2px 8px; vertical-align: top; white-space: pre-wrap; word-wrap: break-word; }
.index { width: 90px; text-align: right; color: #999; background: #f7f7f7; border-right: 1px solid #eee; }
.marker { width: 20px; text-align: center; font-weight: bold; }
.removal { background: #ffeef0; }
.insertion { background: #e6ffed; }
.move { background: #f1f8ff; }
.update { background: #fffbdd; }
.stats { padding: 10px 15px; background: #f7f7f7; border-top: 1px solid #ddd; font-size: 12px; }
"""


class HTMLFormatter(BaseFormatter):
    def _format_impl(self, changes: ArrayChanges, old_name: str, new_name: str,
                     old_items: Optional[Sequence[Any]], new_items: Optional[Sequence[Any]]):
        rows: List[str] = []
        for r in changes.removals:
            rows.append(self._row("removal", "-", str(r.index), self.labeler.label(old_items, r.index)))
        for i in changes.insertions:
            rows.append(self._row("insertion", "+", str(i.index), self.labeler.label(new_items, i.index)))
        for m in changes.moves:
            rows.append(self._row("move", "~", f"{m.old_index} &rarr; {m.new_index}",
                                  self.labeler.label(new_items, m.new_index)))
        for u in changes.updates:
            rows.append(self._row("update", "*", f"{u.old_index} &rarr; {u.new_index}",
                                  self.labeler.label(new_items, u.new_index)))
        summary = changes.summary()
        html = f"""<!DOCTYPE html>
<html><head><meta charset="UTF-8"><title>Changes: {html_escape(old_name)} vs {html_escape(new_name)}</title>
<style>{DEFAULT_STYLES}</style></head><body>
<div class="changes-container">
<div class="changes-header"><span>--- {html_escape(old_name)}</span><br><span>+++ {html_escape(new_name)}</span></div>
<table>{"".join(rows)}</table>
<div class="stats">-{summary['removals']}, +{summary['insertions']}, ~{summary['moves']}, *{summary['updates']}</div>
</div></body></html>"""
        self._write(html)

    def _row(self, kind: str, marker: str, position: str, label: str) -> str:
        return (f'<tr class="{kind}"><td class="index">{position}</td>'
                f'<td class="marker">{marker}</td><td>{html_escape(label)}</td></tr>')


class JSONFormatter(BaseFormatter):
    def _format_impl(self, changes: ArrayChanges, old_name: str, new_name: str,
                     old_items: Optional[Sequence[Any]], new_items: Optional[Sequence[Any]]):
        result = {"old": old_name, "new": new_name, "empty": changes.is_empty}
        result.update(changes.to_dict())
        if old_items is not None and new_items is not None:
            for r in result["removals"]:
                r["item"] = self.labeler.label(old_items, r["index"])
            for i in result["insertions"]:
                i["item"] = self.labeler.label(new_items, i["index"])
            for change in result["moves"] + result["updates"]:
                change["item"] = self.labeler.label(new_items, change["new_index"])
        self._write(json.dumps(result, indent=self.config.indent, ensure_ascii=False))


FormatterFactory.register("html", HTMLFormatter)
FormatterFactory.register("json", JSONFormatter)
