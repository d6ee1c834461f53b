from typing import Any, List, Optional, Sequence

from arraychanges.batch import RecordingBatchTarget, apply_to_batch_target
from arraychanges.changes import ArrayChanges
from formatters.base import BaseFormatter, FormatterFactory


class ListingFormatter(BaseFormatter):
    def _format_impl(self, changes: ArrayChanges, old_name: str, new_name: str,
                     old_items: Optional[Sequence[Any]], new_items: Optional[Sequence[Any]]):
        if changes.is_empty:
            return
        self._writeln(f"{self.colors.bold}--- {old_name}{self.colors.reset}")
        self._writeln(f"{self.colors.bold}+++ {new_name}{self.colors.reset}")
        summary = changes.summary()
        self._writeln(f"{self.colors.cyan}@@ -{summary['removals']} +{summary['insertions']} "
                      f"~{summary['moves']} *{summary['updates']} @@{self.colors.reset}")
        for r in changes.removals:
            self._line(self.colors.red, "-", f"[{r.index}]", self.labeler.label(old_items, r.index))
        for i in changes.insertions:
            self._line(self.colors.green, "+", f"[{i.index}]", self.labeler.label(new_items, i.index))
        for m in changes.moves:
            self._line(self.colors.cyan, "~", f"[{m.old_index} -> {m.new_index}]",
                       self.labeler.label(new_items, m.new_index))
        for u in changes.updates:
            old_label = self.labeler.label(old_items, u.old_index)
            new_label = self.labeler.label(new_items, u.new_index)
            detail = f"{old_label} => {new_label}" if old_label or new_label else ""
            self._line(self.colors.yellow, "*", f"[{u.old_index} -> {u.new_index}]", detail)

    def _line(self, color: str, marker: str, position: str, label: str):
        text = f"{marker}{position} {label}" if label else f"{marker}{position}"
        self._writeln(f"{color}{text}{self.colors.reset}")


class BatchFormatter(BaseFormatter):
    """Shows the calls an incremental list view receives for the changes."""

    def _format_impl(self, changes: ArrayChanges, old_name: str, new_name: str,
                     old_items: Optional[Sequence[Any]], new_items: Optional[Sequence[Any]]):
        target = RecordingBatchTarget()
        apply_to_batch_target(changes, target, lambda row: row, "automatic", "automatic",
                              reload_style="automatic")
        pad = " " * self.config.indent
        depth = 0
        for name, args in target.calls:
            if name == "end_updates":
                depth -= 1
            self._writeln(f"{pad * depth}{name}({self._args(args)})")
            if name == "begin_updates":
                depth += 1

    def _args(self, args: tuple) -> str:
        parts: List[str] = []
        for a in args:
            parts.append(repr(a) if isinstance(a, str) else str(a))
        return ", ".join(parts)


FormatterFactory.register("listing", ListingFormatter)
FormatterFactory.register("batch", BatchFormatter)
