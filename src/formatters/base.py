from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Any, Dict, Sequence
from enum import Enum
import sys

from arraychanges.changes import ArrayChanges


class OutputTarget(Enum):
    STDOUT = "stdout"
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        use_color: bool = True,
        show_items: bool = True,
        indent: int = 2,
        max_item_width: int = 60,
        encoding: str = "utf-8"
    ):
        self.use_color = use_color
        self.show_items = show_items
        self.indent = indent
        self.max_item_width = max_item_width
        self.encoding = encoding

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            use_color=self.use_color,
            show_items=self.show_items,
            indent=self.indent,
            max_item_width=self.max_item_width,
            encoding=self.encoding
        )

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg

    def with_items(self, show_items: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.show_items = show_items
        return cfg

    def with_max_item_width(self, width: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.max_item_width = width
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.yellow = '\033[33m'
        self.cyan = '\033[36m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''
        self.yellow = ''
        self.cyan = ''

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STDOUT, output: Optional[TextIO] = None):
        self.target = target
        self._output = output or sys.stdout
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)

    def flush(self):
        if self.target != OutputTarget.STRING:
            self._output.flush()


class ItemLabeler:
    def __init__(self, max_width: int = 60, ellipsis: str = "..."):
        self.max_width = max_width
        self.ellipsis = ellipsis

    def label(self, items: Optional[Sequence[Any]], index: int) -> str:
        if items is None or not 0 <= index < len(items):
            return ""
        return self.truncate(str(items[index]))

    def truncate(self, text: str) -> str:
        if len(text) <= self.max_width:
            return text
        if self.max_width <= len(self.ellipsis):
            return text[:self.max_width]
        return text[:self.max_width - len(self.ellipsis)] + self.ellipsis


class BaseFormatter(ABC):
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.labeler = ItemLabeler(self.config.max_item_width)
        self.writer: Optional[OutputWriter] = None

    def format(
        self,
        changes: ArrayChanges,
        old_name: str,
        new_name: str,
        old_items: Optional[Sequence[Any]] = None,
        new_items: Optional[Sequence[Any]] = None,
        output: Optional[TextIO] = None
    ) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        if not self.config.show_items:
            old_items = new_items = None
        self._format_impl(changes, old_name, new_name, old_items, new_items)
        if output is None:
            return self.writer.get_output()
        return ""

    @abstractmethod
    def _format_impl(
        self,
        changes: ArrayChanges,
        old_name: str,
        new_name: str,
        old_items: Optional[Sequence[Any]],
        new_items: Optional[Sequence[Any]]
    ):
        pass

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


class SimpleFormatter(BaseFormatter):
    def _format_impl(
        self,
        changes: ArrayChanges,
        old_name: str,
        new_name: str,
        old_items: Optional[Sequence[Any]],
        new_items: Optional[Sequence[Any]]
    ):
        for r in changes.removals:
            self._writeln(f"{self.colors.red}{r}{self.colors.reset}")
        for i in changes.insertions:
            self._writeln(f"{self.colors.green}{i}{self.colors.reset}")
        for m in changes.moves:
            self._writeln(f"{self.colors.cyan}{m}{self.colors.reset}")
        for u in changes.updates:
            self._writeln(f"{self.colors.yellow}{u}{self.colors.reset}")


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())


FormatterFactory.register("simple", SimpleFormatter)
