from formatters.base import (
    BaseFormatter, SimpleFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget, ItemLabeler
)
from formatters.listing import ListingFormatter, BatchFormatter
from formatters.html import HTMLFormatter, JSONFormatter


__all__ = [
    "BaseFormatter", "SimpleFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget", "ItemLabeler",
    "ListingFormatter", "BatchFormatter",
    "HTMLFormatter", "JSONFormatter"
]


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()


def format_changes(
    changes,
    old_name: str,
    new_name: str,
    formatter_name: str = "listing",
    config: FormatterConfig = None,
    old_items=None,
    new_items=None
) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(changes, old_name, new_name, old_items, new_items)
