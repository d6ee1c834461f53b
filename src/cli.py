#!/usr/bin/env python3
import argparse
import logging
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

logger = logging.getLogger(__name__)


class ANSIColors:
    RESET = '\033[0m'
    RED = '\033[31m'
    YELLOW = '\033[33m'

    @classmethod
    def disable(cls):
        cls.RESET = ''
        cls.RED = ''
        cls.YELLOW = ''


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: TextIO = sys.stdout):
        self.use_color = use_color
        self.output = output
        if not use_color:
            ANSIColors.disable()

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_error(self, text: str):
        sys.stderr.write(f"{ANSIColors.RED}Error: {text}{ANSIColors.RESET}\n")

    def print_warning(self, text: str):
        sys.stderr.write(f"{ANSIColors.YELLOW}Warning: {text}{ANSIColors.RESET}\n")


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='array-changes',
            description='Find removals, insertions, moves and updates between two lists of identifiable items',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Inputs are JSON arrays or text files with one "id<TAB>content" record per line.

Examples:
  %(prog)s old.txt new.txt
  %(prog)s --key id old.json new.json
  %(prog)s --format json old.txt new.txt
  %(prog)s --batch --no-color old.txt new.txt
            '''
        )
        parser.add_argument('old', help='File with the old list')
        parser.add_argument('new', help='File with the new list')
        parser.add_argument(
            '-k', '--key',
            metavar='FIELD',
            help='Identity field of JSON objects (implies JSON input)'
        )
        parser.add_argument(
            '-t', '--separator',
            default='\t',
            metavar='SEP',
            help='Separator between identity and content in text records (default: tab)'
        )
        format_group = parser.add_mutually_exclusive_group()
        format_group.add_argument(
            '-f', '--format',
            choices=['simple', 'listing', 'json', 'html'],
            default='listing',
            help='Output format (default: listing)'
        )
        format_group.add_argument(
            '-b', '--batch',
            action='store_true',
            help='Show the batch updates a list view would receive'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether the lists differ'
        )
        parser.add_argument(
            '--no-items',
            action='store_true',
            help='Show indexes only'
        )
        parser.add_argument(
            '-w', '--width',
            type=int,
            default=60,
            metavar='NUM',
            help='Maximum width of an item label (default: 60)'
        )
        parser.add_argument(
            '--verify',
            action='store_true',
            help='Replay the changes on a copy of the old list and check the result'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Log debug information to stderr'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version='%(prog)s 1.0.0'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(levelname)s: %(name)s: %(message)s'
        )
        use_color = not args.no_color and sys.stdout.isatty()
        output_file = None
        if args.output:
            output_file = open(args.output, 'w', encoding='utf-8')
            self.printer = ColorPrinter(use_color=False, output=output_file)
        else:
            self.printer = ColorPrinter(use_color=use_color)
        try:
            result = self._execute(args, use_color and not args.output)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = 130
        except Exception as e:
            logger.debug("Failed", exc_info=True)
            self.printer.print_error(str(e))
            result = 2
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _execute(self, args, use_color: bool) -> int:
        from sources.reader import load_records
        for path in (args.old, args.new):
            if not os.path.exists(path):
                self.printer.print_error(f"File not found: {path}")
                return 2
            if os.path.isdir(path):
                self.printer.print_error(f"Is a directory: {path}")
                return 2
        old_records = load_records(args.old, args.key, args.separator)
        new_records = load_records(args.new, args.key, args.separator)
        changes = self._find_changes(old_records, new_records)
        if args.verify and not self._verify(changes, old_records, new_records):
            self.printer.print_error("Replaying the changes did not reproduce the new list")
            return 2
        if args.quiet:
            if not changes.is_empty:
                self.printer.print(f"Lists {args.old} and {args.new} differ")
            return 0 if changes.is_empty else 1
        if not changes.is_empty:
            self._print_changes(args, changes, old_records, new_records, use_color)
        return 0 if changes.is_empty else 1

    def _find_changes(self, old_records, new_records):
        from arraychanges.matcher import find_changes
        return find_changes(
            old_records, lambda r: r.identity,
            new_records, lambda r: r.identity,
            lambda old, new: old.content == new.content
        )

    def _verify(self, changes, old_records, new_records) -> bool:
        from arraychanges.replay import apply_to_list
        replayed = list(old_records)
        apply_to_list(changes, replayed, new_records, make_item=lambda record: record)
        return [r.identity for r in replayed] == [r.identity for r in new_records]

    def _print_changes(self, args, changes, old_records, new_records, use_color: bool):
        from formatters import FormatterConfig, FormatterFactory
        config = FormatterConfig(
            use_color=use_color,
            show_items=not args.no_items,
            max_item_width=args.width
        )
        formatter = FormatterFactory.create('batch' if args.batch else args.format, config)
        out = formatter.format(
            changes, args.old, args.new,
            [r.label for r in old_records], [r.label for r in new_records]
        )
        self.printer.print(out, end='' if out.endswith('\n') else '\n')


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
