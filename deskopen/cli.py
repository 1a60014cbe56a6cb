"""
Command-line interface for deskopen
"""

import sys
import argparse
import json
from typing import Callable, List, Optional

from . import __version__
from . import desktop
from .config import Config
from .exceptions import DeskopenException, QueryError
from .models import DetectionResult
from .terminal import Terminal


class CLI:
    """Command-line interface handler"""

    def __init__(self):
        self.config = Config()

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run CLI with arguments"""
        parser = self._create_parser()

        if args is None:
            args = sys.argv[1:]

        if not args:
            parser.print_help()
            return 1

        parsed_args = parser.parse_args(args)

        Terminal.set_color_mode(Terminal.resolve_color_mode(
            parsed_args.color, self.config.get_color_override()))

        if not getattr(parsed_args, 'func', None):
            parser.print_help()
            return 1

        try:
            return parsed_args.func(parsed_args)
        except DeskopenException as e:
            print(Terminal.error(f"Error: {e}"), file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            print("\nAborted", file=sys.stderr)
            return 130

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            prog='deskopen',
            description='Detect a graphical desktop and open URLs and files',
        )

        parser.add_argument('--version', action='version',
                            version=f'deskopen v{__version__}')
        parser.add_argument('--color', choices=['auto', 'never', 'always'],
                            default=None, help='Color output mode')

        subparsers = parser.add_subparsers(dest='command', help='Commands')

        # Check
        check_parser = subparsers.add_parser(
            'check', help='Check whether a graphical desktop is available')
        check_parser.add_argument('--quiet', '-q', action='store_true',
                                  help='Only set the exit status')
        check_parser.add_argument('--assume-no-desktop', action='store_true',
                                  help='Treat a failed desktop query as "no desktop"')
        check_parser.set_defaults(func=self.cmd_check)

        # Browse
        browse_parser = subparsers.add_parser(
            'browse', help='Display a URL or file in a web browser')
        browse_parser.add_argument('target', help='URL or filesystem path')
        self._add_launch_arguments(browse_parser)
        browse_parser.set_defaults(func=self.cmd_browse)

        # Open
        open_parser = subparsers.add_parser(
            'open', help='Open a file with its default application')
        open_parser.add_argument('target', help='Filesystem path or URL')
        self._add_launch_arguments(open_parser)
        open_parser.set_defaults(func=self.cmd_open)

        # Info
        info_parser = subparsers.add_parser(
            'info', help='Show platform, desktop status and resolved helpers')
        info_parser.add_argument('--json', action='store_true',
                                 help='Print the report as JSON')
        info_parser.set_defaults(func=self.cmd_info)

        return parser

    @staticmethod
    def _add_launch_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument('--dry-run', '-n', action='store_true',
                            help='Print the helper command instead of running it')
        parser.add_argument('--require-desktop', action='store_true',
                            help='Fail if no graphical desktop is available')

    def cmd_check(self, args) -> int:
        """Report desktop availability through output and exit status"""
        try:
            result = desktop.detect_desktop()
        except QueryError as e:
            if not args.assume_no_desktop:
                print(Terminal.error(f"Error: {e}"), file=sys.stderr)
                return 2
            if not args.quiet:
                print(Terminal.warning(f"Desktop query failed ({e}), assuming no desktop"))
            return 1

        if result.is_error:
            if not args.assume_no_desktop:
                print(Terminal.error(
                    f"Error: {result.method} failed with status {result.error_code}"),
                    file=sys.stderr)
                return 2
            if not args.quiet:
                print(Terminal.warning(
                    f"{result.method} failed with status {result.error_code}, "
                    "assuming no desktop"))
            return 1

        if not args.quiet:
            if result.available:
                print(Terminal.success("Desktop available"))
            else:
                print("No desktop available")
        return 0 if result.available else 1

    def cmd_browse(self, args) -> int:
        """Display a URL in a web browser"""
        return self._launch(args, desktop.get_browser_command, desktop.browse_url,
                            "Cannot find a web browser to display")

    def cmd_open(self, args) -> int:
        """Open a file with its default application"""
        return self._launch(args, desktop.get_open_command, desktop.open_file,
                            "Cannot find an application to open")

    def _launch(self, args,
                get_command: Callable[[str], Optional[List[str]]],
                launch: Callable[[str], bool],
                missing_message: str) -> int:
        if args.require_desktop and not desktop.hasdesktop():
            print(Terminal.error("Error: No desktop environment available"), file=sys.stderr)
            return 1

        if args.dry_run:
            command = get_command(args.target)
            if command is None:
                print(Terminal.error(f"Error: {missing_message} {args.target}"), file=sys.stderr)
                return 1
            print(Terminal.command_line(command))
            return 0

        return 0 if launch(args.target) else 1

    def cmd_info(self, args) -> int:
        """Show platform, desktop status and resolved helpers"""
        strategy = desktop.get_strategy()
        browser = strategy.browser_command('TARGET')
        opener = strategy.open_command('TARGET')

        query_error: Optional[QueryError] = None
        result: Optional[DetectionResult] = None
        try:
            result = strategy.detect()
        except QueryError as e:
            query_error = e

        if args.json:
            info = {
                'platform': strategy.platform.value,
                'desktop': result.to_dict() if result is not None else None,
                'query_error': str(query_error) if query_error is not None else None,
                'browser': browser,
                'opener': opener,
            }
            print(json.dumps(info, indent=2))
            return 0

        print(Terminal.field('Platform', strategy.platform.value))
        if result is None:
            print(Terminal.field('Desktop', Terminal.error(f"query failed: {query_error}")))
        else:
            print(Terminal.field('Desktop',
                                 f"{Terminal.desktop_status(result)} ({result.method})"))
        print(Terminal.field('Browser', Terminal.handler(browser)))
        print(Terminal.field('Opener', Terminal.handler(opener)))
        return 0


def main():
    """Main entry point"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
