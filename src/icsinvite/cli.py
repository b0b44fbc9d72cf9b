"""
Command line interface for the calendar invite application.
"""

import argparse
import json
import sys
from typing import Any

from tabulate import tabulate

from icsinvite.config.logging import setup_logging
from icsinvite.config.settings import IcsSettings, load_settings
from icsinvite.exceptions import ConfigError, InvalidEventError, ParseError
from icsinvite.models.event import EventRecord
from icsinvite.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _attendee_arg(value: str) -> dict[str, str]:
    """Parse an EMAIL[:NAME] attendee argument."""
    email, _, name = value.partition(':')
    if not email.strip():
        raise argparse.ArgumentTypeError(f"Attendee needs an email address: {value!r}")
    return {'email': email, 'name': name}

def _event_options() -> argparse.ArgumentParser:
    """Options shared by every command that describes an event."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument('--summary', help='Event summary (title)')
    parser.add_argument('--start', help='Start time, ISO 8601 (e.g. 2024-01-15T09:30:00Z)')
    parser.add_argument('--end', help='End time, ISO 8601')
    parser.add_argument('--uid', help='Event UID (generated if omitted)')
    parser.add_argument('--type', help='Free-form category tag, not rendered')
    parser.add_argument('--description', help='Event description')
    parser.add_argument('--location', help='Event location')
    parser.add_argument(
        '--organiser',
        nargs=2,
        metavar=('NAME', 'EMAIL'),
        help='Organiser name and email'
    )
    parser.add_argument(
        '--attendee',
        dest='attendees',
        action='append',
        type=_attendee_arg,
        default=[],
        metavar='EMAIL[:NAME]',
        help='Attendee, may be repeated; duplicates by email are ignored'
    )
    return parser

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='icsinvite',
        description='Build single-event iCalendar invitations'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Write logs to this file')
    parser.add_argument('--config-dir', help='Directory containing config.yaml')

    subparsers = parser.add_subparsers(dest='command', required=True)
    event_options = _event_options()

    build_parser = subparsers.add_parser(
        'build',
        parents=[event_options],
        help='Render the invite as ICS'
    )
    build_parser.add_argument('-o', '--output', help='Write to this file instead of stdout')

    show_parser = subparsers.add_parser(
        'show',
        parents=[event_options],
        help='Show event properties and validation errors'
    )
    show_parser.add_argument(
        '--format',
        choices=['table', 'json'],
        default='table',
        help='Output format (default: table)'
    )

    return parser

def build_record(args: argparse.Namespace, settings: IcsSettings) -> EventRecord:
    """Create an event record from parsed arguments.

    Raises:
        ParseError: If a start or end value is not a valid date/time
    """
    properties: dict[str, Any] = {
        'summary': args.summary,
        'start': args.start,
        'end': args.end,
        'uid': args.uid,
        'type': args.type,
        'description': args.description,
        'location': args.location,
        'attendees': args.attendees,
    }
    if args.organiser:
        properties['organiser'] = tuple(args.organiser)
    return EventRecord(properties, settings=settings)

def _format_table(record: EventRecord) -> str:
    organiser = record.get_organiser()
    rows = [
        ['UID', record.get_uid()],
        ['Type', record.get_type() or ''],
        ['Summary', record.get_summary() or ''],
        ['Start', record.get_start() or ''],
        ['End', record.get_end() or ''],
        ['Organiser', f"{organiser.name} <{organiser.email}>" if organiser else ''],
    ]
    for attendee in record.get_attendees():
        rows.append(['Attendee', f"{attendee.name} <{attendee.email}>"])
    rows.extend([
        ['Location', record.get_location() or ''],
        ['Description', record.get_description() or ''],
    ])
    return tabulate(rows, headers=['Property', 'Value'], tablefmt='simple')

def build_command(args: argparse.Namespace, settings: IcsSettings) -> int:
    """Render the event to stdout or a file."""
    record = build_record(args, settings)

    if args.output:
        if not record.save(args.output):
            print(f"Error: {record.last_write_error.message}", file=sys.stderr)
            return 1
        print(f"Wrote {args.output}", file=sys.stderr)
        return 0

    sys.stdout.write(record.get_data())
    return 0

def show_command(args: argparse.Namespace, settings: IcsSettings) -> int:
    """Print event properties and validation result."""
    record = build_record(args, settings)
    valid = record.is_valid()

    if args.format == 'json':
        print(json.dumps({
            'properties': record.to_dict(),
            'valid': valid,
            'errors': record.errors
        }, indent=2, default=str))
    else:
        print(_format_table(record))
        if not valid:
            print()
            for error in record.errors:
                print(f"  - {error}")

    return 0 if valid else 1

COMMANDS = {
    'build': build_command,
    'show': show_command,
}

def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config_dir)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        level=settings.log_level,
        verbose=args.verbose,
        log_file=args.log_file or settings.log_file
    )

    try:
        return COMMANDS[args.command](args, settings)
    except (InvalidEventError, ParseError) as e:
        logger.error(f"Cannot build invite: {e}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
