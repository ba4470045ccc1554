# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""The tagsplice command line program."""

import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich_argparse import RichHelpFormatter

import tagsplice
from tagsplice.frames import KNOWN_FRAMES
from tagsplice.tags import DEFAULT_ENCODING
from tagsplice.util import verb, check_mp3_filename, print_warnings

TITLE = "MP3 Tag Reader and Editor"

EXAMPLES = """\
examples:
  tagsplice --version song.mp3          Display the ID3 version of song.mp3
  tagsplice -v song.mp3                 View tags
  tagsplice -e -t "Song Name" song.mp3  Edit a tag (-t/-a/-A/-y/-g/-c)
  tagsplice -e --comment=-live- song.mp3
                                        Values starting with "-" need the
                                        --field=VALUE form
"""

class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass

def build_parser():
    parser = argparse.ArgumentParser(
        prog="tagsplice",
        usage="tagsplice [options] filename",
        description="View and edit the ID3v2 text frames of MP3 files.",
        epilog=EXAMPLES,
        formatter_class=RichRawHelpFormatter)
    modes = parser.add_argument_group("Modes")
    modes.add_argument("-v", "--view", action="store_true",
                       help="View tags")
    modes.add_argument("-e", "--edit", action="store_true",
                       help="Edit the tag selected by one of the field options")
    modes.add_argument("--version", dest="show_version", action="store_true",
                       help="Display the ID3 version of FILE")
    fields = parser.add_argument_group("Fields")
    for frame in KNOWN_FRAMES:
        fields.add_argument(frame.flag, "--" + frame.field.lower(),
                            dest=frame.field.lower(), metavar="VALUE",
                            help="New {0} ({1} frame)".format(frame.field.lower(),
                                                             frame.frameid))
    parser.add_argument("--encoding", default=DEFAULT_ENCODING,
                        help="Text encoding of frame contents (default: %(default)s)")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Don't print warnings")
    parser.add_argument("--verbose", action="store_true",
                        help="Explain what is being done")
    parser.add_argument("filename", help="MP3 file")
    return parser

def _message(error):
    # KeyError subclasses quote their message in str()
    if isinstance(error, KeyError) and error.args:
        return str(error.args[0])
    return str(error)

def _error(console, message):
    console.print("[bold bright_red]ERROR:[/] [bold]{0}[/]".format(escape(message)))

def _usage_error(console):
    _error(console, "tagsplice: Invalid Arguments")
    console.print('[bold green]Usage:[/] [bold]"tagsplice --help" for help[/]')

def _selected_fields(args):
    return [frame for frame in KNOWN_FRAMES
            if getattr(args, frame.field.lower()) is not None]

def _box(console, rows):
    # The title goes on its own line; a table title wraps to the table width.
    console.print(TITLE, style="bold green", no_wrap=True)
    table = Table(box=box.HEAVY_HEAD, show_header=False, border_style="bold white")
    table.add_column("Field", style="bold green", no_wrap=True)
    table.add_column("Value", style="italic")
    for (field, value) in rows:
        table.add_row(field, escape(value))
    console.print(table)

def view(console, args):
    tags = tagsplice.read_all_tags(args.filename, encoding=args.encoding)
    verb(args.verbose, "{0}: {1} known frames".format(args.filename, len(tags)),
         file=console.file)
    _box(console, [(frame.field, tags[frame.field])
                   for frame in KNOWN_FRAMES if frame.field in tags])

def show_version(console, args):
    (major, minor) = tagsplice.read_version(args.filename)
    _box(console, [("VERSION", "ID3v2.{0}".format(major))])

def edit(console, args):
    (frame,) = _selected_fields(args)
    value = getattr(args, frame.field.lower())
    console.print("[bold]SELECTED FOR EDITING[/] [bold green]{0}[/]".format(frame.field))
    (old, new) = tagsplice.edit_tag(args.filename, frame, value,
                                    encoding=args.encoding)
    verb(args.verbose, "{0}: {1}: {2} -> {3} bytes".format(
        args.filename, frame.frameid, old.content_size, new.content_size),
         file=console.file)
    console.print("[bold]Tag edited successfully.[/]")

def main(argv=None, console=None):
    if console is None:
        console = Console()
    args = build_parser().parse_args(argv)

    modes = [args.view, args.edit, args.show_version]
    fields = _selected_fields(args)
    if modes.count(True) != 1 or (args.edit and len(fields) != 1):
        _usage_error(console)
        return 1
    if fields and not args.edit:
        _usage_error(console)
        return 1

    try:
        check_mp3_filename(args.filename)
    except ValueError as e:
        _error(console, str(e))
        return 1

    if args.view:
        action = view
    elif args.edit:
        action = edit
    else:
        action = show_version

    with print_warnings(args.filename, args):
        try:
            action(console, args)
        except tagsplice.Error as e:
            _error(console, "{0}: {1}".format(args.filename, _message(e)))
            if args.edit:
                console.print("[bold bright_red]Failed to edit tag.[/]")
            return 1
        except UnicodeEncodeError:
            _error(console, "{0}: value can't be encoded as {1}"
                   .format(args.filename, args.encoding))
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
