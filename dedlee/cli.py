"""
# Dedlee: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.

Each dedlee file `«story».dedlee` is compiled to `«story».html` beside it.
A file that cannot be compiled (for want of anything but blank lines and comments)
is reported and skipped, the remaining files are still compiled,
and the exit code is then nonzero.
"""

import argparse
import os
import re
import sys

from dedlee._version import __version__
from dedlee.constants import COMMAND_LINE_ERROR_EXIT_CODE, DEDLEE_SYNTAX_HELP, GENERIC_ERROR_EXIT_CODE
from dedlee.core import dedlee_to_markup
from dedlee.exceptions import EmptySourceError

DESCRIPTION = '''
    Compile dedlee stories (`.dedlee`) to Dedalus story markup (`.html`).
'''
STORY_FILE_NAME_HELP = '''
    dedlee story to compile, given as `story.dedlee`, `story.`, or just `story`
'''
ALL_MODE_HELP = '''
    compile every `.dedlee` story found under the working directory
'''
VERBOSE_MODE_HELP = '''
    trace the compilation (the rule chosen for every line, and every link rewrite)
'''
LAZY_LINKS_HELP = '''
    end each link placeholder at its nearest closing delimiter
    (by default, two placeholders of the same syntax on one line merge into one link)
'''

DEDLEE_EXTENSION = '.dedlee'
MARKUP_EXTENSION = '.html'


def is_dedlee_file(file_name: str) -> bool:
    return file_name.endswith(DEDLEE_EXTENSION)


def extract_dedlee_name(dedlee_file_name_argument: str) -> str:
    """
    Extract the story name (path without extension) from a story file name argument.

    The argument may be of the form `«story».dedlee`, `«story».`, or `«story»`.
    The path is normalised by resolving `./` and `../`.
    """
    dedlee_file_name_argument = os.path.normpath(dedlee_file_name_argument)

    return re.sub(pattern=r'[.](dedlee)? \Z', repl='', string=dedlee_file_name_argument, flags=re.VERBOSE)


def find_dedlee_file_names(directory_name: str) -> list[str]:
    return sorted(
        os.path.join(path, file_name)
        for path, _, file_names in os.walk(directory_name)
        for file_name in file_names
        if is_dedlee_file(file_name)
    )


def parse_command_line_arguments(arguments=None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=DEDLEE_SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-l', '--lazy-links',
        dest='lazy_links_enabled',
        action='store_true',
        help=LAZY_LINKS_HELP,
    )
    argument_parser.add_argument(
        'dedlee_file_name_arguments',
        default=[],
        help=STORY_FILE_NAME_HELP,
        metavar='story.dedlee',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def generate_markup_file(dedlee_file_name_argument: str, verbose_mode_enabled: bool, lazy_links_enabled: bool,
                         uses_command_line_argument: bool) -> bool:
    """
    Compile one story, returning whether its markup file was written.

    A story with nothing but blank lines and comments is reported on stderr, and False is returned.
    A missing story named on the command line, or an unwritable markup file, ends the program.
    """
    dedlee_name = extract_dedlee_name(dedlee_file_name_argument)
    dedlee_file_name = f'{dedlee_name}{DEDLEE_EXTENSION}'
    try:
        with open(dedlee_file_name, 'r', encoding='utf-8') as dedlee_file:
            source = dedlee_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{dedlee_file_name_argument}`: no story file `{dedlee_file_name}`',
                  file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'story file `{dedlee_file_name}` disappeared before it could be compiled'
            raise FileNotFoundError(error_message) from file_not_found_error

    try:
        markup = dedlee_to_markup(source, dedlee_file_name, verbose_mode_enabled, lazy_links_enabled)
    except EmptySourceError as empty_source_error:
        print(f'error: {empty_source_error}; skipped', file=sys.stderr)
        return False

    markup_file_name = f'{dedlee_name}{MARKUP_EXTENSION}'
    try:
        with open(markup_file_name, 'w', encoding='utf-8') as markup_file:
            markup_file.write(markup)
        print(f'success: wrote to `{markup_file_name}`')
    except IOError:
        print(f'error: cannot write to `{markup_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    return True


def main(arguments=None):
    parsed_arguments = parse_command_line_arguments(arguments)
    dedlee_file_name_arguments = parsed_arguments.dedlee_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    lazy_links_enabled = parsed_arguments.lazy_links_enabled

    if all_mode_enabled:
        if len(dedlee_file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        dedlee_file_name_arguments = find_dedlee_file_names(os.curdir)

    skipped_count = 0
    for dedlee_file_name_argument in dedlee_file_name_arguments:
        was_written = generate_markup_file(dedlee_file_name_argument, verbose_mode_enabled, lazy_links_enabled,
                                           uses_command_line_argument=not all_mode_enabled)
        if not was_written:
            skipped_count += 1

    if skipped_count > 0:
        print(f'error: {skipped_count} of {len(dedlee_file_name_arguments)} stories skipped', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
