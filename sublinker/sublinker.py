
import argparse
import logging
import sys

from .tools import linker


def execute(argv, prompter = None):
    parser = argparse.ArgumentParser(
        description='Link or copy subtitles found in per episode (or per movie) directories '
                    'next to matching media files. '
                    'Each input directory is paired with the media file of the same name, '
                    'chosen subtitle is placed beside it as <media name>.srt.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("--verbose",
                        action="store_true",
                        help="Enable verbose output")
    parser.add_argument("--dry-run", "-n",
                        action='store_true',
                        default=False,
                        help='Only show what would be done, do not touch any file.')

    linker.setup_parser(parser)

    args = parser.parse_args(args = argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return linker.run(args, prompter)


def main():
    logging.basicConfig(format='%(asctime)s - %(message)s', level=logging.INFO)
    try:
        execute(sys.argv[1:])
    except (RuntimeError, OSError) as e:
        logging.error(f"Unexpected error occurred: {e}. Terminating")
        sys.exit(1)

if __name__ == '__main__':
    main()
