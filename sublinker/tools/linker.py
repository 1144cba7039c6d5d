
import argparse
import logging
import os
import shutil
from collections import namedtuple
from enum import Enum
from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm
from typing import List

from . import destination, selector, utils
from .prompts import Prompter, QuestionaryPrompter
from .selector import SelectionStrategy, SortStrategy


PairingResult = namedtuple("PairingResult", "stem status source target")
LinkSummary = namedtuple("LinkSummary", "linked failed unmatched")


class Mode(Enum):
    Season = "season"
    Single = "single"


class PairingStatus(Enum):
    Linked = "linked"
    NoCandidates = "no candidates"
    TargetExists = "target exists"


def detect_mode(input_path: str, output_path: str) -> Mode:
    # Directory as output is enough for season mode, whatever the input looks like
    # symlinked entries in input do not count as directories here
    if os.path.isdir(output_path):
        return Mode.Season

    with os.scandir(input_path) as it:
        if all(entry.is_dir(follow_symlinks=False) for entry in it):
            return Mode.Season

    return Mode.Single


class Linker:

    def __init__(self, prompter: Prompter, copy: bool, overwrite: bool, dry_run: bool = False):
        self.prompter = prompter
        self.copy = copy
        self.overwrite = overwrite
        self.dry_run = dry_run

        self.strategy = SelectionStrategy.Alphabetical
        self.sort = SortStrategy.Alphabetical
        self.keyword = None

    def ask_for_strategy(self):
        strategy_choices = [(s.value, s) for s in SelectionStrategy]
        self.strategy = self.prompter.select("Select a strategy:", strategy_choices)

        if self.strategy == SelectionStrategy.Manual:
            sort_choices = [(s.value, s) for s in SortStrategy]
            self.sort = self.prompter.select("Select a display sort type:", sort_choices)
        else:
            self.sort = selector.implied_sort(self.strategy)

        keyword = self.prompter.text("Enter subtitle file name keyword (optional):")
        self.keyword = keyword.lower() if keyword else None

    def _transfer(self, source: str, target: str):
        if os.path.lexists(target):
            if not self.overwrite:
                raise utils.TargetExistsError(target)

            logging.warning(f"Replacing file {target}")
            if not self.dry_run:
                os.remove(target)

        if self.copy:
            logging.debug(f"Copying {source} to {target}")
            if not self.dry_run:
                shutil.copy(source, target)
        else:
            logging.debug(f"Linking {target} -> {source}")
            if not self.dry_run:
                os.symlink(source, target)

    def synchronize(self, sub_dir: str, media_path: str) -> PairingResult:
        stem = utils.file_stem(media_path)
        target = utils.subtitle_path_for(media_path)

        try:
            source = selector.select_subtitle(sub_dir,
                                              self.strategy,
                                              self.sort,
                                              keyword=self.keyword,
                                              prompter=self.prompter,
                                              media_path=media_path)
        except utils.NoCandidatesError as e:
            logging.error(str(e))
            return PairingResult(stem, PairingStatus.NoCandidates, None, target)

        try:
            self._transfer(source, target)
        except utils.TargetExistsError as e:
            logging.error(str(e))
            return PairingResult(stem, PairingStatus.TargetExists, source, target)

        return PairingResult(stem, PairingStatus.Linked, source, target)

    def _season_sub_dirs(self, input_path: str) -> List[os.DirEntry]:
        with os.scandir(input_path) as it:
            entries = [entry for entry in it if entry.is_dir()]

        entries.sort(key=lambda e: e.name)
        return entries

    def _process_season(self, input_path: str, index: destination.DestinationIndex) -> List[PairingResult]:
        results = []
        sub_dirs = self._season_sub_dirs(input_path)

        tqdm_options = utils.get_tqdm_defaults()
        if self.strategy == SelectionStrategy.Manual:
            tqdm_options["disable"] = True

        with logging_redirect_tqdm():
            for sub_dir in tqdm(sub_dirs, desc="Linking", unit="dir", **tqdm_options):
                media_path = index.take(sub_dir.name)

                if media_path is None:
                    logging.debug(f"No media file for {sub_dir.name}, skipping")
                    continue

                results.append(self.synchronize(sub_dir.path, media_path))

        return results

    def _process_single(self, input_path: str, index: destination.DestinationIndex) -> List[PairingResult]:
        stem, _ = index.single()
        media_path = index.take(stem)

        return [self.synchronize(input_path, media_path)]

    def process(self, input_path: str, output_path: str) -> LinkSummary:
        mode = detect_mode(input_path, output_path)
        logging.info(f"Using {mode.value} mode")

        if self.overwrite:
            logging.warning("Overwrite mode enabled!")

        logging.info(f"In {'copying' if self.copy else 'symlinking'} mode")

        logging.info("Reading destination...")
        index = destination.build_index(output_path)
        entries = len(index)
        logging.info(f"Destination read with {entries} {'entries' if entries > 1 else 'entry'}")

        self.ask_for_strategy()

        if mode == Mode.Season:
            results = self._process_season(input_path, index)
        else:
            results = self._process_single(input_path, index)

        linked = [r.stem for r in results if r.status == PairingStatus.Linked]
        failed = [r.stem for r in results if r.status != PairingStatus.Linked]

        summary = LinkSummary(linked, failed, index.remaining())
        report(summary)

        return summary


def report(summary: LinkSummary):
    if len(summary.unmatched) == 0 and len(summary.failed) == 0:
        logging.info("Done!")
        return

    logging.warning(f"Completed with {len(summary.linked)} matches")

    if summary.failed:
        logging.warning("Failed to link subtitles for:")
        for stem in summary.failed:
            logging.warning(f" - {stem}")

    if summary.unmatched:
        logging.warning("Didn't match:")
        for stem in summary.unmatched:
            logging.warning(f" - {stem}")


def setup_parser(parser: argparse.ArgumentParser):
    parser.add_argument('input',
                        help='Input directory, may either be a directory of directories for an entire season '
                             'or just a single directory containing subtitle files.')
    parser.add_argument('output',
                        help='Output directory, must be the path where media files for the respective '
                             'season/movie are. If a FILE is used instead, single mode is assumed.')
    parser.add_argument("--copy", "-c",
                        action='store_true',
                        default=False,
                        help='Copy subtitles instead of symlinking them.')
    parser.add_argument("--overwrite", "-o",
                        action='store_true',
                        default=False,
                        help='Overwrite existing subtitle files.')


def run(args, prompter: Prompter = None) -> LinkSummary:
    if prompter is None:
        prompter = QuestionaryPrompter()

    linker = Linker(prompter,
                    copy=args.copy,
                    overwrite=args.overwrite,
                    dry_run=args.dry_run)

    return linker.process(args.input, args.output)
