
import logging
import os
from typing import Dict, List

from . import utils


class DestinationIndex:
    """
        Media files found in destination, keyed by file stem.

        Matched entries are moved out of the index into the consumed set,
        so whatever stays in the index at the end is the list of unmatched media.
    """

    def __init__(self, entries: Dict[str, str]):
        self._entries = dict(entries)
        self._consumed = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, stem: str) -> bool:
        return stem in self._entries

    def take(self, stem: str) -> str:
        """ Move entry from index to consumed set. Returns media path or None when stem is unknown """
        path = self._entries.pop(stem, None)
        if path is not None:
            self._consumed[stem] = path

        return path

    def single(self) -> (str, str):
        return next(iter(self._entries.items()))

    def remaining(self) -> List[str]:
        return sorted(self._entries)

    def consumed(self) -> List[str]:
        return sorted(self._consumed)


def _scan_directory(dir_path: str) -> Dict[str, str]:
    entries = {}

    with os.scandir(dir_path) as it:
        for entry in it:
            if entry.is_dir():
                continue

            if utils.is_subtitle(entry.path):
                logging.debug(f"Skipping existing subtitle file {entry.name}")
                continue

            # last one wins when two media files share a stem
            stem = utils.file_stem(entry.path)
            if stem in entries:
                logging.warning(f"Files {entries[stem]} and {entry.path} have the same name, using the latter")

            entries[stem] = entry.path

    return entries


def build_index(output_path: str) -> DestinationIndex:
    if os.path.isdir(output_path):
        entries = _scan_directory(output_path)
    elif os.path.exists(output_path):
        entries = {utils.file_stem(output_path): output_path}
    else:
        raise utils.EmptyDestinationError(f"Destination {output_path} does not exist")

    if len(entries) == 0:
        raise utils.EmptyDestinationError("No destination files!")

    return DestinationIndex(entries)
