
import logging
import os
from enum import Enum
from pathlib import Path
from typing import List

from . import utils
from .prompts import Prompter


class SelectionStrategy(Enum):
    Alphabetical = "First alphabetical"
    Size = "Largest"
    Manual = "Manually select"


class SortStrategy(Enum):
    Alphabetical = "Name"
    Size = "Size"


def implied_sort(strategy: SelectionStrategy) -> SortStrategy:
    if strategy == SelectionStrategy.Size:
        return SortStrategy.Size

    return SortStrategy.Alphabetical


def collect_candidates(sub_dir: str, keyword: str = None) -> List[utils.SubtitleCandidate]:
    """
        Subtitle files directly in 'sub_dir', optionally limited to
        those with (lowercase) 'keyword' in their lowercased name
    """
    candidates = []

    with os.scandir(sub_dir) as it:
        for entry in it:
            if not entry.is_file() or not utils.is_subtitle(entry.path):
                continue

            if keyword and keyword not in entry.name.lower():
                logging.debug(f"Skipping {entry.name}: no '{keyword}' in name")
                continue

            candidates.append(utils.SubtitleCandidate(entry.name, entry.path, entry.stat().st_size))

    return candidates


def sort_candidates(candidates: List[utils.SubtitleCandidate], sort: SortStrategy) -> List[utils.SubtitleCandidate]:
    # size sorting is stable over name order, so equally sized files stay alphabetical
    by_name = sorted(candidates, key=lambda c: c.name)

    if sort == SortStrategy.Size:
        return sorted(by_name, key=lambda c: c.size)

    return by_name


def _choice_label(candidate: utils.SubtitleCandidate) -> str:
    return f"{candidate.name} ({utils.human_size(candidate.size)})"


def pick_candidate(candidates: List[utils.SubtitleCandidate],
                   strategy: SelectionStrategy,
                   prompter: Prompter = None,
                   media_path: str = None) -> utils.SubtitleCandidate:
    if strategy == SelectionStrategy.Alphabetical:
        return min(candidates, key=lambda c: c.name)
    elif strategy == SelectionStrategy.Size:
        return sort_candidates(candidates, SortStrategy.Size)[-1]

    media_name = Path(media_path).name if media_path else ""
    choices = [(_choice_label(candidate), candidate) for candidate in candidates]

    return prompter.select(f"Select a subtitle file for {media_name}:", choices)


def select_subtitle(sub_dir: str,
                    strategy: SelectionStrategy,
                    sort: SortStrategy,
                    keyword: str = None,
                    prompter: Prompter = None,
                    media_path: str = None) -> str:
    candidates = collect_candidates(sub_dir, keyword)

    if len(candidates) == 0:
        raise utils.NoCandidatesError(sub_dir)

    ordered = sort_candidates(candidates, sort)
    logging.debug(f"Subtitle candidates in {sub_dir}: {', '.join(c.name for c in ordered)}")

    chosen = pick_candidate(ordered, strategy, prompter, media_path)
    logging.debug(f"Selected {chosen.name}")

    return chosen.path
