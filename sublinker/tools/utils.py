
import sys
from collections import namedtuple
from pathlib import Path


SubtitleCandidate = namedtuple("SubtitleCandidate", "name path size")

subtitle_extension = "srt"


class EmptyDestinationError(RuntimeError):
    pass


class PromptAbortedError(RuntimeError):
    pass


class PairingError(RuntimeError):
    pass


class NoCandidatesError(PairingError):
    def __init__(self, sub_dir: str):
        super().__init__(f"No subtitles in sub directory {Path(sub_dir).name}")
        self.sub_dir = sub_dir


class TargetExistsError(PairingError):
    def __init__(self, target: str):
        super().__init__(f"Target file {target} already exists, use --overwrite to replace it")
        self.target = target


def get_tqdm_defaults():
    return {
    'leave': False,
    'smoothing': 0.1,
    'mininterval':.2,
    'disable': hide_progressbar()
}


def is_subtitle(file: str) -> bool:
    return Path(file).suffix[1:] == subtitle_extension


def split_path(path: str) -> (str, str, str):
    info = Path(path)

    return str(info.parent), info.stem, info.suffix[1:]


def file_stem(path: str) -> str:
    """ File name without its final extension, or the whole name if there is none """
    info = Path(path)
    return info.stem if info.stem else info.name


def subtitle_path_for(media_path: str) -> str:
    media_dir, media_name, _ = split_path(media_path)
    return str(Path(media_dir) / f"{media_name}.{subtitle_extension}")


def human_size(size: int) -> str:
    """ Format size in bytes using decimal (SI) units, like '1.50 kB' """
    if size < 1000:
        return f"{size} B"

    value = float(size)
    for unit in ["kB", "MB", "GB", "TB", "PB"]:
        value /= 1000
        if value < 1000:
            break

    return f"{value:.2f} {unit}"


def hide_progressbar() -> bool:
    return not sys.stdout.isatty() or 'unittest' in sys.modules
