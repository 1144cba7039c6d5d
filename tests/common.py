
import hashlib
import inspect
import os
import shutil
import tempfile

from sublinker.tools.prompts import Prompter
from sublinker.tools.selector import SelectionStrategy, SortStrategy


class TestDataWorkingDirectory:
    def __init__(self):
        self.directory = None

    @property
    def path(self):
        return self.directory

    def __enter__(self):
        self.directory = os.path.join(tempfile.gettempdir(), "sublinker_tests", inspect.stack()[1].function)
        if os.path.exists(self.directory):
            shutil.rmtree(self.directory)

        os.makedirs(self.directory, exist_ok=True)
        return self

    def __exit__(self, type, value, traceback):
        shutil.rmtree(self.directory)


class ScriptedPrompter(Prompter):
    """
        Answers prompts with predefined values.

        'picks' is a list of subtitle file names returned, one per manual selection.
        All asked questions are collected in 'questions' as (message, labels) tuples.
    """

    def __init__(self, strategy: SelectionStrategy, sort: SortStrategy = SortStrategy.Alphabetical, keyword: str = "", picks: [str] = None):
        self.strategy = strategy
        self.sort = sort
        self.keyword = keyword
        self.picks = list(picks or [])
        self.questions = []

    def select(self, message, choices):
        self.questions.append((message, [label for label, _ in choices]))
        values = [value for _, value in choices]

        if isinstance(values[0], SelectionStrategy):
            return self.strategy
        elif isinstance(values[0], SortStrategy):
            return self.sort

        pick = self.picks.pop(0)
        return next(value for value in values if value.name == pick)

    def text(self, message):
        self.questions.append((message, None))
        return self.keyword


def write_file(path: str, size: int = 16) -> str:
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, "wb") as f:
        f.write(b"x" * size)

    return path


def read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def list_files(path: str) -> []:
    results = []

    for root, _, files in os.walk(path):
        for filename in files:
            filepath = os.path.join(root, filename)

            if os.path.lexists(filepath):
                results.append(filepath)

    return sorted(results)


def hashes(path: str) -> [()]:
    results = []

    files = list_files(path)

    for filepath in files:
        with open(filepath, "rb") as f:
            file_hash = hashlib.md5()
            while chunk := f.read(8192):
                file_hash.update(chunk)

            results.append((filepath, file_hash.hexdigest()))

    return results
