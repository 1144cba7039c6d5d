
import questionary
from typing import Any, List, Tuple

from . import utils


class Prompter:
    """
        User interaction needed by the linker.

        select() presents labeled options and returns the value of the chosen one,
        text() asks for a free-form answer.
    """

    def select(self, message: str, choices: List[Tuple[str, Any]]) -> Any:
        raise NotImplementedError

    def text(self, message: str) -> str:
        raise NotImplementedError


class QuestionaryPrompter(Prompter):

    @staticmethod
    def _answered(answer):
        # questionary returns None when user hits ctrl+c
        if answer is None:
            raise utils.PromptAbortedError("Selection aborted by user")

        return answer

    def select(self, message: str, choices: List[Tuple[str, Any]]) -> Any:
        options = [questionary.Choice(title, value=value) for title, value in choices]
        return self._answered(questionary.select(message, choices=options).ask())

    def text(self, message: str) -> str:
        return self._answered(questionary.text(message).ask())
