"""QuestionFlow: the linear state machine behind the setup wizard.

The flow state is an immutable FlowState value. The module-level
transition functions (type_text, submit) map one FlowState to the next;
QuestionFlow holds the current state and fires the completion callback
when the last question is answered.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from hookwiz.wizard.answers import Answers
from hookwiz.wizard.questions import QUESTIONS, QuestionKind

WORKING_STATUS = "Setting up your Git pre-commit hooks...\n"

_DOCROOT_CANDIDATES = ("docroot", "web")


def detect_docroot(base_dir: str = ".") -> str:
    """Pick the docroot when the user left the answer empty.

    Returns "docroot" or "web" when a directory of that name exists in
    base_dir, in that order of preference, otherwise ".".
    """
    for candidate in _DOCROOT_CANDIDATES:
        if os.path.isdir(os.path.join(base_dir, candidate)):
            return candidate
    return "."


def coerce_boolean(line: str) -> bool:
    return line.strip().lower() == "y"


@dataclass(frozen=True)
class FlowState:
    index: int = 0
    answers: Answers = field(default_factory=Answers)
    buffer: str = ""

    @property
    def is_done(self) -> bool:
        return self.index >= len(QUESTIONS)

    @property
    def question(self):
        return QUESTIONS[self.index]


def type_text(state: FlowState, text: str) -> FlowState:
    """Append keystrokes to the free-text buffer.

    Only the free-text question accumulates; typing on a boolean question
    leaves the state unchanged.
    """
    if state.is_done or state.question.kind is not QuestionKind.FREE_TEXT:
        return state
    return FlowState(state.index, state.answers, state.buffer + text)


def submit(state: FlowState, line: str = "", base_dir: str = ".") -> FlowState:
    """Confirm the current question and advance to the next one."""
    if state.is_done:
        raise RuntimeError("All questions have already been answered")

    question = state.question
    if question.kind is QuestionKind.FREE_TEXT:
        text = (state.buffer + line).strip()
        answers = state.answers.with_docroot(text or detect_docroot(base_dir))
    else:
        answers = state.answers.with_flag(question.target, coerce_boolean(line))

    return FlowState(state.index + 1, answers, "")


def view(state: FlowState) -> str:
    if state.is_done:
        return WORKING_STATUS
    return state.question.prompt


class QuestionFlow:
    """Presents the wizard questions one at a time.

    Args:
        on_done: Called once with the final Answers when the last
            question is confirmed.
        base_dir: Directory in which docroot auto-detection looks.
    """

    def __init__(self, on_done: Optional[Callable[[Answers], None]] = None, base_dir: str = "."):
        self._on_done = on_done
        self._base_dir = base_dir
        self._state = FlowState()

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state.is_done

    @property
    def answers(self) -> Answers:
        return self._state.answers

    def view(self) -> str:
        return view(self._state)

    def type_text(self, text: str) -> None:
        self._state = type_text(self._state, text)

    def submit(self, line: str = "") -> None:
        self._state = submit(self._state, line, self._base_dir)
        if self._state.is_done and self._on_done is not None:
            self._on_done(self._state.answers)
