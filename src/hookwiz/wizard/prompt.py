"""Line-based terminal driver for the QuestionFlow."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO


@dataclass
class PromptConfig:
    """I/O configuration for question display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _read_answer(prompt_text, config):
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print("Input closed. Exiting.", file=config.output)
        sys.exit(0)


def ask_questions(flow, *, config=None):
    """Feed one line of input per question into flow until it is done.

    Args:
        flow: QuestionFlow to drive.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        The final Answers.

    Raises:
        SystemExit(0): On EOF (e.g. piped input closed early).
    """
    if config is None:
        config = PromptConfig()

    while not flow.is_done:
        flow.submit(_read_answer(flow.view(), config))

    return flow.answers
