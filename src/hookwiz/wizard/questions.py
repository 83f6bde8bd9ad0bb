"""The fixed, ordered list of wizard questions."""

from dataclasses import dataclass
from enum import Enum

DOCROOT = "docroot"


class QuestionKind(Enum):
    FREE_TEXT = "free_text"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Question:
    prompt: str
    kind: QuestionKind
    target: str


QUESTIONS = (
    Question(
        "Give the path of your docroot (auto-detect if current directory has 'docroot' or 'web' folder): ",
        QuestionKind.FREE_TEXT, DOCROOT,
    ),
    Question(
        "Do you want to add eslint for JS? (y/n): ",
        QuestionKind.BOOLEAN, "eslint",
    ),
    Question(
        "Do you want to add prettier support? (y/n): ",
        QuestionKind.BOOLEAN, "prettier",
    ),
    Question(
        "Do you want to add stylelint for CSS and SCSS? (y/n): ",
        QuestionKind.BOOLEAN, "stylelint",
    ),
    Question(
        "Do you want to add secretlint for all files? (y/n): ",
        QuestionKind.BOOLEAN, "secretlint",
    ),
    Question(
        "Do you want to add PHPCS and PHPCBF for PHP and all Drupal PHP files? (y/n): ",
        QuestionKind.BOOLEAN, "phpcs",
    ),
    Question(
        "Do you want to add support for validating branch name pattern "
        "using validate-branch-name npm package? (y/n): ",
        QuestionKind.BOOLEAN, "validate_branch_name",
    ),
    Question(
        "Do you want to add support to automatically add ticket number "
        "in commit message using jira-prepare-commit-msg npm package? (y/n): ",
        QuestionKind.BOOLEAN, "jira_prepare_commit",
    ),
)
