"""Extract issue coordinates from GitHub issue URLs."""

import re

from pydantic import ValidationError

from ..utils.errors import INVALID_URL_MESSAGE, InvalidParamsError
from .models import IssueCoordinates


# Unanchored: the pattern may appear anywhere in the string, and trailing
# path segments after the number (".../issues/5/comments") are tolerated.
ISSUE_URL_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)/issues/(\d+)", re.ASCII)


def parse_issue_url(url: str) -> IssueCoordinates:
    """
    Parse a GitHub issue URL into owner, repo and issue number.

    Owner and repo are taken verbatim, without case folding or
    percent-decoding.

    Args:
        url: Any string containing github.com/<owner>/<repo>/issues/<number>

    Returns:
        IssueCoordinates for the first match in the string

    Raises:
        InvalidParamsError: If the string does not contain an issue URL
    """
    if not isinstance(url, str):
        raise InvalidParamsError(INVALID_URL_MESSAGE)

    match = ISSUE_URL_PATTERN.search(url)
    if not match:
        raise InvalidParamsError(INVALID_URL_MESSAGE)

    owner, repo, number = match.groups()
    try:
        return IssueCoordinates(owner=owner, repo=repo, issue_number=int(number, 10))
    except ValidationError:
        # issue number 0
        raise InvalidParamsError(INVALID_URL_MESSAGE) from None
