"""Utilities for redacting sensitive information from logs."""

import re


REDACTED = '***REDACTED***'


def redact_token(text: str) -> str:
    """
    Redact GitHub tokens from text.

    Tokens typically start with 'ghp_', 'gho_', 'ghu_', 'ghs_', or 'ghr_';
    fine-grained tokens start with 'github_pat_'.
    """
    text = re.sub(r'github_pat_[A-Za-z0-9_]{22,}', REDACTED, text)
    text = re.sub(r'gh[pousr]_[A-Za-z0-9]{36,}', REDACTED, text)

    # Bearer tokens in Authorization headers
    text = re.sub(r'Bearer\s+[A-Za-z0-9_\-\.]+', f'Bearer {REDACTED}', text)

    return text


def safe_error_message(error: BaseException, context: str = "") -> str:
    """
    Create a safe error message with redacted sensitive information.

    Args:
        error: The exception to format
        context: Additional context about where the error occurred

    Returns:
        A safe error message with redacted tokens
    """
    redacted_msg = redact_token(str(error))

    if context:
        return f"{context}: {redacted_msg}"
    return redacted_msg
