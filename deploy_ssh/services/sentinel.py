"""Exit status framing for remote batch scripts.

ssh only hands back one output stream for the whole remote script, so
the wrapper script prints a marker carrying the exit status of the
user's command once it finishes::

    [exit_code:<status>]

The marker goes to stdout after everything the command printed. It is
unlikely to occur in ordinary output but is not collision-proof.
"""

import re

SENTINEL_FORMAT = "[exit_code:%s]"
SENTINEL_PATTERN = re.compile(r"\[exit_code:(.*?)\]")

# Exit status reported when no marker arrived (session dropped, ssh died)
MISSING_EXIT_CODE = -1


def encode_status(status: int | str) -> str:
    """Render the marker for a status.

    Passing ``"%s"`` gives the printf template used by the remote wrapper.
    """
    return SENTINEL_FORMAT % status


# Remote side reads the command from stdin, then prints the marker
REMOTE_SCRIPT = 'bash -s; printf "' + encode_status("%s") + '" $?;'


def strip_sentinel(text: str) -> str:
    """Remove every exit status marker from text."""
    return SENTINEL_PATTERN.sub("", text)


def parse_exit_code(text: str) -> int:
    """Extract the exit status from remote output.

    The last marker wins since the wrapper prints it after the command.

    Returns:
        The reported status, or -1 if no well-formed marker was found.
    """
    matches = SENTINEL_PATTERN.findall(text)
    if not matches:
        return MISSING_EXIT_CODE
    try:
        return int(matches[-1].strip())
    except ValueError:
        return MISSING_EXIT_CODE


def decode(text: str) -> tuple[str, int]:
    """Split remote output into (output without markers, exit status)."""
    return strip_sentinel(text), parse_exit_code(text)
