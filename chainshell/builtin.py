"""The one builtin the interpreter knows: exit."""

EXIT = "exit"

# Dispatch outcomes
BUILTIN_EXIT = "builtin-exit"
EXTERNAL = "external"


def classify(argv):
    """
    Decide how argv is run.
    Returns: BUILTIN_EXIT or EXTERNAL
    """
    if argv and argv[0] == EXIT:
        return BUILTIN_EXIT
    return EXTERNAL
