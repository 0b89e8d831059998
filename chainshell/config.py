import os

HISTORY_FILE = os.path.expanduser(os.getenv("CHAINSHELL_HISTORY", "~/.chainshell_history"))
MAX_HISTORY = int(os.getenv("CHAINSHELL_MAX_HISTORY", "1000"))  # lines kept in the history file
LOG_LEVEL = os.getenv("CHAINSHELL_LOG_LEVEL", "WARNING").upper()

PROMPT_TEMPLATE = "shell[{count}]% "

# Handle values
NO_HANDLE = 0
DISPATCH_FAILED = -1
