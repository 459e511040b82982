from .commands import apply_command, parse_command
from .shell import main, run_shell
