"""Turn commands and raw input into source text for the target interpreter."""


def compose(command: list[str]) -> str:
    """Single-quote each token and join them into one POSIX/fish command line.

    A token that itself contains a single quote is not escaped. The stray quote
    leaves the quoting unbalanced, so a quoted run can cross the newline and
    swallow the fragments composed after it.
    """
    return " ".join(f"'{token}'" for token in command) + "\n"


def compose_powershell(command: list[str]) -> str:
    """Return a PowerShell call-operator line; single quotes are not doubled."""
    return "& " + " ".join(f"'{token}'" for token in command) + "\n"


def compose_python(command: list[str]) -> str:
    """Return a Python statement that runs the command as a subprocess."""
    return f'__import__("subprocess").run({command!r}, check=True)\n'


def preprocess(raw: str) -> str:
    """Make sure user input ends on its own line."""
    if raw.endswith("\n"):
        return raw
    return raw + "\n"


def invoke_posix(executable: str, script: str) -> list[str]:
    """Return argv running script through a `-c` style interpreter."""
    return [executable, "-c", script]


def invoke_powershell(executable: str, script: str) -> list[str]:
    return [executable, "-NoProfile", "-NonInteractive", "-Command", script]
