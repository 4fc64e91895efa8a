"""
Simulated code execution. User code is never run; the output is a canned
transcript per language.
"""

from datetime import datetime, timedelta, timezone

SHARED_CODE_TTL = timedelta(days=7)

_OUTPUTS = {
    "javascript": "JavaScript output:\nConsole.log output would appear here.\nCode executed successfully!",
    "python": 'Python output:\n>>> print("Hello, World!")\nHello, World!\n>>> x = 10\n>>> print(x * 2)\n20',
    "java": "Java output:\nCompiling Java code...\nCompiled successfully!\nHello, World!",
}


def simulate_execution(code: str, language: str) -> str:
    output = _OUTPUTS.get(language.lower())
    if output is not None:
        return output
    return (
        f"Execution for {language} is simulated in this demo.\n"
        "In a production environment, code would be executed in a secure sandbox."
    )


def default_snippet_title(language: str, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"{language} Snippet {now.month}/{now.day}/{now.year}"


def shared_code_expiry(now: datetime | None = None) -> datetime:
    return (now or datetime.now(timezone.utc)) + SHARED_CODE_TTL
