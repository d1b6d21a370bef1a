from os import getenv

DEFAULT_ENCODING: str = "utf8"

# Value of the `Server` header attached to every response
SERVER_NAME: str = getenv("REPLY_SERVER", "Reply")

# Indentation used when pretty-printing JSON bodies
JSON_INDENT: int = int(getenv("REPLY_JSON_INDENT", 2))

# Soft rendering failures are reported as warnings unless disabled
LOG_FAILURES: bool = getenv("REPLY_LOG_FAILURES", "1") == "1"

# One of the `LogLevel` names (Debug, Info, Warning, Error, …)
LOG_LEVEL: str = getenv("REPLY_LOG_LEVEL", "Info")

# EOF
