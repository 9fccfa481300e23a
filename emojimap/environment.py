from os import getenv


LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO")

SENTRY_DSN: str | None = getenv("SENTRY_DSN")  # sentry data source name
GITHUB_TOKEN: str | None = getenv("GITHUB_TOKEN")  # github personal access token
