"""Test configuration and fixtures."""

import logfire

# Configured at import so app modules instrumented during collection see it
logfire.configure(
    service_name="remark-api-tests",
    send_to_logfire=False,
    console=False,
)
