"""Test configuration and fixtures."""

import os

import logfire

os.environ.setdefault("ENVIRONMENT", "test")

# Spans and logs are recorded locally only; nothing leaves the test run
logfire.configure(send_to_logfire=False, console=False)
