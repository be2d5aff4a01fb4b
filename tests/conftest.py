"""Test configuration and fixtures."""

import logfire

# Keep test runs off the network and out of the console
logfire.configure(send_to_logfire=False, console=False)
