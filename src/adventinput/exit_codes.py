"""Process exit codes used by the ``advent-input`` command.

Scripts wrapping the command can tell failure kinds apart without parsing
stderr, e.g. exit 3 usually means the session cookie has expired.
"""

EXIT_SUCCESS = 0
EXIT_CONFIGURATION_ERROR = 2
"""Settings are missing or malformed, or the base url does not parse."""

EXIT_REQUEST_REJECTED = 3
"""The server answered with a non-success status (bad session, day not yet unlocked)."""

EXIT_HTTP_ERROR = 4
"""The server could not be reached or the transfer failed."""

EXIT_CACHE_WRITE_ERROR = 5
"""The input was downloaded but could not be written to the store root."""
