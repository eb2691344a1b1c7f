# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_DATAERR = 65  # Trace or source data was invalid (malformed, stale, unparsable)
EXIT_NOINPUT = 66  # Input folder or file not found
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad [tool.tracecov] value)
