"""Configuration values for the Mastermind client."""
import os

# API connectivity
API_BASE_URL = os.getenv("MASTERMIND_BASE_URL", "https://mastermind.darkube.app")
API_TIMEOUT = float(os.getenv("MASTERMIND_TIMEOUT", "15"))

# Debug output (request lines and state transitions on stderr)
VERBOSE = os.getenv("MASTERMIND_VERBOSE", "false").strip().lower() in {"1", "true", "yes"}

# Game rules shared with the server
CODE_LENGTH = 4
