"""Runtime tunables for the auth panel.

Values can be overridden through environment variables so the simulated
backend delay can be shortened for demos and local runs.
"""
import os

# Stand-in for network latency of the simulated backend (1500 ms)
SUBMIT_DELAY_SECONDS = float(os.environ.get("AUTH_PANEL_SUBMIT_DELAY", "1.5"))

# Registration only; sign-in accepts whatever password was originally set
MIN_PASSWORD_LENGTH = 8

LOG_LEVEL = os.environ.get("AUTH_PANEL_LOG_LEVEL", "INFO").upper()
