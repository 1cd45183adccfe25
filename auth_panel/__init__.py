"""Sign-in / registration / password-reset form panel built on Reflex."""
