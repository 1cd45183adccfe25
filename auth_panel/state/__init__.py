from .auth import AuthState, use_submitter

# This alias allows page code to refer to "State"
State = AuthState
