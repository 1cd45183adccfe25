"""Framework-free core of the auth panel: modes, validation, submission."""
from .models import (
    FormMode,
    SubmissionStatus,
    SignInBuffer,
    RegisterBuffer,
    ResetBuffer,
    RevealFlags,
    FormState,
)
from .validators import validate, is_valid_email
from .submission import (
    Submitter,
    SubmissionResult,
    DelayedSuccessSubmitter,
    safe_run,
)
from .controller import (
    FormModeController,
    SubmissionTicket,
    UnknownFieldError,
    SwitchMode,
    EditField,
    SetTermsAccepted,
    ToggleReveal,
    SubmissionResolved,
    apply,
    begin_submit,
    can_submit,
    run_submission,
)

__all__ = [
    "FormMode",
    "SubmissionStatus",
    "SignInBuffer",
    "RegisterBuffer",
    "ResetBuffer",
    "RevealFlags",
    "FormState",
    "validate",
    "is_valid_email",
    "Submitter",
    "SubmissionResult",
    "DelayedSuccessSubmitter",
    "safe_run",
    "FormModeController",
    "SubmissionTicket",
    "UnknownFieldError",
    "SwitchMode",
    "EditField",
    "SetTermsAccepted",
    "ToggleReveal",
    "SubmissionResolved",
    "apply",
    "begin_submit",
    "can_submit",
    "run_submission",
]
