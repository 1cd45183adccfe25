"""Data model for the auth panel.

The whole screen is one immutable FormState record. Transitions in
controller.py build a new record with dataclasses.replace() instead of
mutating fields, so every state the UI can be in is a plain value that
tests can construct and compare directly.
"""
from dataclasses import dataclass, field, fields, replace
from enum import Enum


class FormMode(str, Enum):
    """The three mutually exclusive forms shown on the screen."""
    SIGN_IN = "sign_in"
    REGISTER = "register"
    RESET_REQUEST = "reset_request"


class SubmissionStatus(str, Enum):
    """Submission lifecycle of the active form.

    IDLE: nothing in flight, controls enabled
    PENDING: one submission outstanding, controls disabled
    SUCCEEDED: last submission of this mode went through
    FAILED: last submission was rejected by the backend
    """
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SignInBuffer:
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class RegisterBuffer:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True)
class ResetBuffer:
    email: str = ""


Buffer = SignInBuffer | RegisterBuffer | ResetBuffer

# Which buffer slot of FormState belongs to which mode
BUFFER_SLOTS = {
    FormMode.SIGN_IN: "sign_in",
    FormMode.REGISTER: "register",
    FormMode.RESET_REQUEST: "reset",
}


def buffer_fields(buffer: Buffer) -> tuple[str, ...]:
    """Field keys owned by a buffer, in display order."""
    return tuple(f.name for f in fields(buffer))


@dataclass(frozen=True)
class RevealFlags:
    """Whether the password inputs show their text in the clear."""
    password: bool = False
    confirm_password: bool = False


@dataclass(frozen=True)
class FormState:
    """Snapshot of the entire panel.

    `errors` maps a field key (or "terms") to its message and is always
    replaced as a whole, never patched. `last_token` only ever grows; a
    submission is current while `pending_token` still equals the token it
    was issued with.
    """
    mode: FormMode = FormMode.SIGN_IN
    sign_in: SignInBuffer = field(default_factory=SignInBuffer)
    register: RegisterBuffer = field(default_factory=RegisterBuffer)
    reset: ResetBuffer = field(default_factory=ResetBuffer)
    terms_accepted: bool = False
    errors: dict[str, str] = field(default_factory=dict)
    status: SubmissionStatus = SubmissionStatus.IDLE
    submission_error: str = ""
    notice: str = ""
    reveal: RevealFlags = field(default_factory=RevealFlags)
    last_token: int = 0
    pending_token: int | None = None

    def buffer_for(self, mode: FormMode) -> Buffer:
        return getattr(self, BUFFER_SLOTS[mode])

    @property
    def active_buffer(self) -> Buffer:
        return self.buffer_for(self.mode)

    @property
    def is_pending(self) -> bool:
        return self.status == SubmissionStatus.PENDING

    def with_buffer(self, mode: FormMode, buffer: Buffer) -> "FormState":
        """Return a copy with `mode`'s buffer replaced."""
        expected = type(self.buffer_for(mode))
        if not isinstance(buffer, expected):
            raise TypeError(
                f"{mode.value} form takes a {expected.__name__}, got {type(buffer).__name__}"
            )
        return replace(self, **{BUFFER_SLOTS[mode]: buffer})
