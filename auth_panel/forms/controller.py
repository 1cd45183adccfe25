"""Form-mode state machine.

Transitions are plain functions from one FormState to the next, driven by
small event records through `apply()`. FormModeController wraps them for
callers that want an object holding the current state and a Submitter.

Submissions are tagged with a token taken from a counter that only grows.
A result is applied only while the panel is still in the mode it was
issued from and still waiting on that very token; anything else is a
stale resolution and is dropped without touching the state.
"""
import asyncio
import logging
from contextlib import nullcontext
from dataclasses import dataclass, replace

from ..utils.log import redact_email
from .models import (
    Buffer,
    FormMode,
    FormState,
    RegisterBuffer,
    ResetBuffer,
    RevealFlags,
    SubmissionStatus,
    buffer_fields,
)
from .submission import (
    GENERIC_FAILURE,
    DelayedSuccessSubmitter,
    SubmissionResult,
    Submitter,
    safe_run,
)
from .validators import validate

logger = logging.getLogger(__name__)

SUCCESS_NOTICES = {
    FormMode.SIGN_IN: "Login successful!",
    FormMode.REGISTER: "Account created successfully!",
    FormMode.RESET_REQUEST: "Password reset link sent to your email!",
}

REVEALABLE_FIELDS = ("password", "confirm_password")


class UnknownFieldError(KeyError):
    """A field key that the active form does not own."""


# --- Events ---

@dataclass(frozen=True)
class SwitchMode:
    target: FormMode


@dataclass(frozen=True)
class EditField:
    field: str
    value: str


@dataclass(frozen=True)
class SetTermsAccepted:
    accepted: bool


@dataclass(frozen=True)
class ToggleReveal:
    field: str = "password"


@dataclass(frozen=True)
class SubmissionResolved:
    token: int
    mode: FormMode
    result: SubmissionResult


@dataclass(frozen=True)
class SubmissionTicket:
    """What a started submission needs to reach the backend and come back."""
    token: int
    mode: FormMode
    buffer: Buffer


# --- Transitions ---

def switch_mode(state: FormState, target: FormMode) -> FormState:
    """Activate `target`, dropping errors, reveal flags and any pending result.

    Text buffers are kept as they are; the terms checkbox is unchecked so
    consent has to be given again on each visit to the registration form.
    """
    return replace(
        state,
        mode=target,
        errors={},
        reveal=RevealFlags(),
        terms_accepted=False,
        status=SubmissionStatus.IDLE,
        submission_error="",
        notice="",
        pending_token=None,
    )


def edit_field(state: FormState, field: str, value: str) -> FormState:
    buffer = state.active_buffer
    if field not in buffer_fields(buffer):
        raise UnknownFieldError(f"{state.mode.value} form has no field {field!r}")
    updated = state.with_buffer(state.mode, replace(buffer, **{field: value}))
    # A failed or finished submission is over once the user starts typing
    status = SubmissionStatus.PENDING if state.is_pending else SubmissionStatus.IDLE
    return replace(updated, submission_error="", notice="", status=status)


def set_terms_accepted(state: FormState, accepted: bool) -> FormState:
    if state.mode != FormMode.REGISTER:
        raise UnknownFieldError(f"{state.mode.value} form has no terms checkbox")
    return replace(state, terms_accepted=accepted)


def toggle_reveal(state: FormState, field: str = "password") -> FormState:
    if field not in REVEALABLE_FIELDS:
        raise UnknownFieldError(f"{field!r} cannot be revealed")
    current = getattr(state.reveal, field)
    return replace(state, reveal=replace(state.reveal, **{field: not current}))


def can_submit(state: FormState) -> bool:
    """Whether the submit control should be enabled."""
    if state.is_pending:
        return False
    if state.mode == FormMode.REGISTER:
        return state.terms_accepted
    return True


def begin_submit(state: FormState) -> tuple[FormState, SubmissionTicket | None]:
    """Validate the active form and, if clean, move to PENDING.

    Returns the new state and a ticket for the backend call, or None when
    nothing should be sent (already pending, or validation failed). The
    registration form is validated in full even with terms unchecked.
    """
    if state.is_pending:
        return state, None

    errors = validate(state.mode, state.active_buffer, state.terms_accepted)
    if errors:
        return replace(
            state,
            errors=errors,
            status=SubmissionStatus.IDLE,
            submission_error="",
            notice="",
        ), None

    token = state.last_token + 1
    pending = replace(
        state,
        errors={},
        status=SubmissionStatus.PENDING,
        submission_error="",
        notice="",
        last_token=token,
        pending_token=token,
    )
    return pending, SubmissionTicket(token=token, mode=state.mode, buffer=state.active_buffer)


def is_current(state: FormState, token: int, mode: FormMode) -> bool:
    return state.is_pending and state.pending_token == token and state.mode == mode


def resolve_submission(state: FormState, token: int, mode: FormMode,
                       result: SubmissionResult) -> FormState:
    """Apply a backend outcome, or return `state` untouched if it is stale."""
    if not is_current(state, token, mode):
        return state

    if not result.ok:
        return replace(
            state,
            status=SubmissionStatus.FAILED,
            submission_error=result.reason or GENERIC_FAILURE,
            pending_token=None,
        )

    notice = SUCCESS_NOTICES[mode]
    if mode == FormMode.REGISTER:
        cleared = state.with_buffer(FormMode.REGISTER, RegisterBuffer())
        return replace(switch_mode(cleared, FormMode.SIGN_IN), notice=notice)
    if mode == FormMode.RESET_REQUEST:
        cleared = state.with_buffer(FormMode.RESET_REQUEST, ResetBuffer())
        return replace(switch_mode(cleared, FormMode.SIGN_IN), notice=notice)

    return replace(
        state,
        status=SubmissionStatus.SUCCEEDED,
        notice=notice,
        pending_token=None,
    )


def apply(state: FormState, event) -> FormState:
    """Single entry point: the state that follows `state` after `event`."""
    if isinstance(event, SwitchMode):
        return switch_mode(state, event.target)
    if isinstance(event, EditField):
        return edit_field(state, event.field, event.value)
    if isinstance(event, SetTermsAccepted):
        return set_terms_accepted(state, event.accepted)
    if isinstance(event, ToggleReveal):
        return toggle_reveal(state, event.field)
    if isinstance(event, SubmissionResolved):
        return resolve_submission(state, event.token, event.mode, event.result)
    raise TypeError(f"Unsupported event: {event!r}")


class FormModeController:
    """Holds the current FormState and drives submissions through a Submitter.

    Only this object writes `state`; callers read it and send events.
    """

    def __init__(self, submitter: Submitter | None = None, state: FormState | None = None):
        self.submitter = submitter or DelayedSuccessSubmitter()
        self.state = state or FormState()

    def dispatch(self, event) -> FormState:
        self.state = apply(self.state, event)
        return self.state

    def switch_mode(self, target: FormMode) -> FormState:
        if self.state.is_pending:
            logger.debug("Leaving %s with a submission in flight", self.state.mode.value)
        logger.debug("Switching form %s -> %s", self.state.mode.value, target.value)
        return self.dispatch(SwitchMode(target))

    def edit(self, field: str, value: str) -> FormState:
        return self.dispatch(EditField(field, value))

    def set_terms_accepted(self, accepted: bool) -> FormState:
        return self.dispatch(SetTermsAccepted(accepted))

    def toggle_reveal(self, field: str = "password") -> FormState:
        return self.dispatch(ToggleReveal(field))

    @property
    def can_submit(self) -> bool:
        return can_submit(self.state)

    def start_submit(self) -> "asyncio.Task[FormState] | None":
        """Flip to PENDING now and schedule the backend call.

        Must be called with an event loop running. Returns the task that
        completes once the result has been applied (or dropped as stale),
        or None when nothing was sent.
        """
        ticket = self.begin()
        if ticket is None:
            return None
        return asyncio.ensure_future(self._complete(ticket))

    async def submit(self) -> FormState:
        """Validate, send and wait for the outcome of the active form."""
        ticket = self.begin()
        if ticket is None:
            return self.state
        return await self._complete(ticket)

    def begin(self) -> SubmissionTicket | None:
        """Validate the active form; return a ticket if it should be sent."""
        was_pending = self.state.is_pending
        self.state, ticket = begin_submit(self.state)
        if ticket is not None:
            logger.info(
                "Submitting %s form for %s (token %d)",
                ticket.mode.value, redact_email(ticket.buffer.email), ticket.token,
            )
        elif not was_pending:
            logger.info(
                "%s form rejected, invalid fields: %s",
                self.state.mode.value, ", ".join(sorted(self.state.errors)),
            )
        return ticket

    def resolve(self, ticket: SubmissionTicket, result: SubmissionResult) -> bool:
        """Apply `result` for `ticket`; False if it arrived too late to matter."""
        if not is_current(self.state, ticket.token, ticket.mode):
            logger.debug("Dropping stale %s result (token %d)", ticket.mode.value, ticket.token)
            return False
        if result.ok:
            logger.info("%s submission succeeded (token %d)", ticket.mode.value, ticket.token)
        else:
            logger.warning("%s submission failed: %s", ticket.mode.value, result.reason)
        self.dispatch(SubmissionResolved(ticket.token, ticket.mode, result))
        return True

    async def _complete(self, ticket: SubmissionTicket) -> FormState:
        result = await safe_run(self.submitter, ticket.mode, ticket.buffer)
        self.resolve(ticket, result)
        return self.state


async def run_submission(submitter: Submitter, read, write, guard=nullcontext) -> FormState | None:
    """Full submit cycle against state owned by someone else.

    `read()` returns the current FormState and `write(state)` stores a new
    one; both are only called inside `guard()`, an async context manager
    that serializes access (the Reflex state proxy, for instance). The
    guard is released while the backend works, so other events may change
    the state meanwhile and turn this submission stale.

    Returns the state after the result was applied, or None when nothing
    was sent or the result arrived stale.
    """
    async with guard():
        controller = FormModeController(submitter, read())
        ticket = controller.begin()
        write(controller.state)
    if ticket is None:
        return None

    result = await safe_run(submitter, ticket.mode, ticket.buffer)

    async with guard():
        controller = FormModeController(submitter, read())
        applied = controller.resolve(ticket, result)
        write(controller.state)
    return controller.state if applied else None
