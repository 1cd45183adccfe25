"""State for the sign-in / create-account / reset-password screen."""
import dataclasses

import reflex as rx

from ..forms import (
    DelayedSuccessSubmitter,
    FormMode,
    FormModeController,
    FormState,
    SubmissionStatus,
    Submitter,
    run_submission,
)
from ..forms import can_submit as submit_allowed

# Button captions per mode: (idle, pending)
SUBMIT_LABELS = {
    FormMode.SIGN_IN: ("Sign In", "Signing In..."),
    FormMode.REGISTER: ("Create Account", "Creating Account..."),
    FormMode.RESET_REQUEST: ("Send Reset Link", "Sending Reset Link..."),
}

_submitter: Submitter = DelayedSuccessSubmitter()


def use_submitter(submitter: Submitter) -> None:
    """Swap the backend used by every session (e.g. a real HTTP client)."""
    global _submitter
    _submitter = submitter


class AuthState(rx.State):
    """Bridges the form state machine to the page.

    The whole screen lives in one immutable backend var; handlers replace
    it and the computed vars below expose the pieces the page renders.
    """
    _form: FormState = FormState()

    def _controller(self) -> FormModeController:
        return FormModeController(_submitter, self._form)

    def _store_form(self, form: FormState):
        self._form = form

    @rx.var
    def mode(self) -> str:
        return self._form.mode.value

    @rx.var
    def field_values(self) -> dict[str, str]:
        """Contents of the active form only."""
        return dataclasses.asdict(self._form.active_buffer)

    @rx.var
    def errors(self) -> dict[str, str]:
        return dict(self._form.errors)

    @rx.var
    def submission_error(self) -> str:
        return self._form.submission_error

    @rx.var
    def notice(self) -> str:
        return self._form.notice

    @rx.var
    def is_pending(self) -> bool:
        return self._form.status == SubmissionStatus.PENDING

    @rx.var
    def terms_accepted(self) -> bool:
        return self._form.terms_accepted

    @rx.var
    def show_password(self) -> bool:
        return self._form.reveal.password

    @rx.var
    def show_confirm_password(self) -> bool:
        return self._form.reveal.confirm_password

    @rx.var
    def can_submit(self) -> bool:
        return submit_allowed(self._form)

    @rx.var
    def submit_label(self) -> str:
        idle, pending = SUBMIT_LABELS[self._form.mode]
        return pending if self._form.is_pending else idle

    def switch_mode(self, target: str):
        controller = self._controller()
        controller.switch_mode(FormMode(target))
        self._form = controller.state

    def set_field(self, field: str, value: str):
        controller = self._controller()
        controller.edit(field, value)
        self._form = controller.state

    def set_terms_accepted(self, checked: bool):
        controller = self._controller()
        controller.set_terms_accepted(checked)
        self._form = controller.state

    def toggle_reveal(self, field: str):
        controller = self._controller()
        controller.toggle_reveal(field)
        self._form = controller.state

    @rx.event(background=True)
    async def submit(self):
        """Validate and send the active form.

        Runs as a background task so the state lock is released while the
        backend works; the user can still switch forms, which makes this
        submission stale and its result is then ignored.
        """
        final = await run_submission(
            _submitter,
            read=lambda: self._form,
            write=self._store_form,
            guard=lambda: self,
        )
        if final is not None and final.notice:
            return rx.toast.success(final.notice)
