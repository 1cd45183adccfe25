"""
Shared fixtures for the auth panel test suite.

Submitter fakes:
- instant_submitter: resolves immediately with a configurable result
- gated_submitter: blocks until the test releases it, so the controller
  can be observed (and navigated) while a submission is pending
"""

import asyncio

import pytest

from auth_panel.forms import (
    FormMode,
    FormState,
    RegisterBuffer,
    SignInBuffer,
    SubmissionResult,
)


class InstantSubmitter:
    """Records calls and answers right away."""

    def __init__(self, result=None):
        self.result = result or SubmissionResult.success()
        self.calls = []

    async def run(self, mode, buffer):
        self.calls.append((mode, buffer))
        return self.result


class GatedSubmitter(InstantSubmitter):
    """Records calls and answers once `release` is set."""

    def __init__(self, result=None):
        super().__init__(result)
        self.release = asyncio.Event()

    async def run(self, mode, buffer):
        self.calls.append((mode, buffer))
        await self.release.wait()
        return self.result


class ExplodingSubmitter:
    """Backend that raises instead of returning a result."""

    async def run(self, mode, buffer):
        raise ConnectionError("backend unreachable")


VALID_REGISTRATION = RegisterBuffer(
    first_name="Ada",
    last_name="Lovelace",
    email="ada@example.com",
    password="analytical",
    confirm_password="analytical",
)


@pytest.fixture
def instant_submitter():
    return InstantSubmitter()


@pytest.fixture
def gated_submitter():
    return GatedSubmitter()


@pytest.fixture
def sign_in_state():
    """Sign-in form holding acceptable credentials."""
    return FormState(sign_in=SignInBuffer(email="a@b.com", password="x"))


@pytest.fixture
def register_state():
    """Registration form that passes validation."""
    return FormState(
        mode=FormMode.REGISTER,
        register=VALID_REGISTRATION,
        terms_accepted=True,
    )
