"""
Submission backend tests.

Covers:
- SubmissionResult constructors
- The fixed-delay success stub
- safe_run turning backend exceptions into failed results
"""

import asyncio
import logging

import pytest

from auth_panel.config import SUBMIT_DELAY_SECONDS
from auth_panel.forms import (
    DelayedSuccessSubmitter,
    FormMode,
    SignInBuffer,
    SubmissionResult,
    safe_run,
)
from auth_panel.forms.submission import GENERIC_FAILURE
from tests.conftest import ExplodingSubmitter


class TestSubmissionResult:

    def test_success_has_no_reason(self):
        result = SubmissionResult.success()
        assert result.ok is True
        assert result.reason == ''

    def test_failure_keeps_given_reason(self):
        result = SubmissionResult.failure('Email already registered')
        assert result.ok is False
        assert result.reason == 'Email already registered'

    def test_failure_without_reason_uses_generic_message(self):
        assert SubmissionResult.failure('').reason == GENERIC_FAILURE


class TestDelayedSuccessSubmitter:

    def test_default_delay_is_one_and_a_half_seconds(self):
        assert SUBMIT_DELAY_SECONDS == 1.5
        assert DelayedSuccessSubmitter().delay == SUBMIT_DELAY_SECONDS

    @pytest.mark.asyncio
    async def test_always_succeeds(self):
        submitter = DelayedSuccessSubmitter(delay=0.01)
        result = await submitter.run(FormMode.SIGN_IN, SignInBuffer('a@b.com', 'x'))
        assert result == SubmissionResult.success()

    @pytest.mark.asyncio
    async def test_waits_for_the_configured_delay(self):
        submitter = DelayedSuccessSubmitter(delay=0.05)
        loop = asyncio.get_running_loop()
        started = loop.time()
        await submitter.run(FormMode.SIGN_IN, SignInBuffer('a@b.com', 'x'))
        assert loop.time() - started >= 0.04


class TestSafeRun:

    @pytest.mark.asyncio
    async def test_passes_through_backend_result(self, instant_submitter):
        instant_submitter.result = SubmissionResult.failure('Invalid credentials')
        buffer = SignInBuffer('a@b.com', 'x')
        result = await safe_run(instant_submitter, FormMode.SIGN_IN, buffer)
        assert result.reason == 'Invalid credentials'
        assert instant_submitter.calls == [(FormMode.SIGN_IN, buffer)]

    @pytest.mark.asyncio
    async def test_backend_exception_becomes_failure(self, caplog):
        with caplog.at_level(logging.ERROR, logger='auth_panel'):
            result = await safe_run(
                ExplodingSubmitter(), FormMode.SIGN_IN, SignInBuffer('a@b.com', 'x'),
            )
        assert result == SubmissionResult.failure()
        assert 'Submitter raised' in caplog.text
