"""Auth page UI: one card that shows whichever form is active."""
import reflex as rx
from ..state import State
from ..components import field_error, text_field, password_field, submit_button, mode_link
from ..styles.constants import ACCENT_PRIMARY, CARD_MAX_WIDTH, CARD_PADDING, PAGE_BACKGROUND


def _header(title: str, subtitle: str, back_link: bool = False) -> rx.Component:
    children = []
    if back_link:
        children.append(mode_link("← Back to Login", "sign_in"))
    children += [
        rx.heading(title, size="7", weight="bold"),
        rx.text(subtitle, size="3", color="gray"),
    ]
    return rx.vstack(*children, spacing="2", align="center", width="100%", margin_bottom="1em")


def _banners() -> rx.Component:
    """Success notice and submission-level error, kept apart from field errors."""
    return rx.fragment(
        rx.cond(
            State.notice != "",
            rx.callout(State.notice, icon="circle-check", color="green", size="1", width="100%"),
        ),
        rx.cond(
            State.submission_error != "",
            rx.callout(
                State.submission_error,
                icon="triangle-alert",
                color="red",
                size="1",
                width="100%",
            ),
        ),
    )


def sign_in_form() -> rx.Component:
    return rx.vstack(
        _header("Welcome Back", "Sign in to your account"),
        _banners(),
        text_field("Email Address", "email", "Enter your email", input_type="email"),
        password_field("Password", "password", State.show_password, "Enter your password"),
        rx.hstack(
            rx.spacer(),
            mode_link("Forgot Password?", "reset_request"),
            width="100%",
        ),
        submit_button(),
        rx.hstack(
            rx.text("Don't have an account?", size="2", color="gray"),
            mode_link("Create Account", "register"),
            spacing="1",
            justify="center",
            width="100%",
        ),
        spacing="4",
        width="100%",
    )


def register_form() -> rx.Component:
    return rx.vstack(
        _header("Create Account", "Join us today", back_link=True),
        _banners(),
        rx.hstack(
            text_field("First Name", "first_name", "First name"),
            text_field("Last Name", "last_name", "Last name"),
            spacing="3",
            width="100%",
        ),
        text_field("Email Address", "email", "Enter your email", input_type="email"),
        password_field("Password", "password", State.show_password, "Create a password"),
        password_field(
            "Confirm Password",
            "confirm_password",
            State.show_confirm_password,
            "Confirm your password",
        ),
        rx.vstack(
            rx.checkbox(
                "I agree to the Terms of Service and Privacy Policy",
                checked=State.terms_accepted,
                on_change=State.set_terms_accepted,
                size="2",
            ),
            field_error("terms"),
            spacing="1",
            width="100%",
            align_items="start",
        ),
        submit_button(),
        spacing="4",
        width="100%",
    )


def reset_request_form() -> rx.Component:
    return rx.vstack(
        _header("Reset Password", "Enter your email to receive a reset link", back_link=True),
        _banners(),
        text_field("Email Address", "email", "Enter your email", input_type="email"),
        submit_button(),
        rx.hstack(
            rx.text("Remember your password?", size="2", color="gray"),
            mode_link("Sign In", "sign_in"),
            spacing="1",
            justify="center",
            width="100%",
        ),
        spacing="4",
        width="100%",
    )


def auth_page() -> rx.Component:
    """Centered card switching between the three forms."""
    return rx.center(
        rx.card(
            rx.match(
                State.mode,
                ("register", register_form()),
                ("reset_request", reset_request_form()),
                sign_in_form(),
            ),
            width="100%",
            max_width=CARD_MAX_WIDTH,
            padding=CARD_PADDING,
            border_top=f"4px solid {ACCENT_PRIMARY}",
        ),
        min_height="100vh",
        width="100%",
        padding="2em",
        background=PAGE_BACKGROUND,
    )
