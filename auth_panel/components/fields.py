"""Labelled form inputs bound to AuthState."""
import reflex as rx
from ..state import State
from ..styles.constants import ACCENT_PRIMARY, ACCENT_PRIMARY_HOVER, COLOR_ERROR


def field_error(key: str) -> rx.Component:
    """Error line under a field, rendered only while `key` is invalid."""
    return rx.cond(
        State.errors.contains(key),
        rx.text(State.errors[key], size="1", color=COLOR_ERROR),
    )


def _border(key: str):
    return rx.cond(State.errors.contains(key), f"1px solid {COLOR_ERROR}", "")


def text_field(
    label: str,
    key: str,
    placeholder: str = "",
    input_type: str = "text",
) -> rx.Component:
    """Plain text/email input for one buffer field.

    Args:
        label: Text shown above the input
        key: Buffer field the input edits (also its error key)
        placeholder: Hint shown while empty
        input_type: HTML input type
    """
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        rx.input(
            placeholder=placeholder,
            type=input_type,
            value=State.field_values[key],
            on_change=lambda value: State.set_field(key, value),
            border=_border(key),
            width="100%",
            size="3",
        ),
        field_error(key),
        spacing="1",
        width="100%",
        align_items="start",
    )


def password_field(
    label: str,
    key: str,
    revealed: rx.Var,
    placeholder: str = "••••••••",
) -> rx.Component:
    """Password input with a show/hide toggle.

    Args:
        label: Text shown above the input
        key: "password" or "confirm_password"
        revealed: State var telling whether the text is shown in the clear
        placeholder: Hint shown while empty
    """
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        rx.hstack(
            rx.input(
                placeholder=placeholder,
                type=rx.cond(revealed, "text", "password"),
                value=State.field_values[key],
                on_change=lambda value: State.set_field(key, value),
                border=_border(key),
                width="100%",
                size="3",
            ),
            rx.icon_button(
                rx.cond(revealed, rx.icon("eye-off"), rx.icon("eye")),
                on_click=State.toggle_reveal(key),
                variant="ghost",
                type="button",
                size="3",
            ),
            width="100%",
            align="center",
        ),
        field_error(key),
        spacing="1",
        width="100%",
        align_items="start",
    )


def submit_button() -> rx.Component:
    """Submit control for the active form; disabled while not submittable."""
    return rx.button(
        rx.cond(
            State.is_pending,
            rx.hstack(rx.spinner(size="1"), rx.text(State.submit_label)),
            rx.text(State.submit_label),
        ),
        on_click=State.submit,
        width="100%",
        size="3",
        background=ACCENT_PRIMARY,
        _hover={"background": ACCENT_PRIMARY_HOVER},
        disabled=~State.can_submit,
    )


def mode_link(text: str, target: str) -> rx.Component:
    return rx.link(
        text,
        on_click=State.switch_mode(target),
        size="2",
        weight="medium",
        cursor="pointer",
    )
