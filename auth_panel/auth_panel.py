import reflex as rx

from .pages.auth import auth_page
from .utils.log import setup_logging

setup_logging()

# Light theme to match the blue gradient page background
app = rx.App(
    theme=rx.theme(
        appearance="light",
        accent_color="blue",
        radius="large",
    )
)

# Sign in / create account / reset password all share one route
app.add_page(
    auth_page,
    route="/",
    title="Sign In",
)
