import reflex as rx

config = rx.Config(
    app_name="auth_panel",
    plugins=[
        rx.plugins.SitemapPlugin(),
        rx.plugins.TailwindV4Plugin(),
    ]
)
