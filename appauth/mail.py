"""Notification e-mails sent by the auth service.

Each function hands a subject, a plain-text body and an HTML body to
``mailer.send(to_email, subject, text, html)``.
"""

from __future__ import annotations

from typing import Any

_NOTICE = "(This is an automated message.)"
_GREETING = "Hello,"
_GREETING_HTML = f"<p>{_GREETING}</p>"
# The nonexistent-account message has always been sent with an unclosed tag.
_GREETING_HTML_UNCLOSED = f"<p>{_GREETING}<p>"


def _compose(
    message: str,
    link: str | None = None,
    footer: str | None = None,
    greeting_html: str = _GREETING_HTML,
) -> tuple[str, str]:
    """Build the plain-text and HTML bodies shared by every notification."""
    text_lines = [message]
    html_lines = [f"<p>{message}</p>"]
    if link is not None:
        text_lines.append(link)
        html_lines.append(f'<p><a href="{link}">{link}</a></p>')
    if footer is not None:
        text_lines.append(footer)
        html_lines.append(f"<p>{footer}</p>")

    text_blocks = [_NOTICE, _GREETING, "\n".join(text_lines)]
    html_blocks = [f"<p>{_NOTICE}</p>", greeting_html, "\n".join(html_lines)]
    text = "\n" + "\n\n".join(text_blocks) + "\n"
    html = "\n" + "\n\n".join(html_blocks) + "\n"
    return text, html


def send_activated(mailer: Any, to_email: str) -> None:
    """Tell the user their account is now active."""
    text, html = _compose("Your account has been activated!")
    mailer.send(to_email, "Account activated", text, html)


def send_password_changed(mailer: Any, to_email: str) -> None:
    """Tell the user their password was changed."""
    text, html = _compose("Your password was changed successfully!")
    mailer.send(to_email, "Your password was changed", text, html)


def send_password_reset(mailer: Any, to_email: str) -> None:
    """Tell the user their password was reset."""
    text, html = _compose("Your password was successfully reset!")
    mailer.send(to_email, "Your password was reset", text, html)


def send_recover_existent_account(mailer: Any, to_email: str, link: str) -> None:
    """Send the password-reset link for an existing account."""
    message = "\n".join(
        [
            "Someone requested a password reset for the account "
            "associated with this email.",
            "Please visit this link to reset your password:",
        ]
    )
    text, html = _compose(message, link=link, footer="(valid for 24 hours)")
    mailer.send(to_email, "Reset Password Instructions", text, html)


def send_recover_nonexistent_account(mailer: Any, to_email: str, link: str) -> None:
    """Send a registration link to an address that has no account."""
    message = "\n".join(
        [
            "Someone requested a password reset for the account "
            "associated with this email, but no account exists!",
            "If this was intentional, you can register for a new account "
            "using the link below:",
        ]
    )
    text, html = _compose(message, link=link, greeting_html=_GREETING_HTML_UNCLOSED)
    mailer.send(to_email, "Reset Password Instructions", text, html)


def send_register(mailer: Any, to_email: str, link: str) -> None:
    """Send the link that completes a registration."""
    text, html = _compose(
        "Please follow the link below to complete your registration:", link=link
    )
    mailer.send(to_email, "Registration Confirmation", text, html)