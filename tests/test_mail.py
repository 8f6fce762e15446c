import pytest

from appauth import mail


class RecordingMailer:
    def __init__(self):
        self.sent = []

    def send(self, to_email, subject, text, html):
        self.sent.append((to_email, subject, text, html))


LINK = "https://app.example.com/activate?token=token"


@pytest.mark.parametrize(
    ("send", "subject", "phrase"),
    [
        (mail.send_activated, "Account activated", "Your account has been activated!"),
        (
            mail.send_password_changed,
            "Your password was changed",
            "Your password was changed successfully!",
        ),
        (
            mail.send_password_reset,
            "Your password was reset",
            "Your password was successfully reset!",
        ),
    ],
)
def test_notifications_without_link(send, subject, phrase):
    mailer = RecordingMailer()
    send(mailer, "a@example.com")
    assert len(mailer.sent) == 1
    to_email, sent_subject, text, html = mailer.sent[0]
    assert to_email == "a@example.com"
    assert sent_subject == subject
    assert text.startswith("\n(This is an automated message.)\n")
    assert phrase in text
    assert f"<p>{phrase}</p>" in html


@pytest.mark.parametrize(
    ("send", "subject"),
    [
        (mail.send_recover_existent_account, "Reset Password Instructions"),
        (mail.send_recover_nonexistent_account, "Reset Password Instructions"),
        (mail.send_register, "Registration Confirmation"),
    ],
)
def test_notifications_with_link(send, subject):
    mailer = RecordingMailer()
    send(mailer, "b@example.com", LINK)
    (to_email, sent_subject, text, html), = mailer.sent
    assert to_email == "b@example.com"
    assert sent_subject == subject
    assert f"\n{LINK}\n" in text
    assert f'<p><a href="{LINK}">{LINK}</a></p>' in html
    assert "{link}" not in text and "{link}" not in html


def test_existent_account_mentions_validity():
    mailer = RecordingMailer()
    mail.send_recover_existent_account(mailer, "c@example.com", LINK)
    _, _, text, html = mailer.sent[0]
    assert text.endswith("(valid for 24 hours)\n")
    assert "<p>(valid for 24 hours)</p>" in html


def test_nonexistent_account_says_no_account_exists():
    mailer = RecordingMailer()
    mail.send_recover_nonexistent_account(mailer, "d@example.com", LINK)
    _, _, text, _ = mailer.sent[0]
    assert "but no account exists!" in text