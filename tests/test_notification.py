from contact_api.core.notification import build_notification_email, to_email_message
from contact_api.models.contact import PersistedSubmission


def make_submission(**overrides):
    data = {"id": "abc123", "name": "Ann", "email": "ann@x.com", "subject": "Hi", "message": "Hello"}
    data.update(overrides)
    return PersistedSubmission(**data)


def test_addresses_and_subject():
    email = build_notification_email(make_submission(), "site@example.com")

    assert email.from_address == "site@example.com"
    assert email.to == "site@example.com"
    assert email.reply_to == "ann@x.com"
    assert email.subject == "New Contact Form Submission: Hi"


def test_bodies_contain_every_field():
    email = build_notification_email(make_submission(), "site@example.com")

    for line in ("Name: Ann", "Email: ann@x.com", "Subject: Hi", "Message: Hello"):
        assert line in email.text
    assert "<p><strong>Name:</strong> Ann</p>" in email.html
    assert "<p><strong>Message:</strong> Hello</p>" in email.html


def test_html_body_escapes_markup():
    email = build_notification_email(make_submission(message="<b>hi</b> & bye"), "site@example.com")

    assert "&lt;b&gt;hi&lt;/b&gt; &amp; bye" in email.html
    assert "Message: <b>hi</b> & bye" in email.text


def test_email_message_headers_and_parts():
    email = build_notification_email(make_submission(), "site@example.com")

    message = to_email_message(email)

    assert message["From"] == "site@example.com"
    assert message["To"] == "site@example.com"
    assert message["Reply-To"] == "ann@x.com"
    assert message["Subject"] == "New Contact Form Submission: Hi"
    assert message.is_multipart()
    content_types = [part.get_content_type() for part in message.iter_parts()]
    assert content_types == ["text/plain", "text/html"]
