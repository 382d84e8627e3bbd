"""
Notification email construction for saved contact submissions.

The email is sent from the service mailbox to itself, with Reply-To pointing
at the submitter so the recipient can answer them directly.
"""

from email.message import EmailMessage
import html

from contact_api.models.contact import NotificationEmail, PersistedSubmission

SUBJECT_PREFIX = "New Contact Form Submission: "


def _render_text(submission: PersistedSubmission) -> str:
    return "\n".join(
        [
            "You have a new contact form submission:",
            "",
            f"Name: {submission.name}",
            f"Email: {submission.email}",
            f"Subject: {submission.subject}",
            f"Message: {submission.message}",
        ]
    )


def _render_html(submission: PersistedSubmission) -> str:
    return "\n".join(
        [
            "<h2>New Contact Form Submission</h2>",
            f"<p><strong>Name:</strong> {html.escape(submission.name)}</p>",
            f"<p><strong>Email:</strong> {html.escape(submission.email)}</p>",
            f"<p><strong>Subject:</strong> {html.escape(submission.subject)}</p>",
            f"<p><strong>Message:</strong> {html.escape(submission.message)}</p>",
        ]
    )


def build_notification_email(submission: PersistedSubmission, mailbox: str) -> NotificationEmail:
    return NotificationEmail(
        from_address=mailbox,
        to=mailbox,
        reply_to=submission.email,
        subject=SUBJECT_PREFIX + submission.subject,
        text=_render_text(submission),
        html=_render_html(submission),
    )


def to_email_message(email: NotificationEmail) -> EmailMessage:
    message = EmailMessage()
    message["From"] = email.from_address
    message["To"] = email.to
    message["Reply-To"] = email.reply_to
    message["Subject"] = email.subject
    message.set_content(email.text)
    message.add_alternative(email.html, subtype="html")
    return message
