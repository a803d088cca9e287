"""Outgoing email for contact form confirmations."""

import smtplib
from email.message import EmailMessage

from app.config import settings
from app.models.contact import Contact
from app.utils.logger import logger


def build_contact_confirmation(contact: Contact) -> EmailMessage:
    """Auto-reply acknowledging a contact form submission."""
    msg = EmailMessage()
    msg["Subject"] = f"We've received your message: {contact.subject}"
    msg["From"] = f"{settings.from_name} <{settings.from_email}>"
    msg["To"] = contact.email

    msg.set_content(
        f"Hi {contact.name},\n\n"
        f"Thank you for reaching out to {settings.app_name}.\n"
        f'We have received your message regarding "{contact.subject}" and our team '
        f"will get back to you shortly.\n\n"
        f"Your Request ID: {contact.id}\n\n"
        f"Best Regards,\n{settings.from_name} Team\n"
    )
    msg.add_alternative(
        f"<h1>Hi {contact.name},</h1>"
        f"<p>Thank you for reaching out to {settings.app_name}.</p>"
        f"<p>We have received your message regarding \"<strong>{contact.subject}</strong>\" "
        f"and our team will get back to you shortly.</p>"
        f"<p>Your Request ID: {contact.id}</p>"
        f"<br><p>Best Regards,</p><p>{settings.from_name} Team</p>",
        subtype="html",
    )
    return msg


def send_email(msg: EmailMessage) -> bool:
    """
    Deliver ``msg`` over SMTP.

    Returns:
        True if sent, False if email is disabled, unconfigured or delivery failed
    """
    if not settings.enable_email_notifications:
        logger.debug(f"Email notifications disabled, not sending to {msg['To']}")
        return False

    if not settings.smtp_host:
        logger.warning("SMTP host not configured, skipping email")
        return False

    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30) as smtp:
            smtp.starttls()
            if settings.smtp_user and settings.smtp_password:
                smtp.login(settings.smtp_user, settings.smtp_password)
            smtp.send_message(msg)
        logger.info(f"Sent email to {msg['To']}: {msg['Subject']}")
        return True
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Email send failed to {msg['To']}: {e}")
        return False


def send_contact_confirmation(contact: Contact) -> bool:
    """Send the contact auto-reply; failures are logged, never raised."""
    return send_email(build_contact_confirmation(contact))
