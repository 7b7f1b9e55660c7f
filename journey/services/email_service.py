import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr
from journey.core.config import settings

SENDER_NAME = settings.APP_NAME
SENDER_EMAIL = settings.MAIL_FROM

def _connect() -> smtplib.SMTP:
    if settings.SMTP_USE_SSL:
        return smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT)
    return smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT)

def send_email_text(to_email: str, subject: str, body: str) -> None:
    msg = MIMEText(body, "plain", "utf-8")
    msg["Subject"] = subject
    msg["From"] = formataddr((SENDER_NAME, SENDER_EMAIL))
    msg["To"] = to_email

    with _connect() as server:
        if settings.SMTP_USER:
            server.login(settings.SMTP_USER, settings.SMTP_PASSWORD or "")
        server.sendmail(SENDER_EMAIL, [to_email], msg.as_string())
