from jobportal.integrations.email.templates.contact import render_contact_email
from jobportal.integrations.email.templates.otp import OTP_SUBJECT, render_otp_email
from jobportal.integrations.email.templates.password_reset import render_password_reset_email

__all__ = [
    "OTP_SUBJECT",
    "render_otp_email",
    "render_password_reset_email",
    "render_contact_email",
]
