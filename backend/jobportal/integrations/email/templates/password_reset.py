from jobportal.integrations.email.templates.render import render

_HTML = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; background-color: #f9f9f9;">
  <div style="background-color: #ffffff; padding: 24px; border-radius: 10px;">
    <h2 style="margin: 0 0 12px; color: #111827;">Reset your password</h2>
    <p style="color: #4b5563; line-height: 1.6;">We received a request to reset the password for your {{brand}} account. Click the button below to set a new password. This link will expire in 1 hour.</p>
    <div style="text-align: center; margin: 20px 0;">
      <a href="{{reset_url}}" style="display: inline-block; background-color: #2563eb; color: #ffffff; text-decoration: none; padding: 12px 18px; border-radius: 8px; font-weight: 600;">Set New Password</a>
    </div>
    <p style="color: #6b7280; font-size: 14px;">If the button doesn't work, copy and paste this link into your browser:</p>
    <p style="word-break: break-all; color: #1f2937; font-size: 14px;">{{reset_url}}</p>
    <hr style="border:none;border-top:1px solid #e5e7eb;margin:24px 0;" />
    <p style="color: #9ca3af; font-size: 12px;">If you didn't request this, you can safely ignore this email.</p>
  </div>
</div>
"""

_TEXT = """\
We received a request to reset the password for your {{brand}} account.
Open this link to set a new password (expires in 1 hour):

{{reset_url}}

If you didn't request this, you can safely ignore this email.
"""


def render_password_reset_email(reset_url: str, brand: str = "MegaJobNepal") -> tuple[str, str, str]:
    """Вернуть (subject, html, text) письма со ссылкой сброса пароля."""
    values = {"reset_url": reset_url, "brand": brand}
    subject = f"Reset your {brand} password"
    return subject, render(_HTML, values), render(_TEXT, values, escape=False)
