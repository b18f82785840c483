from jobportal.integrations.email.templates.render import render

OTP_SUBJECT = "Your OTP Verification Code"

_HTML = """\
<div style="font-family:Arial,sans-serif; padding:10px;">
  <h2>OTP Verification</h2>
  <p>Your verification code is:</p>
  <h3 style="color:#007bff;">{{otp}}</h3>
  <p>This code will expire in {{ttl_minutes}} minutes.</p>
  <p>{{closing}}</p>
</div>
"""

_TEXT = """\
Your verification code is: {{otp}}

This code will expire in {{ttl_minutes}} minutes.
{{closing}}
"""

_CLOSINGS = {
    "signup": "Thank you for registering at {brand}!",
    "password_reset": "Use this code to reset your {brand} password. If you didn't request it, ignore this email.",
}


def render_otp_email(
    otp: str,
    ttl_minutes: int = 5,
    brand: str = "MegaJobNepal",
    purpose: str = "signup",
) -> tuple[str, str, str]:
    """Вернуть (subject, html, text) письма с одноразовым кодом."""
    closing = _CLOSINGS.get(purpose, _CLOSINGS["signup"]).format(brand=brand)
    values = {"otp": otp, "ttl_minutes": ttl_minutes, "closing": closing}
    return OTP_SUBJECT, render(_HTML, values), render(_TEXT, values, escape=False)
