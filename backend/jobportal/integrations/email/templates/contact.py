from jobportal.integrations.email.templates.render import render

_HTML = """\
<div style="font-family: Arial, sans-serif; max-width: 640px; margin: 0 auto; padding: 16px; background: #f9fafb;">
  <div style="background: #ffffff; border: 1px solid #e5e7eb; border-radius: 8px; padding: 20px;">
    <h2 style="margin: 0 0 12px; color: #111827;">New Contact Message</h2>
    <p style="margin: 0 0 8px; color: #374151;"><strong>Name:</strong> {{name}}</p>
    <p style="margin: 0 0 8px; color: #374151;"><strong>Email:</strong> {{from_email}}</p>
    {{category_block}}
    <p style="margin: 12px 0 6px; color: #374151;"><strong>Subject:</strong> {{subject}}</p>
    <div style="margin-top: 10px; padding: 12px; background: #f3f4f6; border-radius: 6px; color: #1f2937; white-space: pre-wrap;">{{message}}</div>
    <hr style="border:none;border-top:1px solid #e5e7eb;margin:16px 0;" />
    <p style="color:#6b7280;font-size:12px;margin:0;">This email was generated from the {{brand}} contact form.</p>
  </div>
</div>
"""

_CATEGORY = '<p style="margin: 0 0 8px; color: #374151;"><strong>Category:</strong> {{category}}</p>'


def contact_subject(subject: str | None, category: str | None) -> str:
    """[Contact] <тема> - <категория>."""
    result = f"[Contact] {subject or 'New message'}"
    if category:
        result += f" - {category}"
    return result


def render_contact_email(
    *,
    name: str,
    from_email: str,
    message: str,
    subject: str | None = None,
    category: str | None = None,
    brand: str = "MegaJobNepal",
) -> tuple[str, str, str]:
    """Вернуть (subject, html, text) письма с формы обратной связи."""
    category_block = render(_CATEGORY, {"category": category}) if category else ""
    body = render(
        _HTML,
        {
            "name": name,
            "from_email": from_email,
            "category_block": category_block,
            "subject": subject or "No subject",
            "message": message,
            "brand": brand,
        },
        raw=("category_block",),
    )
    text = f"Name: {name}\nEmail: {from_email}\n"
    if category:
        text += f"Category: {category}\n"
    text += f"Subject: {subject or 'No subject'}\n\n{message}\n"
    return contact_subject(subject, category), body, text
