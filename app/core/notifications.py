"""
HTML notification and subject line for contact form submissions.

Everything a visitor typed goes through escape_html before it is placed in the
email body. The subject line is plain text and is left as submitted.
"""

from app.models.contact import ContactSubmission


def escape_html(value: str) -> str:
    """Escape &, <, > and " (ampersand first so entities are not escaped twice)"""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def build_subject(submission: ContactSubmission) -> str:
    if submission.service:
        return f"New Lead: {submission.service} from {submission.name}"
    return f"New Contact: {submission.name}"


def build_email_html(submission: ContactSubmission, brand_color: str) -> str:
    """
    Render the admin notification for a submission.

    The "Service Requested" and "Message" blocks are only included when the
    visitor filled those fields in.

    Args:
        submission: Validated contact submission
        brand_color: CSS colour for the header bar

    Returns:
        str: HTML email body
    """
    name = escape_html(submission.name)
    email = escape_html(submission.email)
    phone = escape_html(submission.phone)

    service_block = ""
    if submission.service:
        service_block = f"""
        <div style="margin-bottom: 16px; padding: 12px 16px; background: #eff6ff; border-radius: 8px;">
          <p style="margin: 0 0 4px; color: #706d85; font-size: 13px;">Service Requested</p>
          <p style="margin: 0; font-weight: 600;">{escape_html(submission.service)}</p>
        </div>"""

    message_block = ""
    if submission.message:
        message_block = f"""
        <div style="padding: 16px; background: #f3f3f6; border-radius: 8px;">
          <p style="margin: 0 0 4px; color: #706d85; font-size: 13px;">Message</p>
          <p style="margin: 0; white-space: pre-wrap;">{escape_html(submission.message)}</p>
        </div>"""

    return f"""
    <div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 600px; margin: 0 auto;">
      <div style="background: {brand_color}; padding: 20px 24px; border-radius: 12px 12px 0 0;">
        <h1 style="color: white; margin: 0; font-size: 18px;">New Contact Form Submission</h1>
      </div>
      <div style="border: 1px solid #e8e7ed; border-top: none; padding: 24px; border-radius: 0 0 12px 12px;">
        <div style="margin-bottom: 16px;">
          <p style="margin: 0 0 4px; color: #706d85; font-size: 13px;">Customer Details</p>
          <p style="margin: 4px 0; font-weight: 600;">{name}</p>
          <p style="margin: 4px 0;"><a href="mailto:{email}">{email}</a></p>
          <p style="margin: 4px 0;"><a href="tel:{phone}">{phone}</a></p>
        </div>{service_block}{message_block}
      </div>
    </div>"""
