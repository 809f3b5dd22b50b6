"""Built-in HTML fragments for mail components.

Each fragment is the markup for one component kind. Placeholders use the
``{name}`` syntax and are filled by the owning component at render time.

To customize fragments:
1. Modify the HTML in the respective constant, keeping its placeholders
2. Or override a fragment by id with MAIL_TEMPLATES_DIR / MAIL_TEMPLATES_BUCKET
3. HTML uses table layouts and inline CSS for email client compatibility
"""

from __future__ import annotations

# =============================================================================
# DOCUMENT WRAPPER
# =============================================================================

STRUCTURE_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta http-equiv="X-UA-Compatible" content="IE=edge">
    <style type="text/css">
        body { margin: 0; padding: 0; -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; }
        table { border-collapse: collapse; mso-table-lspace: 0pt; mso-table-rspace: 0pt; }
        img { border: 0; outline: none; text-decoration: none; -ms-interpolation-mode: bicubic; }
        .col-2 { width: 16.66%; } .col-3 { width: 25%; } .col-4 { width: 33.33%; }
        .col-5 { width: 41.66%; } .col-6 { width: 50%; } .col-7 { width: 58.33%; }
        .col-8 { width: 66.66%; } .col-9 { width: 75%; } .col-10 { width: 83.33%; }
        .col-11 { width: 91.66%; } .col-12 { width: 100%; }
        @media only screen and (max-width: 600px) {
            .col { display: block !important; width: 100% !important; }
        }
    </style>
</head>
<body style="margin: 0; padding: 0; background-color: #f4f4f4; font-family: Arial, sans-serif; color: #333;">
    <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="background-color: #f4f4f4;">
        <tr>
            <td align="center" style="padding: 20px 0;">
                <table role="presentation" width="600" cellpadding="0" cellspacing="0" border="0" style="max-width: 600px; width: 100%; background-color: #ffffff;">
                    {content}
                </table>
            </td>
        </tr>
    </table>
</body>
</html>
"""

# =============================================================================
# LAYOUT
# =============================================================================

ROW_HTML = """<tr>
    <td style="padding: 0 20px;">
        <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0">
            <tr>
                {content}
            </tr>
        </table>
    </td>
</tr>
"""

COLUMN_HTML = """<td class="col col-{width}" valign="top" style="padding: 10px 0;">
    <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0">
        {content}
    </table>
</td>
"""

# =============================================================================
# CONTENT
# =============================================================================

TITLE_HTML = """<tr>
    <td style="background-color: {backgroundColor}; padding: 20px;">
        <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0">
            <tr>
                <td width="60" valign="middle">
                    <img src="{logo}" alt="{brand}" width="48" style="display: block;">
                </td>
                <td valign="middle" style="font-size: 20px; font-weight: bold; color: {brandFontColor};">
                    {brand}
                </td>
            </tr>
            <tr>
                <td colspan="2" style="padding-top: 20px; font-size: 24px; line-height: 30px; color: #1a1a1a;">
                    {content}
                </td>
            </tr>
        </table>
    </td>
</tr>
<tr>
    <td style="border-bottom: 2px solid {separatorColor}; font-size: 0; line-height: 0;">&nbsp;</td>
</tr>
"""

TEXT_LEFT_HTML = """<tr>
    <td align="{align}" style="text-align: {align}; padding-bottom: {padding_bottom}; {style}">
        {content}
    </td>
</tr>
"""

SEPARATOR_HTML = """<tr>
    <td style="padding: 10px 0;">
        <hr style="border: none; border-top: 1px solid #dee2e6; margin: 0;">{content}
    </td>
</tr>
"""

IMAGE_HTML = """<tr>
    <td align="center" style="padding-bottom: 10px;">
        <img src="{content}" alt="" style="display: block; width: {width}; max-width: 100%; height: auto;">
    </td>
</tr>
"""

BUTTON_HTML = """<tr>
    <td align="{align}" style="padding: 10px 0;">
        <table role="presentation" cellpadding="0" cellspacing="0" border="0">
            <tr>
                <td style="background-color: {color}; border-radius: 4px;">
                    <a href="{target}" target="_blank" style="display: inline-block; padding: 12px 24px; font-size: 14px; color: #ffffff; text-decoration: none;">{content}</a>
                </td>
            </tr>
        </table>
    </td>
</tr>
"""

FOOTER_HTML = """<tr>
    <td style="padding: 20px; background-color: #f8f9fa; font-size: 12px; line-height: 18px; color: #666;">
        <p style="margin: 0 0 10px 0;">{entrySentence}</p>
        <p style="margin: 0;">
            <strong>{content}</strong><br>
            {street}<br>
            {zipCode} {city}<br>
            Tel: {phone}<br>
            <a href="mailto:{email}" style="color: #0066cc;">{email}</a>
        </p>
        <p style="margin: 10px 0 0 0; color: #999;">&copy; {companyName}</p>
    </td>
</tr>
"""

BUILTIN_TEMPLATES: dict[str, str] = {
    "structure": STRUCTURE_HTML,
    "row": ROW_HTML,
    "col": COLUMN_HTML,
    "title": TITLE_HTML,
    "text_left": TEXT_LEFT_HTML,
    "separator": SEPARATOR_HTML,
    "image": IMAGE_HTML,
    "button": BUTTON_HTML,
    "footer": FOOTER_HTML,
}
