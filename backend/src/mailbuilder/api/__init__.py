"""Lambda-facing API for rendering mails."""
