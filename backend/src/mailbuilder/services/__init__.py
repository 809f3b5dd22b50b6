"""AWS-backed services for template storage and mail delivery."""
