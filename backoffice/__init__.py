"""Back-office notification center service."""
