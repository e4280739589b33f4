"""Application use cases for study events, reminders and notifications."""
